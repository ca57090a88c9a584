"""Seed the demo school with two students when running under the production profile."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date

from campus.db import database, schemas
from campus.db.models import Location
from campus.db.repositories import schools as repo_schools
from campus.utils.settings import PROFILE_PRODUCTION, get_settings


logger = logging.getLogger("campus.scripts.seed_demo_data")


# Access SessionLocal dynamically so test fixtures that rebind the
# sessionmaker are respected.
SessionLocal = lambda: database.SessionLocal()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Insert the demo school and its students")
    parser.add_argument(
        "--profile",
        default=None,
        help="Active profile; seeding only happens for 'production' (default: CAMPUS_PROFILE)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print what would be inserted without writing anything",
    )
    parser.add_argument(
        "--create-schema",
        action="store_true",
        help="Create missing tables before seeding",
    )
    return parser.parse_args(argv)


def demo_school() -> schemas.SchoolCreate:
    return schemas.SchoolCreate(
        name="Codecool Budapest",
        location=Location.BUDAPEST,
        students=[
            schemas.StudentCreate(
                name="John",
                email="john@codecool.com",
                birth_date=date(1990, 9, 19),
                phone_numbers=["555-6666", "555-2322"],
                address=schemas.AddressCreate(
                    street="Nagymező street 44", city="Budapest", country="Hungary"
                ),
            ),
            schemas.StudentCreate(
                name="Barbara",
                email="barb@codecool.com",
                birth_date=date(1995, 9, 19),
                phone_numbers=["121-2322", "232-4521"],
                address=schemas.AddressCreate(
                    street="Alkotmány street 20", city="Budapest", country="Hungary"
                ),
            ),
        ],
    )


def seed(profile: str, dry_run: bool, create_schema: bool = False) -> int:
    if profile != PROFILE_PRODUCTION:
        print(f"Profile '{profile}' is not '{PROFILE_PRODUCTION}'; skipping demo data.")
        logger.info("Seed skipped for inactive profile", extra={"profile": profile})
        return 0

    school = demo_school()
    if dry_run:
        print(f"Would create school '{school.name}' with {len(school.students)} students; no changes made.")
        return 0

    if create_schema:
        database.init_db()

    session = SessionLocal()
    try:
        db_school = repo_schools.create_school(session, school)
        print(f"Created school '{db_school.name}' (id={db_school.id}) with {len(db_school.students)} students.")
        logger.info(
            "Demo data seeded",
            extra={"school_id": db_school.id, "student_count": len(db_school.students)},
        )
        return 0
    except Exception as exc:
        logger.exception("Demo data seeding failed")
        print(f"Seeding failed: {exc}", file=sys.stderr)
        return 1
    finally:
        session.close()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    profile = (args.profile or get_settings().profile).strip().lower()
    return seed(profile, args.dry_run, args.create_schema)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    sys.exit(main())
