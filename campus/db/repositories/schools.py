"""
School repository functions.

Saving a school persists every student it owns (and their addresses);
deleting a school deletes its students first.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from campus.db import cascade, models, schemas
from campus.db.repositories import students as repo_students
from campus.db.tx_utils import commit, guarded


logger = logging.getLogger(__name__)


def save_school(db: Session, school: models.School) -> models.School:
    with guarded(db, action="save_school"):
        cascade.persist_school(db, school)
        db.commit()
    db.refresh(school)
    logger.debug(
        "Saved school",
        extra={"school_id": school.id, "student_count": len(school.students)},
    )
    return school


def create_school(db: Session, school: schemas.SchoolCreate) -> models.School:
    builder = (
        models.School.builder()
        .name(school.name)
        .location(school.location)
        .students(repo_students.build_student(student) for student in school.students)
    )
    return save_school(db, builder.build())


def get_school(db: Session, school_id: int) -> Optional[models.School]:
    return db.get(models.School, school_id)


def get_schools(db: Session, skip: int = 0, limit: Optional[int] = None) -> List[models.School]:
    q = (
        db.query(models.School)
        .options(selectinload(models.School.students))
        .order_by(models.School.id)
        .offset(skip)
    )
    if limit is not None:
        q = q.limit(limit)
    return q.all()


def delete_school(db: Session, school_id: int) -> bool:
    db_school = get_school(db, school_id)
    if db_school is None:
        return False
    cascade.delete_school(db, db_school)
    commit(db, action="delete_school")
    return True


def delete_all_schools(db: Session) -> int:
    """Delete every school and, through ownership, every student it holds."""
    db_schools = get_schools(db)
    for db_school in db_schools:
        cascade.delete_school(db, db_school)
    commit(db, action="delete_all_schools")
    logger.info("Deleted all schools", extra={"school_count": len(db_schools)})
    return len(db_schools)
