from __future__ import annotations

import runpy
from pathlib import Path
from types import SimpleNamespace

MODULE_GLOBALS = runpy.run_path(Path(__file__).resolve().parents[2] / "scripts" / "seed_demo_data.py")
SEED = MODULE_GLOBALS["seed"]
MAIN = MODULE_GLOBALS["main"]
DEMO_SCHOOL = MODULE_GLOBALS["demo_school"]


class DummySession:
    def __init__(self) -> None:
        self.closed = False

    def close(self) -> None:
        self.closed = True


def _patch(module_globals, **overrides):
    for key, value in overrides.items():
        module_globals[key] = value


def test_seed_skipped_outside_production(capsys):
    exit_code = MAIN(["--profile", "dev"])

    assert exit_code == 0
    assert "skipping demo data" in capsys.readouterr().out


def test_seed_dry_run_makes_no_session(capsys):
    _patch(SEED.__globals__, SessionLocal=lambda: (_ for _ in ()).throw(AssertionError("no session expected")))

    exit_code = MAIN(["--profile", "production", "--dry-run"])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "Codecool Budapest" in out
    assert "2 students" in out


def test_seed_production_creates_school(capsys):
    session = DummySession()
    created = {}

    def fake_create_school(db, school):
        created["db"] = db
        created["school"] = school
        return SimpleNamespace(id=7, name=school.name, students=[object(), object()])

    _patch(
        SEED.__globals__,
        SessionLocal=lambda: session,
        repo_schools=SimpleNamespace(create_school=fake_create_school),
    )

    exit_code = MAIN(["--profile", "PRODUCTION"])

    assert exit_code == 0
    assert session.closed is True
    assert created["db"] is session
    assert {s.email for s in created["school"].students} == {"john@codecool.com", "barb@codecool.com"}
    assert "id=7" in capsys.readouterr().out


def test_seed_failure_reports_and_closes_session(capsys):
    session = DummySession()

    def failing_create_school(db, school):
        raise RuntimeError("boom")

    _patch(
        SEED.__globals__,
        SessionLocal=lambda: session,
        repo_schools=SimpleNamespace(create_school=failing_create_school),
    )

    exit_code = MAIN(["--profile", "production"])

    assert exit_code == 1
    assert session.closed is True
    assert "Seeding failed: boom" in capsys.readouterr().err


def test_demo_school_shape():
    school = DEMO_SCHOOL()
    john = next(s for s in school.students if s.name == "John")
    assert john.phone_numbers == ["555-6666", "555-2322"]
    assert john.address.street == "Nagymező street 44"
