import runpy
from pathlib import Path

from campus.db.repositories import schools as repo_schools
from campus.db.repositories import students as repo_students

MODULE_GLOBALS = runpy.run_path(Path(__file__).resolve().parents[2] / "scripts" / "seed_demo_data.py")
MAIN = MODULE_GLOBALS["main"]


def test_seed_writes_demo_school(db):
    assert MAIN(["--profile", "production"]) == 0

    schools = repo_schools.get_schools(db)
    assert [s.name for s in schools] == ["Codecool Budapest"]
    students = repo_students.get_students(db)
    assert {s.name for s in students} == {"John", "Barbara"}
    john = next(s for s in students if s.name == "John")
    assert list(john.phone_numbers) == ["555-6666", "555-2322"]
    assert repo_students.find_all_country(db) == ["Hungary"]


def test_seed_twice_reports_duplicate_emails(db, capsys):
    assert MAIN(["--profile", "production"]) == 0
    assert MAIN(["--profile", "production"]) == 1

    assert "Constraint violation" in capsys.readouterr().err
    assert repo_students.count_students(db) == 2
