from sqlalchemy.exc import IntegrityError

from campus.db.errors import ConstraintViolationError, RepositoryError


def _integrity_error(message: str) -> IntegrityError:
    return IntegrityError("INSERT INTO students ...", {}, Exception(message))


def test_sqlite_unique_violation_is_parsed():
    err = ConstraintViolationError.from_integrity_error(
        _integrity_error("UNIQUE constraint failed: students.email")
    )
    assert isinstance(err, RepositoryError)
    assert err.entity == "students"
    assert err.field == "email"
    assert "students.email" in str(err)


def test_sqlite_not_null_violation_is_parsed():
    err = ConstraintViolationError.from_integrity_error(
        _integrity_error("NOT NULL constraint failed: students.email")
    )
    assert (err.entity, err.field) == ("students", "email")


def test_postgres_unique_violation_is_parsed():
    err = ConstraintViolationError.from_integrity_error(
        _integrity_error(
            'duplicate key value violates unique constraint "students_email_key"\n'
            "DETAIL:  Key (email)=(john@codecool.com) already exists."
        )
    )
    assert err.field == "email"


def test_postgres_not_null_violation_is_parsed():
    err = ConstraintViolationError.from_integrity_error(
        _integrity_error('null value in column "email" of relation "students" violates not-null constraint')
    )
    assert (err.entity, err.field) == ("students", "email")


def test_unknown_message_keeps_detail():
    err = ConstraintViolationError.from_integrity_error(_integrity_error("something odd"))
    assert err.field is None
    assert err.detail == "something odd"
    assert str(err) == "Constraint violation"
