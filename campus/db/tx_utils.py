"""
Transaction helpers shared by the repositories.

`guarded` wraps a unit of work: store-level integrity failures become
:class:`ConstraintViolationError`; any other error is rolled back and
re-raised unchanged. `commit` is the common single-statement case.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .errors import ConstraintViolationError


logger = logging.getLogger(__name__)


@contextmanager
def guarded(db: Session, *, action: str):
    try:
        yield
    except IntegrityError as exc:
        db.rollback()
        violation = ConstraintViolationError.from_integrity_error(exc)
        logger.warning(
            "Constraint violation during %s",
            action,
            extra={"entity": violation.entity, "field": violation.field},
        )
        raise violation from exc
    except Exception:
        db.rollback()
        raise


def commit(db: Session, *, action: str) -> None:
    with guarded(db, action=action):
        db.commit()
