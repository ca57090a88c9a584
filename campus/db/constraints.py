"""
Flush-time constraint validation.

Required-field rules are checked in a ``before_flush`` hook so that a missing
student email is rejected before any row reaches the store. Uniqueness is
left to the store's unique index (the only place a race between concurrent
writers can be decided); the resulting IntegrityError is translated by the
repositories into :class:`ConstraintViolationError`.
"""
from __future__ import annotations

import logging

from sqlalchemy import event
from sqlalchemy.orm import Session

from .errors import ConstraintViolationError
from .models.students import Student


logger = logging.getLogger(__name__)


def validate_student(student: Student) -> None:
    email = student.email
    if email is None or not str(email).strip():
        raise ConstraintViolationError(
            "Student email is required",
            entity=Student.__tablename__,
            field="email",
        )


@event.listens_for(Session, "before_flush")
def _validate_pending_students(session, flush_context, instances):
    for obj in list(session.new) + list(session.dirty):
        if isinstance(obj, Student):
            try:
                validate_student(obj)
            except ConstraintViolationError:
                logger.warning(
                    "Rejected student write with missing email",
                    extra={"student_id": obj.id, "student_name": obj.name},
                )
                raise
