"""
Repository error taxonomy.

Constraint violations raised by the store (or by the flush-time validation
hook) are surfaced as :class:`ConstraintViolationError`; every other
SQLAlchemy failure propagates unchanged.
"""
from __future__ import annotations

import re
from typing import Optional

from sqlalchemy.exc import IntegrityError


class RepositoryError(RuntimeError):
    """Base class for failures raised by the repository layer."""


class ConstraintViolationError(RepositoryError):
    """A unique or required-field rule was broken while writing."""

    def __init__(
        self,
        message: str,
        *,
        entity: Optional[str] = None,
        field: Optional[str] = None,
        detail: Optional[str] = None,
    ):
        super().__init__(message)
        self.entity = entity
        self.field = field
        self.detail = detail

    @classmethod
    def from_integrity_error(cls, exc: IntegrityError) -> "ConstraintViolationError":
        detail = str(getattr(exc, "orig", exc))
        entity, field = _parse_constraint_target(detail)
        if field:
            message = f"Constraint violation on {entity}.{field}"
        else:
            message = "Constraint violation"
        return cls(message, entity=entity, field=field, detail=detail)


# SQLite: "UNIQUE constraint failed: students.email" / "NOT NULL constraint failed: students.email"
_SQLITE_TARGET = re.compile(r"constraint failed: (\w+)\.(\w+)", re.IGNORECASE)
# PostgreSQL: 'Key (email)=(...) already exists' / 'column "email" of relation "students"'
_PG_KEY = re.compile(r"Key \((\w+)\)=")
_PG_COLUMN = re.compile(r'column "(\w+)"(?: of relation "(\w+)")?')
_PG_RELATION = re.compile(r'(?:relation|table) "(\w+)"')


def _parse_constraint_target(detail: str) -> tuple[Optional[str], Optional[str]]:
    match = _SQLITE_TARGET.search(detail)
    if match:
        return match.group(1), match.group(2)
    relation = _PG_RELATION.search(detail)
    entity = relation.group(1) if relation else None
    key = _PG_KEY.search(detail)
    if key:
        return entity, key.group(1)
    column = _PG_COLUMN.search(detail)
    if column:
        return column.group(2) or entity, column.group(1)
    return entity, None
