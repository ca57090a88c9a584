"""
Student repository functions.

Implements save/read/delete for students (cascading to their address), plus
the two derived finders: the name-prefix OR birth-date-range search and the
distinct-country projection through the student address.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, List, Optional

from sqlalchemy import distinct, func, or_, select
from sqlalchemy.orm import Session

from campus.db import cascade, models, schemas
from campus.db.tx_utils import commit, guarded


logger = logging.getLogger(__name__)


def save_student(db: Session, student: models.Student) -> models.Student:
    """Insert or update ``student`` together with the address it owns."""
    with guarded(db, action="save_student"):
        cascade.persist_student(db, student)
        db.commit()
    db.refresh(student)
    logger.debug("Saved student", extra={"student_id": student.id})
    return student


def save_students(db: Session, students: Iterable[models.Student]) -> List[models.Student]:
    """Save several students in one transaction; all or none are written."""
    with guarded(db, action="save_students"):
        saved = cascade.persist_all(db, students)
        db.commit()
    for student in saved:
        db.refresh(student)
    logger.debug("Saved students", extra={"count": len(saved)})
    return saved


def build_student(student: schemas.StudentCreate) -> models.Student:
    builder = (
        models.Student.builder()
        .name(student.name)
        .email(student.email)
        .birth_date(student.birth_date)
        .phone_numbers(student.phone_numbers)
    )
    if student.address is not None:
        builder.address(models.Address(**student.address.model_dump()))
    db_student = builder.build()
    if student.school_id is not None:
        db_student.school_id = student.school_id
    return db_student


def create_student(db: Session, student: schemas.StudentCreate) -> models.Student:
    return save_student(db, build_student(student))


def get_student(db: Session, student_id: int) -> Optional[models.Student]:
    return db.get(models.Student, student_id)


def get_students(db: Session, skip: int = 0, limit: Optional[int] = None) -> List[models.Student]:
    q = db.query(models.Student).order_by(models.Student.id).offset(skip)
    if limit is not None:
        q = q.limit(limit)
    return q.all()


def count_students(db: Session) -> int:
    return db.query(func.count(models.Student.id)).scalar() or 0


def delete_student(db: Session, student_id: int) -> bool:
    """Delete a student and its address; the school is left untouched."""
    db_student = get_student(db, student_id)
    if db_student is None:
        return False
    cascade.delete_student(db, db_student)
    commit(db, action="delete_student")
    logger.debug("Deleted student", extra={"student_id": student_id})
    return True


def find_by_name_starting_with_or_birth_date_between(
    db: Session,
    prefix: str,
    start: date,
    end: date,
) -> List[models.Student]:
    """Students whose name starts with ``prefix`` OR whose birth date is within [start, end].

    The prefix is matched literally (LIKE wildcards in it are escaped); the
    date range uses the store's BETWEEN, inclusive on both ends.
    """
    stmt = (
        select(models.Student)
        .where(
            or_(
                models.Student.name.startswith(prefix, autoescape=True),
                models.Student.birth_date.between(start, end),
            )
        )
        .order_by(models.Student.id)
    )
    return list(db.scalars(stmt).all())


def find_all_country(db: Session) -> List[str]:
    """Distinct, non-null countries of the addresses owned by students."""
    stmt = (
        select(distinct(models.Address.country))
        .select_from(models.Student)
        .join(models.Student.address)
        .where(models.Address.country.is_not(None))
    )
    return list(db.scalars(stmt).all())
