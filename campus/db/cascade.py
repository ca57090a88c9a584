"""
Ownership-graph walker for cascading writes.

Ownership edges in the campus domain:

    School --owns--> Student --owns--> Address

Student -> School is a plain foreign-key reference and is never cascaded.
Phone numbers are dependent rows of their Student and ride along with it
through the ORM relationship itself.

The relationships are mapped without ORM cascades; persisting or deleting a
graph goes through :func:`persist_graph` / :func:`delete_graph`, which add
roots before their owned entities and delete owned entities before their
owners. Nothing here commits: the caller owns the transaction boundary.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from sqlalchemy import inspect, update
from sqlalchemy.orm import Session

from campus.db.models import Address, School, Student
from campus.utils.settings import ORPHAN_POLICY_DELETE, OrphanPolicy, get_settings


logger = logging.getLogger(__name__)


def _orphan_policy(policy: Optional[OrphanPolicy]) -> OrphanPolicy:
    return policy or get_settings().address_orphan_policy


def _released_addresses(student: Student) -> list[Address]:
    """Addresses detached from a persistent student since it was loaded."""
    state = inspect(student)
    if state.transient or state.pending:
        return []
    history = state.attrs.address.history
    return [addr for addr in history.deleted if addr is not None]


def _release_previous_owner(db: Session, student: Student) -> None:
    """Clear students.address_id on whichever row held a newly assigned, already stored Address.

    The unit of work orders UPDATEs on one table by primary key, so the new
    owner's row could otherwise be written before the old owner's is cleared
    and trip the unique index on address_id.
    """
    address = student.address
    if address is None or not inspect(address).persistent:
        return
    if address not in inspect(student).attrs.address.history.added:
        return
    stmt = update(Student).where(Student.address_id == address.id)
    if student.id is not None:
        stmt = stmt.where(Student.id != student.id)
    db.execute(stmt.values(address_id=None).execution_options(synchronize_session=False))


def persist_student(db: Session, student: Student, *, orphan_policy: Optional[OrphanPolicy] = None) -> Student:
    db.add(student)
    if student.address is not None:
        db.add(student.address)
        _release_previous_owner(db, student)
    if _orphan_policy(orphan_policy) == ORPHAN_POLICY_DELETE:
        for released in _released_addresses(student):
            if inspect(released).persistent:
                logger.debug("Deleting orphaned address", extra={"address_id": released.id})
                db.delete(released)
    return student


def persist_school(db: Session, school: School, *, orphan_policy: Optional[OrphanPolicy] = None) -> School:
    db.add(school)
    for student in school.students:
        persist_student(db, student, orphan_policy=orphan_policy)
    return school


def persist_graph(db: Session, entity, *, orphan_policy: Optional[OrphanPolicy] = None):
    """Stage ``entity`` and everything it owns in ``db``."""
    if isinstance(entity, School):
        return persist_school(db, entity, orphan_policy=orphan_policy)
    if isinstance(entity, Student):
        return persist_student(db, entity, orphan_policy=orphan_policy)
    if isinstance(entity, Address):
        db.add(entity)
        return entity
    raise TypeError(f"Unsupported entity type: {type(entity).__name__}")


def delete_student(db: Session, student: Student) -> None:
    address = student.address
    db.delete(student)
    if address is not None and inspect(address).persistent:
        db.delete(address)


def delete_school(db: Session, school: School) -> None:
    for student in list(school.students):
        delete_student(db, student)
    db.delete(school)


def delete_graph(db: Session, entity) -> None:
    """Mark ``entity`` and everything it owns for deletion."""
    if isinstance(entity, School):
        delete_school(db, entity)
    elif isinstance(entity, Student):
        delete_student(db, entity)
    elif isinstance(entity, Address):
        db.delete(entity)
    else:
        raise TypeError(f"Unsupported entity type: {type(entity).__name__}")


def persist_all(db: Session, entities: Iterable, *, orphan_policy: Optional[OrphanPolicy] = None) -> list:
    return [persist_graph(db, entity, orphan_policy=orphan_policy) for entity in entities]
