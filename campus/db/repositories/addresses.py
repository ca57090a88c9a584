"""
Address repository functions.

Addresses are normally written as part of their student; these functions
cover standalone saves and reads, and the bulk country update.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from campus.db import models
from campus.db.tx_utils import commit, guarded


logger = logging.getLogger(__name__)

USA = "USA"


def save_address(db: Session, address: models.Address) -> models.Address:
    db.add(address)
    commit(db, action="save_address")
    db.refresh(address)
    return address


def get_address(db: Session, address_id: int) -> Optional[models.Address]:
    return db.get(models.Address, address_id)


def get_addresses(db: Session, skip: int = 0, limit: Optional[int] = None) -> List[models.Address]:
    q = db.query(models.Address).order_by(models.Address.id).offset(skip)
    if limit is not None:
        q = q.limit(limit)
    return q.all()


def delete_address(db: Session, address_id: int) -> bool:
    """Delete an address; an owning student keeps existing with no address."""
    db_address = get_address(db, address_id)
    if db_address is None:
        return False
    db.delete(db_address)
    commit(db, action="delete_address")
    return True


def update_all_to_usa_by_student_name(db: Session, name_pattern: str) -> int:
    """Set country to 'USA' on every address owned by a student whose name is LIKE ``name_pattern``.

    Pending session changes are flushed first, then a single UPDATE runs that
    bypasses the session's change tracking. Once committed, every instance in
    the identity map is expired so subsequent reads go back to the store
    instead of returning stale state. Returns the number of rows matched.
    """
    owned_address_ids = (
        select(models.Student.address_id)
        .where(models.Student.address_id.is_not(None))
        .where(models.Student.name.like(name_pattern))
    )
    stmt = (
        update(models.Address)
        .where(models.Address.id.in_(owned_address_ids))
        .values(country=USA)
        .execution_options(synchronize_session=False)
    )
    with guarded(db, action="update_all_to_usa_by_student_name"):
        # In-memory edits must reach the store before the set-based write, or
        # the commit-time flush would overwrite it.
        db.flush()
        affected = db.execute(stmt).rowcount
        db.commit()
    # Invalidate only after the rows are committed, before returning to the caller.
    db.expire_all()
    logger.info(
        "Bulk-updated address countries",
        extra={"name_pattern": name_pattern, "affected_rows": affected},
    )
    return affected
