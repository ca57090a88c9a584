"""
Shared SQLAlchemy base and helpers.
"""
from datetime import date
from typing import Optional

from sqlalchemy.orm import declarative_base


def compute_age(birth_date: Optional[date], today: Optional[date] = None) -> int:
    """Return full years elapsed since ``birth_date`` (0 when unknown)."""
    if birth_date is None:
        return 0
    today = today or date.today()
    years = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        years -= 1
    return max(years, 0)


Base = declarative_base()
