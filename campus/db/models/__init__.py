"""
SQLAlchemy models for the campus domain.

Exposes `Base`, the entity classes, the `Location` enum, the fluent builders
and the `compute_age` helper used for the transient `Student.age` value.
"""

from .base import Base, compute_age  # re-export

from .addresses import Address
from .schools import Location, School
from .students import Student, StudentPhoneNumber
from .builders import AddressBuilder, SchoolBuilder, StudentBuilder

# Register the flush-time constraint hook alongside the mappings.
from .. import constraints  # noqa: F401,E402

__all__ = [
    # base
    "Base",
    "compute_age",
    # entities
    "Address",
    "Location",
    "School",
    "Student",
    "StudentPhoneNumber",
    # builders
    "AddressBuilder",
    "SchoolBuilder",
    "StudentBuilder",
]
