"""
Pydantic schemas for creating and reading campus entities.
"""

from .addresses import AddressBase, AddressCreate, Address
from .students import StudentBase, StudentCreate, Student
from .schools import SchoolBase, SchoolCreate, School

__all__ = [
    # Addresses
    "AddressBase",
    "AddressCreate",
    "Address",
    # Students
    "StudentBase",
    "StudentCreate",
    "Student",
    # Schools
    "SchoolBase",
    "SchoolCreate",
    "School",
]
