"""
CRUD facade over the per-entity repositories.

Callers that prefer a single import can use these names; each delegates to
the repository module that owns the entity.
"""
from datetime import date
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from . import models, schemas
from .repositories import addresses as repo_addresses
from .repositories import schools as repo_schools
from .repositories import students as repo_students


# Students
def save_student(db: Session, student: models.Student) -> models.Student:
    return repo_students.save_student(db, student)


def save_students(db: Session, students: Iterable[models.Student]) -> List[models.Student]:
    return repo_students.save_students(db, students)


def create_student(db: Session, student: schemas.StudentCreate) -> models.Student:
    return repo_students.create_student(db, student)


def get_student(db: Session, student_id: int) -> Optional[models.Student]:
    return repo_students.get_student(db, student_id)


def get_students(db: Session, skip: int = 0, limit: Optional[int] = None) -> List[models.Student]:
    return repo_students.get_students(db, skip, limit)


def count_students(db: Session) -> int:
    return repo_students.count_students(db)


def delete_student(db: Session, student_id: int) -> bool:
    return repo_students.delete_student(db, student_id)


def find_by_name_starting_with_or_birth_date_between(
    db: Session, prefix: str, start: date, end: date
) -> List[models.Student]:
    return repo_students.find_by_name_starting_with_or_birth_date_between(db, prefix, start, end)


def find_all_country(db: Session) -> List[str]:
    return repo_students.find_all_country(db)


# Addresses
def save_address(db: Session, address: models.Address) -> models.Address:
    return repo_addresses.save_address(db, address)


def get_address(db: Session, address_id: int) -> Optional[models.Address]:
    return repo_addresses.get_address(db, address_id)


def get_addresses(db: Session, skip: int = 0, limit: Optional[int] = None) -> List[models.Address]:
    return repo_addresses.get_addresses(db, skip, limit)


def delete_address(db: Session, address_id: int) -> bool:
    return repo_addresses.delete_address(db, address_id)


def update_all_to_usa_by_student_name(db: Session, name_pattern: str) -> int:
    return repo_addresses.update_all_to_usa_by_student_name(db, name_pattern)


# Schools
def save_school(db: Session, school: models.School) -> models.School:
    return repo_schools.save_school(db, school)


def create_school(db: Session, school: schemas.SchoolCreate) -> models.School:
    return repo_schools.create_school(db, school)


def get_school(db: Session, school_id: int) -> Optional[models.School]:
    return repo_schools.get_school(db, school_id)


def get_schools(db: Session, skip: int = 0, limit: Optional[int] = None) -> List[models.School]:
    return repo_schools.get_schools(db, skip, limit)


def delete_school(db: Session, school_id: int) -> bool:
    return repo_schools.delete_school(db, school_id)


def delete_all_schools(db: Session) -> int:
    return repo_schools.delete_all_schools(db)
