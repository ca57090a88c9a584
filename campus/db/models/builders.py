"""
Fluent builders for the domain entities.

Each builder collects attribute values and produces a transient ORM instance
from ``build()``. Collection members can be added one at a time
(``phone_number``, ``student``) or replaced wholesale (``phone_numbers``,
``students``). Builders never touch a session.
"""
from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from .addresses import Address
from .schools import Location, School
from .students import Student


class AddressBuilder:
    def __init__(self):
        self._fields: dict = {}

    def street(self, value: Optional[str]) -> "AddressBuilder":
        self._fields["street"] = value
        return self

    def city(self, value: Optional[str]) -> "AddressBuilder":
        self._fields["city"] = value
        return self

    def country(self, value: Optional[str]) -> "AddressBuilder":
        self._fields["country"] = value
        return self

    def zip_code(self, value: Optional[int]) -> "AddressBuilder":
        self._fields["zip_code"] = value
        return self

    def build(self) -> Address:
        return Address(**self._fields)


class StudentBuilder:
    def __init__(self):
        self._fields: dict = {}
        self._phone_numbers: list[str] = []

    def name(self, value: Optional[str]) -> "StudentBuilder":
        self._fields["name"] = value
        return self

    def email(self, value: Optional[str]) -> "StudentBuilder":
        self._fields["email"] = value
        return self

    def birth_date(self, value: Optional[date]) -> "StudentBuilder":
        self._fields["birth_date"] = value
        return self

    def address(self, value: Optional[Address]) -> "StudentBuilder":
        self._fields["address"] = value
        return self

    def school(self, value: Optional[School]) -> "StudentBuilder":
        self._fields["school"] = value
        return self

    def phone_number(self, value: str) -> "StudentBuilder":
        self._phone_numbers.append(value)
        return self

    def phone_numbers(self, values: Iterable[str]) -> "StudentBuilder":
        self._phone_numbers = list(values)
        return self

    def build(self) -> Student:
        student = Student(**self._fields)
        student.phone_numbers = list(self._phone_numbers)
        return student


class SchoolBuilder:
    def __init__(self):
        self._fields: dict = {}
        self._students: list[Student] = []

    def name(self, value: Optional[str]) -> "SchoolBuilder":
        self._fields["name"] = value
        return self

    def location(self, value: Optional[Location]) -> "SchoolBuilder":
        self._fields["location"] = value
        return self

    def student(self, value: Student) -> "SchoolBuilder":
        if value not in self._students:
            self._students.append(value)
        return self

    def students(self, values: Iterable[Student]) -> "SchoolBuilder":
        self._students = []
        for value in values:
            self.student(value)
        return self

    def build(self) -> School:
        school = School(**self._fields)
        # Adding through the collection keeps Student.school in step via back_populates.
        for student in self._students:
            school.students.add(student)
        return school
