from datetime import date
from typing import Optional

from sqlalchemy import Column, Date, ForeignKey, Index, Integer, String, event
from sqlalchemy.ext.associationproxy import association_proxy
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import reconstructor, relationship
from .base import Base, compute_age


class Student(Base):
    __tablename__ = 'students'
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255))
    email = Column(String(255), nullable=False, unique=True)
    birth_date = Column(Date)
    address_id = Column(Integer, ForeignKey('addresses.id'), nullable=True, unique=True)
    school_id = Column(Integer, ForeignKey('schools.id'), nullable=True)

    # Not mapped: derived from birth_date on demand and reset on every load.
    age = 0

    # Ownership edges are walked by campus.db.cascade; the ORM itself cascades nothing here.
    # active_history keeps the replaced Address visible to the orphan policy.
    address = relationship("Address", back_populates="student", cascade="", active_history=True)
    school = relationship("School", back_populates="students", cascade="")

    phone_entries = relationship(
        "StudentPhoneNumber",
        back_populates="student",
        order_by="StudentPhoneNumber.position",
        collection_class=ordering_list("position"),
        cascade="all, delete-orphan",
    )
    phone_numbers = association_proxy(
        "phone_entries",
        "number",
        creator=lambda number: StudentPhoneNumber(number=number),
    )

    __table_args__ = (
        Index('idx_students_name', 'name'),
        Index('idx_students_birth_date', 'birth_date'),
        Index('idx_students_school_id', 'school_id'),
    )

    @reconstructor
    def _reset_transient_state(self):
        self.age = 0

    def calculate_age(self, today: Optional[date] = None) -> int:
        self.age = compute_age(self.birth_date, today)
        return self.age

    @classmethod
    def builder(cls):
        from .builders import StudentBuilder
        return StudentBuilder()

    def __repr__(self):
        return f"<Student id={self.id} email={self.email!r}>"


@event.listens_for(Student, "refresh")
def _reset_age_on_refresh(target, context, attrs):
    # Expired instances are reloaded in place without the reconstructor firing.
    target.age = 0


class StudentPhoneNumber(Base):
    __tablename__ = 'student_phone_numbers'
    student_id = Column(Integer, ForeignKey('students.id', ondelete='CASCADE'), primary_key=True)
    position = Column(Integer, primary_key=True, autoincrement=False)
    number = Column(String(64), nullable=False)

    student = relationship("Student", back_populates="phone_entries")
