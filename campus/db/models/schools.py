import enum

from sqlalchemy import Column, Enum, Integer, String
from sqlalchemy.orm import relationship
from .base import Base


class Location(enum.Enum):
    BUDAPEST = "BUDAPEST"
    MISKOLC = "MISKOLC"
    WARSAW = "WARSAW"
    KRAKOW = "KRAKOW"


class School(Base):
    __tablename__ = 'schools'
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255))
    location = Column(Enum(Location, name='location', native_enum=False, length=32))

    # Inverse side of students.school_id; persisted and deleted through campus.db.cascade.
    students = relationship("Student", back_populates="school", collection_class=set, cascade="")

    @classmethod
    def builder(cls):
        from .builders import SchoolBuilder
        return SchoolBuilder()

    def __repr__(self):
        return f"<School id={self.id} name={self.name!r} location={self.location}>"
