from pydantic import BaseModel, ConfigDict, Field

from campus.db.models.schools import Location

from .students import Student, StudentCreate


class SchoolBase(BaseModel):
    name: str | None = None
    location: Location | None = None


class SchoolCreate(SchoolBase):
    students: list[StudentCreate] = Field(default_factory=list)


class School(SchoolBase):
    id: int
    students: list[Student] = Field(default_factory=list)
    model_config = ConfigDict(from_attributes=True)
