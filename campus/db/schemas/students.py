from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .addresses import Address, AddressCreate


class StudentBase(BaseModel):
    name: str | None = None
    email: str
    birth_date: date | None = None
    phone_numbers: list[str] = Field(default_factory=list)

    @field_validator("phone_numbers", mode="before")
    @classmethod
    def _coerce_phone_numbers(cls, value):
        # ORM instances expose an association proxy, not a plain list
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return list(value)


class StudentCreate(StudentBase):
    address: AddressCreate | None = None
    school_id: int | None = None


class Student(StudentBase):
    id: int
    address: Address | None = None
    school_id: int | None = None
    model_config = ConfigDict(from_attributes=True)
