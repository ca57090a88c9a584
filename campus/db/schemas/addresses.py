from pydantic import BaseModel, ConfigDict


class AddressBase(BaseModel):
    street: str | None = None
    city: str | None = None
    country: str | None = None
    zip_code: int | None = None


class AddressCreate(AddressBase):
    pass


class Address(AddressBase):
    id: int
    model_config = ConfigDict(from_attributes=True)
