from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from .base import Base


class Address(Base):
    __tablename__ = 'addresses'
    id = Column(Integer, primary_key=True, autoincrement=True)
    street = Column(String(255))
    city = Column(String(255))
    country = Column(String(255))
    zip_code = Column(Integer)

    # Inverse of Student.address; the FK lives on students.address_id.
    # Cascades along this edge are driven by campus.db.cascade, not the ORM.
    student = relationship("Student", back_populates="address", uselist=False, cascade="")

    @classmethod
    def builder(cls):
        from .builders import AddressBuilder
        return AddressBuilder()

    def __repr__(self):
        return f"<Address id={self.id} city={self.city!r} country={self.country!r}>"
