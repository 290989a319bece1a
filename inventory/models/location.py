"""
Location model
"""
from sqlalchemy import Column, String, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from inventory.db.base import Base, TimestampMixin


class Location(TimestampMixin, Base):
    __tablename__ = "locations"

    code = Column(String(20), unique=True, nullable=True, index=True)
    name = Column(String(100), nullable=False)
    address = Column(String(500), nullable=True)
    city = Column(String(50), nullable=False, default="Unknown")
    state = Column(String(50), nullable=False, default="Karnataka")
    pincode = Column(String(10), nullable=True)
    company_id = Column(String(36), ForeignKey("companies.id"), nullable=False, index=True)
    is_active = Column(Boolean, default=True, nullable=False)

    company = relationship("Company")
