"""
Vendor model
"""
from sqlalchemy import Column, String, Boolean, Text
from inventory.db.base import Base, TimestampMixin


class Vendor(TimestampMixin, Base):
    __tablename__ = "vendors"

    name = Column(String(100), nullable=False, index=True)
    code = Column(String(20), unique=True, nullable=True)
    contact_person = Column(String(100), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(15), nullable=True)
    address = Column(String(500), nullable=True)
    city = Column(String(50), nullable=True)
    state = Column(String(50), nullable=True)
    gstin = Column(String(20), nullable=True)
    pan_number = Column(String(20), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    remarks = Column(Text, nullable=True)
