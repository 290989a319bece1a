"""
Mobile device model
"""
import enum

from sqlalchemy import Column, String, Float, Date, Text, ForeignKey
from sqlalchemy.orm import relationship
from inventory.db.base import Base, TimestampMixin


class MobileStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    LOST = "LOST"
    DAMAGED = "DAMAGED"
    RETURNED = "RETURNED"


class Mobile(TimestampMixin, Base):
    __tablename__ = "mobiles"

    device_type = Column(String(50), nullable=True)
    manufacturer = Column(String(100), nullable=True)
    model = Column(String(100), nullable=True)
    imei1 = Column(String(20), nullable=True, index=True)
    imei2 = Column(String(20), nullable=True)

    # SIM
    sim_number = Column(String(30), nullable=True)
    mobile_number = Column(String(15), nullable=True, index=True)
    operator = Column(String(50), nullable=True)
    plan_type = Column(String(50), nullable=True)
    plan_details = Column(String(500), nullable=True)
    monthly_rental = Column(Float, nullable=True)
    data_limit = Column(String(50), nullable=True)

    # Purchase
    purchase_date = Column(Date, nullable=True)
    purchase_price = Column(Float, nullable=True)
    invoice_number = Column(String(50), nullable=True)

    status = Column(String(20), nullable=False, default=MobileStatus.ACTIVE.value, index=True)
    allocation_date = Column(Date, nullable=True)
    return_date = Column(Date, nullable=True)
    remarks = Column(Text, nullable=True)

    company_id = Column(String(36), ForeignKey("companies.id"), nullable=False, index=True)
    location_id = Column(String(36), ForeignKey("locations.id"), nullable=True, index=True)
    employee_id = Column(String(36), ForeignKey("employees.id"), nullable=True)

    company = relationship("Company")
    location = relationship("Location")
    employee = relationship("Employee")
