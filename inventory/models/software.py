"""
Software license model
"""
import enum

from sqlalchemy import Column, String, Integer, Float, Date, Text, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from inventory.db.base import Base, TimestampMixin


class LicenseType(str, enum.Enum):
    PERPETUAL = "PERPETUAL"
    SUBSCRIPTION = "SUBSCRIPTION"
    OEM = "OEM"
    VOLUME = "VOLUME"
    FREEWARE = "FREEWARE"
    OPEN_SOURCE = "OPEN_SOURCE"


class SoftwareCategory(str, enum.Enum):
    OPERATING_SYSTEM = "OPERATING_SYSTEM"
    OFFICE_SUITE = "OFFICE_SUITE"
    ANTIVIRUS = "ANTIVIRUS"
    DATABASE = "DATABASE"
    DEVELOPMENT = "DEVELOPMENT"
    DESIGN = "DESIGN"
    ACCOUNTING = "ACCOUNTING"
    ERP = "ERP"
    CRM = "CRM"
    COMMUNICATION = "COMMUNICATION"
    UTILITY = "UTILITY"
    OTHER = "OTHER"


class Software(TimestampMixin, Base):
    __tablename__ = "software"

    name = Column(String(100), nullable=False, index=True)
    version = Column(String(50), nullable=True)
    publisher = Column(String(100), nullable=True)
    category = Column(String(30), nullable=False, default=SoftwareCategory.OTHER.value)
    description = Column(Text, nullable=True)

    # License
    license_type = Column(String(20), nullable=False, default=LicenseType.PERPETUAL.value)
    license_key = Column(String(500), nullable=True)
    total_licenses = Column(Integer, nullable=False, default=1)
    used_licenses = Column(Integer, nullable=False, default=0)

    # Cost
    cost_per_license = Column(Float, nullable=True)
    total_cost = Column(Float, nullable=True)
    currency = Column(String(3), nullable=False, default="INR")

    # Purchase & renewal
    purchase_date = Column(Date, nullable=True)
    expiry_date = Column(Date, nullable=True, index=True)
    renewal_date = Column(Date, nullable=True)
    invoice_number = Column(String(50), nullable=True)
    po_number = Column(String(50), nullable=True)
    vendor_id = Column(String(36), ForeignKey("vendors.id"), nullable=True)

    is_active = Column(Boolean, default=True, nullable=False)
    remarks = Column(Text, nullable=True)

    company_id = Column(String(36), ForeignKey("companies.id"), nullable=False, index=True)
    location_id = Column(String(36), ForeignKey("locations.id"), nullable=True, index=True)

    company = relationship("Company")
    location = relationship("Location")
    vendor = relationship("Vendor")

    installations = relationship(
        "SystemSoftware",
        viewonly=True,
        order_by="SystemSoftware.created_at",
    )
