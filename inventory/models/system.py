"""
Hardware system (asset) model
"""
import enum

from sqlalchemy import Column, String, Integer, Float, Date, Text, ForeignKey
from sqlalchemy.orm import relationship
from inventory.db.base import Base, TimestampMixin


class ProductType(str, enum.Enum):
    DESKTOP = "DESKTOP"
    LAPTOP = "LAPTOP"
    SERVER = "SERVER"
    PRINTER = "PRINTER"
    SCANNER = "SCANNER"
    MONITOR = "MONITOR"
    PROJECTOR = "PROJECTOR"
    NETWORKING = "NETWORKING"
    UPS = "UPS"
    OTHER = "OTHER"


class SystemStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    MAINTENANCE = "MAINTENANCE"
    RETIRED = "RETIRED"
    DISPOSED = "DISPOSED"
    IN_STOCK = "IN_STOCK"


class System(TimestampMixin, Base):
    __tablename__ = "systems"

    asset_tag = Column(String(50), unique=True, nullable=False, index=True)
    serial_number = Column(String(100), nullable=True, index=True)
    product_type = Column(String(20), nullable=False, default=ProductType.OTHER.value)
    manufacturer = Column(String(100), nullable=True)
    model = Column(String(100), nullable=True)

    # Configuration
    processor = Column(String(100), nullable=True)
    ram = Column(String(50), nullable=True)
    storage = Column(String(100), nullable=True)
    operating_system = Column(String(100), nullable=True)
    os_version = Column(String(50), nullable=True)
    mac_address = Column(String(50), nullable=True)
    ip_address = Column(String(50), nullable=True)

    # Purchase & warranty
    purchase_date = Column(Date, nullable=True)
    warranty_start_date = Column(Date, nullable=True)
    warranty_end_date = Column(Date, nullable=True, index=True)
    purchase_price = Column(Float, nullable=True)
    invoice_number = Column(String(50), nullable=True)
    invoice_date = Column(Date, nullable=True)
    po_number = Column(String(50), nullable=True)
    vendor_id = Column(String(36), ForeignKey("vendors.id"), nullable=True)

    # Maintenance
    last_maintenance_date = Column(Date, nullable=True)
    next_maintenance_date = Column(Date, nullable=True, index=True)
    maintenance_frequency = Column(Integer, nullable=True)  # days
    amc_start_date = Column(Date, nullable=True)
    amc_end_date = Column(Date, nullable=True)

    # Status & assignment
    status = Column(String(20), nullable=False, default=SystemStatus.IN_STOCK.value, index=True)
    condition = Column(String(100), nullable=True)
    remarks = Column(Text, nullable=True)

    company_id = Column(String(36), ForeignKey("companies.id"), nullable=False, index=True)
    location_id = Column(String(36), ForeignKey("locations.id"), nullable=True, index=True)
    department_id = Column(String(36), ForeignKey("departments.id"), nullable=True)
    current_user_id = Column(String(36), ForeignKey("employees.id"), nullable=True)
    previous_user_id = Column(String(36), ForeignKey("employees.id"), nullable=True)

    company = relationship("Company")
    location = relationship("Location")
    department = relationship("Department")
    vendor = relationship("Vendor")
    current_user = relationship("Employee", foreign_keys=[current_user_id])
    previous_user = relationship("Employee", foreign_keys=[previous_user_id])

    # Read side only; installs and removals go through SystemSoftware rows
    installed_software = relationship(
        "SystemSoftware",
        viewonly=True,
        order_by="SystemSoftware.created_at",
    )
