"""
Change/service request models
"""
import enum

from sqlalchemy import Column, String, Integer, Date, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from inventory.db.base import Base, TimestampMixin, generate_id


class RequestType(str, enum.Enum):
    NEW_EMPLOYEE = "NEW_EMPLOYEE"
    HARDWARE = "HARDWARE"
    SOFTWARE = "SOFTWARE"
    ACCESS = "ACCESS"
    MOBILE = "MOBILE"
    EMAIL_ACCOUNT = "EMAIL_ACCOUNT"
    MAINTENANCE = "MAINTENANCE"
    OTHER = "OTHER"


class RequestStatus(str, enum.Enum):
    DRAFT = "DRAFT"
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class Priority(str, enum.Enum):
    LOW = "LOW"
    NORMAL = "NORMAL"
    HIGH = "HIGH"
    URGENT = "URGENT"


class EmployeeType(str, enum.Enum):
    NEW = "NEW"
    EXISTING = "EXISTING"


# Higher weight sorts first in the pending queue
PRIORITY_WEIGHT = {
    Priority.URGENT.value: 4,
    Priority.HIGH.value: 3,
    Priority.NORMAL.value: 2,
    Priority.LOW.value: 1,
}


class Request(TimestampMixin, Base):
    __tablename__ = "requests"

    request_number = Column(String(30), unique=True, nullable=False, index=True)
    request_type = Column(String(20), nullable=False, default=RequestType.OTHER.value)
    priority = Column(String(10), nullable=False, default=Priority.NORMAL.value)
    status = Column(String(20), nullable=False, default=RequestStatus.PENDING.value, index=True)

    # Requester
    employee_type = Column(String(10), nullable=True)
    requester_name = Column(String(100), nullable=True)
    requester_email = Column(String(255), nullable=True)
    requester_phone = Column(String(15), nullable=True)
    joining_date = Column(Date, nullable=True)

    subject = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    justification = Column(Text, nullable=True)

    # Asset / access requirements
    asset_type = Column(String(100), nullable=True)
    specifications = Column(Text, nullable=True)
    quantity = Column(Integer, nullable=False, default=1)
    access_requirements = Column(Text, nullable=True)
    software_requirements = Column(Text, nullable=True)

    company_id = Column(String(36), ForeignKey("companies.id"), nullable=False, index=True)
    location_id = Column(String(36), ForeignKey("locations.id"), nullable=True)
    department_id = Column(String(36), ForeignKey("departments.id"), nullable=True)
    requester_id = Column(String(36), ForeignKey("employees.id"), nullable=True)
    approver_id = Column(String(36), ForeignKey("employees.id"), nullable=True)

    approval_remarks = Column(Text, nullable=True)
    approved_at = Column(DateTime(timezone=True), nullable=True)
    completed_at = Column(DateTime(timezone=True), nullable=True)

    company = relationship("Company")
    location = relationship("Location")
    department = relationship("Department")
    requester = relationship("Employee", foreign_keys=[requester_id])
    approver = relationship("Employee", foreign_keys=[approver_id])
    comments = relationship(
        "RequestComment",
        back_populates="request",
        cascade="all, delete-orphan",
        order_by="RequestComment.created_at.desc()",
    )


class RequestComment(Base):
    __tablename__ = "request_comments"

    id = Column(String(36), primary_key=True, default=generate_id, index=True)
    request_id = Column(String(36), ForeignKey("requests.id", ondelete="CASCADE"), nullable=False, index=True)
    comment = Column(Text, nullable=False)
    comment_by = Column(String(100), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), nullable=False)

    request = relationship("Request", back_populates="comments")
