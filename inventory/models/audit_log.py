"""
Audit log model
"""
import enum

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from inventory.db.base import Base


class AuditAction(str, enum.Enum):
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class AuditLog(Base):
    """Immutable change record written after every tracked create/update/delete"""

    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    action = Column(String(10), nullable=False, index=True)
    entity_type = Column(String(50), nullable=False, index=True)  # e.g. "Company", "System"
    entity_id = Column(String(36), nullable=False, index=True)
    # None is written as JSON null rather than SQL NULL
    old_values = Column(JSON(none_as_null=False), nullable=True)
    new_values = Column(JSON(none_as_null=False), nullable=True)
    performed_by = Column(String(100), nullable=False)
    company_id = Column(String(36), ForeignKey("companies.id", ondelete="SET NULL"), nullable=True, index=True)
    ip_address = Column(String(45), nullable=True)
    user_agent = Column(String(500), nullable=True)
    # Set explicitly on insert to avoid SQLite issues with server_default
    created_at = Column(DateTime(timezone=True), nullable=False, index=True)

    company = relationship("Company")
