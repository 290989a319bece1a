"""
Department model
"""
from sqlalchemy import Column, String, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from inventory.db.base import Base, TimestampMixin


class Department(TimestampMixin, Base):
    __tablename__ = "departments"

    name = Column(String(100), nullable=False, index=True)
    code = Column(String(20), nullable=True)
    company_id = Column(String(36), ForeignKey("companies.id"), nullable=True, index=True)
    is_active = Column(Boolean, default=True, nullable=False)

    company = relationship("Company")
