"""
Software installed on a hardware system
"""
from sqlalchemy import Column, String, Date, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from inventory.db.base import Base, TimestampMixin


class SystemSoftware(TimestampMixin, Base):
    __tablename__ = "system_software"
    __table_args__ = (
        UniqueConstraint("system_id", "software_id", name="uq_system_software"),
    )

    system_id = Column(String(36), ForeignKey("systems.id"), nullable=False, index=True)
    software_id = Column(String(36), ForeignKey("software.id"), nullable=False, index=True)
    installed_date = Column(Date, nullable=True)
    remarks = Column(Text, nullable=True)

    system = relationship("System")
    software = relationship("Software")
