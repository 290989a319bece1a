"""
Declarative base and shared column helpers
"""
import uuid

from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


def generate_id() -> str:
    return str(uuid.uuid4())


class TimestampMixin:
    """Primary key plus created_at/updated_at bookkeeping shared by all tracked entities"""

    id = Column(String(36), primary_key=True, default=generate_id, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.current_timestamp(),
        onupdate=func.current_timestamp(),
        nullable=False,
    )
