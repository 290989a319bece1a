"""
Shared schema base classes and annotated field types
"""
from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, EmailStr, StringConstraints, field_serializer
from pydantic.alias_generators import to_camel


def _blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


# Codes are stored upper-case
UpperCode = Annotated[str, StringConstraints(strip_whitespace=True, to_upper=True, min_length=1, max_length=20)]

# HTML forms post "" for empty optional fields
OptionalEmail = Annotated[Optional[EmailStr], BeforeValidator(_blank_to_none)]


class APIModel(BaseModel):
    """Base for API payloads: camelCase on the wire, snake_case in Python; both accepted on input"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class OutModel(APIModel):
    """Base for response schemas. Bookkeeping datetimes render in the display timezone."""

    @field_serializer("created_at", "updated_at", check_fields=False)
    def _ser_datetime(self, dt: datetime):
        from inventory.utils.datetime_utils import iso_display
        return iso_display(dt) if dt is not None else None


class Pagination(APIModel):
    page: int
    limit: int
    total: int
    total_pages: int


class CompanyRef(APIModel):
    """Minimal company for joins"""
    id: str
    name: str
    code: str


class NamedRef(APIModel):
    """Minimal id/name reference"""
    id: str
    name: str


class MessageOut(APIModel):
    success: bool = True
    message: str


class CountBucket(APIModel):
    key: Optional[str] = None
    count: int
