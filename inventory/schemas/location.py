"""
Location schemas
"""
from datetime import datetime
from typing import Optional
from pydantic import Field
from inventory.schemas.common import APIModel, OutModel, NamedRef, UpperCode


class LocationCreate(APIModel):
    """Schema for creating a location"""
    name: str = Field(..., min_length=1, max_length=100)
    code: Optional[UpperCode] = Field(None, description="Location code (stored upper-case)")
    address: Optional[str] = Field(None, max_length=500)
    city: str = Field(default="Unknown", max_length=50)
    state: str = Field(default="Karnataka", max_length=50)
    pincode: Optional[str] = Field(None, max_length=10)
    company_id: str = Field(..., min_length=1)
    is_active: bool = Field(default=True)


class LocationUpdate(APIModel):
    """Schema for updating a location"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    code: Optional[UpperCode] = None
    address: Optional[str] = Field(None, max_length=500)
    city: Optional[str] = Field(None, max_length=50)
    state: Optional[str] = Field(None, max_length=50)
    pincode: Optional[str] = Field(None, max_length=10)
    company_id: Optional[str] = Field(None, min_length=1)
    is_active: Optional[bool] = None


class LocationOut(OutModel):
    id: str
    code: Optional[str] = None
    name: str
    address: Optional[str] = None
    city: str
    state: str
    pincode: Optional[str] = None
    company_id: str
    company: Optional[NamedRef] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
