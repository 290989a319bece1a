"""
Company schemas
"""
from datetime import datetime
from typing import Optional
from pydantic import Field
from inventory.schemas.common import APIModel, OutModel, UpperCode


class CompanyCreate(APIModel):
    """Schema for creating a company"""
    code: UpperCode = Field(..., description="Short company code (stored upper-case)")
    name: str = Field(..., min_length=1, max_length=100, description="Company name")
    description: Optional[str] = Field(None, max_length=500)
    address: Optional[str] = Field(None, max_length=500)
    is_active: bool = Field(default=True)


class CompanyUpdate(APIModel):
    """Schema for updating a company"""
    code: Optional[UpperCode] = None
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    address: Optional[str] = Field(None, max_length=500)
    is_active: Optional[bool] = None


class CompanyOut(OutModel):
    id: str
    code: str
    name: str
    description: Optional[str] = None
    address: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
