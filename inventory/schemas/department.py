"""
Department schemas
"""
from datetime import datetime
from typing import Optional
from pydantic import Field
from inventory.schemas.common import APIModel, OutModel, NamedRef


class DepartmentCreate(APIModel):
    """Schema for creating a department"""
    name: str = Field(..., min_length=1, max_length=100, description="Department name")
    code: Optional[str] = Field(None, max_length=20)
    company_id: Optional[str] = Field(None, min_length=1)
    is_active: bool = Field(default=True, description="Department active status")


class DepartmentUpdate(APIModel):
    """Schema for updating a department"""
    name: Optional[str] = Field(None, min_length=1, max_length=100, description="Department name")
    code: Optional[str] = Field(None, max_length=20)
    company_id: Optional[str] = Field(None, min_length=1)
    is_active: Optional[bool] = Field(None, description="Department active status")


class DepartmentOut(OutModel):
    """Schema for department output"""
    id: str
    name: str
    code: Optional[str] = None
    company_id: Optional[str] = None
    company: Optional[NamedRef] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime
