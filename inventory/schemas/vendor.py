"""
Vendor schemas
"""
from datetime import datetime
from typing import Optional
from pydantic import Field
from inventory.schemas.common import APIModel, OutModel, OptionalEmail


class VendorCreate(APIModel):
    name: str = Field(..., min_length=2, max_length=100)
    code: Optional[str] = Field(None, max_length=20)
    contact_person: Optional[str] = Field(None, max_length=100)
    email: OptionalEmail = None
    phone: Optional[str] = Field(None, max_length=15)
    address: Optional[str] = Field(None, max_length=500)
    city: Optional[str] = Field(None, max_length=50)
    state: Optional[str] = Field(None, max_length=50)
    gstin: Optional[str] = Field(None, max_length=20)
    pan_number: Optional[str] = Field(None, max_length=20)
    is_active: bool = True
    remarks: Optional[str] = Field(None, max_length=1000)


class VendorUpdate(APIModel):
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    code: Optional[str] = Field(None, max_length=20)
    contact_person: Optional[str] = Field(None, max_length=100)
    email: OptionalEmail = None
    phone: Optional[str] = Field(None, max_length=15)
    address: Optional[str] = Field(None, max_length=500)
    city: Optional[str] = Field(None, max_length=50)
    state: Optional[str] = Field(None, max_length=50)
    gstin: Optional[str] = Field(None, max_length=20)
    pan_number: Optional[str] = Field(None, max_length=20)
    is_active: Optional[bool] = None
    remarks: Optional[str] = Field(None, max_length=1000)


class VendorOut(OutModel):
    id: str
    name: str
    code: Optional[str] = None
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    gstin: Optional[str] = None
    pan_number: Optional[str] = None
    is_active: bool
    remarks: Optional[str] = None
    created_at: datetime
    updated_at: datetime
