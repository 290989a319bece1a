"""
Mobile device schemas
"""
from datetime import date, datetime
from typing import List, Optional
from pydantic import Field
from inventory.models.mobile import MobileStatus
from inventory.schemas.common import APIModel, OutModel, NamedRef, Pagination


class MobileBase(APIModel):
    device_type: Optional[str] = Field(None, max_length=50)
    manufacturer: Optional[str] = Field(None, max_length=100)
    model: Optional[str] = Field(None, max_length=100)
    imei1: Optional[str] = Field(None, max_length=20)
    imei2: Optional[str] = Field(None, max_length=20)

    sim_number: Optional[str] = Field(None, max_length=30)
    mobile_number: Optional[str] = Field(None, max_length=15)
    operator: Optional[str] = Field(None, max_length=50)
    plan_type: Optional[str] = Field(None, max_length=50)
    plan_details: Optional[str] = Field(None, max_length=500)
    monthly_rental: Optional[float] = Field(None, ge=0)
    data_limit: Optional[str] = Field(None, max_length=50)

    purchase_date: Optional[date] = None
    purchase_price: Optional[float] = Field(None, ge=0)
    invoice_number: Optional[str] = Field(None, max_length=50)

    allocation_date: Optional[date] = None
    return_date: Optional[date] = None
    remarks: Optional[str] = Field(None, max_length=1000)

    location_id: Optional[str] = None
    employee_id: Optional[str] = None


class MobileCreate(MobileBase):
    status: MobileStatus = MobileStatus.ACTIVE
    company_id: str = Field(..., min_length=1)


class MobileUpdate(MobileBase):
    status: Optional[MobileStatus] = None
    company_id: Optional[str] = Field(None, min_length=1)


class MobileOut(MobileBase, OutModel):
    id: str
    status: str
    company_id: str
    company: Optional[NamedRef] = None
    location: Optional[NamedRef] = None
    created_at: datetime
    updated_at: datetime


class MobileListOut(APIModel):
    data: List[MobileOut]
    pagination: Pagination
