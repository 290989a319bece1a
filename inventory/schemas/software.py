"""
Software license schemas
"""
from datetime import date, datetime
from typing import List, Optional
from pydantic import Field
from inventory.models.software import LicenseType, SoftwareCategory
from inventory.schemas.common import APIModel, OutModel, NamedRef, Pagination


class SoftwareBase(APIModel):
    version: Optional[str] = Field(None, max_length=50)
    publisher: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = Field(None, max_length=1000)
    license_key: Optional[str] = Field(None, max_length=500)

    cost_per_license: Optional[float] = Field(None, ge=0)
    total_cost: Optional[float] = Field(None, ge=0)

    purchase_date: Optional[date] = None
    expiry_date: Optional[date] = None
    renewal_date: Optional[date] = None
    invoice_number: Optional[str] = Field(None, max_length=50)
    po_number: Optional[str] = Field(None, max_length=50)
    vendor_id: Optional[str] = None

    remarks: Optional[str] = Field(None, max_length=1000)
    location_id: Optional[str] = None


class SoftwareCreate(SoftwareBase):
    name: str = Field(..., min_length=1, max_length=100)
    category: SoftwareCategory = SoftwareCategory.OTHER
    license_type: LicenseType = LicenseType.PERPETUAL
    total_licenses: int = Field(default=1, ge=0)
    used_licenses: int = Field(default=0, ge=0)
    currency: str = Field(default="INR", min_length=3, max_length=3)
    is_active: bool = True
    company_id: str = Field(..., min_length=1)


class SoftwareUpdate(SoftwareBase):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    category: Optional[SoftwareCategory] = None
    license_type: Optional[LicenseType] = None
    total_licenses: Optional[int] = Field(None, ge=0)
    used_licenses: Optional[int] = Field(None, ge=0)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    is_active: Optional[bool] = None
    company_id: Optional[str] = Field(None, min_length=1)


class SoftwareOut(SoftwareBase, OutModel):
    id: str
    name: str
    category: str
    license_type: str
    total_licenses: int
    used_licenses: int
    currency: str
    is_active: bool
    company_id: str
    company: Optional[NamedRef] = None
    vendor: Optional[NamedRef] = None
    created_at: datetime
    updated_at: datetime


class SoftwareListOut(APIModel):
    data: List[SoftwareOut]
    pagination: Pagination


class InstalledSystemRef(APIModel):
    id: str
    asset_tag: str


class SoftwareInstallationOut(OutModel):
    id: str
    system_id: str
    installed_date: Optional[date] = None
    system: InstalledSystemRef
    created_at: datetime
    updated_at: datetime


class SoftwareDetailOut(SoftwareOut):
    installations: List[SoftwareInstallationOut] = []
