"""
Hardware system schemas
"""
from datetime import date, datetime
from typing import List, Optional
from pydantic import Field
from inventory.models.system import ProductType, SystemStatus
from inventory.schemas.common import APIModel, OutModel, NamedRef, Pagination, CountBucket


class SystemBase(APIModel):
    serial_number: Optional[str] = Field(None, max_length=100)
    manufacturer: Optional[str] = Field(None, max_length=100)
    model: Optional[str] = Field(None, max_length=100)

    processor: Optional[str] = Field(None, max_length=100)
    ram: Optional[str] = Field(None, max_length=50)
    storage: Optional[str] = Field(None, max_length=100)
    operating_system: Optional[str] = Field(None, max_length=100)
    os_version: Optional[str] = Field(None, max_length=50)
    mac_address: Optional[str] = Field(None, max_length=50)
    ip_address: Optional[str] = Field(None, max_length=50)

    purchase_date: Optional[date] = None
    warranty_start_date: Optional[date] = None
    warranty_end_date: Optional[date] = None
    purchase_price: Optional[float] = Field(None, ge=0)
    invoice_number: Optional[str] = Field(None, max_length=50)
    invoice_date: Optional[date] = None
    po_number: Optional[str] = Field(None, max_length=50)
    vendor_id: Optional[str] = None

    last_maintenance_date: Optional[date] = None
    next_maintenance_date: Optional[date] = None
    maintenance_frequency: Optional[int] = Field(None, ge=0, description="Days between maintenance visits")
    amc_start_date: Optional[date] = None
    amc_end_date: Optional[date] = None

    condition: Optional[str] = Field(None, max_length=100)
    remarks: Optional[str] = Field(None, max_length=1000)

    location_id: Optional[str] = None
    department_id: Optional[str] = None
    current_user_id: Optional[str] = None
    previous_user_id: Optional[str] = None


class SystemCreate(SystemBase):
    """Schema for registering a hardware asset"""
    asset_tag: str = Field(..., min_length=1, max_length=50)
    product_type: ProductType = ProductType.OTHER
    status: SystemStatus = SystemStatus.IN_STOCK
    company_id: str = Field(..., min_length=1)


class SystemUpdate(SystemBase):
    """Partial update; only fields present in the payload are applied"""
    asset_tag: Optional[str] = Field(None, min_length=1, max_length=50)
    product_type: Optional[ProductType] = None
    status: Optional[SystemStatus] = None
    company_id: Optional[str] = Field(None, min_length=1)


class SystemOut(SystemBase, OutModel):
    id: str
    asset_tag: str
    product_type: str
    status: str
    company_id: str
    company: Optional[NamedRef] = None
    location: Optional[NamedRef] = None
    created_at: datetime
    updated_at: datetime


class SystemListOut(APIModel):
    data: List[SystemOut]
    pagination: Pagination


class SystemStatsOut(APIModel):
    total: int
    by_status: List[CountBucket]
    by_product_type: List[CountBucket]
    by_company: List[CountBucket]


class SoftwareInstall(APIModel):
    """Record software as installed on a system"""
    software_id: str = Field(..., min_length=1)
    installed_date: Optional[date] = None
    remarks: Optional[str] = Field(None, max_length=1000)


class InstalledSoftwareOut(OutModel):
    id: str
    system_id: str
    software_id: str
    installed_date: Optional[date] = None
    remarks: Optional[str] = None
    software: NamedRef
    created_at: datetime
    updated_at: datetime


class SystemDetailOut(SystemOut):
    installed_software: List[InstalledSoftwareOut] = []
