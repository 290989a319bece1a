"""
Dashboard schemas
"""
from datetime import date, datetime
from typing import List, Optional
from inventory.schemas.common import APIModel, OutModel, CountBucket


class DashboardKpis(APIModel):
    total_systems: int
    total_software: int
    total_mobiles: int
    pending_requests: int
    total_asset_value: float
    monthly_mobile_rental: float


class DashboardCharts(APIModel):
    systems_by_status: List[CountBucket]
    systems_by_company: List[CountBucket]
    systems_by_product_type: List[CountBucket]
    mobiles_by_operator: List[CountBucket]
    software_by_category: List[CountBucket]


class WarrantyAlert(APIModel):
    id: str
    asset_tag: str
    model: Optional[str] = None
    warranty_end_date: date


class LicenseAlert(APIModel):
    id: str
    name: str
    expiry_date: date


class DashboardAlerts(APIModel):
    warranty_expiries: List[WarrantyAlert]
    license_expiries: List[LicenseAlert]


class RecentRequest(OutModel):
    id: str
    request_number: str
    subject: str
    status: str
    priority: str
    requester: str
    company: str
    created_at: datetime


class DashboardOut(APIModel):
    kpis: DashboardKpis
    charts: DashboardCharts
    alerts: DashboardAlerts
    recent_requests: List[RecentRequest]
