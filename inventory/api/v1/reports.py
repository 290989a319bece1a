"""
Reports and exports endpoints
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from inventory.core.deps import get_db
from inventory.services.report_service import (
    SYSTEM_HEADERS,
    MOBILE_HEADERS,
    SOFTWARE_HEADERS,
    REQUEST_HEADERS,
    LOCATION_HEADERS,
    get_system_rows,
    get_mobile_rows,
    get_software_rows,
    get_request_rows,
    get_location_summary_rows,
)
from inventory.utils.csv_export import stream_csv
from inventory.utils.datetime_utils import today

router = APIRouter()


def _filename(prefix: str) -> str:
    return f"{prefix}_{today().strftime('%Y%m%d')}.csv"


@router.get("/systems.csv")
async def export_systems_csv(
    company_id: Optional[str] = Query(None, alias="companyId"),
    status: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """Export hardware systems as CSV"""
    rows = get_system_rows(db, company_id=company_id, status=status, search=search)
    return stream_csv(SYSTEM_HEADERS, rows, _filename("systems"))


@router.get("/mobile.csv")
async def export_mobile_csv(
    company_id: Optional[str] = Query(None, alias="companyId"),
    status: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    rows = get_mobile_rows(db, company_id=company_id, status=status, search=search)
    return stream_csv(MOBILE_HEADERS, rows, _filename("mobile"))


@router.get("/software.csv")
async def export_software_csv(
    company_id: Optional[str] = Query(None, alias="companyId"),
    is_active: Optional[bool] = Query(None, alias="isActive"),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    rows = get_software_rows(db, company_id=company_id, is_active=is_active, search=search)
    return stream_csv(SOFTWARE_HEADERS, rows, _filename("software"))


@router.get("/requests.csv")
async def export_requests_csv(
    company_id: Optional[str] = Query(None, alias="companyId"),
    status: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    rows = get_request_rows(db, company_id=company_id, status=status, search=search)
    return stream_csv(REQUEST_HEADERS, rows, _filename("requests"))


@router.get("/locations.csv")
async def export_locations_csv(
    company_id: Optional[str] = Query(None, alias="companyId"),
    db: Session = Depends(get_db),
):
    """Per-location asset counts"""
    rows = get_location_summary_rows(db, company_id=company_id)
    return stream_csv(LOCATION_HEADERS, rows, _filename("locations"))
