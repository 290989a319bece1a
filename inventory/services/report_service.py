"""
Report service - row builders for CSV exports
"""
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from inventory.models.location import Location
from inventory.models.mobile import Mobile
from inventory.models.request import Request
from inventory.models.software import Software
from inventory.models.system import System
from inventory.services.mobile_service import filter_mobiles
from inventory.services.request_service import filter_requests
from inventory.services.software_service import filter_software
from inventory.services.system_service import filter_systems

SYSTEM_HEADERS = [
    "asset_tag",
    "serial_number",
    "product_type",
    "manufacturer",
    "model",
    "status",
    "company",
    "location",
    "current_user",
    "purchase_date",
    "purchase_price",
    "warranty_end_date",
    "next_maintenance_date",
]

MOBILE_HEADERS = [
    "mobile_number",
    "device_type",
    "manufacturer",
    "model",
    "imei1",
    "operator",
    "plan_type",
    "monthly_rental",
    "status",
    "company",
    "location",
    "employee",
]

SOFTWARE_HEADERS = [
    "name",
    "version",
    "publisher",
    "category",
    "license_type",
    "total_licenses",
    "used_licenses",
    "expiry_date",
    "total_cost",
    "currency",
    "company",
    "vendor",
    "is_active",
]

REQUEST_HEADERS = [
    "request_number",
    "subject",
    "request_type",
    "priority",
    "status",
    "requester_name",
    "company",
    "created_at",
    "approved_at",
    "completed_at",
]

LOCATION_HEADERS = [
    "location",
    "code",
    "city",
    "company",
    "systems",
    "mobiles",
    "software",
]


def _name(obj) -> Optional[str]:
    return obj.name if obj is not None else None


def _person(employee) -> Optional[str]:
    return employee.full_name if employee is not None else None


def get_system_rows(
    db: Session,
    company_id: Optional[str] = None,
    status: Optional[str] = None,
    search: Optional[str] = None,
) -> List[Dict]:
    """Systems ordered by asset tag"""
    query = filter_systems(db.query(System), company_id=company_id, status=status, search=search)
    systems = (
        query.options(
            joinedload(System.company),
            joinedload(System.location),
            joinedload(System.current_user),
        )
        .order_by(System.asset_tag)
        .all()
    )
    return [
        {
            "asset_tag": s.asset_tag,
            "serial_number": s.serial_number,
            "product_type": s.product_type,
            "manufacturer": s.manufacturer,
            "model": s.model,
            "status": s.status,
            "company": _name(s.company),
            "location": _name(s.location),
            "current_user": _person(s.current_user),
            "purchase_date": s.purchase_date,
            "purchase_price": s.purchase_price,
            "warranty_end_date": s.warranty_end_date,
            "next_maintenance_date": s.next_maintenance_date,
        }
        for s in systems
    ]


def get_mobile_rows(
    db: Session,
    company_id: Optional[str] = None,
    status: Optional[str] = None,
    search: Optional[str] = None,
) -> List[Dict]:
    query = filter_mobiles(db.query(Mobile), company_id=company_id, status=status, search=search)
    mobiles = (
        query.options(
            joinedload(Mobile.company),
            joinedload(Mobile.location),
            joinedload(Mobile.employee),
        )
        .order_by(Mobile.mobile_number, Mobile.id)
        .all()
    )
    return [
        {
            "mobile_number": m.mobile_number,
            "device_type": m.device_type,
            "manufacturer": m.manufacturer,
            "model": m.model,
            "imei1": m.imei1,
            "operator": m.operator,
            "plan_type": m.plan_type,
            "monthly_rental": m.monthly_rental,
            "status": m.status,
            "company": _name(m.company),
            "location": _name(m.location),
            "employee": _person(m.employee),
        }
        for m in mobiles
    ]


def get_software_rows(
    db: Session,
    company_id: Optional[str] = None,
    is_active: Optional[bool] = None,
    search: Optional[str] = None,
) -> List[Dict]:
    query = filter_software(db.query(Software), company_id=company_id, is_active=is_active, search=search)
    items = (
        query.options(joinedload(Software.company), joinedload(Software.vendor))
        .order_by(Software.name)
        .all()
    )
    return [
        {
            "name": sw.name,
            "version": sw.version,
            "publisher": sw.publisher,
            "category": sw.category,
            "license_type": sw.license_type,
            "total_licenses": sw.total_licenses,
            "used_licenses": sw.used_licenses,
            "expiry_date": sw.expiry_date,
            "total_cost": sw.total_cost,
            "currency": sw.currency,
            "company": _name(sw.company),
            "vendor": _name(sw.vendor),
            "is_active": sw.is_active,
        }
        for sw in items
    ]


def get_request_rows(
    db: Session,
    company_id: Optional[str] = None,
    status: Optional[str] = None,
    search: Optional[str] = None,
) -> List[Dict]:
    query = filter_requests(db.query(Request), company_id=company_id, status=status, search=search)
    requests = query.options(joinedload(Request.company)).order_by(Request.request_number).all()
    return [
        {
            "request_number": r.request_number,
            "subject": r.subject,
            "request_type": r.request_type,
            "priority": r.priority,
            "status": r.status,
            "requester_name": r.requester_name,
            "company": _name(r.company),
            "created_at": r.created_at,
            "approved_at": r.approved_at,
            "completed_at": r.completed_at,
        }
        for r in requests
    ]


def get_location_summary_rows(db: Session, company_id: Optional[str] = None) -> List[Dict]:
    """
    Asset counts per location

    Returns:
        One row per location with system, mobile and software counts
    """
    def counts(model) -> Dict[str, int]:
        rows = (
            db.query(model.location_id, func.count(model.id))
            .filter(model.location_id.isnot(None))
            .group_by(model.location_id)
            .all()
        )
        return dict(rows)

    system_counts = counts(System)
    mobile_counts = counts(Mobile)
    software_counts = counts(Software)

    query = db.query(Location).options(joinedload(Location.company))
    if company_id:
        query = query.filter(Location.company_id == company_id)

    return [
        {
            "location": loc.name,
            "code": loc.code,
            "city": loc.city,
            "company": _name(loc.company),
            "systems": system_counts.get(loc.id, 0),
            "mobiles": mobile_counts.get(loc.id, 0),
            "software": software_counts.get(loc.id, 0),
        }
        for loc in query.order_by(Location.name).all()
    ]
