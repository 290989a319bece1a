"""
Dashboard service - KPIs, chart series, expiry alerts and recent activity
"""
from datetime import timedelta
from typing import Any, Dict, List

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from inventory.core.config import settings
from inventory.models.company import Company
from inventory.models.mobile import Mobile, MobileStatus
from inventory.models.request import Request, RequestStatus
from inventory.models.software import Software
from inventory.models.system import System, SystemStatus
from inventory.utils.datetime_utils import today

ALERT_LIMIT = 5
RECENT_REQUEST_LIMIT = 5

OPEN_REQUEST_STATUSES = (RequestStatus.PENDING.value, RequestStatus.IN_PROGRESS.value)


def _buckets(rows) -> List[Dict[str, Any]]:
    return [{"key": key, "count": count} for key, count in rows]


def get_kpis(db: Session) -> Dict[str, Any]:
    """Headline counts and money totals"""
    system_value = db.query(func.coalesce(func.sum(System.purchase_price), 0)).scalar()
    software_value = db.query(func.coalesce(func.sum(Software.total_cost), 0)).scalar()
    mobile_value = db.query(func.coalesce(func.sum(Mobile.purchase_price), 0)).scalar()
    rental = (
        db.query(func.coalesce(func.sum(Mobile.monthly_rental), 0))
        .filter(Mobile.status == MobileStatus.ACTIVE.value)
        .scalar()
    )

    return {
        "total_systems": db.query(func.count(System.id)).scalar() or 0,
        "total_software": db.query(func.count(Software.id)).scalar() or 0,
        "total_mobiles": db.query(func.count(Mobile.id)).scalar() or 0,
        "pending_requests": (
            db.query(func.count(Request.id)).filter(Request.status.in_(OPEN_REQUEST_STATUSES)).scalar() or 0
        ),
        "total_asset_value": float(system_value or 0) + float(software_value or 0) + float(mobile_value or 0),
        "monthly_mobile_rental": float(rental or 0),
    }


def get_charts(db: Session) -> Dict[str, List[Dict[str, Any]]]:
    """Grouped counts backing the dashboard charts"""
    by_company = (
        db.query(Company.name, func.count(System.id))
        .join(System, System.company_id == Company.id)
        .group_by(Company.name)
        .order_by(Company.name)
        .all()
    )
    return {
        "systems_by_status": _buckets(
            db.query(System.status, func.count(System.id)).group_by(System.status).order_by(System.status).all()
        ),
        "systems_by_company": _buckets(by_company),
        "systems_by_product_type": _buckets(
            db.query(System.product_type, func.count(System.id))
            .group_by(System.product_type).order_by(System.product_type).all()
        ),
        "mobiles_by_operator": _buckets(
            db.query(Mobile.operator, func.count(Mobile.id))
            .filter(Mobile.operator.isnot(None))
            .group_by(Mobile.operator).order_by(Mobile.operator).all()
        ),
        "software_by_category": _buckets(
            db.query(Software.category, func.count(Software.id))
            .group_by(Software.category).order_by(Software.category).all()
        ),
    }


def get_alerts(db: Session) -> Dict[str, List[Dict[str, Any]]]:
    """Warranty and license expiries inside the alert window, soonest first"""
    start = today()
    end = start + timedelta(days=settings.EXPIRY_ALERT_DAYS)

    warranties = (
        db.query(System)
        .filter(
            System.status == SystemStatus.ACTIVE.value,
            System.warranty_end_date >= start,
            System.warranty_end_date <= end,
        )
        .order_by(System.warranty_end_date)
        .limit(ALERT_LIMIT)
        .all()
    )
    licenses = (
        db.query(Software)
        .filter(
            Software.is_active.is_(True),
            Software.expiry_date >= start,
            Software.expiry_date <= end,
        )
        .order_by(Software.expiry_date)
        .limit(ALERT_LIMIT)
        .all()
    )

    return {
        "warranty_expiries": [
            {
                "id": s.id,
                "asset_tag": s.asset_tag,
                "model": s.model,
                "warranty_end_date": s.warranty_end_date,
            }
            for s in warranties
        ],
        "license_expiries": [
            {"id": sw.id, "name": sw.name, "expiry_date": sw.expiry_date}
            for sw in licenses
        ],
    }


def get_recent_requests(db: Session) -> List[Dict[str, Any]]:
    requests = (
        db.query(Request)
        .options(joinedload(Request.company), joinedload(Request.requester))
        .order_by(Request.created_at.desc(), Request.request_number.desc())
        .limit(RECENT_REQUEST_LIMIT)
        .all()
    )
    rows = []
    for r in requests:
        requester = r.requester.full_name if r.requester is not None else (r.requester_name or "")
        rows.append({
            "id": r.id,
            "request_number": r.request_number,
            "subject": r.subject,
            "status": r.status,
            "priority": r.priority,
            "requester": requester,
            "company": r.company.name if r.company is not None else "",
            "created_at": r.created_at,
        })
    return rows


def get_dashboard(db: Session) -> Dict[str, Any]:
    """
    Everything the dashboard page renders, in one payload

    Returns:
        Dict with kpis, charts, alerts, recent_requests
    """
    return {
        "kpis": get_kpis(db),
        "charts": get_charts(db),
        "alerts": get_alerts(db),
        "recent_requests": get_recent_requests(db),
    }
