"""
Software service - license inventory and renewal tracking
"""
from datetime import timedelta
from typing import Any, Dict, Optional

from fastapi import HTTPException, status
from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from inventory.core.deps import ActorContext, SYSTEM_ACTOR
from inventory.models.company import Company
from inventory.models.location import Location
from inventory.models.software import Software
from inventory.models.vendor import Vendor
from inventory.schemas.software import SoftwareCreate, SoftwareUpdate
from inventory.services.audit_service import snapshot, audit_create, audit_update, audit_delete
from inventory.services.common import (
    get_or_404,
    ensure_reference,
    apply_changes,
    build_entity,
    delete_or_400,
    paginate,
)
from inventory.utils.datetime_utils import today

ENTITY_TYPE = "Software"


def _validate_references(db: Session, data) -> None:
    ensure_reference(db, Company, data.company_id)
    ensure_reference(db, Location, data.location_id)
    ensure_reference(db, Vendor, data.vendor_id)


def _check_license_counts(total_licenses: int, used_licenses: int) -> None:
    if used_licenses > total_licenses:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Used licenses cannot exceed total licenses"
        )


def filter_software(
    query,
    company_id: Optional[str] = None,
    category: Optional[str] = None,
    license_type: Optional[str] = None,
    is_active: Optional[bool] = None,
    expiring_days: Optional[int] = None,
    search: Optional[str] = None,
):
    """Apply the list/report filters to a Software query"""
    if company_id:
        query = query.filter(Software.company_id == company_id)
    if category:
        query = query.filter(Software.category == category)
    if license_type:
        query = query.filter(Software.license_type == license_type)
    if is_active is not None:
        query = query.filter(Software.is_active.is_(is_active))
    if expiring_days is not None:
        start = today()
        query = query.filter(
            Software.expiry_date.isnot(None),
            Software.expiry_date >= start,
            Software.expiry_date <= start + timedelta(days=expiring_days),
        )
    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(Software.name.ilike(pattern), Software.publisher.ilike(pattern)))
    return query


def create_software(db: Session, software_data: SoftwareCreate, actor: ActorContext = SYSTEM_ACTOR) -> Software:
    """
    Register a software license

    Raises:
        HTTPException: If a referenced row is missing or used licenses exceed total licenses
    """
    _validate_references(db, software_data)
    _check_license_counts(software_data.total_licenses, software_data.used_licenses)

    software = build_entity(Software, software_data)
    db.add(software)
    db.commit()
    db.refresh(software)

    audit_create(db, ENTITY_TYPE, software, actor, company_id=software.company_id)
    return software


def list_software(
    db: Session,
    page: int = 1,
    limit: Optional[int] = None,
    company_id: Optional[str] = None,
    category: Optional[str] = None,
    license_type: Optional[str] = None,
    is_active: Optional[bool] = None,
    expiring_days: Optional[int] = None,
    search: Optional[str] = None,
) -> Dict[str, Any]:
    """List software newest first, one page at a time"""
    query = filter_software(
        db.query(Software),
        company_id=company_id,
        category=category,
        license_type=license_type,
        is_active=is_active,
        expiring_days=expiring_days,
        search=search,
    )
    query = query.options(joinedload(Software.company), joinedload(Software.vendor))
    return paginate(query.order_by(Software.created_at.desc(), Software.name), page, limit)


def get_software(db: Session, software_id: str) -> Software:
    return get_or_404(db, Software, software_id)


def update_software(db: Session, software_id: str, software_data: SoftwareUpdate,
                    actor: ActorContext = SYSTEM_ACTOR) -> Software:
    software = get_software(db, software_id)
    _validate_references(db, software_data)

    total = software_data.total_licenses
    used = software_data.used_licenses
    _check_license_counts(
        software.total_licenses if total is None else total,
        software.used_licenses if used is None else used,
    )

    before = snapshot(software)
    apply_changes(software, software_data)
    db.commit()
    db.refresh(software)

    audit_update(db, ENTITY_TYPE, software, before, actor, company_id=software.company_id)
    return software


def delete_software(db: Session, software_id: str, actor: ActorContext = SYSTEM_ACTOR) -> None:
    software = get_software(db, software_id)
    before = snapshot(software)
    company_id = software.company_id

    delete_or_400(db, software, "software")
    audit_delete(db, ENTITY_TYPE, software_id, before, actor, company_id=company_id)
