"""
Mobile service - handsets, SIM connections and their allocation
"""
from typing import Any, Dict, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from inventory.core.deps import ActorContext, SYSTEM_ACTOR
from inventory.models.company import Company
from inventory.models.employee import Employee
from inventory.models.location import Location
from inventory.models.mobile import Mobile
from inventory.schemas.mobile import MobileCreate, MobileUpdate
from inventory.services.audit_service import snapshot, audit_create, audit_update, audit_delete
from inventory.services.common import (
    get_or_404,
    ensure_reference,
    apply_changes,
    build_entity,
    delete_or_400,
    paginate,
)

ENTITY_TYPE = "Mobile"


def _validate_references(db: Session, data) -> None:
    ensure_reference(db, Company, data.company_id)
    ensure_reference(db, Location, data.location_id)
    ensure_reference(db, Employee, data.employee_id)


def filter_mobiles(
    query,
    company_id: Optional[str] = None,
    location_id: Optional[str] = None,
    status: Optional[str] = None,
    operator: Optional[str] = None,
    search: Optional[str] = None,
):
    """Apply the list/report filters to a Mobile query"""
    if company_id:
        query = query.filter(Mobile.company_id == company_id)
    if location_id:
        query = query.filter(Mobile.location_id == location_id)
    if status:
        query = query.filter(Mobile.status == status)
    if operator:
        query = query.filter(Mobile.operator == operator)
    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(
            Mobile.mobile_number.ilike(pattern),
            Mobile.imei1.ilike(pattern),
            Mobile.manufacturer.ilike(pattern),
            Mobile.model.ilike(pattern),
        ))
    return query


def create_mobile(db: Session, mobile_data: MobileCreate, actor: ActorContext = SYSTEM_ACTOR) -> Mobile:
    _validate_references(db, mobile_data)

    mobile = build_entity(Mobile, mobile_data)
    db.add(mobile)
    db.commit()
    db.refresh(mobile)

    audit_create(db, ENTITY_TYPE, mobile, actor, company_id=mobile.company_id)
    return mobile


def list_mobiles(
    db: Session,
    page: int = 1,
    limit: Optional[int] = None,
    company_id: Optional[str] = None,
    location_id: Optional[str] = None,
    status: Optional[str] = None,
    operator: Optional[str] = None,
    search: Optional[str] = None,
) -> Dict[str, Any]:
    """List mobiles newest first, one page at a time"""
    query = filter_mobiles(
        db.query(Mobile),
        company_id=company_id,
        location_id=location_id,
        status=status,
        operator=operator,
        search=search,
    )
    query = query.options(joinedload(Mobile.company), joinedload(Mobile.location))
    return paginate(query.order_by(Mobile.created_at.desc(), Mobile.id), page, limit)


def get_mobile(db: Session, mobile_id: str) -> Mobile:
    return get_or_404(db, Mobile, mobile_id)


def update_mobile(db: Session, mobile_id: str, mobile_data: MobileUpdate,
                  actor: ActorContext = SYSTEM_ACTOR) -> Mobile:
    mobile = get_mobile(db, mobile_id)
    _validate_references(db, mobile_data)

    before = snapshot(mobile)
    apply_changes(mobile, mobile_data)
    db.commit()
    db.refresh(mobile)

    audit_update(db, ENTITY_TYPE, mobile, before, actor, company_id=mobile.company_id)
    return mobile


def delete_mobile(db: Session, mobile_id: str, actor: ActorContext = SYSTEM_ACTOR) -> None:
    mobile = get_mobile(db, mobile_id)
    before = snapshot(mobile)
    company_id = mobile.company_id

    delete_or_400(db, mobile, "mobile")
    audit_delete(db, ENTITY_TYPE, mobile_id, before, actor, company_id=company_id)
