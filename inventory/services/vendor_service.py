"""
Vendor service
"""
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from inventory.core.deps import ActorContext, SYSTEM_ACTOR
from inventory.models.vendor import Vendor
from inventory.schemas.vendor import VendorCreate, VendorUpdate
from inventory.services.audit_service import snapshot, audit_create, audit_update, audit_delete
from inventory.services.common import get_or_404, ensure_unique, apply_changes, build_entity, delete_or_400

ENTITY_TYPE = "Vendor"


def create_vendor(db: Session, vendor_data: VendorCreate, actor: ActorContext = SYSTEM_ACTOR) -> Vendor:
    ensure_unique(db, Vendor, Vendor.code, vendor_data.code, "Vendor code already exists")

    vendor = build_entity(Vendor, vendor_data)
    db.add(vendor)
    db.commit()
    db.refresh(vendor)

    # Vendors are shared across companies
    audit_create(db, ENTITY_TYPE, vendor, actor)
    return vendor


def list_vendors(db: Session, active_only: Optional[bool] = None, search: Optional[str] = None) -> List[Vendor]:
    query = db.query(Vendor)
    if active_only:
        query = query.filter(Vendor.is_active.is_(True))
    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(
            Vendor.name.ilike(pattern),
            Vendor.code.ilike(pattern),
            Vendor.contact_person.ilike(pattern),
        ))
    return query.order_by(Vendor.name).all()


def get_vendor(db: Session, vendor_id: str) -> Vendor:
    return get_or_404(db, Vendor, vendor_id)


def update_vendor(db: Session, vendor_id: str, vendor_data: VendorUpdate,
                  actor: ActorContext = SYSTEM_ACTOR) -> Vendor:
    vendor = get_vendor(db, vendor_id)
    ensure_unique(db, Vendor, Vendor.code, vendor_data.code, "Vendor code already exists",
                  exclude_id=vendor.id)

    before = snapshot(vendor)
    apply_changes(vendor, vendor_data)
    db.commit()
    db.refresh(vendor)

    audit_update(db, ENTITY_TYPE, vendor, before, actor)
    return vendor


def delete_vendor(db: Session, vendor_id: str, actor: ActorContext = SYSTEM_ACTOR) -> None:
    vendor = get_vendor(db, vendor_id)
    before = snapshot(vendor)

    delete_or_400(db, vendor, "vendor")
    audit_delete(db, ENTITY_TYPE, vendor_id, before, actor)
