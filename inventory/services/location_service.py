"""
Location service - business logic for company sites
"""
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from inventory.core.deps import ActorContext, SYSTEM_ACTOR
from inventory.models.company import Company
from inventory.models.location import Location
from inventory.schemas.location import LocationCreate, LocationUpdate
from inventory.services.audit_service import snapshot, audit_create, audit_update, audit_delete
from inventory.services.common import (
    get_or_404,
    ensure_reference,
    ensure_unique,
    apply_changes,
    build_entity,
    delete_or_400,
)

ENTITY_TYPE = "Location"


def create_location(db: Session, location_data: LocationCreate, actor: ActorContext = SYSTEM_ACTOR) -> Location:
    """
    Create a new location

    Raises:
        HTTPException: If the company does not exist or the code is taken
    """
    ensure_reference(db, Company, location_data.company_id)
    ensure_unique(db, Location, Location.code, location_data.code, "Location code already exists")

    location = build_entity(Location, location_data)
    db.add(location)
    db.commit()
    db.refresh(location)

    audit_create(db, ENTITY_TYPE, location, actor, company_id=location.company_id)
    return location


def list_locations(
    db: Session,
    company_id: Optional[str] = None,
    active_only: Optional[bool] = None,
    search: Optional[str] = None,
) -> List[Location]:
    """List locations ordered by name, with their company"""
    query = db.query(Location).options(joinedload(Location.company))

    if company_id:
        query = query.filter(Location.company_id == company_id)
    if active_only:
        query = query.filter(Location.is_active.is_(True))
    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(Location.name.ilike(pattern), Location.city.ilike(pattern)))

    return query.order_by(Location.name).all()


def get_location(db: Session, location_id: str) -> Location:
    return get_or_404(db, Location, location_id)


def update_location(
    db: Session,
    location_id: str,
    location_data: LocationUpdate,
    actor: ActorContext = SYSTEM_ACTOR,
) -> Location:
    location = get_location(db, location_id)
    ensure_reference(db, Company, location_data.company_id)
    ensure_unique(db, Location, Location.code, location_data.code, "Location code already exists",
                  exclude_id=location.id)

    before = snapshot(location)
    apply_changes(location, location_data)
    db.commit()
    db.refresh(location)

    audit_update(db, ENTITY_TYPE, location, before, actor, company_id=location.company_id)
    return location


def delete_location(db: Session, location_id: str, actor: ActorContext = SYSTEM_ACTOR) -> None:
    location = get_location(db, location_id)
    before = snapshot(location)
    company_id = location.company_id

    delete_or_400(db, location, "location")
    audit_delete(db, ENTITY_TYPE, location_id, before, actor, company_id=company_id)
