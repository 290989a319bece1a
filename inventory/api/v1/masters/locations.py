"""
Location endpoints
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from inventory.core.deps import get_db, get_actor, ActorContext
from inventory.schemas.common import MessageOut
from inventory.schemas.location import LocationCreate, LocationUpdate, LocationOut
from inventory.services.location_service import (
    create_location,
    list_locations,
    get_location,
    update_location,
    delete_location,
)

router = APIRouter()


@router.post("", response_model=LocationOut, status_code=201)
async def create_location_endpoint(
    location_data: LocationCreate,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    return create_location(db, location_data, actor)


@router.get("", response_model=List[LocationOut])
async def list_locations_endpoint(
    company_id: Optional[str] = Query(None, alias="companyId"),
    active_only: Optional[bool] = Query(None, alias="activeOnly"),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """List locations ordered by name"""
    return list_locations(db, company_id=company_id, active_only=active_only, search=search)


@router.get("/{location_id}", response_model=LocationOut)
async def get_location_endpoint(location_id: str, db: Session = Depends(get_db)):
    return get_location(db, location_id)


@router.put("/{location_id}", response_model=LocationOut)
async def update_location_endpoint(
    location_id: str,
    location_data: LocationUpdate,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    return update_location(db, location_id, location_data, actor)


@router.delete("/{location_id}", response_model=MessageOut)
async def delete_location_endpoint(
    location_id: str,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    delete_location(db, location_id, actor)
    return MessageOut(message="Location deleted successfully")
