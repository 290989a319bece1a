"""
Vendor endpoints
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from inventory.core.deps import get_db, get_actor, ActorContext
from inventory.schemas.common import MessageOut
from inventory.schemas.vendor import VendorCreate, VendorUpdate, VendorOut
from inventory.services.vendor_service import (
    create_vendor,
    list_vendors,
    get_vendor,
    update_vendor,
    delete_vendor,
)

router = APIRouter()


@router.post("", response_model=VendorOut, status_code=201)
async def create_vendor_endpoint(
    vendor_data: VendorCreate,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    return create_vendor(db, vendor_data, actor)


@router.get("", response_model=List[VendorOut])
async def list_vendors_endpoint(
    active_only: Optional[bool] = Query(None, alias="activeOnly"),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    return list_vendors(db, active_only=active_only, search=search)


@router.get("/{vendor_id}", response_model=VendorOut)
async def get_vendor_endpoint(vendor_id: str, db: Session = Depends(get_db)):
    return get_vendor(db, vendor_id)


@router.put("/{vendor_id}", response_model=VendorOut)
async def update_vendor_endpoint(
    vendor_id: str,
    vendor_data: VendorUpdate,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    return update_vendor(db, vendor_id, vendor_data, actor)


@router.delete("/{vendor_id}", response_model=MessageOut)
async def delete_vendor_endpoint(
    vendor_id: str,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    delete_vendor(db, vendor_id, actor)
    return MessageOut(message="Vendor deleted successfully")
