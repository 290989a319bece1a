"""
Mobile device endpoints
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from inventory.core.deps import get_db, get_actor, ActorContext
from inventory.models.mobile import MobileStatus
from inventory.schemas.common import MessageOut
from inventory.schemas.mobile import MobileCreate, MobileUpdate, MobileOut, MobileListOut
from inventory.services import mobile_service as svc
from inventory.utils.enums import enum_to_str

router = APIRouter()


@router.post("", response_model=MobileOut, status_code=201)
async def create_mobile_endpoint(
    mobile_data: MobileCreate,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    return svc.create_mobile(db, mobile_data, actor)


@router.get("", response_model=MobileListOut)
async def list_mobiles_endpoint(
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    company_id: Optional[str] = Query(None, alias="companyId"),
    location_id: Optional[str] = Query(None, alias="locationId"),
    status: Optional[MobileStatus] = Query(None),
    operator: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """List mobiles newest first"""
    return svc.list_mobiles(
        db,
        page=page,
        limit=limit,
        company_id=company_id,
        location_id=location_id,
        status=enum_to_str(status),
        operator=operator,
        search=search,
    )


@router.get("/{mobile_id}", response_model=MobileOut)
async def get_mobile_endpoint(mobile_id: str, db: Session = Depends(get_db)):
    return svc.get_mobile(db, mobile_id)


@router.put("/{mobile_id}", response_model=MobileOut)
async def update_mobile_endpoint(
    mobile_id: str,
    mobile_data: MobileUpdate,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    return svc.update_mobile(db, mobile_id, mobile_data, actor)


@router.delete("/{mobile_id}", response_model=MessageOut)
async def delete_mobile_endpoint(
    mobile_id: str,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    svc.delete_mobile(db, mobile_id, actor)
    return MessageOut(message="Mobile deleted successfully")
