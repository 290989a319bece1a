"""
Software license endpoints
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from inventory.core.deps import get_db, get_actor, ActorContext
from inventory.models.software import LicenseType, SoftwareCategory
from inventory.schemas.common import MessageOut
from inventory.schemas.software import (
    SoftwareCreate,
    SoftwareUpdate,
    SoftwareOut,
    SoftwareDetailOut,
    SoftwareListOut,
)
from inventory.services import software_service as svc
from inventory.utils.enums import enum_to_str

router = APIRouter()


@router.post("", response_model=SoftwareOut, status_code=201)
async def create_software_endpoint(
    software_data: SoftwareCreate,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    """Register a software license"""
    return svc.create_software(db, software_data, actor)


@router.get("", response_model=SoftwareListOut)
async def list_software_endpoint(
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    company_id: Optional[str] = Query(None, alias="companyId"),
    category: Optional[SoftwareCategory] = Query(None),
    license_type: Optional[LicenseType] = Query(None, alias="licenseType"),
    is_active: Optional[bool] = Query(None, alias="isActive"),
    expiring_days: Optional[int] = Query(None, alias="expiringDays", ge=0),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """
    List software newest first

    Filters:
    - companyId, category, licenseType, isActive: exact match
    - expiringDays: licenses expiring between today and today + N days
    - search: name or publisher
    """
    return svc.list_software(
        db,
        page=page,
        limit=limit,
        company_id=company_id,
        category=enum_to_str(category),
        license_type=enum_to_str(license_type),
        is_active=is_active,
        expiring_days=expiring_days,
        search=search,
    )


@router.get("/{software_id}", response_model=SoftwareDetailOut)
async def get_software_endpoint(software_id: str, db: Session = Depends(get_db)):
    return svc.get_software(db, software_id)


@router.put("/{software_id}", response_model=SoftwareOut)
async def update_software_endpoint(
    software_id: str,
    software_data: SoftwareUpdate,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    return svc.update_software(db, software_id, software_data, actor)


@router.delete("/{software_id}", response_model=MessageOut)
async def delete_software_endpoint(
    software_id: str,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    svc.delete_software(db, software_id, actor)
    return MessageOut(message="Software deleted successfully")
