"""
Hardware system endpoints
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from inventory.core.deps import get_db, get_actor, ActorContext
from inventory.models.system import ProductType, SystemStatus
from inventory.schemas.common import MessageOut
from inventory.schemas.system import (
    SystemCreate,
    SystemUpdate,
    SystemOut,
    SystemDetailOut,
    SystemListOut,
    SystemStatsOut,
    SoftwareInstall,
    InstalledSoftwareOut,
)
from inventory.services import system_service as svc
from inventory.utils.enums import enum_to_str

router = APIRouter()


@router.post("", response_model=SystemOut, status_code=201)
async def create_system_endpoint(
    system_data: SystemCreate,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    """Register a hardware asset"""
    return svc.create_system(db, system_data, actor)


@router.get("", response_model=SystemListOut)
async def list_systems_endpoint(
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    company_id: Optional[str] = Query(None, alias="companyId"),
    location_id: Optional[str] = Query(None, alias="locationId"),
    status: Optional[SystemStatus] = Query(None),
    product_type: Optional[ProductType] = Query(None, alias="productType"),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """
    List systems newest first

    Filters:
    - companyId, locationId, status, productType: exact match
    - search: asset tag, serial number, manufacturer or model
    """
    return svc.list_systems(
        db,
        page=page,
        limit=limit,
        company_id=company_id,
        location_id=location_id,
        status=enum_to_str(status),
        product_type=enum_to_str(product_type),
        search=search,
    )


@router.get("/stats", response_model=SystemStatsOut)
async def system_stats_endpoint(db: Session = Depends(get_db)):
    return svc.get_system_stats(db)


@router.get("/warranty-expiring", response_model=List[SystemOut])
async def warranty_expiring_endpoint(
    days: int = Query(30, ge=0, le=3650),
    db: Session = Depends(get_db),
):
    """ACTIVE systems whose warranty ends within `days` days"""
    return svc.get_warranty_expiring(db, days=days)


@router.get("/maintenance-due", response_model=List[SystemOut])
async def maintenance_due_endpoint(db: Session = Depends(get_db)):
    """ACTIVE systems due or overdue for maintenance"""
    return svc.get_maintenance_due(db)


@router.get("/{system_id}", response_model=SystemDetailOut)
async def get_system_endpoint(system_id: str, db: Session = Depends(get_db)):
    return svc.get_system(db, system_id)


@router.put("/{system_id}", response_model=SystemOut)
async def update_system_endpoint(
    system_id: str,
    system_data: SystemUpdate,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    return svc.update_system(db, system_id, system_data, actor)


@router.delete("/{system_id}", response_model=MessageOut)
async def delete_system_endpoint(
    system_id: str,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    svc.delete_system(db, system_id, actor)
    return MessageOut(message="System deleted successfully")


@router.get("/{system_id}/software", response_model=List[InstalledSoftwareOut])
async def list_installed_software_endpoint(system_id: str, db: Session = Depends(get_db)):
    return svc.list_installed_software(db, system_id)


@router.post("/{system_id}/software", response_model=InstalledSoftwareOut, status_code=201)
async def install_software_endpoint(
    system_id: str,
    install_data: SoftwareInstall,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    """Record a software title as installed on this system"""
    return svc.install_software(db, system_id, install_data, actor)


@router.delete("/{system_id}/software/{software_id}", response_model=MessageOut)
async def uninstall_software_endpoint(
    system_id: str,
    software_id: str,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    svc.uninstall_software(db, system_id, software_id, actor)
    return MessageOut(message="Software removed from system")
