"""
System service - hardware asset register, warranty and maintenance tracking
"""
import logging
from datetime import timedelta
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status
from sqlalchemy import func, or_
from sqlalchemy.orm import Session, joinedload

from inventory.core.deps import ActorContext, SYSTEM_ACTOR
from inventory.models.company import Company
from inventory.models.department import Department
from inventory.models.employee import Employee
from inventory.models.location import Location
from inventory.models.system import System, SystemStatus
from inventory.models.software import Software
from inventory.models.system_software import SystemSoftware
from inventory.models.vendor import Vendor
from inventory.schemas.system import SystemCreate, SystemUpdate, SoftwareInstall
from inventory.services.audit_service import snapshot, audit_create, audit_update, audit_delete
from inventory.services.common import (
    get_or_404,
    ensure_reference,
    ensure_unique,
    apply_changes,
    build_entity,
    delete_or_400,
    paginate,
)
from inventory.utils.datetime_utils import today

logger = logging.getLogger(__name__)

ENTITY_TYPE = "System"
INSTALLATION_ENTITY_TYPE = "SystemSoftware"


def _validate_references(db: Session, data) -> None:
    ensure_reference(db, Company, data.company_id)
    ensure_reference(db, Location, data.location_id)
    ensure_reference(db, Department, data.department_id)
    ensure_reference(db, Vendor, data.vendor_id)
    ensure_reference(db, Employee, data.current_user_id, "Current user")
    ensure_reference(db, Employee, data.previous_user_id, "Previous user")


def _with_relations(query):
    return query.options(joinedload(System.company), joinedload(System.location))


def filter_systems(
    query,
    company_id: Optional[str] = None,
    location_id: Optional[str] = None,
    status: Optional[str] = None,
    product_type: Optional[str] = None,
    search: Optional[str] = None,
):
    """Apply the list/report filters to a System query"""
    if company_id:
        query = query.filter(System.company_id == company_id)
    if location_id:
        query = query.filter(System.location_id == location_id)
    if status:
        query = query.filter(System.status == status)
    if product_type:
        query = query.filter(System.product_type == product_type)
    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(
            System.asset_tag.ilike(pattern),
            System.serial_number.ilike(pattern),
            System.manufacturer.ilike(pattern),
            System.model.ilike(pattern),
        ))
    return query


def create_system(db: Session, system_data: SystemCreate, actor: ActorContext = SYSTEM_ACTOR) -> System:
    """
    Register a hardware asset

    Raises:
        HTTPException: If the asset tag is taken or a referenced row is missing
    """
    ensure_unique(db, System, System.asset_tag, system_data.asset_tag, "Asset tag already exists")
    _validate_references(db, system_data)

    system = build_entity(System, system_data)
    db.add(system)
    db.commit()
    db.refresh(system)
    logger.info("System created: id=%s asset_tag=%s", system.id, system.asset_tag)

    audit_create(db, ENTITY_TYPE, system, actor, company_id=system.company_id)
    return system


def list_systems(
    db: Session,
    page: int = 1,
    limit: Optional[int] = None,
    company_id: Optional[str] = None,
    location_id: Optional[str] = None,
    status: Optional[str] = None,
    product_type: Optional[str] = None,
    search: Optional[str] = None,
) -> Dict[str, Any]:
    """
    List systems newest first, one page at a time

    Returns:
        Dict with data and pagination
    """
    query = filter_systems(
        db.query(System),
        company_id=company_id,
        location_id=location_id,
        status=status,
        product_type=product_type,
        search=search,
    )
    query = _with_relations(query).order_by(System.created_at.desc(), System.asset_tag)
    return paginate(query, page, limit)


def get_system(db: Session, system_id: str) -> System:
    return get_or_404(db, System, system_id)


def update_system(
    db: Session,
    system_id: str,
    system_data: SystemUpdate,
    actor: ActorContext = SYSTEM_ACTOR,
) -> System:
    system = get_system(db, system_id)
    ensure_unique(db, System, System.asset_tag, system_data.asset_tag, "Asset tag already exists",
                  exclude_id=system.id)
    _validate_references(db, system_data)

    before = snapshot(system)
    apply_changes(system, system_data)
    db.commit()
    db.refresh(system)

    audit_update(db, ENTITY_TYPE, system, before, actor, company_id=system.company_id)
    return system


def delete_system(db: Session, system_id: str, actor: ActorContext = SYSTEM_ACTOR) -> None:
    system = get_system(db, system_id)
    before = snapshot(system)
    company_id = system.company_id

    delete_or_400(db, system, "system")
    audit_delete(db, ENTITY_TYPE, system_id, before, actor, company_id=company_id)


def get_warranty_expiring(db: Session, days: int = 30) -> List[System]:
    """ACTIVE systems whose warranty ends within the next `days` days, soonest first"""
    start = today()
    end = start + timedelta(days=days)
    query = db.query(System).filter(
        System.status == SystemStatus.ACTIVE.value,
        System.warranty_end_date.isnot(None),
        System.warranty_end_date >= start,
        System.warranty_end_date <= end,
    )
    return _with_relations(query).order_by(System.warranty_end_date).all()


def get_maintenance_due(db: Session) -> List[System]:
    """ACTIVE systems whose next maintenance date is today or overdue"""
    query = db.query(System).filter(
        System.status == SystemStatus.ACTIVE.value,
        System.next_maintenance_date.isnot(None),
        System.next_maintenance_date <= today(),
    )
    return _with_relations(query).order_by(System.next_maintenance_date).all()


def _count_by(db: Session, column) -> List[Dict[str, Any]]:
    rows = db.query(column, func.count(System.id)).group_by(column).order_by(column).all()
    return [{"key": key, "count": count} for key, count in rows]


def get_system_stats(db: Session) -> Dict[str, Any]:
    """Totals by status, product type and company (keyed by company name)"""
    by_company = (
        db.query(Company.name, func.count(System.id))
        .join(System, System.company_id == Company.id)
        .group_by(Company.name)
        .order_by(Company.name)
        .all()
    )
    return {
        "total": db.query(func.count(System.id)).scalar() or 0,
        "by_status": _count_by(db, System.status),
        "by_product_type": _count_by(db, System.product_type),
        "by_company": [{"key": name, "count": count} for name, count in by_company],
    }


def _get_installation(db: Session, system_id: str, software_id: str) -> Optional[SystemSoftware]:
    return (
        db.query(SystemSoftware)
        .filter(SystemSoftware.system_id == system_id, SystemSoftware.software_id == software_id)
        .first()
    )


def install_software(
    db: Session,
    system_id: str,
    install_data: SoftwareInstall,
    actor: ActorContext = SYSTEM_ACTOR,
) -> SystemSoftware:
    """
    Record a software title as installed on a system

    Raises:
        HTTPException: 404 if the system is missing, 400 if the software is
        missing or already installed on it
    """
    system = get_system(db, system_id)
    ensure_reference(db, Software, install_data.software_id)
    if _get_installation(db, system.id, install_data.software_id):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Software is already installed on this system"
        )

    installation = build_entity(SystemSoftware, install_data, system_id=system.id)
    db.add(installation)
    db.commit()
    db.refresh(installation)
    logger.info("Software installed: system=%s software=%s", system.id, installation.software_id)

    audit_create(db, INSTALLATION_ENTITY_TYPE, installation, actor, company_id=system.company_id)
    return installation


def uninstall_software(
    db: Session,
    system_id: str,
    software_id: str,
    actor: ActorContext = SYSTEM_ACTOR,
) -> None:
    system = get_system(db, system_id)
    installation = _get_installation(db, system.id, software_id)
    if not installation:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Software is not installed on this system"
        )

    before = snapshot(installation)
    installation_id = installation.id
    db.delete(installation)
    db.commit()
    audit_delete(db, INSTALLATION_ENTITY_TYPE, installation_id, before, actor, company_id=system.company_id)


def list_installed_software(db: Session, system_id: str) -> List[SystemSoftware]:
    system = get_system(db, system_id)
    return (
        db.query(SystemSoftware)
        .options(joinedload(SystemSoftware.software))
        .filter(SystemSoftware.system_id == system.id)
        .order_by(SystemSoftware.created_at)
        .all()
    )
