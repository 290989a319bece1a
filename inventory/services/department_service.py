"""
Department service - business logic for department management
"""
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from inventory.core.deps import ActorContext, SYSTEM_ACTOR
from inventory.models.company import Company
from inventory.models.department import Department
from inventory.schemas.department import DepartmentCreate, DepartmentUpdate
from inventory.services.audit_service import snapshot, audit_create, audit_update, audit_delete
from inventory.services.common import get_or_404, ensure_reference, apply_changes, build_entity, delete_or_400

ENTITY_TYPE = "Department"


def _check_duplicate_name(db: Session, name: Optional[str], company_id: Optional[str],
                          exclude_id: Optional[str] = None) -> None:
    """Department names are unique per company (case-insensitive)"""
    if name is None:
        return
    query = db.query(Department).filter(func.lower(Department.name) == func.lower(name))
    if company_id:
        query = query.filter(Department.company_id == company_id)
    else:
        query = query.filter(Department.company_id.is_(None))
    if exclude_id is not None:
        query = query.filter(Department.id != exclude_id)

    if query.first():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Department with name '{name}' already exists"
        )


def create_department(
    db: Session,
    department_data: DepartmentCreate,
    actor: ActorContext = SYSTEM_ACTOR,
) -> Department:
    """
    Create a new department

    Args:
        db: Database session
        department_data: Department creation data
        actor: Who is performing the write

    Returns:
        Created Department instance

    Raises:
        HTTPException: If the company is unknown or the name already exists
    """
    ensure_reference(db, Company, department_data.company_id)
    _check_duplicate_name(db, department_data.name, department_data.company_id)

    department = build_entity(Department, department_data)
    db.add(department)
    db.commit()
    db.refresh(department)

    audit_create(db, ENTITY_TYPE, department, actor, company_id=department.company_id)
    return department


def list_departments(
    db: Session,
    company_id: Optional[str] = None,
    active_only: Optional[bool] = None,
) -> List[Department]:
    """
    List departments ordered by name

    Args:
        db: Database session
        company_id: Only departments of this company
        active_only: If True, return only active departments

    Returns:
        List of Department instances
    """
    query = db.query(Department).options(joinedload(Department.company))

    if company_id:
        query = query.filter(Department.company_id == company_id)
    if active_only:
        query = query.filter(Department.is_active.is_(True))

    return query.order_by(Department.name).all()


def get_department(db: Session, department_id: str) -> Department:
    """Get a department by ID or raise 404"""
    return get_or_404(db, Department, department_id)


def update_department(
    db: Session,
    department_id: str,
    department_data: DepartmentUpdate,
    actor: ActorContext = SYSTEM_ACTOR,
) -> Department:
    """
    Update a department

    Raises:
        HTTPException: If department not found or name conflict
    """
    department = get_department(db, department_id)
    ensure_reference(db, Company, department_data.company_id)

    fields = department_data.model_fields_set
    target_company = department_data.company_id if "company_id" in fields else department.company_id
    _check_duplicate_name(db, department_data.name, target_company, exclude_id=department.id)

    before = snapshot(department)
    apply_changes(department, department_data)
    db.commit()
    db.refresh(department)

    audit_update(db, ENTITY_TYPE, department, before, actor, company_id=department.company_id)
    return department


def delete_department(db: Session, department_id: str, actor: ActorContext = SYSTEM_ACTOR) -> None:
    department = get_department(db, department_id)
    before = snapshot(department)
    company_id = department.company_id

    delete_or_400(db, department, "department")
    audit_delete(db, ENTITY_TYPE, department_id, before, actor, company_id=company_id)
