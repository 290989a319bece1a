"""
Department endpoints
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from inventory.core.deps import get_db, get_actor, ActorContext
from inventory.schemas.common import MessageOut
from inventory.schemas.department import DepartmentCreate, DepartmentUpdate, DepartmentOut
from inventory.services.department_service import (
    create_department,
    list_departments,
    get_department,
    update_department,
    delete_department,
)

router = APIRouter()


@router.post("", response_model=DepartmentOut, status_code=201)
async def create_department_endpoint(
    department_data: DepartmentCreate,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    """Create a new department"""
    return create_department(db, department_data, actor)


@router.get("", response_model=List[DepartmentOut])
async def list_departments_endpoint(
    company_id: Optional[str] = Query(None, alias="companyId"),
    active_only: Optional[bool] = Query(None, alias="activeOnly"),
    db: Session = Depends(get_db),
):
    """List departments ordered by name"""
    return list_departments(db, company_id=company_id, active_only=active_only)


@router.get("/{department_id}", response_model=DepartmentOut)
async def get_department_endpoint(department_id: str, db: Session = Depends(get_db)):
    """Get a department by ID"""
    return get_department(db, department_id)


@router.put("/{department_id}", response_model=DepartmentOut)
async def update_department_endpoint(
    department_id: str,
    department_data: DepartmentUpdate,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    """Update a department"""
    return update_department(db, department_id, department_data, actor)


@router.delete("/{department_id}", response_model=MessageOut)
async def delete_department_endpoint(
    department_id: str,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    delete_department(db, department_id, actor)
    return MessageOut(message="Department deleted successfully")
