"""
Employee endpoints
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from inventory.core.deps import get_db, get_actor, ActorContext
from inventory.schemas.common import MessageOut
from inventory.schemas.employee import EmployeeCreate, EmployeeUpdate, EmployeeOut, EmployeeOption
from inventory.services.employee_service import (
    create_employee,
    list_employees,
    list_employee_options,
    get_employee,
    update_employee,
    delete_employee,
)

router = APIRouter()


@router.post("", response_model=EmployeeOut, status_code=201)
async def create_employee_endpoint(
    employee_data: EmployeeCreate,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    """Create a new employee"""
    return create_employee(db, employee_data, actor)


@router.get("", response_model=List[EmployeeOut])
async def list_employees_endpoint(
    company_id: Optional[str] = Query(None, alias="companyId"),
    location_id: Optional[str] = Query(None, alias="locationId"),
    department_id: Optional[str] = Query(None, alias="departmentId"),
    active_only: Optional[bool] = Query(None, alias="activeOnly"),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """
    List employees

    Filters:
    - companyId, locationId, departmentId: exact match
    - activeOnly: only active employees
    - search: name, employee code or email
    """
    return list_employees(
        db,
        company_id=company_id,
        location_id=location_id,
        department_id=department_id,
        active_only=active_only,
        search=search,
    )


# Declared before /{employee_id} so "options" is not captured as an id
@router.get("/options", response_model=List[EmployeeOption])
async def list_employee_options_endpoint(
    company_id: Optional[str] = Query(None, alias="companyId"),
    db: Session = Depends(get_db),
):
    """Active employees for dropdowns"""
    return list_employee_options(db, company_id=company_id)


@router.get("/{employee_id}", response_model=EmployeeOut)
async def get_employee_endpoint(employee_id: str, db: Session = Depends(get_db)):
    return get_employee(db, employee_id)


@router.put("/{employee_id}", response_model=EmployeeOut)
async def update_employee_endpoint(
    employee_id: str,
    employee_data: EmployeeUpdate,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    return update_employee(db, employee_id, employee_data, actor)


@router.delete("/{employee_id}", response_model=MessageOut)
async def delete_employee_endpoint(
    employee_id: str,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    delete_employee(db, employee_id, actor)
    return MessageOut(message="Employee deleted successfully")
