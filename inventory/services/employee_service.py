"""
Employee service - business logic for employee master records
"""
from typing import Dict, List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from inventory.core.deps import ActorContext, SYSTEM_ACTOR
from inventory.models.company import Company
from inventory.models.department import Department
from inventory.models.employee import Employee
from inventory.models.location import Location
from inventory.schemas.employee import EmployeeCreate, EmployeeUpdate
from inventory.services.audit_service import snapshot, audit_create, audit_update, audit_delete
from inventory.services.common import (
    get_or_404,
    ensure_reference,
    ensure_unique,
    apply_changes,
    build_entity,
    delete_or_400,
)

ENTITY_TYPE = "Employee"


def _validate_references(db: Session, data) -> None:
    ensure_reference(db, Company, data.company_id)
    ensure_reference(db, Location, data.location_id)
    ensure_reference(db, Department, data.department_id)


def create_employee(db: Session, employee_data: EmployeeCreate, actor: ActorContext = SYSTEM_ACTOR) -> Employee:
    """
    Create a new employee

    Args:
        db: Database session
        employee_data: Employee creation data
        actor: Who is performing the write

    Returns:
        Created Employee instance

    Raises:
        HTTPException: If employee code or email already exists, or a referenced row is missing
    """
    ensure_unique(db, Employee, Employee.employee_code, employee_data.employee_code,
                  "Employee code already exists")
    ensure_unique(db, Employee, Employee.email, employee_data.email, "Employee email already exists")
    _validate_references(db, employee_data)

    employee = build_entity(Employee, employee_data)
    db.add(employee)
    db.commit()
    db.refresh(employee)

    audit_create(db, ENTITY_TYPE, employee, actor, company_id=employee.company_id)
    return employee


def list_employees(
    db: Session,
    company_id: Optional[str] = None,
    location_id: Optional[str] = None,
    department_id: Optional[str] = None,
    active_only: Optional[bool] = None,
    search: Optional[str] = None,
) -> List[Employee]:
    """List employees ordered by first name, with company/location/department loaded"""
    query = db.query(Employee).options(
        joinedload(Employee.company),
        joinedload(Employee.location),
        joinedload(Employee.department),
    )

    if company_id:
        query = query.filter(Employee.company_id == company_id)
    if location_id:
        query = query.filter(Employee.location_id == location_id)
    if department_id:
        query = query.filter(Employee.department_id == department_id)
    if active_only:
        query = query.filter(Employee.is_active.is_(True))
    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(
            Employee.first_name.ilike(pattern),
            Employee.last_name.ilike(pattern),
            Employee.employee_code.ilike(pattern),
            Employee.email.ilike(pattern),
        ))

    return query.order_by(Employee.first_name, Employee.last_name).all()


def list_employee_options(db: Session, company_id: Optional[str] = None) -> List[Dict]:
    """
    Active employees as dropdown entries labelled "First Last - COMPANYCODE"
    """
    query = db.query(Employee).options(joinedload(Employee.company)).filter(Employee.is_active.is_(True))
    if company_id:
        query = query.filter(Employee.company_id == company_id)

    options = []
    for employee in query.order_by(Employee.first_name, Employee.last_name).all():
        label = employee.full_name
        if employee.company is not None:
            label = f"{label} - {employee.company.code}"
        options.append({
            "id": employee.id,
            "name": label,
            "employee_code": employee.employee_code,
            "email": employee.email,
        })
    return options


def get_employee(db: Session, employee_id: str) -> Employee:
    return get_or_404(db, Employee, employee_id)


def update_employee(
    db: Session,
    employee_id: str,
    employee_data: EmployeeUpdate,
    actor: ActorContext = SYSTEM_ACTOR,
) -> Employee:
    """
    Update an employee

    Raises:
        HTTPException: If not found, a unique field is taken, or a referenced row is missing
    """
    employee = get_employee(db, employee_id)
    ensure_unique(db, Employee, Employee.employee_code, employee_data.employee_code,
                  "Employee code already exists", exclude_id=employee.id)
    ensure_unique(db, Employee, Employee.email, employee_data.email, "Employee email already exists",
                  exclude_id=employee.id)
    _validate_references(db, employee_data)

    before = snapshot(employee)
    apply_changes(employee, employee_data)
    db.commit()
    db.refresh(employee)

    audit_update(db, ENTITY_TYPE, employee, before, actor, company_id=employee.company_id)
    return employee


def delete_employee(db: Session, employee_id: str, actor: ActorContext = SYSTEM_ACTOR) -> None:
    employee = get_employee(db, employee_id)
    before = snapshot(employee)
    company_id = employee.company_id

    delete_or_400(db, employee, "employee")
    audit_delete(db, ENTITY_TYPE, employee_id, before, actor, company_id=company_id)
