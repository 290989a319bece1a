"""Master data API: companies, locations, departments, employees, vendors."""
from fastapi import APIRouter
from inventory.api.v1.masters import companies
from inventory.api.v1.masters import locations
from inventory.api.v1.masters import departments
from inventory.api.v1.masters import employees
from inventory.api.v1.masters import vendors

masters_router = APIRouter(prefix="/masters", tags=["masters"])
masters_router.include_router(companies.router, prefix="/companies", tags=["companies"])
masters_router.include_router(locations.router, prefix="/locations", tags=["locations"])
masters_router.include_router(departments.router, prefix="/departments", tags=["departments"])
masters_router.include_router(employees.router, prefix="/employees", tags=["employees"])
masters_router.include_router(vendors.router, prefix="/vendors", tags=["vendors"])
