"""
Employee schemas
"""
from datetime import date, datetime
from typing import Any, Optional
from pydantic import Field, model_validator
from inventory.schemas.common import APIModel, OutModel, NamedRef, OptionalEmail


class _EmployeeInput(APIModel):
    @model_validator(mode="before")
    @classmethod
    def _blank_strings_to_none(cls, data: Any) -> Any:
        """The employee forms post "" for every empty optional field"""
        if isinstance(data, dict):
            return {k: (None if isinstance(v, str) and not v.strip() else v) for k, v in data.items()}
        return data


class EmployeeCreate(_EmployeeInput):
    """Schema for creating an employee"""
    employee_code: str = Field(..., min_length=1, max_length=20, description="Employee code (unique)")
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: Optional[str] = Field(None, max_length=50)
    email: OptionalEmail = Field(None, description="Work email (unique)")
    phone: Optional[str] = Field(None, max_length=15)
    designation: Optional[str] = Field(None, max_length=100)
    joining_date: Optional[date] = None
    company_id: str = Field(..., min_length=1)
    location_id: Optional[str] = Field(None, min_length=1)
    department_id: Optional[str] = Field(None, min_length=1)
    is_active: bool = Field(default=True)


class EmployeeUpdate(_EmployeeInput):
    """Schema for updating an employee"""
    employee_code: Optional[str] = Field(None, min_length=1, max_length=20)
    first_name: Optional[str] = Field(None, min_length=1, max_length=50)
    last_name: Optional[str] = Field(None, max_length=50)
    email: OptionalEmail = None
    phone: Optional[str] = Field(None, max_length=15)
    designation: Optional[str] = Field(None, max_length=100)
    joining_date: Optional[date] = None
    company_id: Optional[str] = Field(None, min_length=1)
    location_id: Optional[str] = Field(None, min_length=1)
    department_id: Optional[str] = Field(None, min_length=1)
    is_active: Optional[bool] = None


class EmployeeOut(OutModel):
    """Schema for employee output"""
    id: str
    employee_code: str
    first_name: str
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    designation: Optional[str] = None
    joining_date: Optional[date] = None
    company_id: str
    location_id: Optional[str] = None
    department_id: Optional[str] = None
    company: Optional[NamedRef] = None
    location: Optional[NamedRef] = None
    department: Optional[NamedRef] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime


class EmployeeOption(APIModel):
    """Dropdown entry labelled "First Last - COMPANYCODE" """
    id: str
    name: str
    employee_code: str
    email: Optional[str] = None
