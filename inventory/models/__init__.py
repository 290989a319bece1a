"""
Database models
"""
from inventory.models.company import Company
from inventory.models.location import Location
from inventory.models.department import Department
from inventory.models.employee import Employee
from inventory.models.vendor import Vendor
from inventory.models.system import System, ProductType, SystemStatus
from inventory.models.mobile import Mobile, MobileStatus
from inventory.models.software import Software, LicenseType, SoftwareCategory
from inventory.models.system_software import SystemSoftware
from inventory.models.request import (
    Request,
    RequestComment,
    RequestType,
    RequestStatus,
    Priority,
    EmployeeType,
)
from inventory.models.audit_log import AuditLog, AuditAction

__all__ = [
    "Company",
    "Location",
    "Department",
    "Employee",
    "Vendor",
    "System",
    "ProductType",
    "SystemStatus",
    "Mobile",
    "MobileStatus",
    "Software",
    "LicenseType",
    "SoftwareCategory",
    "SystemSoftware",
    "Request",
    "RequestComment",
    "RequestType",
    "RequestStatus",
    "Priority",
    "EmployeeType",
    "AuditLog",
    "AuditAction",
]
