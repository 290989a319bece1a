"""
Main API router
"""
from fastapi import APIRouter

from inventory.api.v1 import (
    health,
    systems,
    mobile,
    software,
    requests,
    audit_logs,
    dashboard,
    reports,
)
from inventory.api.v1.masters import masters_router

api_router = APIRouter()

api_router.include_router(health.router)
api_router.include_router(masters_router)
api_router.include_router(systems.router, prefix="/systems", tags=["systems"])
api_router.include_router(mobile.router, prefix="/mobile", tags=["mobile"])
api_router.include_router(software.router, prefix="/software", tags=["software"])
api_router.include_router(requests.router, prefix="/requests", tags=["requests"])
api_router.include_router(audit_logs.router, prefix="/audit-logs", tags=["audit-logs"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
