"""
Audit log read endpoints
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from inventory.core.deps import get_db
from inventory.models.audit_log import AuditAction
from inventory.schemas.audit import AuditLogOut, AuditLogListOut
from inventory.services.audit_service import list_audit_logs, get_audit_log
from inventory.utils.enums import enum_to_str

router = APIRouter()


@router.get("", response_model=AuditLogListOut)
async def list_audit_logs_endpoint(
    page: int = Query(1, ge=1),
    limit: int = Query(50, ge=1),
    entity_type: Optional[str] = Query(None, alias="entityType"),
    entity_id: Optional[str] = Query(None, alias="entityId"),
    action: Optional[AuditAction] = Query(None),
    start_date: Optional[str] = Query(None, alias="startDate", description="ISO-8601 date or datetime"),
    end_date: Optional[str] = Query(None, alias="endDate", description="ISO-8601 date or datetime"),
    db: Session = Depends(get_db),
):
    """
    List audit records newest first

    Filters:
    - entityType, entityId, action: exact match
    - startDate, endDate: inclusive created_at range
    """
    return list_audit_logs(
        db,
        page=page,
        limit=limit,
        entity_type=entity_type,
        entity_id=entity_id,
        action=enum_to_str(action),
        start_date=start_date,
        end_date=end_date,
    )


@router.get("/{audit_log_id}", response_model=AuditLogOut)
async def get_audit_log_endpoint(audit_log_id: int, db: Session = Depends(get_db)):
    return get_audit_log(db, audit_log_id)
