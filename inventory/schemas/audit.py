"""
Audit log schemas
"""
from datetime import datetime
from typing import Any, Dict, List, Optional
from inventory.schemas.common import APIModel, OutModel, CompanyRef


class AuditLogOut(OutModel):
    id: int
    action: str
    entity_type: str
    entity_id: str
    old_values: Optional[Dict[str, Any]] = None
    new_values: Optional[Dict[str, Any]] = None
    performed_by: str
    company_id: Optional[str] = None
    company: Optional[CompanyRef] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    created_at: datetime


class AuditLogListOut(APIModel):
    data: List[AuditLogOut]
    total: int
    page: int
    limit: int
    total_pages: int
