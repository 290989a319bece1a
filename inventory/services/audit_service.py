"""
Audit logging service

Computes field-level diffs between entity snapshots, records one immutable
AuditLog per tracked write, and serves the paginated audit read path.
Recording is best-effort: a failed audit insert is logged and swallowed so
the business write that triggered it still succeeds.
"""
import logging
import math
from typing import Any, Dict, NamedTuple, Optional

from fastapi import HTTPException, status
from pydantic.alias_generators import to_camel
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import Session, joinedload

from inventory.core.deps import ActorContext, SYSTEM_ACTOR
from inventory.models.audit_log import AuditLog, AuditAction
from inventory.utils.datetime_utils import now_utc, parse_range_bound
from inventory.utils.json_serializer import sanitize_for_json, to_json_safe, json_equal

logger = logging.getLogger(__name__)

# ORM attribute names and their JSON aliases
BOOKKEEPING_FIELDS = frozenset({"id", "created_at", "updated_at", "createdAt", "updatedAt"})

DEFAULT_PERFORMED_BY = "System"

_MISSING = object()


class ChangeSet(NamedTuple):
    old_values: Dict[str, Any]
    new_values: Dict[str, Any]


def snapshot(entity) -> Dict[str, Any]:
    """Column values of an ORM row as a JSON-safe mapping with camelCase keys"""
    mapper = sa_inspect(entity).mapper
    return {
        to_camel(attr.key): to_json_safe(getattr(entity, attr.key))
        for attr in mapper.column_attrs
    }


def _same_value(old: Any, new: Any) -> bool:
    if old is _MISSING or new is _MISSING:
        return old is new
    return json_equal(to_json_safe(old), to_json_safe(new))


def diff_snapshots(
    old_snapshot: Optional[Dict[str, Any]],
    new_snapshot: Optional[Dict[str, Any]],
) -> ChangeSet:
    """
    Compute the changed-field subset between two snapshots.

    Fields are visited in first-seen order across old then new. Bookkeeping
    fields are skipped. A changed field is reported with its old value in
    old_values and its new value in new_values; a side on which the field
    did not exist leaves it out.

    With no old snapshot at all, the whole new snapshot is reported as new.

    Args:
        old_snapshot: Entity state before the write, or None
        new_snapshot: Entity state after the write

    Returns:
        ChangeSet(old_values, new_values)
    """
    new_snapshot = new_snapshot or {}
    if old_snapshot is None:
        return ChangeSet({}, dict(new_snapshot))

    old_values: Dict[str, Any] = {}
    new_values: Dict[str, Any] = {}

    keys = list(old_snapshot)
    keys.extend(key for key in new_snapshot if key not in old_snapshot)

    for key in keys:
        if key in BOOKKEEPING_FIELDS:
            continue
        old = old_snapshot.get(key, _MISSING)
        new = new_snapshot.get(key, _MISSING)
        if _same_value(old, new):
            continue
        if old is not _MISSING:
            old_values[key] = old
        if new is not _MISSING:
            new_values[key] = new

    return ChangeSet(old_values, new_values)


def record_change(
    db: Session,
    action: AuditAction,
    entity_type: str,
    entity_id: str,
    old_values: Optional[Dict[str, Any]] = None,
    new_values: Optional[Dict[str, Any]] = None,
    performed_by: Optional[str] = None,
    company_id: Optional[str] = None,
    ip_address: Optional[str] = None,
    user_agent: Optional[str] = None,
) -> Optional[AuditLog]:
    """
    Persist one audit record.

    Empty or missing value maps are stored as JSON null. Any persistence
    error is rolled back and logged; the caller gets None and carries on.

    Args:
        db: Database session (the business write must already be committed)
        action: CREATE, UPDATE or DELETE
        entity_type: Tracked entity name, e.g. "System"
        entity_id: ID of the affected row
        old_values: Field values before the write
        new_values: Field values after the write
        performed_by: Actor name, defaults to "System"
        company_id: Tenant scope of the affected row

    Returns:
        Created AuditLog, or None when the insert failed
    """
    action = AuditAction(action)
    if not entity_id:
        raise ValueError("entity_id is required for an audit record")

    try:
        audit_log = AuditLog(
            action=action.value,
            entity_type=entity_type,
            entity_id=str(entity_id),
            old_values=sanitize_for_json(old_values),
            new_values=sanitize_for_json(new_values),
            performed_by=performed_by or DEFAULT_PERFORMED_BY,
            company_id=company_id,
            ip_address=ip_address,
            user_agent=user_agent[:500] if user_agent else None,
            created_at=now_utc(),
        )
        db.add(audit_log)
        db.commit()
        db.refresh(audit_log)
        return audit_log
    except Exception:
        db.rollback()
        logger.exception(
            "Failed to create audit log: action=%s entity_type=%s entity_id=%s",
            action.value, entity_type, entity_id,
        )
        return None


def _record_for_actor(db: Session, action: AuditAction, entity_type: str, entity_id: str,
                      changes: ChangeSet, actor: ActorContext, company_id: Optional[str]):
    return record_change(
        db,
        action,
        entity_type,
        entity_id,
        old_values=changes.old_values,
        new_values=changes.new_values,
        performed_by=actor.name,
        company_id=company_id,
        ip_address=actor.ip_address,
        user_agent=actor.user_agent,
    )


def audit_create(db: Session, entity_type: str, entity, actor: ActorContext = SYSTEM_ACTOR,
                 company_id: Optional[str] = None) -> Optional[AuditLog]:
    """Record a CREATE with the full new snapshot"""
    changes = ChangeSet({}, snapshot(entity))
    return _record_for_actor(db, AuditAction.CREATE, entity_type, entity.id, changes, actor, company_id)


def audit_update(db: Session, entity_type: str, entity, before: Dict[str, Any],
                 actor: ActorContext = SYSTEM_ACTOR, company_id: Optional[str] = None) -> Optional[AuditLog]:
    """Record an UPDATE with only the fields that changed since `before`"""
    changes = diff_snapshots(before, snapshot(entity))
    return _record_for_actor(db, AuditAction.UPDATE, entity_type, entity.id, changes, actor, company_id)


def audit_delete(db: Session, entity_type: str, entity_id: str, before: Dict[str, Any],
                 actor: ActorContext = SYSTEM_ACTOR, company_id: Optional[str] = None) -> Optional[AuditLog]:
    """Record a DELETE with the full snapshot taken before deletion"""
    changes = ChangeSet(before, {})
    return _record_for_actor(db, AuditAction.DELETE, entity_type, entity_id, changes, actor, company_id)


def list_audit_logs(
    db: Session,
    page: int = 1,
    limit: int = 50,
    entity_type: Optional[str] = None,
    entity_id: Optional[str] = None,
    action: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> Dict[str, Any]:
    """
    List audit records newest-first with exact-match filters and a created_at range

    Args:
        db: Database session
        page: 1-based page number
        limit: Page size
        entity_type: Exact entity type
        entity_id: Exact entity id
        action: Exact action
        start_date: ISO-8601 inclusive lower bound
        end_date: ISO-8601 inclusive upper bound (a bare date covers the whole day)

    Returns:
        Dict with data, total, page, limit, total_pages

    Raises:
        ValueError: If a date bound is not ISO-8601
    """
    query = db.query(AuditLog)

    if entity_type:
        query = query.filter(AuditLog.entity_type == entity_type)
    if entity_id:
        query = query.filter(AuditLog.entity_id == entity_id)
    if action:
        query = query.filter(AuditLog.action == action)

    start = parse_range_bound(start_date)
    end = parse_range_bound(end_date, end_of_day=True)
    if start is not None:
        query = query.filter(AuditLog.created_at >= start)
    if end is not None:
        query = query.filter(AuditLog.created_at <= end)

    total = query.count()
    records = (
        query.options(joinedload(AuditLog.company))
        .order_by(AuditLog.created_at.desc(), AuditLog.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )

    return {
        "data": records,
        "total": total,
        "page": page,
        "limit": limit,
        "total_pages": math.ceil(total / limit) if limit else 0,
    }


def get_audit_log(db: Session, audit_log_id: int) -> AuditLog:
    """Get a single audit record or raise 404"""
    audit_log = (
        db.query(AuditLog)
        .options(joinedload(AuditLog.company))
        .filter(AuditLog.id == audit_log_id)
        .first()
    )
    if not audit_log:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Audit log with id {audit_log_id} not found"
        )
    return audit_log
