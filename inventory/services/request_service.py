"""
Request service - IT change/service requests and their approval workflow

Lifecycle:
    PENDING -> APPROVED -> (IN_PROGRESS) -> COMPLETED
    PENDING -> REJECTED
Every transition is a normal audited UPDATE of the request row.
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status
from sqlalchemy import case, func, or_
from sqlalchemy.orm import Session, joinedload

from inventory.core.deps import ActorContext, SYSTEM_ACTOR
from inventory.models.company import Company
from inventory.models.department import Department
from inventory.models.employee import Employee
from inventory.models.location import Location
from inventory.models.request import Request, RequestComment, RequestStatus, PRIORITY_WEIGHT
from inventory.schemas.request import RequestCreate, RequestUpdate, RequestDecision, RequestCommentCreate
from inventory.services.audit_service import snapshot, audit_create, audit_update, audit_delete
from inventory.services.common import (
    get_or_404,
    ensure_reference,
    apply_changes,
    build_entity,
    delete_or_400,
    paginate,
)
from inventory.utils.datetime_utils import now_utc, today

logger = logging.getLogger(__name__)

ENTITY_TYPE = "Request"

DECIDABLE_STATUSES = {RequestStatus.DRAFT.value, RequestStatus.PENDING.value}
COMPLETABLE_STATUSES = {RequestStatus.APPROVED.value, RequestStatus.IN_PROGRESS.value}


def _validate_references(db: Session, data) -> None:
    ensure_reference(db, Company, data.company_id)
    ensure_reference(db, Location, data.location_id)
    ensure_reference(db, Department, data.department_id)
    ensure_reference(db, Employee, data.requester_id, "Requester")


def generate_request_number(db: Session) -> str:
    """
    Next request number, REQ-<year>-<5-digit sequence>

    The sequence is the running request count; numbers freed by deletes are skipped over.
    """
    year = today().year
    sequence = (db.query(func.count(Request.id)).scalar() or 0) + 1
    while True:
        candidate = f"REQ-{year}-{sequence:05d}"
        if not db.query(Request.id).filter(Request.request_number == candidate).first():
            return candidate
        sequence += 1


def filter_requests(
    query,
    company_id: Optional[str] = None,
    location_id: Optional[str] = None,
    status: Optional[str] = None,
    request_type: Optional[str] = None,
    priority: Optional[str] = None,
    search: Optional[str] = None,
):
    """Apply the list/report filters to a Request query"""
    if company_id:
        query = query.filter(Request.company_id == company_id)
    if location_id:
        query = query.filter(Request.location_id == location_id)
    if status:
        query = query.filter(Request.status == status)
    if request_type:
        query = query.filter(Request.request_type == request_type)
    if priority:
        query = query.filter(Request.priority == priority)
    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(
            Request.request_number.ilike(pattern),
            Request.subject.ilike(pattern),
            Request.requester_name.ilike(pattern),
        ))
    return query


def create_request(db: Session, request_data: RequestCreate, actor: ActorContext = SYSTEM_ACTOR) -> Request:
    """
    Raise a new request in PENDING status with a generated request number

    Raises:
        HTTPException: If a referenced row is missing
    """
    _validate_references(db, request_data)

    request = build_entity(
        Request,
        request_data,
        request_number=generate_request_number(db),
        status=RequestStatus.PENDING.value,
    )
    db.add(request)
    db.commit()
    db.refresh(request)
    logger.info("Request created: id=%s number=%s", request.id, request.request_number)

    audit_create(db, ENTITY_TYPE, request, actor, company_id=request.company_id)
    return request


def list_requests(
    db: Session,
    page: int = 1,
    limit: Optional[int] = None,
    company_id: Optional[str] = None,
    location_id: Optional[str] = None,
    status: Optional[str] = None,
    request_type: Optional[str] = None,
    priority: Optional[str] = None,
    search: Optional[str] = None,
) -> Dict[str, Any]:
    """List requests newest first, one page at a time"""
    query = filter_requests(
        db.query(Request),
        company_id=company_id,
        location_id=location_id,
        status=status,
        request_type=request_type,
        priority=priority,
        search=search,
    )
    query = query.options(joinedload(Request.company))
    return paginate(query.order_by(Request.created_at.desc(), Request.request_number.desc()), page, limit)


def get_request(db: Session, request_id: str) -> Request:
    return get_or_404(db, Request, request_id)


def update_request(db: Session, request_id: str, request_data: RequestUpdate,
                   actor: ActorContext = SYSTEM_ACTOR) -> Request:
    """Partial update; status and approval fields may be set directly"""
    request = get_request(db, request_id)
    _validate_references(db, request_data)
    ensure_reference(db, Employee, request_data.approver_id, "Approver")

    before = snapshot(request)
    apply_changes(request, request_data)
    db.commit()
    db.refresh(request)

    audit_update(db, ENTITY_TYPE, request, before, actor, company_id=request.company_id)
    return request


def delete_request(db: Session, request_id: str, actor: ActorContext = SYSTEM_ACTOR) -> None:
    request = get_request(db, request_id)
    before = snapshot(request)
    company_id = request.company_id

    delete_or_400(db, request, "request")
    audit_delete(db, ENTITY_TYPE, request_id, before, actor, company_id=company_id)


def _transition(db: Session, request: Request, actor: ActorContext, **changes) -> Request:
    before = snapshot(request)
    for field, value in changes.items():
        setattr(request, field, value)
    db.commit()
    db.refresh(request)

    audit_update(db, ENTITY_TYPE, request, before, actor, company_id=request.company_id)
    return request


def _ensure_status(request: Request, allowed: set, action: str) -> None:
    if request.status not in allowed:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Cannot {action} a request in {request.status} status"
        )


def approve_request(db: Session, request_id: str, decision: RequestDecision,
                    actor: ActorContext = SYSTEM_ACTOR) -> Request:
    """
    Approve a pending request

    Raises:
        HTTPException: 404 if not found, 400 if not pending or approver unknown
    """
    request = get_request(db, request_id)
    _ensure_status(request, DECIDABLE_STATUSES, "approve")
    ensure_reference(db, Employee, decision.approver_id, "Approver")

    logger.info("Request approved: id=%s by=%s", request.id, actor.name)
    return _transition(
        db, request, actor,
        status=RequestStatus.APPROVED.value,
        approver_id=decision.approver_id,
        approval_remarks=decision.remarks,
        approved_at=now_utc(),
    )


def reject_request(db: Session, request_id: str, decision: RequestDecision,
                   actor: ActorContext = SYSTEM_ACTOR) -> Request:
    """
    Reject a pending request; remarks are mandatory

    Raises:
        HTTPException: 404 if not found, 400 if not pending or remarks are missing
    """
    request = get_request(db, request_id)
    _ensure_status(request, DECIDABLE_STATUSES, "reject")
    if not decision.remarks or not decision.remarks.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Remarks are required to reject a request"
        )
    ensure_reference(db, Employee, decision.approver_id, "Approver")

    logger.info("Request rejected: id=%s by=%s", request.id, actor.name)
    return _transition(
        db, request, actor,
        status=RequestStatus.REJECTED.value,
        approver_id=decision.approver_id,
        approval_remarks=decision.remarks.strip(),
    )


def complete_request(db: Session, request_id: str, actor: ActorContext = SYSTEM_ACTOR) -> Request:
    """Mark an approved or in-progress request as completed"""
    request = get_request(db, request_id)
    _ensure_status(request, COMPLETABLE_STATUSES, "complete")

    return _transition(
        db, request, actor,
        status=RequestStatus.COMPLETED.value,
        completed_at=now_utc(),
    )


def add_comment(db: Session, request_id: str, comment_data: RequestCommentCreate,
                actor: ActorContext = SYSTEM_ACTOR) -> RequestComment:
    request = get_request(db, request_id)
    comment = RequestComment(
        request_id=request.id,
        comment=comment_data.comment,
        comment_by=actor.name,
        created_at=now_utc(),
    )
    db.add(comment)
    db.commit()
    db.refresh(comment)
    return comment


def list_comments(db: Session, request_id: str) -> List[RequestComment]:
    """Comments of a request, newest first"""
    get_request(db, request_id)
    return (
        db.query(RequestComment)
        .filter(RequestComment.request_id == request_id)
        .order_by(RequestComment.created_at.desc())
        .all()
    )


def _count_by(db: Session, column) -> List[Dict[str, Any]]:
    rows = db.query(column, func.count(Request.id)).group_by(column).order_by(column).all()
    return [{"key": key, "count": count} for key, count in rows]


def get_request_stats(db: Session) -> Dict[str, Any]:
    return {
        "total": db.query(func.count(Request.id)).scalar() or 0,
        "by_status": _count_by(db, Request.status),
        "by_type": _count_by(db, Request.request_type),
        "by_priority": _count_by(db, Request.priority),
    }


def get_pending_requests(db: Session) -> List[Request]:
    """PENDING requests, most urgent first, then oldest first"""
    weight = case(PRIORITY_WEIGHT, value=Request.priority, else_=0)
    return (
        db.query(Request)
        .options(joinedload(Request.company))
        .filter(Request.status == RequestStatus.PENDING.value)
        .order_by(weight.desc(), Request.created_at.asc(), Request.request_number.asc())
        .all()
    )
