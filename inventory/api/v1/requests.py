"""
Change/service request endpoints and approval workflow
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from inventory.core.deps import get_db, get_actor, ActorContext
from inventory.models.request import RequestStatus, RequestType, Priority
from inventory.schemas.common import MessageOut
from inventory.schemas.request import (
    RequestCreate,
    RequestUpdate,
    RequestDecision,
    RequestOut,
    RequestListOut,
    RequestCommentCreate,
    RequestCommentOut,
    RequestStatsOut,
)
from inventory.services import request_service as svc
from inventory.utils.enums import enum_to_str

router = APIRouter()


@router.post("", response_model=RequestOut, status_code=201)
async def create_request_endpoint(
    request_data: RequestCreate,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    """Raise a request; it starts in PENDING with a generated REQ-<year>-<nnnnn> number"""
    return svc.create_request(db, request_data, actor)


@router.get("", response_model=RequestListOut)
async def list_requests_endpoint(
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    company_id: Optional[str] = Query(None, alias="companyId"),
    location_id: Optional[str] = Query(None, alias="locationId"),
    status: Optional[RequestStatus] = Query(None),
    request_type: Optional[RequestType] = Query(None, alias="requestType"),
    priority: Optional[Priority] = Query(None),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """List requests newest first"""
    return svc.list_requests(
        db,
        page=page,
        limit=limit,
        company_id=company_id,
        location_id=location_id,
        status=enum_to_str(status),
        request_type=enum_to_str(request_type),
        priority=enum_to_str(priority),
        search=search,
    )


@router.get("/stats", response_model=RequestStatsOut)
async def request_stats_endpoint(db: Session = Depends(get_db)):
    return svc.get_request_stats(db)


@router.get("/pending", response_model=List[RequestOut])
async def pending_requests_endpoint(db: Session = Depends(get_db)):
    """Pending queue: most urgent first, then oldest first"""
    return svc.get_pending_requests(db)


@router.get("/{request_id}", response_model=RequestOut)
async def get_request_endpoint(request_id: str, db: Session = Depends(get_db)):
    return svc.get_request(db, request_id)


@router.put("/{request_id}", response_model=RequestOut)
async def update_request_endpoint(
    request_id: str,
    request_data: RequestUpdate,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    return svc.update_request(db, request_id, request_data, actor)


@router.delete("/{request_id}", response_model=MessageOut)
async def delete_request_endpoint(
    request_id: str,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    svc.delete_request(db, request_id, actor)
    return MessageOut(message="Request deleted successfully")


@router.post("/{request_id}/approve", response_model=RequestOut)
async def approve_request_endpoint(
    request_id: str,
    decision: RequestDecision,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    return svc.approve_request(db, request_id, decision, actor)


@router.post("/{request_id}/reject", response_model=RequestOut)
async def reject_request_endpoint(
    request_id: str,
    decision: RequestDecision,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    """Reject a pending request (remarks required)"""
    return svc.reject_request(db, request_id, decision, actor)


@router.post("/{request_id}/complete", response_model=RequestOut)
async def complete_request_endpoint(
    request_id: str,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    return svc.complete_request(db, request_id, actor)


@router.get("/{request_id}/comments", response_model=List[RequestCommentOut])
async def list_comments_endpoint(request_id: str, db: Session = Depends(get_db)):
    return svc.list_comments(db, request_id)


@router.post("/{request_id}/comments", response_model=RequestCommentOut, status_code=201)
async def add_comment_endpoint(
    request_id: str,
    comment_data: RequestCommentCreate,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    """Add a comment; the author is the acting user"""
    return svc.add_comment(db, request_id, comment_data, actor)
