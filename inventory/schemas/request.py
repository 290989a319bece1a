"""
Change/service request schemas
"""
from datetime import date, datetime
from typing import List, Optional
from pydantic import Field, field_serializer
from inventory.models.request import RequestType, RequestStatus, Priority, EmployeeType
from inventory.schemas.common import APIModel, OutModel, NamedRef, Pagination, CountBucket, OptionalEmail


class RequestBase(APIModel):
    employee_type: Optional[EmployeeType] = None
    requester_name: Optional[str] = Field(None, max_length=100)
    requester_email: OptionalEmail = None
    requester_phone: Optional[str] = Field(None, max_length=15)
    joining_date: Optional[date] = None

    description: Optional[str] = Field(None, max_length=2000)
    justification: Optional[str] = Field(None, max_length=1000)

    asset_type: Optional[str] = Field(None, max_length=100)
    specifications: Optional[str] = Field(None, max_length=1000)
    access_requirements: Optional[str] = Field(None, max_length=1000)
    software_requirements: Optional[str] = Field(None, max_length=1000)

    location_id: Optional[str] = None
    department_id: Optional[str] = None
    requester_id: Optional[str] = None


class RequestCreate(RequestBase):
    """Schema for raising a request; request number and status are assigned by the server"""
    subject: str = Field(..., min_length=1, max_length=200)
    request_type: RequestType = RequestType.OTHER
    priority: Priority = Priority.NORMAL
    quantity: int = Field(default=1, ge=1)
    company_id: str = Field(..., min_length=1)


class RequestUpdate(RequestBase):
    subject: Optional[str] = Field(None, min_length=1, max_length=200)
    request_type: Optional[RequestType] = None
    priority: Optional[Priority] = None
    quantity: Optional[int] = Field(None, ge=1)
    company_id: Optional[str] = Field(None, min_length=1)
    status: Optional[RequestStatus] = None
    approval_remarks: Optional[str] = Field(None, max_length=1000)
    approver_id: Optional[str] = None


class RequestDecision(APIModel):
    """Approve/reject payload"""
    approver_id: Optional[str] = None
    remarks: Optional[str] = Field(None, max_length=1000)


class RequestOut(RequestBase, OutModel):
    id: str
    request_number: str
    subject: str
    request_type: str
    priority: str
    status: str
    quantity: int
    company_id: str
    approver_id: Optional[str] = None
    approval_remarks: Optional[str] = None
    approved_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    company: Optional[NamedRef] = None
    created_at: datetime
    updated_at: datetime

    @field_serializer("approved_at", "completed_at")
    def _ser_workflow_datetime(self, dt):
        from inventory.utils.datetime_utils import iso_display
        return iso_display(dt)


class RequestListOut(APIModel):
    data: List[RequestOut]
    pagination: Pagination


class RequestCommentCreate(APIModel):
    comment: str = Field(..., min_length=1, max_length=2000)


class RequestCommentOut(OutModel):
    id: str
    request_id: str
    comment: str
    comment_by: str
    created_at: datetime


class RequestStatsOut(APIModel):
    total: int
    by_status: List[CountBucket]
    by_type: List[CountBucket]
    by_priority: List[CountBucket]
