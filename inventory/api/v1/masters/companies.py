"""
Company endpoints
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from inventory.core.deps import get_db, get_actor, ActorContext
from inventory.schemas.common import MessageOut
from inventory.schemas.company import CompanyCreate, CompanyUpdate, CompanyOut
from inventory.services.company_service import (
    create_company,
    list_companies,
    get_company,
    update_company,
    delete_company,
)

router = APIRouter()


@router.post("", response_model=CompanyOut, status_code=201)
async def create_company_endpoint(
    company_data: CompanyCreate,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    """Create a new company"""
    return create_company(db, company_data, actor)


@router.get("", response_model=List[CompanyOut])
async def list_companies_endpoint(
    active_only: Optional[bool] = Query(None, alias="activeOnly"),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """List companies ordered by name"""
    return list_companies(db, active_only=active_only, search=search)


@router.get("/{company_id}", response_model=CompanyOut)
async def get_company_endpoint(company_id: str, db: Session = Depends(get_db)):
    return get_company(db, company_id)


@router.put("/{company_id}", response_model=CompanyOut)
async def update_company_endpoint(
    company_id: str,
    company_data: CompanyUpdate,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    """Update a company (partial)"""
    return update_company(db, company_id, company_data, actor)


@router.delete("/{company_id}", response_model=MessageOut)
async def delete_company_endpoint(
    company_id: str,
    db: Session = Depends(get_db),
    actor: ActorContext = Depends(get_actor),
):
    """Delete a company that nothing references any more"""
    delete_company(db, company_id, actor)
    return MessageOut(message="Company deleted successfully")
