"""
Company service - business logic for tenant companies
"""
import logging
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from inventory.core.deps import ActorContext, SYSTEM_ACTOR
from inventory.models.company import Company
from inventory.schemas.company import CompanyCreate, CompanyUpdate
from inventory.services.audit_service import snapshot, audit_create, audit_update, audit_delete
from inventory.services.common import get_or_404, ensure_unique, apply_changes, build_entity, delete_or_400

logger = logging.getLogger(__name__)

ENTITY_TYPE = "Company"


def create_company(db: Session, company_data: CompanyCreate, actor: ActorContext = SYSTEM_ACTOR) -> Company:
    """
    Create a new company

    Args:
        db: Database session
        company_data: Company creation data
        actor: Who is performing the write

    Returns:
        Created Company instance

    Raises:
        HTTPException: If the company code already exists
    """
    ensure_unique(db, Company, Company.code, company_data.code, "Company code already exists")

    company = build_entity(Company, company_data)
    db.add(company)
    db.commit()
    db.refresh(company)
    logger.info("Company created: id=%s code=%s", company.id, company.code)

    # A company is its own tenant scope
    audit_create(db, ENTITY_TYPE, company, actor, company_id=company.id)
    return company


def list_companies(
    db: Session,
    active_only: Optional[bool] = None,
    search: Optional[str] = None,
) -> List[Company]:
    """List companies ordered by name"""
    query = db.query(Company)

    if active_only:
        query = query.filter(Company.is_active.is_(True))
    if search:
        pattern = f"%{search}%"
        query = query.filter(or_(Company.name.ilike(pattern), Company.code.ilike(pattern)))

    return query.order_by(Company.name).all()


def get_company(db: Session, company_id: str) -> Company:
    """Get a company by ID or raise 404"""
    return get_or_404(db, Company, company_id)


def update_company(
    db: Session,
    company_id: str,
    company_data: CompanyUpdate,
    actor: ActorContext = SYSTEM_ACTOR,
) -> Company:
    """
    Update a company

    Raises:
        HTTPException: If company not found or the new code is taken
    """
    company = get_company(db, company_id)
    ensure_unique(db, Company, Company.code, company_data.code, "Company code already exists",
                  exclude_id=company.id)

    before = snapshot(company)
    apply_changes(company, company_data)
    db.commit()
    db.refresh(company)

    audit_update(db, ENTITY_TYPE, company, before, actor, company_id=company.id)
    return company


def delete_company(db: Session, company_id: str, actor: ActorContext = SYSTEM_ACTOR) -> None:
    """
    Delete a company

    Raises:
        HTTPException: 404 if not found, 400 if assets or masters still reference it
    """
    company = get_company(db, company_id)
    before = snapshot(company)

    delete_or_400(db, company, "company")
    logger.info("Company deleted: id=%s", company_id)

    # The row is gone, so the audit record carries no company scope
    audit_delete(db, ENTITY_TYPE, company_id, before, actor)
