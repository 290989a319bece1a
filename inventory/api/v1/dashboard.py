"""
Dashboard endpoint
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from inventory.core.deps import get_db
from inventory.schemas.dashboard import DashboardOut
from inventory.services.dashboard_service import get_dashboard

router = APIRouter()


@router.get("", response_model=DashboardOut)
async def dashboard_endpoint(db: Session = Depends(get_db)):
    """KPIs, chart series, expiry alerts and the most recent requests"""
    return get_dashboard(db)
