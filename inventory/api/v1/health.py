"""
Liveness and build metadata endpoints
"""
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from inventory.core.config import settings
from inventory.core.constants import SERVICE_NAME, DEFAULT_VERSION
from inventory.core.deps import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check(db: Session = Depends(get_db)):
    """
    Report whether the service can reach its database

    Responds 503 with ``"database": "unavailable"`` when the round trip fails.
    """
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Health check: database unreachable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "degraded", "service": SERVICE_NAME, "database": "unavailable"},
        )
    return {"status": "ok", "service": SERVICE_NAME, "database": "ok"}


@router.get("/version", tags=["version"])
async def get_version():
    return {
        "service": SERVICE_NAME,
        "version": settings.VERSION or DEFAULT_VERSION,
        "env": settings.APP_ENV,
    }
