"""
Dependencies for FastAPI endpoints
"""
from dataclasses import dataclass
from typing import Generator, Optional

from fastapi import Header, Request

from inventory.core.config import settings
from inventory.db.session import SessionLocal


@dataclass(frozen=True)
class ActorContext:
    """Who performed a write, threaded from the request down to the audit record"""
    name: str
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


SYSTEM_ACTOR = ActorContext(name="System")


def get_db() -> Generator:
    """Dependency for getting database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_actor(
    request: Request,
    x_actor: Optional[str] = Header(None, alias="X-Actor"),
) -> ActorContext:
    """
    Build the actor context for a write request.

    There is no identity system; the X-Actor header is trusted as-is and
    falls back to settings.DEFAULT_ACTOR.
    """
    name = (x_actor or "").strip() or settings.DEFAULT_ACTOR
    return ActorContext(
        name=name,
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )
