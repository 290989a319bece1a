"""
Shared helpers for entity services: lookups, reference checks, partial updates and pagination
"""
import math
from enum import Enum
from typing import Any, Dict, Optional, Type

from fastapi import HTTPException, status
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, Query

from inventory.core.config import settings
from inventory.utils.enums import enum_to_str


def get_or_404(db: Session, model: Type, entity_id: str, label: Optional[str] = None):
    """Fetch a row by primary key or raise 404"""
    entity = db.query(model).filter(model.id == entity_id).first()
    if not entity:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{label or model.__name__} with id {entity_id} not found"
        )
    return entity


def ensure_reference(db: Session, model: Type, entity_id: Optional[str], label: Optional[str] = None) -> None:
    """
    Check that a foreign key target exists

    Raises:
        HTTPException: 400 if entity_id is set and no such row exists
    """
    if not entity_id:
        return
    exists = db.query(model.id).filter(model.id == entity_id).first()
    if not exists:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{label or model.__name__} with id {entity_id} not found"
        )


def ensure_unique(db: Session, model: Type, column, value: Any, message: str,
                  exclude_id: Optional[str] = None) -> None:
    """Raise 400 with `message` if another row already has `value` in `column`"""
    if value is None:
        return
    query = db.query(model.id).filter(column == value)
    if exclude_id is not None:
        query = query.filter(model.id != exclude_id)
    if query.first():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


def apply_changes(entity, data: BaseModel) -> Dict[str, Any]:
    """
    Copy the fields present in a partial-update payload onto an ORM row.

    An explicit null for a NOT NULL column is ignored. Enum members are
    stored by value.

    Returns:
        The applied field values
    """
    columns = entity.__table__.columns
    applied = {}
    for field, value in data.model_dump(exclude_unset=True).items():
        if field not in columns:
            continue
        if value is None and not columns[field].nullable:
            continue
        if isinstance(value, Enum):
            value = enum_to_str(value)
        setattr(entity, field, value)
        applied[field] = value
    return applied


def build_entity(model: Type, data: BaseModel, **overrides):
    """Construct a new ORM row from a create payload"""
    values = {
        field: enum_to_str(value) if isinstance(value, Enum) else value
        for field, value in data.model_dump().items()
    }
    values.update(overrides)
    return model(**values)


def delete_or_400(db: Session, entity, label: str) -> None:
    """
    Delete a row, mapping a foreign key violation to 400

    Raises:
        HTTPException: 400 if other rows still reference the entity
    """
    try:
        db.delete(entity)
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Cannot delete {label} with associated records"
        )


def clamp_limit(limit: Optional[int]) -> int:
    """Apply the default and maximum page size for asset lists"""
    if not limit or limit < 1:
        return settings.DEFAULT_PAGE_SIZE
    return min(limit, settings.MAX_PAGE_SIZE)


def paginate(query: Query, page: int, limit: int) -> Dict[str, Any]:
    """
    Run a list query one page at a time

    Returns:
        Dict with data and pagination (page, limit, total, total_pages)
    """
    page = max(page or 1, 1)
    limit = clamp_limit(limit)
    total = query.count()
    data = query.offset((page - 1) * limit).limit(limit).all()
    return {
        "data": data,
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "total_pages": math.ceil(total / limit),
        },
    }
