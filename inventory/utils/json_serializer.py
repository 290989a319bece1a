"""
Conversion of ORM and pydantic values into plain JSON values

Audit snapshots are stored in JSON columns and compared field by field, so
everything that reaches them goes through ``to_json_safe`` first.
"""
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel

_SCALARS = (str, int, float, bool)


def to_json_safe(value: Any) -> Any:
    """
    Recursively convert a value to its JSON form

    Enums become their value, temporal values ISO strings, Decimals floats.
    Mapping keys are coerced to str; tuples and sets become lists.
    Anything unrecognised falls back to ``str()``.
    """
    if value is None:
        return None
    # str-based enums are str instances too
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, _SCALARS):
        return value
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, BaseModel):
        return to_json_safe(value.model_dump())
    if isinstance(value, dict):
        return {str(key): to_json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [to_json_safe(item) for item in value]
    return str(value)


def sanitize_for_json(values: Optional[dict]) -> Optional[dict]:
    """Value map for an audit JSON column; empty maps are stored as NULL"""
    if not values:
        return None
    return to_json_safe(values)


def json_equal(a: Any, b: Any) -> bool:
    """
    Structural equality over JSON-safe values.

    Mapping key order is ignored. Types are compared the way JSON sees them:
    5 == 5.0, but 5 != "5" and True != 1.
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return a == b
    if isinstance(a, dict) and isinstance(b, dict):
        if a.keys() != b.keys():
            return False
        return all(json_equal(a[k], b[k]) for k in a)
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(json_equal(x, y) for x, y in zip(a, b))
    if type(a) is not type(b):
        return False
    return a == b
