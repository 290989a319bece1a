"""Helpers for the str-based status/type enums stored in String columns."""
from enum import Enum
from typing import Optional


def enum_to_str(v) -> Optional[str]:
    """
    Column value for an enum member, a raw string, or None.

    Query filters and payloads arrive as enum members; the database holds plain strings.

        >>> enum_to_str(SystemStatus.ACTIVE)
        'ACTIVE'
        >>> enum_to_str("ACTIVE")
        'ACTIVE'
    """
    if v is None:
        return None
    return v.value if isinstance(v, Enum) else str(v)
