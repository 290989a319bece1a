"""
Timezone-aware datetime helpers.
- Store and compute in UTC in DB.
- API responses expose datetimes in the configured display timezone (settings.TZ).
"""
from datetime import date, datetime, time, timezone
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo

from inventory.core.config import settings

UTC = timezone.utc


@lru_cache(maxsize=1)
def display_tz() -> ZoneInfo:
    return ZoneInfo(settings.TZ)


def now_utc() -> datetime:
    """Current time in UTC (timezone-aware)."""
    return datetime.now(UTC)


def today() -> date:
    """Today's date in the display timezone."""
    return now_utc().astimezone(display_tz()).date()


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """If dt is naive, treat as UTC and return timezone-aware UTC. If already aware, convert to UTC."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def iso_display(dt: Optional[datetime]) -> Optional[str]:
    """Serialize as ISO-8601 in the display timezone. Naive datetimes are treated as UTC."""
    if dt is None:
        return None
    return ensure_utc(dt).astimezone(display_tz()).isoformat()


def parse_range_bound(value: Optional[str], end_of_day: bool = False) -> Optional[datetime]:
    """
    Parse an ISO-8601 date or datetime filter value into an aware UTC datetime.

    A bare date (YYYY-MM-DD) used as an upper bound covers that whole day.
    Invalid strings raise ValueError.
    """
    if value is None or value == "":
        return None
    if len(value) == 10:
        day = date.fromisoformat(value)
        return datetime.combine(day, time.max if end_of_day else time.min, tzinfo=UTC)
    # fromisoformat only accepts a "Z" suffix from Python 3.11
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    return ensure_utc(datetime.fromisoformat(value))
