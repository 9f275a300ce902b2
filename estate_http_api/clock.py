"""
Time helpers shared by the models and services.

All persisted datetimes are naive UTC, which is what SQLite hands back.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def add_years(moment: datetime, years: int) -> datetime:
    """
    Shift ``moment`` by whole calendar years.

    February 29th lands on February 28th in non-leap target years.
    """
    try:
        return moment.replace(year=moment.year + years)
    except ValueError:
        return moment.replace(year=moment.year + years, month=2, day=28)


def to_naive_utc(moment: Optional[datetime]) -> Optional[datetime]:
    """
    Convert an offset-aware datetime to naive UTC. Naive values and None
    pass through unchanged.
    """
    if moment is None or moment.tzinfo is None:
        return moment
    return moment.astimezone(timezone.utc).replace(tzinfo=None)


def normalize_datetimes(fields: Dict[str, Any]) -> Dict[str, Any]:
    """
    Return ``fields`` with every datetime value converted to naive UTC.
    """
    return {
        key: to_naive_utc(value) if isinstance(value, datetime) else value
        for key, value in fields.items()
    }
