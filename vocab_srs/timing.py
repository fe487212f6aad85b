"""
Timing - clock helpers shared by the scheduler.

All timestamps inside the scheduler are timezone-aware UTC. Records coming
from a store may carry naive datetimes; those are read as UTC.
"""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional


SECONDS_PER_DAY = 86400.0


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime to aware UTC.

    Naive values are assumed to already be UTC.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def resolve_now(now: Optional[datetime]) -> datetime:
    """Return `now` normalized to UTC, or the current time if omitted."""
    if now is None:
        return utc_now()
    return ensure_utc(now)


def epoch_ms(value: datetime) -> float:
    """Milliseconds since the Unix epoch."""
    return ensure_utc(value).timestamp() * 1000.0


def days_since(earlier: Optional[datetime], now: datetime) -> float:
    """
    Fractional days from `earlier` to `now`.

    A missing timestamp counts from the Unix epoch, so never-reviewed
    items sort as the longest-waiting.
    """
    if earlier is None:
        return now.timestamp() / SECONDS_PER_DAY
    return (now - ensure_utc(earlier)).total_seconds() / SECONDS_PER_DAY
