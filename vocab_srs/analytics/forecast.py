"""
Forecast Builder

Buckets every schedulable item into the day it next falls due, over a
window starting today (day 0).
"""

from __future__ import annotations
from datetime import datetime, timedelta
from typing import Iterable, Optional
import math

from vocab_srs.analytics.types import ReviewForecastDay
from vocab_srs.logging import get_logger
from vocab_srs.schemas import ReviewStage, VocabularyItem
from vocab_srs.sm2.stages import classify_stage, empty_stage_counts
from vocab_srs.timing import SECONDS_PER_DAY, resolve_now

logger = get_logger(__name__)


def due_day_offset(item: VocabularyItem, now: datetime) -> int:
    """
    Days from now until the item is due: ceil((due - now) / 1 day), floored at 0.

    Never-scheduled and overdue items land on day 0.
    """
    if item.next_review_date is None:
        return 0
    delta_days = (item.next_review_date - now).total_seconds() / SECONDS_PER_DAY
    return max(0, math.ceil(delta_days))


def generate_forecast(
    items: Iterable[VocabularyItem],
    days: int,
    now: Optional[datetime] = None
) -> list[ReviewForecastDay]:
    """
    Per-day due counts for the next `days` days.

    Suspended items are skipped. Items due beyond the window are left out
    rather than piled into the last day.

    Args:
        items: Snapshot of the learner's items
        days: Window length, day 0 = today
        now: Reference time (defaults to now)

    Returns:
        Exactly `days` ReviewForecastDay entries
    """
    if days < 0:
        raise ValueError(f"days must be non-negative, got {days}")
    now = resolve_now(now)

    counts = [0] * days
    breakdowns = [empty_stage_counts() for _ in range(days)]
    skipped = 0

    for item in items:
        stage = classify_stage(item)
        if stage == ReviewStage.SUSPENDED:
            continue
        offset = due_day_offset(item, now)
        if offset >= days:
            skipped += 1
            continue
        counts[offset] += 1
        breakdowns[offset][stage] += 1

    today = now.date()
    forecast = [
        ReviewForecastDay(
            date=today + timedelta(days=offset),
            due_count=counts[offset],
            per_stage_breakdown=breakdowns[offset],
        )
        for offset in range(days)
    ]

    logger.debug("forecast_generated", days=days, forecasted=sum(counts), beyond_window=skipped)
    return forecast
