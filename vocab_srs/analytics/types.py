"""
Types for review analytics.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from vocab_srs.schemas import ReviewStage


@dataclass(frozen=True)
class ReviewForecastDay:
    """
    Projected review load for one day of a forecast window.
    """
    date: date
    due_count: int = 0
    per_stage_breakdown: dict[ReviewStage, int] = field(default_factory=dict)
