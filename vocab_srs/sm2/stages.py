"""
Stage Classifier

Read-side view over the SM-2 fields: buckets items into
new / learning / young / mature / suspended for sorting and reporting.
"""

from __future__ import annotations
from typing import Iterable

from vocab_srs.constants import MATURE_INTERVAL_DAYS, MATURE_STREAK
from vocab_srs.schemas import Familiarity, ReviewStage, VocabularyItem


def classify_stage(item: VocabularyItem) -> ReviewStage:
    """
    Derive the review stage of an item. First match wins:

    1. IGNORED familiarity -> SUSPENDED
    2. never reviewed -> NEW
    3. interval below one day -> LEARNING
    4. interval >= 21 days and streak >= 5 -> MATURE
    5. otherwise -> YOUNG

    Depends only on familiarity, review_count, interval_days and
    consecutive_correct.
    """
    if item.familiarity == Familiarity.IGNORED:
        return ReviewStage.SUSPENDED
    if item.review_count == 0:
        return ReviewStage.NEW
    if item.interval_days < 1:
        return ReviewStage.LEARNING
    if item.interval_days >= MATURE_INTERVAL_DAYS and item.consecutive_correct >= MATURE_STREAK:
        return ReviewStage.MATURE
    return ReviewStage.YOUNG


def empty_stage_counts() -> dict[ReviewStage, int]:
    return {stage: 0 for stage in ReviewStage}


def get_stage_counts(items: Iterable[VocabularyItem]) -> dict[ReviewStage, int]:
    """Count items per stage. Every stage is present in the result."""
    counts = empty_stage_counts()
    for item in items:
        counts[classify_stage(item)] += 1
    return counts
