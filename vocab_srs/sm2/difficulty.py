"""
Difficulty Scorer & Promotion Policy

Difficulty is a 0-1 estimate of how much extra practice an item needs,
blended from its ease, its current streak and how many reviews it has
taken so far. Promotion decides when an item leaves active review.
"""

from __future__ import annotations

from vocab_srs.constants import (
    DIFFICULTY_EASE_WEIGHT,
    DIFFICULTY_STREAK_TARGET,
    DIFFICULTY_STREAK_WEIGHT,
    DIFFICULTY_VOLUME_SCALE,
    DIFFICULTY_VOLUME_TARGET,
    DIFFICULTY_VOLUME_WEIGHT,
    EF_MAX,
    EF_MIN,
    PROMOTION_MIN_EASE,
    PROMOTION_MIN_INTERVAL,
    PROMOTION_STREAK,
)
from vocab_srs.schemas import VocabularyItem


def compute_difficulty(item: VocabularyItem) -> float:
    """
    Weighted difficulty score in [0, 1]. Higher = harder.

    Components:
        ease   = 1 - (EF - 1.3) / (2.5 - 1.3)          weight 0.4
        streak = max(0, 1 - consecutive_correct / 5)   weight 0.4
        volume = min(1, review_count / 20) * 0.3       weight 0.2

    The volume term is scaled by 0.3 before its 0.2 weight, so review
    volume contributes at most 0.06.
    """
    ease_component = 1.0 - (item.ease_factor - EF_MIN) / (EF_MAX - EF_MIN)
    streak_component = max(0.0, 1.0 - item.consecutive_correct / DIFFICULTY_STREAK_TARGET)
    volume_component = min(1.0, item.review_count / DIFFICULTY_VOLUME_TARGET) * DIFFICULTY_VOLUME_SCALE

    difficulty = (
        ease_component * DIFFICULTY_EASE_WEIGHT
        + streak_component * DIFFICULTY_STREAK_WEIGHT
        + volume_component * DIFFICULTY_VOLUME_WEIGHT
    )
    return max(0.0, min(1.0, difficulty))


def should_promote_to_known(item: VocabularyItem) -> bool:
    """
    True when the item is solid enough to retire from active review:
    5+ streak, ease at least 2.0 and an interval of 21+ days.
    """
    return (
        item.consecutive_correct >= PROMOTION_STREAK
        and item.ease_factor >= PROMOTION_MIN_EASE
        and item.interval_days >= PROMOTION_MIN_INTERVAL
    )
