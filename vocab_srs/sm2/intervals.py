"""
Interval Calculator

SM-2 derivative tuned for vocabulary read in context:
- Root family bonus: known words sharing a root speed up related words
- Frequency adjustment: words that recur often in the text get longer intervals
- Failure penalty: failed recalls cost extra ease on top of plain SM-2

Everything here is pure. Callers validate quality before calling
(see validate_quality) and apply the returned values themselves.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Optional
import math

from vocab_srs.constants import (
    EF_FAILURE_PENALTY,
    EF_MAX,
    EF_MIN,
    FIRST_INTERVAL,
    FREQUENCY_TAIL_MULTIPLIER,
    FREQUENCY_TIERS,
    INTERVAL_MAX,
    INTERVAL_MIN,
    PASSING_QUALITY,
    QUALITY_INTERVAL_ADJUSTMENT,
    QUALITY_MAX,
    QUALITY_MIN,
    ROOT_FAMILY_MAX_BONUS,
    SECOND_INTERVAL,
)
from vocab_srs.schemas import Familiarity, VocabularyItem
from vocab_srs.timing import resolve_now


@dataclass(frozen=True)
class SRSResult:
    """New scheduling values produced by one review answer."""
    new_ease_factor: float
    new_interval_days: int
    next_review_date: datetime
    new_consecutive_correct: int


def is_valid_review_quality(value: object) -> bool:
    """True for integers 0-5 (bools are rejected)."""
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and QUALITY_MIN <= value <= QUALITY_MAX
    )


def validate_quality(value: object) -> int:
    """
    Reject anything that is not a 0-5 quality rating.

    Raises:
        ValueError: if value is out of range or not an integer
    """
    if not is_valid_review_quality(value):
        raise ValueError(
            f"quality must be an integer between {QUALITY_MIN} and {QUALITY_MAX}, got {value!r}"
        )
    return int(value)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_ease_factor(ease_factor: float) -> float:
    return max(EF_MIN, min(EF_MAX, ease_factor))


def clamp_interval(interval: int) -> int:
    return max(INTERVAL_MIN, min(INTERVAL_MAX, interval))


def update_ease_factor(ease_factor: float, quality: int) -> float:
    """
    SM-2 ease update, clamped to [EF_MIN, EF_MAX].

    Formula:
        EF' = EF + (0.1 - (5 - q) * (0.08 + (5 - q) * 0.02))

    Failures (q < 3) lose an extra EF_FAILURE_PENALTY, re-clamped.
    """
    miss = QUALITY_MAX - quality
    new_ef = clamp_ease_factor(ease_factor + (0.1 - miss * (0.08 + miss * 0.02)))
    if quality < PASSING_QUALITY:
        new_ef = clamp_ease_factor(new_ef - EF_FAILURE_PENALTY)
    return new_ef


def get_frequency_multiplier(frequency_rank: int) -> float:
    """
    Interval multiplier from the item's rank in the source text.

    Top words are reinforced by reading alone, rare ones need more drilling.
    Unranked items (rank 0) are left alone.
    """
    if frequency_rank <= 0:
        return 1.0
    for max_rank, multiplier in FREQUENCY_TIERS:
        if frequency_rank <= max_rank:
            return multiplier
    return FREQUENCY_TAIL_MULTIPLIER


def calculate_root_family_bonus(known_in_family: int, total_in_family: int) -> float:
    """
    Ease bonus from already-known words sharing the item's root.

    Args:
        known_in_family: Family members currently KNOWN
        total_in_family: All family members, including the item itself

    Returns:
        Bonus in [0, ROOT_FAMILY_MAX_BONUS]
    """
    if known_in_family < 0 or total_in_family < 0:
        raise ValueError("family counts must be non-negative")
    if known_in_family > total_in_family:
        raise ValueError(
            f"known_in_family ({known_in_family}) exceeds total_in_family ({total_in_family})"
        )
    if total_in_family <= 1 or known_in_family == 0:
        return 0.0
    return (known_in_family / total_in_family) * ROOT_FAMILY_MAX_BONUS


def root_family_bonus_for(item: VocabularyItem, items: Iterable[VocabularyItem]) -> float:
    """Root family bonus for `item`, counting its family within a snapshot."""
    if not item.root:
        return 0.0
    family = [other for other in items if other.root == item.root]
    known = sum(1 for other in family if other.familiarity == Familiarity.KNOWN)
    return calculate_root_family_bonus(known, len(family))


def compute_next_review(
    item: VocabularyItem,
    quality: int,
    root_family_bonus: float = 0.0,
    now: Optional[datetime] = None
) -> SRSResult:
    """
    Compute new SM-2 values for an item after one answer.

    Success path:
        streak 1 -> 1 day, streak 2 -> 6 days,
        streak >= 3 -> round(interval * (EF' + bonus)),
        then frequency multiplier and quality fine-adjustment.
    Failure path:
        1 day, streak reset, extra ease penalty.

    Args:
        item: Current snapshot of the item
        quality: 0-5 rating
        root_family_bonus: Non-negative bonus added to EF' for long intervals
        now: Review time (defaults to now, UTC)

    Returns:
        SRSResult with the values to write back

    Raises:
        ValueError: if quality is not an integer in 0-5, or the bonus is negative
    """
    if root_family_bonus < 0:
        raise ValueError(f"root_family_bonus must be >= 0, got {root_family_bonus}")
    quality = validate_quality(quality)
    now = resolve_now(now)

    new_ease_factor = update_ease_factor(item.ease_factor, quality)

    if quality < PASSING_QUALITY:
        new_interval = INTERVAL_MIN
        new_consecutive_correct = 0
    else:
        new_consecutive_correct = item.consecutive_correct + 1

        if new_consecutive_correct == 1:
            new_interval = FIRST_INTERVAL
        elif new_consecutive_correct == 2:
            new_interval = SECOND_INTERVAL
        else:
            new_interval = _round_half_up(item.interval_days * (new_ease_factor + root_family_bonus))

        new_interval = _round_half_up(new_interval * get_frequency_multiplier(item.frequency_rank))

        adjustment = QUALITY_INTERVAL_ADJUSTMENT.get(quality)
        if adjustment is not None:
            new_interval = _round_half_up(new_interval * adjustment)

    new_interval = clamp_interval(new_interval)

    return SRSResult(
        new_ease_factor=new_ease_factor,
        new_interval_days=new_interval,
        next_review_date=now + timedelta(days=new_interval),
        new_consecutive_correct=new_consecutive_correct,
    )
