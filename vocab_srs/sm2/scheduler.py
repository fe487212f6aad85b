"""
Scheduler - one review answer, start to finish

Pure review processing (no store calls).

Main workflow:
1. Load item snapshot (caller's responsibility)
2. Work out the root family bonus from the caller's snapshot
3. Compute new SM-2 values
4. Advance familiarity (SEEN -> LEARNING, promotion to KNOWN)
5. Recompute the cached difficulty score
6. Return the partial update + event data dict

The caller writes the update back to its store.
"""

from __future__ import annotations
from datetime import datetime
from typing import Iterable, Optional, Tuple

from vocab_srs.constants import PASSING_QUALITY
from vocab_srs.logging import get_logger
from vocab_srs.schemas import Familiarity, ItemUpdate, VocabularyItem
from vocab_srs.sm2.difficulty import compute_difficulty, should_promote_to_known
from vocab_srs.sm2.intervals import (
    compute_next_review,
    root_family_bonus_for,
    validate_quality,
)
from vocab_srs.sm2.stages import classify_stage
from vocab_srs.timing import resolve_now

logger = get_logger(__name__)


def process_review(
    item: VocabularyItem,
    quality: int,
    family: Optional[Iterable[VocabularyItem]] = None,
    now: Optional[datetime] = None
) -> Tuple[ItemUpdate, dict]:
    """
    Process one review answer and return the update to persist.

    Args:
        item: Snapshot of the item being reviewed
        quality: 0-5 rating
        family: Items to search for same-root relatives (usually the store's
            get_by_root result). Omit to skip the root family bonus.
        now: Review timestamp (defaults to now)

    Returns:
        Tuple of (item_update, event_data_dict)

    Raises:
        ValueError: if quality is not an integer in 0-5, or the item is IGNORED
    """
    quality = validate_quality(quality)
    if item.familiarity == Familiarity.IGNORED:
        raise ValueError(f"item {item.item_id!r} is ignored and cannot be reviewed")
    now = resolve_now(now)

    bonus = root_family_bonus_for(item, family) if family is not None else 0.0
    result = compute_next_review(item, quality, root_family_bonus=bonus, now=now)

    familiarity = item.familiarity
    if familiarity in (Familiarity.NEW, Familiarity.SEEN):
        familiarity = Familiarity.LEARNING

    # Scored against the pre-review count.
    reviewed = item.model_copy(update={
        "ease_factor": result.new_ease_factor,
        "interval_days": result.new_interval_days,
        "next_review_date": result.next_review_date,
        "consecutive_correct": result.new_consecutive_correct,
    })
    promoted = should_promote_to_known(reviewed)
    if promoted:
        familiarity = Familiarity.KNOWN

    difficulty = compute_difficulty(reviewed)

    update = ItemUpdate(
        familiarity=familiarity,
        ease_factor=result.new_ease_factor,
        interval_days=result.new_interval_days,
        next_review_date=result.next_review_date,
        consecutive_correct=result.new_consecutive_correct,
        difficulty_score=difficulty,
        review_count=item.review_count + 1,
        last_reviewed=now,
    )

    # Build event data dict (ready to log)
    event_data = {
        'item_id': item.item_id,
        'lemma': item.lemma,
        'timestamp': now,
        'quality': quality,
        'is_correct': quality >= PASSING_QUALITY,
        'root_family_bonus': bonus,
        'stage_before': classify_stage(item),
        'stage_after': classify_stage(item.apply(update)),
        'ease_factor_before': item.ease_factor,
        'ease_factor_after': result.new_ease_factor,
        'interval_before': item.interval_days,
        'interval_after': result.new_interval_days,
        'familiarity_before': item.familiarity,
        'familiarity_after': familiarity,
        'promoted': promoted,
    }

    logger.debug(
        "review_processed",
        item_id=item.item_id,
        quality=quality,
        interval_days=result.new_interval_days,
        promoted=promoted,
    )
    return update, event_data
