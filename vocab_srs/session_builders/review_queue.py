"""
Review Queue Builder

Builds prioritized review queues from an item snapshot:
- Due items first by how overdue they are, nudged by difficulty
- Quick sessions lean harder on overdueness than on difficulty
- Practice sessions revisit non-due items that were not answered recently
- Optional container filter for reading reinforcement

Sessions are computed from whatever snapshot the caller passes in; nothing
here reads from or writes to a store.
"""

from __future__ import annotations
from datetime import datetime, timedelta
from typing import Iterable, Optional

from vocab_srs.config import get_settings
from vocab_srs.constants import (
    CONTAINER_QUEUE_SIZE,
    DEFAULT_DIFFICULTY_WEIGHT,
    PRACTICE_DIFFICULTY_WEIGHT,
    PRACTICE_RECENCY_WEIGHT,
    QUICK_DIFFICULTY_WEIGHT,
    RECOMMENDED_DUE_CAP,
    RECOMMENDED_EXTRA_LEARNING,
    RECOMMENDED_LOW_DUE,
)
from vocab_srs.logging import get_logger
from vocab_srs.schemas import Familiarity, QueueOptions, ReviewMode, VocabularyItem
from vocab_srs.session_builders.pool_utils import (
    candidate_familiarities,
    due_items_from_snapshot,
    practice_items_from_snapshot,
    select_candidates,
)
from vocab_srs.timing import days_since, epoch_ms, resolve_now

logger = get_logger(__name__)


# ---- Session Configuration ----

def review_session_options(mode: ReviewMode, max_items: Optional[int] = None) -> QueueOptions:
    """
    Options for a regular (due) session.

    Quick sessions stick to items already in LEARNING.
    """
    if max_items is None:
        max_items = get_settings().session_size
    return QueueOptions(
        mode=mode,
        max_items=max_items,
        include_new_words=mode != ReviewMode.QUICK,
    )


def practice_session_options(mode: ReviewMode, max_items: Optional[int] = None) -> QueueOptions:
    """Options for an extra-practice session over non-due items."""
    if max_items is None:
        max_items = get_settings().practice_size
    return QueueOptions(
        mode=mode,
        max_items=max_items,
        include_new_words=False,
        practice_mode=True,
    )


# ---- Priorities ----

def due_priority(item: VocabularyItem, mode: ReviewMode, now: datetime) -> float:
    """
    overdue_ms + difficulty * weight.

    Never-scheduled items count as overdue since the Unix epoch.
    """
    if item.next_review_date is None:
        overdue_ms = epoch_ms(now)
    else:
        overdue_ms = epoch_ms(now) - epoch_ms(item.next_review_date)

    weight = QUICK_DIFFICULTY_WEIGHT if mode == ReviewMode.QUICK else DEFAULT_DIFFICULTY_WEIGHT
    return overdue_ms + item.difficulty_score * weight


def practice_priority(item: VocabularyItem, now: datetime) -> float:
    """difficulty * 0.5 + days since last review * 0.5."""
    return (
        item.difficulty_score * PRACTICE_DIFFICULTY_WEIGHT
        + days_since(item.last_reviewed, now) * PRACTICE_RECENCY_WEIGHT
    )


def sort_by_priority(
    items: list[VocabularyItem],
    mode: ReviewMode,
    practice_mode: bool,
    now: datetime
) -> list[VocabularyItem]:
    """Highest priority first. Ties keep input order."""
    if practice_mode:
        return sorted(items, key=lambda item: practice_priority(item, now), reverse=True)
    return sorted(items, key=lambda item: due_priority(item, mode, now), reverse=True)


# ---- Queue ----

def build_review_queue(
    items: Iterable[VocabularyItem],
    options: QueueOptions,
    now: Optional[datetime] = None
) -> list[VocabularyItem]:
    """
    Build a prioritized review queue.

    Args:
        items: Snapshot of the learner's items
        options: Session options
        now: Reference time (defaults to now)

    Returns:
        At most options.max_items items, highest priority first.
        An empty list when nothing qualifies.
    """
    now = resolve_now(now)

    familiarities = candidate_familiarities(
        include_new_words=options.include_new_words,
        include_known=options.practice_mode,
    )
    candidates = select_candidates(items, familiarities, options.container_filter)

    if options.practice_mode:
        selected = practice_items_from_snapshot(candidates, now)
    else:
        selected = due_items_from_snapshot(candidates, now)

    queue = sort_by_priority(selected, options.mode, options.practice_mode, now)[:options.max_items]

    logger.debug(
        "review_queue_built",
        mode=options.mode.value,
        practice_mode=options.practice_mode,
        candidates=len(candidates),
        selected=len(selected),
        queued=len(queue),
    )
    return queue


def get_due_items_in_container(
    items: Iterable[VocabularyItem],
    container_id: int,
    now: Optional[datetime] = None
) -> list[VocabularyItem]:
    """Due items met in one container, for reading-reinforcement badges."""
    options = QueueOptions(
        mode=ReviewMode.CONTEXTUAL,
        max_items=CONTAINER_QUEUE_SIZE,
        container_filter=container_id,
    )
    return build_review_queue(items, options, now=now)


# ---- Counts ----

def get_due_item_count(
    items: Iterable[VocabularyItem],
    container_filter: Optional[int] = None,
    now: Optional[datetime] = None
) -> int:
    """Number of due LEARNING/SEEN items, optionally within one container."""
    now = resolve_now(now)
    familiarities = candidate_familiarities(include_new_words=True, include_known=False)
    candidates = select_candidates(items, familiarities, container_filter)
    return len(due_items_from_snapshot(candidates, now))


def get_recommended_review_count(due_count: int, learning_count: int) -> int:
    """
    Suggested session length: all due items up to 50, topped up with a few
    learning items when little is due.
    """
    if due_count < 0 or learning_count < 0:
        raise ValueError("counts must be non-negative")
    due_review = min(due_count, RECOMMENDED_DUE_CAP)
    if due_count < RECOMMENDED_LOW_DUE and learning_count > 0:
        return due_review + min(RECOMMENDED_EXTRA_LEARNING, learning_count)
    return due_review


def get_queue_stats(
    items: Iterable[VocabularyItem],
    now: Optional[datetime] = None
) -> dict[str, int]:
    """
    Summary counts over LEARNING and SEEN items.

    Returns:
        total_due, learning_count, seen_count and overdue_count
        (more than one day past due)
    """
    now = resolve_now(now)
    familiarities = candidate_familiarities(include_new_words=True, include_known=False)
    candidates = select_candidates(items, familiarities)

    overdue_cutoff = now - timedelta(days=1)
    overdue_count = sum(
        1 for item in candidates
        if item.next_review_date is not None and item.next_review_date < overdue_cutoff
    )

    return {
        "total_due": len(due_items_from_snapshot(candidates, now)),
        "learning_count": sum(1 for item in candidates if item.familiarity == Familiarity.LEARNING),
        "seen_count": sum(1 for item in candidates if item.familiarity == Familiarity.SEEN),
        "overdue_count": overdue_count,
    }
