"""
Pool utilities for session builders.

These helpers provide shared, minimal primitives for selecting candidate
items from a snapshot without enforcing a single ordering policy.
"""

from __future__ import annotations
from datetime import datetime, timedelta
from typing import Iterable, Optional

from vocab_srs.constants import PRACTICE_COOLDOWN_SECONDS
from vocab_srs.schemas import Familiarity, VocabularyItem


def candidate_familiarities(
    include_new_words: bool,
    include_known: bool
) -> frozenset[Familiarity]:
    """
    Familiarity levels eligible for a review pool.

    LEARNING is always eligible, SEEN and KNOWN on request.
    NEW and IGNORED never are.
    """
    levels = {Familiarity.LEARNING}
    if include_new_words:
        levels.add(Familiarity.SEEN)
    if include_known:
        levels.add(Familiarity.KNOWN)
    return frozenset(levels)


def select_candidates(
    items: Iterable[VocabularyItem],
    familiarities: frozenset[Familiarity],
    container_filter: Optional[int] = None
) -> list[VocabularyItem]:
    """
    Filter a snapshot to the given familiarity levels (and container), keeping input order.
    """
    candidates = []
    for item in items:
        if item.familiarity == Familiarity.IGNORED or item.familiarity not in familiarities:
            continue
        if container_filter is not None and not item.seen_in_container(container_filter):
            continue
        candidates.append(item)
    return candidates


def is_due(item: VocabularyItem, now: datetime) -> bool:
    """Due = never scheduled, or scheduled at or before now."""
    return item.next_review_date is None or item.next_review_date <= now


def is_practice_eligible(item: VocabularyItem, now: datetime) -> bool:
    """
    Practice pools skip never-reviewed items and anything answered within the cooldown.
    """
    if item.review_count == 0:
        return False
    if item.last_reviewed is None:
        return True
    return item.last_reviewed <= now - timedelta(seconds=PRACTICE_COOLDOWN_SECONDS)


def due_items_from_snapshot(
    items: Iterable[VocabularyItem],
    now: datetime
) -> list[VocabularyItem]:
    """Due items from a snapshot, input order preserved (no store calls)."""
    return [item for item in items if is_due(item, now)]


def practice_items_from_snapshot(
    items: Iterable[VocabularyItem],
    now: datetime
) -> list[VocabularyItem]:
    """Practice-eligible items from a snapshot, input order preserved."""
    return [item for item in items if is_practice_eligible(item, now)]
