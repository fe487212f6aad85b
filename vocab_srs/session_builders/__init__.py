"""Session builder modules for vocabulary review."""

from vocab_srs.session_builders.review_queue import (
    build_review_queue,
    get_due_item_count,
    get_due_items_in_container,
    get_queue_stats,
    get_recommended_review_count,
    practice_session_options,
    review_session_options,
)

__all__ = [
    "build_review_queue",
    "get_due_item_count",
    "get_due_items_in_container",
    "get_queue_stats",
    "get_recommended_review_count",
    "practice_session_options",
    "review_session_options",
]
