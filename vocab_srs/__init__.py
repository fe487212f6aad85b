"""
vocab_srs - spaced-repetition scheduling for vocabulary learners

Main API for the review scheduler. Every function works on plain
VocabularyItem snapshots supplied by the caller's store:
- compute_next_review: new ease factor / interval / due date after an answer
- classify_stage: new / learning / young / mature / suspended
- compute_difficulty / should_promote_to_known
- build_review_queue: ordered, capped review session
- generate_forecast: per-day due counts over a window

Quick start:
    from vocab_srs import QueueOptions, ReviewMode, build_review_queue, process_review

    queue = build_review_queue(items, QueueOptions(mode=ReviewMode.QUICK, max_items=15))
    update, event_data = process_review(queue[0], quality=4)
"""

# Records
from vocab_srs.schemas import (
    Familiarity,
    ItemUpdate,
    Location,
    QueueOptions,
    ReviewMode,
    ReviewStage,
    VocabularyItem,
)

# Core algorithm
from vocab_srs.sm2 import (
    SRSResult,
    calculate_root_family_bonus,
    classify_stage,
    compute_difficulty,
    compute_next_review,
    get_frequency_multiplier,
    get_stage_counts,
    is_valid_review_quality,
    process_review,
    root_family_bonus_for,
    should_promote_to_known,
    validate_quality,
)
from vocab_srs.constants import ReviewQuality

# Sessions
from vocab_srs.session_builders import (
    build_review_queue,
    get_due_item_count,
    get_due_items_in_container,
    get_queue_stats,
    get_recommended_review_count,
    practice_session_options,
    review_session_options,
)

# Forecast
from vocab_srs.analytics import ReviewForecastDay, generate_forecast

# Store boundary
from vocab_srs.store import InMemoryItemStore, ItemStore, record_review


__all__ = [
    # Records
    "Familiarity",
    "ItemUpdate",
    "Location",
    "QueueOptions",
    "ReviewMode",
    "ReviewStage",
    "VocabularyItem",
    "ReviewQuality",

    # Core algorithm
    "SRSResult",
    "calculate_root_family_bonus",
    "classify_stage",
    "compute_difficulty",
    "compute_next_review",
    "get_frequency_multiplier",
    "get_stage_counts",
    "is_valid_review_quality",
    "process_review",
    "root_family_bonus_for",
    "should_promote_to_known",
    "validate_quality",

    # Sessions
    "build_review_queue",
    "get_due_item_count",
    "get_due_items_in_container",
    "get_queue_stats",
    "get_recommended_review_count",
    "practice_session_options",
    "review_session_options",

    # Forecast
    "ReviewForecastDay",
    "generate_forecast",

    # Store boundary
    "InMemoryItemStore",
    "ItemStore",
    "record_review",
]
