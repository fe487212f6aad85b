"""
SM-2 - vocabulary scheduling algorithm

Pure functions over VocabularyItem snapshots:
- Interval calculation (ease factor, interval, due date)
- Stage classification (new / learning / young / mature / suspended)
- Difficulty scoring and promotion to "known"
- One-answer review processing

Quick start:
    from vocab_srs import sm2

    result = sm2.compute_next_review(item, quality=4)
    update, event_data = sm2.process_review(item, 4, family=same_root_items)
"""

# Interval calculator
from vocab_srs.sm2.intervals import (
    SRSResult,
    calculate_root_family_bonus,
    compute_next_review,
    get_frequency_multiplier,
    is_valid_review_quality,
    root_family_bonus_for,
    validate_quality,
)

# Stage classifier
from vocab_srs.sm2.stages import classify_stage, get_stage_counts

# Difficulty and promotion
from vocab_srs.sm2.difficulty import compute_difficulty, should_promote_to_known

# Review processing
from vocab_srs.sm2.scheduler import process_review


__all__ = [
    "SRSResult",
    "calculate_root_family_bonus",
    "compute_next_review",
    "get_frequency_multiplier",
    "is_valid_review_quality",
    "root_family_bonus_for",
    "validate_quality",
    "classify_stage",
    "get_stage_counts",
    "compute_difficulty",
    "should_promote_to_known",
    "process_review",
]
