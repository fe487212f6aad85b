"""
SM-2 Constants and Parameters

All tunable numbers for the vocabulary scheduler in one place.
The base update rule is SM-2; the frequency and root-family adjustments
are specific to learning vocabulary from a fixed body of text.
"""

from enum import IntEnum


# ---- Review Quality ----

class ReviewQuality(IntEnum):
    """Self-reported recall quality on the SM-2 0-5 scale."""
    BLACKOUT = 0    # No memory at all
    WRONG = 1       # Incorrect, remembered after seeing the answer
    WRONG_EASY = 2  # Incorrect, but the answer felt familiar
    HARD = 3        # Correct with serious difficulty
    GOOD = 4        # Correct after hesitation
    PERFECT = 5     # Correct, no hesitation


QUALITY_MIN = 0
QUALITY_MAX = 5
PASSING_QUALITY = 3  # q >= 3 counts as a successful recall


# ---- Ease Factor ----

EF_DEFAULT = 2.5
EF_MIN = 1.3
EF_MAX = 2.5
EF_FAILURE_PENALTY = 0.2  # Extra drop on top of the SM-2 formula for q < 3


# ---- Intervals (days) ----

INTERVAL_MIN = 1
INTERVAL_MAX = 365
FIRST_INTERVAL = 1
SECOND_INTERVAL = 6


# ---- Frequency Multiplier ----
# (max_rank, multiplier); ranks above the last tier get FREQUENCY_TAIL_MULTIPLIER.
# Frequent words are reinforced by reading alone and need less drilling.

FREQUENCY_TIERS = (
    (100, 1.3),
    (500, 1.15),
    (1000, 1.0),
)
FREQUENCY_TAIL_MULTIPLIER = 0.9


# ---- Quality Fine-Adjustment ----

QUALITY_INTERVAL_ADJUSTMENT = {
    ReviewQuality.PERFECT: 1.1,
    ReviewQuality.HARD: 0.9,
}


# ---- Root Family Bonus ----

ROOT_FAMILY_MAX_BONUS = 0.5


# ---- Stage Thresholds ----

MATURE_INTERVAL_DAYS = 21
MATURE_STREAK = 5


# ---- Promotion to Known ----

PROMOTION_STREAK = 5
PROMOTION_MIN_EASE = 2.0
PROMOTION_MIN_INTERVAL = 21


# ---- Difficulty Score ----

DIFFICULTY_EASE_WEIGHT = 0.4
DIFFICULTY_STREAK_WEIGHT = 0.4
DIFFICULTY_VOLUME_WEIGHT = 0.2
DIFFICULTY_VOLUME_SCALE = 0.3   # Applied inside the volume term, before its weight
DIFFICULTY_STREAK_TARGET = 5
DIFFICULTY_VOLUME_TARGET = 20
DIFFICULTY_DEFAULT = 0.5


# ---- Queue Prioritization ----

QUICK_DIFFICULTY_WEIGHT = 500_000
DEFAULT_DIFFICULTY_WEIGHT = 1_000_000
PRACTICE_DIFFICULTY_WEIGHT = 0.5
PRACTICE_RECENCY_WEIGHT = 0.5
PRACTICE_COOLDOWN_SECONDS = 60 * 60  # Items answered within the last hour are skipped

CONTAINER_QUEUE_SIZE = 100


# ---- Review Recommendations ----

RECOMMENDED_DUE_CAP = 50
RECOMMENDED_LOW_DUE = 10
RECOMMENDED_EXTRA_LEARNING = 5
