"""
Pydantic models for vocabulary scheduling records.

These models describe the snapshots a store hands to the scheduler and the
partial updates it writes back. Items are frozen: the scheduler never
mutates what it is given, it returns new values.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vocab_srs.constants import (
    DIFFICULTY_DEFAULT,
    EF_DEFAULT,
    EF_MAX,
    EF_MIN,
    INTERVAL_MAX,
)
from vocab_srs.timing import ensure_utc


class Familiarity(str, Enum):
    """Coarse, user-facing knowledge bucket for an item."""
    NEW = "new"              # Never interacted with
    SEEN = "seen"            # Met while reading, not yet drilled
    LEARNING = "learning"    # In active review
    KNOWN = "known"          # Retired from active review
    IGNORED = "ignored"      # Excluded from scheduling until reactivated


class ReviewStage(str, Enum):
    """Scheduling stage derived from an item's review fields."""
    NEW = "new"
    LEARNING = "learning"
    YOUNG = "young"
    MATURE = "mature"
    SUSPENDED = "suspended"


class ReviewMode(str, Enum):
    """How a review session presents items."""
    CONTEXTUAL = "contextual"
    QUICK = "quick"
    RECOGNITION = "recognition"
    RECALL = "recall"


# ---- Locations ----

class Location(BaseModel):
    """
    Where an item was met in the source text.

    container_id / section_id / position_index map to e.g.
    chapter / verse / word index.
    """
    model_config = ConfigDict(frozen=True)

    container_id: int = Field(..., ge=1, description="Top-level container, e.g. chapter")
    section_id: int = Field(..., ge=1, description="Section within the container, e.g. verse")
    position_index: int = Field(0, ge=0, description="Token position within the section")


# ---- Main Vocabulary Item ----

class VocabularyItem(BaseModel):
    """
    One tracked unit of vocabulary for one learner.

    Lifecycle: created by the store with review_count=0, interval_days=0
    and no next_review_date; afterwards only changed through review results
    or an explicit familiarity override.
    """
    model_config = ConfigDict(frozen=True)

    item_id: str = Field(..., min_length=1, description="Stable identity, not the surface text")
    surface_form: str = Field(..., description="Form as it appears in the text")
    lemma: str
    root: Optional[str] = None
    gloss: str = ""
    frequency_rank: int = Field(0, ge=0, description="Rank in the source text, 0 = unranked")

    familiarity: Familiarity = Familiarity.NEW

    # SM-2 state
    ease_factor: float = Field(EF_DEFAULT, ge=EF_MIN, le=EF_MAX)
    interval_days: int = Field(0, ge=0, le=INTERVAL_MAX)
    next_review_date: Optional[datetime] = None
    consecutive_correct: int = Field(0, ge=0)
    difficulty_score: float = Field(DIFFICULTY_DEFAULT, ge=0.0, le=1.0)

    # Review tracking
    review_count: int = Field(0, ge=0)
    last_reviewed: Optional[datetime] = None

    # Learning context
    first_seen: Location
    encounter_locations: list[Location] = Field(default_factory=list)

    @field_validator("next_review_date", "last_reviewed")
    @classmethod
    def _normalize_timestamps(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(value)

    def seen_in_container(self, container_id: int) -> bool:
        """True if the item was first met, or met again, in the given container."""
        if self.first_seen.container_id == container_id:
            return True
        return any(loc.container_id == container_id for loc in self.encounter_locations)

    def apply(self, update: ItemUpdate) -> VocabularyItem:
        """Return a copy of this item with a partial update applied."""
        return self.model_copy(update=update.model_dump(exclude_unset=True))


# ---- Store Writes ----

class ItemUpdate(BaseModel):
    """
    Partial update written back to the store after a review or override.

    Only fields that were explicitly set are applied.
    """
    model_config = ConfigDict(frozen=True)

    familiarity: Optional[Familiarity] = None
    ease_factor: Optional[float] = Field(None, ge=EF_MIN, le=EF_MAX)
    interval_days: Optional[int] = Field(None, ge=0, le=INTERVAL_MAX)
    next_review_date: Optional[datetime] = None
    consecutive_correct: Optional[int] = Field(None, ge=0)
    difficulty_score: Optional[float] = Field(None, ge=0.0, le=1.0)
    review_count: Optional[int] = Field(None, ge=0)
    last_reviewed: Optional[datetime] = None

    @field_validator("next_review_date", "last_reviewed")
    @classmethod
    def _normalize_timestamps(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(value)


# ---- Session Options ----

class QueueOptions(BaseModel):
    """Parameters for building one review session."""
    model_config = ConfigDict(frozen=True)

    mode: ReviewMode = ReviewMode.CONTEXTUAL
    max_items: int = Field(..., ge=0, description="Upper bound on queue length")
    container_filter: Optional[int] = Field(None, ge=1, description="Only items met in this container")
    include_new_words: bool = Field(True, description="Include SEEN items that were never drilled")
    practice_mode: bool = Field(False, description="Review non-due items for extra practice")
