"""Shared test fixtures for vocab_srs."""

from datetime import datetime, timezone
from itertools import count

import pytest

from vocab_srs.config import get_settings
from vocab_srs.schemas import Familiarity, Location, VocabularyItem


NOW = datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """Fixed reference time so ordering and bucketing are reproducible."""
    return NOW


@pytest.fixture
def make_item():
    """Factory for VocabularyItem snapshots with sensible defaults."""
    ids = count(1)

    def _make(**overrides) -> VocabularyItem:
        n = next(ids)
        data = {
            "item_id": f"word-{n}",
            "surface_form": f"form-{n}",
            "lemma": f"lemma-{n}",
            "familiarity": Familiarity.LEARNING,
            "first_seen": Location(container_id=1, section_id=1, position_index=n),
        }
        data.update(overrides)
        return VocabularyItem(**data)

    return _make


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate tests from a developer's environment and .env file."""
    for name in (
        "VOCAB_SRS_FORECAST_DAYS",
        "VOCAB_SRS_SESSION_SIZE",
        "VOCAB_SRS_PRACTICE_SIZE",
        "VOCAB_SRS_LOG_LEVEL",
        "VOCAB_SRS_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("vocab_srs.config.load_dotenv", lambda *args, **kwargs: False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
