"""
Runtime settings for applications embedding vocab_srs.

Session sizes, forecast window and logging are read from the environment
(and a local .env file, if present). Algorithm constants are fixed in
vocab_srs.constants and are not configurable here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


DEFAULT_FORECAST_DAYS = 14
DEFAULT_SESSION_SIZE = 15
DEFAULT_PRACTICE_SIZE = 10


@dataclass(frozen=True)
class Settings:
    forecast_days: int
    session_size: int
    practice_size: int
    log_level: str
    log_json: bool


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    """Read settings from the environment, loading .env first."""
    load_dotenv()
    return Settings(
        forecast_days=_env_int("VOCAB_SRS_FORECAST_DAYS", DEFAULT_FORECAST_DAYS),
        session_size=_env_int("VOCAB_SRS_SESSION_SIZE", DEFAULT_SESSION_SIZE),
        practice_size=_env_int("VOCAB_SRS_PRACTICE_SIZE", DEFAULT_PRACTICE_SIZE),
        log_level=os.getenv("VOCAB_SRS_LOG_LEVEL", "INFO").upper(),
        log_json=_env_bool("VOCAB_SRS_LOG_JSON", False),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached settings; call get_settings.cache_clear() to re-read."""
    return load_settings()
