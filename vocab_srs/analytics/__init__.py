"""
Analytics package exports.
"""

from vocab_srs.analytics.forecast import due_day_offset, generate_forecast
from vocab_srs.analytics.metrics import (
    build_forecast_frame,
    compute_cumulative_due,
    forecast_to_frame,
    stage_counts_series,
)
from vocab_srs.analytics.types import ReviewForecastDay

__all__ = [
    "due_day_offset",
    "generate_forecast",
    "build_forecast_frame",
    "compute_cumulative_due",
    "forecast_to_frame",
    "stage_counts_series",
    "ReviewForecastDay",
]
