"""
Tabular views of forecasts and stage counts for dashboards.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

import pandas as pd

from vocab_srs.analytics.forecast import generate_forecast
from vocab_srs.analytics.types import ReviewForecastDay
from vocab_srs.config import get_settings
from vocab_srs.schemas import ReviewStage, VocabularyItem
from vocab_srs.sm2.stages import get_stage_counts


STAGE_COLUMNS = [stage.value for stage in ReviewStage]


def forecast_to_frame(forecast: list[ReviewForecastDay]) -> pd.DataFrame:
    """
    One row per forecast day, indexed by date.

    Columns: due_count, then one column per stage.
    """
    columns = ["due_count", *STAGE_COLUMNS]
    if not forecast:
        return pd.DataFrame(columns=columns, index=pd.DatetimeIndex([], name="date")).astype("int64")

    rows = []
    for day in forecast:
        row = {"date": pd.Timestamp(day.date), "due_count": day.due_count}
        for stage in ReviewStage:
            row[stage.value] = day.per_stage_breakdown.get(stage, 0)
        rows.append(row)

    df = pd.DataFrame(rows).set_index("date")
    return df[columns].astype("int64")


def build_forecast_frame(
    items: Iterable[VocabularyItem],
    days: Optional[int] = None,
    now: Optional[datetime] = None
) -> pd.DataFrame:
    """
    Forecast dataframe for a snapshot. Window defaults to the configured forecast_days.
    """
    if days is None:
        days = get_settings().forecast_days
    return forecast_to_frame(generate_forecast(items, days, now=now))


def compute_cumulative_due(forecast_df: pd.DataFrame) -> pd.Series:
    """
    Running total of due items across the window.
    """
    if forecast_df.empty:
        return pd.Series(dtype="int64")
    return forecast_df["due_count"].cumsum().astype("int64")


def stage_counts_series(items: Iterable[VocabularyItem]) -> pd.Series:
    """
    Item count per stage as a series indexed by stage name.
    """
    counts = get_stage_counts(items)
    return pd.Series(
        {stage.value: counts[stage] for stage in ReviewStage},
        dtype="int64",
        name="count",
    )
