"""
Optional pandas helpers over normalized forecast points.
Not used by StormGlassClient itself; for inspecting fetched forecasts.
"""
from __future__ import annotations

from dataclasses import asdict, fields
from typing import List, Sequence, Tuple

import pandas as pd

from .client import ForecastPoint

COLUMNS = [f.name for f in fields(ForecastPoint)]


def points_to_frame(points: Sequence[ForecastPoint]) -> pd.DataFrame:
    """Tabulate forecast points, one row per hour, with ``time`` as UTC datetimes.

    Row order follows the input; no sorting or deduplication is applied.
    """
    if not points:
        return pd.DataFrame(columns=COLUMNS)
    df = pd.DataFrame([asdict(p) for p in points], columns=COLUMNS)
    df['time'] = pd.to_datetime(df['time'], utc=True)
    return df


def detect_missing_hours(points: List[ForecastPoint]) -> Tuple[int, int, int]:
    """Return (expected, actual, missing) hourly slots in the span covered.
    If fewer than 2 points, missing = 0 (no baseline).
    """
    if len(points) < 2:
        return (len(points), len(points), 0)
    times = pd.to_datetime(pd.Series([p.time for p in points]), utc=True).drop_duplicates().sort_values()
    span_hours = (times.iloc[-1] - times.iloc[0]).total_seconds() / 3600
    expected = int(span_hours) + 1
    actual = len(times)
    missing = max(0, expected - actual)
    return expected, actual, missing
