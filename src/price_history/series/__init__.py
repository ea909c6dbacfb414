"""Interval expansion and day-snapshot merging."""

from price_history.series.calendar import DayCalendar
from price_history.series.merger import (
    SeriesMerger,
    expand_interval,
    merge_series,
    validate_batch,
)

__all__ = [
    "DayCalendar",
    "SeriesMerger",
    "expand_interval",
    "merge_series",
    "validate_batch",
]
