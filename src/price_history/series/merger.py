"""Interval expansion and per-day merging of price series.

Turns sparse, possibly overlapping price intervals into one chronological
list of ``DaySnapshot`` records, the row format the chart renders.

Expansion runs up to ``end`` rounded up to a day boundary, exclusive: an
interval from midnight Day0 to midnight Day2 yields Day0 and Day1, while one
ending at Day2 09:00 also covers Day2. The start day is always emitted, so an
interval that starts and ends on the same day yields exactly one point.

Merging is last-write-wins per (timestamp, series key) in processing order:
selectors as supplied, then each selector's intervals as supplied, then
days ascending. Keys of other series at the same timestamp are untouched.
"""

from __future__ import annotations

import logging
from datetime import timedelta

from price_history.core.exceptions import InvalidIntervalError
from price_history.core.models import DaySnapshot, PriceInterval, SeriesBatch
from price_history.series.calendar import DayCalendar

logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(days=1)


def expand_interval(interval: PriceInterval, calendar: DayCalendar) -> list[int]:
    """Day-start timestamps covered by ``interval``, ascending."""
    first = calendar.date_of(interval.start)
    bound = calendar.date_of(interval.end)
    if calendar.start_of_day(interval.end) != interval.end:
        bound += _ONE_DAY

    days = [calendar.day_start(first)]
    day = first + _ONE_DAY
    while day < bound:
        days.append(calendar.day_start(day))
        day += _ONE_DAY
    return days


def validate_batch(batch: SeriesBatch) -> None:
    """Raise InvalidIntervalError for the first interval ending before it starts."""
    for selector, intervals in batch.entries:
        for index, interval in enumerate(intervals):
            if interval.start > interval.end:
                raise InvalidIntervalError(
                    f"Interval {index} of '{selector.key}' ends before it starts "
                    f"(start={interval.start}, end={interval.end})",
                    context={
                        "series_key": selector.key,
                        "index": index,
                        "start": interval.start,
                        "end": interval.end,
                    },
                )


class SeriesMerger:
    """Expands interval batches into a merged per-day series.

    Usage:
        merger = SeriesMerger(DayCalendar("Atlantic/Reykjavik"))
        snapshots = merger.merge(batch)

    Each call owns its accumulator; nothing is shared between calls.
    """

    def __init__(self, calendar: DayCalendar):
        self._calendar = calendar

    @property
    def calendar(self) -> DayCalendar:
        return self._calendar

    def merge(self, batch: SeriesBatch) -> list[DaySnapshot]:
        """Merge every interval in ``batch`` into sorted day snapshots.

        Raises:
            InvalidIntervalError: if any interval has start > end. Nothing
                is merged in that case.
        """
        validate_batch(batch)

        by_timestamp: dict[int, DaySnapshot] = {}
        points = 0
        for selector, intervals in batch.entries:
            key = selector.key
            for interval in intervals:
                for ts in expand_interval(interval, self._calendar):
                    snapshot = by_timestamp.get(ts)
                    if snapshot is None:
                        snapshot = DaySnapshot(timestamp=ts)
                        by_timestamp[ts] = snapshot
                    snapshot.set(key, interval.price)
                    points += 1

        snapshots = [by_timestamp[ts] for ts in sorted(by_timestamp)]
        logger.debug(
            "Merged %d intervals into %d points across %d days",
            batch.interval_count,
            points,
            len(snapshots),
        )
        return snapshots


def merge_series(batch: SeriesBatch, calendar: DayCalendar) -> list[DaySnapshot]:
    """Convenience function: merge a batch with a one-off SeriesMerger."""
    return SeriesMerger(calendar).merge(batch)
