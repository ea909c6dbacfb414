"""Month-boundary axis ticks for a merged day series."""

from __future__ import annotations

from collections.abc import Sequence

from price_history.core.exceptions import EmptySeriesError
from price_history.core.models import DaySnapshot
from price_history.series.calendar import DayCalendar


def timestamp_extent(snapshots: Sequence[DaySnapshot]) -> tuple[int, int]:
    """Lowest and highest snapshot timestamp, by linear scan.

    Does not rely on the input being sorted.
    """
    if not snapshots:
        raise EmptySeriesError("Cannot take the extent of an empty series")

    lowest = highest = snapshots[0].timestamp
    for snapshot in snapshots:
        if snapshot.timestamp < lowest:
            lowest = snapshot.timestamp
        if snapshot.timestamp > highest:
            highest = snapshot.timestamp
    return lowest, highest


def month_ticks(snapshots: Sequence[DaySnapshot], calendar: DayCalendar) -> list[int]:
    """One tick per month start, from the month of the earliest snapshot.

    Ticks continue while the next month start is strictly before the
    latest snapshot. A series inside a single month yields one tick.

    Raises:
        EmptySeriesError: callers must short-circuit empty series.
    """
    lowest, highest = timestamp_extent(snapshots)

    ticks = [calendar.start_of_month(lowest)]
    candidate = calendar.add_months(ticks[0], 1)
    while candidate < highest:
        ticks.append(candidate)
        candidate = calendar.add_months(candidate, 1)
    return ticks
