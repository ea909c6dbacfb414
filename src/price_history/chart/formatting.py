"""Price and date labels, and axis domains."""

from __future__ import annotations

import math
import re
from collections.abc import Sequence

from price_history.chart.ticks import timestamp_extent
from price_history.core.exceptions import EmptySeriesError
from price_history.core.models import DaySnapshot
from price_history.series.calendar import DayCalendar

# Labels are not localized
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_THOUSANDS = re.compile(r"\B(?=(\d{3})+(?!\d))")


def format_price(value: int, separator: str = ".") -> str:
    """Insert ``separator`` between groups of three digits: 1234567 -> 1.234.567."""
    return _THOUSANDS.sub(separator, str(value))


def format_price_label(
    value: int | None,
    separator: str = ".",
    suffix: str = " kr.",
) -> str:
    """Tooltip value with unit suffix. Missing or zero prices render empty."""
    if not value:
        return ""
    return format_price(value, separator) + suffix


def format_tick_label(ts: int, calendar: DayCalendar) -> str:
    """Month axis label, e.g. ``Jan-2024``."""
    day = calendar.date_of(ts)
    return f"{_MONTHS[day.month - 1]}-{day.year:04d}"


def format_day_label(ts: int, calendar: DayCalendar) -> str:
    """Tooltip date label, e.g. ``02-Jan-2024``."""
    day = calendar.date_of(ts)
    return f"{day.day:02d}-{_MONTHS[day.month - 1]}-{day.year:04d}"


def y_domain(snapshots: Sequence[DaySnapshot], rounding: int = 10000) -> tuple[int, int]:
    """Price axis bounds, widened outward to multiples of ``rounding``."""
    prices = [price for snapshot in snapshots for price in snapshot.values.values()]
    if not prices:
        raise EmptySeriesError("Cannot compute a price domain without prices")
    low = math.floor(min(prices) / rounding) * rounding
    high = math.ceil(max(prices) / rounding) * rounding
    return low, high


def x_domain(snapshots: Sequence[DaySnapshot], padding: int = 500000) -> tuple[int, int]:
    """Time axis bounds; the lower end is pulled back by ``padding`` seconds."""
    lowest, highest = timestamp_extent(snapshots)
    return lowest - padding, highest
