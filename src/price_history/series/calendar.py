"""Day and month arithmetic in an explicit time zone.

Day boundaries used for interval expansion and month boundaries used for
axis ticks must come from the same civil calendar. The zone is always
passed in; the process-local zone is never consulted.
"""

from __future__ import annotations

from calendar import monthrange
from datetime import date, datetime, time
from zoneinfo import ZoneInfo

from price_history.core.config import ChartConfig


class DayCalendar:
    """Converts epoch seconds to and from local calendar days.

    Parameters
    ----------
    tz : ZoneInfo | str
        The reference time zone, or its IANA name.
    """

    def __init__(self, tz: ZoneInfo | str) -> None:
        self._tz = ZoneInfo(tz) if isinstance(tz, str) else tz

    @classmethod
    def from_config(cls, config: ChartConfig) -> DayCalendar:
        return cls(config.timezone)

    @property
    def tz(self) -> ZoneInfo:
        return self._tz

    def to_datetime(self, ts: int) -> datetime:
        """Aware local datetime for an epoch timestamp."""
        return datetime.fromtimestamp(ts, self._tz)

    def date_of(self, ts: int) -> date:
        """Local calendar date containing ``ts``."""
        return self.to_datetime(ts).date()

    def day_start(self, day: date) -> int:
        """Epoch seconds of local midnight starting ``day``."""
        return int(datetime.combine(day, time.min, tzinfo=self._tz).timestamp())

    def start_of_day(self, ts: int) -> int:
        return self.day_start(self.date_of(ts))

    def start_of_month(self, ts: int) -> int:
        return self.day_start(self.date_of(ts).replace(day=1))

    def add_months(self, ts: int, months: int) -> int:
        """Start of the same day-of-month ``months`` later.

        The day is clamped to the length of the target month, so
        Jan 31 + 1 month is the last day of February.
        """
        day = self.date_of(ts)
        index = day.year * 12 + (day.month - 1) + months
        year, month = divmod(index, 12)
        month += 1
        last = monthrange(year, month)[1]
        return self.day_start(date(year, month, min(day.day, last)))

    def __repr__(self) -> str:
        return f"DayCalendar({self._tz.key!r})"
