"""Assembles everything a renderer needs from a merged day series."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from price_history.chart.colors import LineStyle, SeriesStyler
from price_history.chart.formatting import format_tick_label, x_domain, y_domain
from price_history.chart.ticks import month_ticks
from price_history.core.config import ChartConfig
from price_history.core.models import DaySnapshot
from price_history.series.calendar import DayCalendar

logger = logging.getLogger(__name__)


class ChartData(BaseModel):
    """Merged series plus derived presentation metadata."""

    model_config = ConfigDict(frozen=True)

    snapshots: list[DaySnapshot] = Field(default_factory=list)
    records: list[dict[str, int]] = Field(default_factory=list)
    ticks: list[int] = Field(default_factory=list)
    tick_labels: list[str] = Field(default_factory=list)
    lines: list[LineStyle] = Field(default_factory=list)
    x_domain: tuple[int, int] | None = None
    y_domain: tuple[int, int] | None = None

    @classmethod
    def empty(cls) -> ChartData:
        return cls()

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to render."""
        return not self.snapshots


class ChartBuilder:
    """Derives ticks, line styles and axis domains for a day series.

    An empty series returns ``ChartData.empty()`` without deriving ticks.
    """

    def __init__(self, config: ChartConfig, calendar: DayCalendar | None = None):
        self._config = config
        self._calendar = calendar or DayCalendar.from_config(config)
        self._styler = SeriesStyler.from_config(config)

    @property
    def calendar(self) -> DayCalendar:
        return self._calendar

    @property
    def styler(self) -> SeriesStyler:
        return self._styler

    def build(self, snapshots: Sequence[DaySnapshot]) -> ChartData:
        if not snapshots:
            logger.debug("Empty series, nothing to render")
            return ChartData.empty()

        ticks = month_ticks(snapshots, self._calendar)
        return ChartData(
            snapshots=list(snapshots),
            records=[s.to_record() for s in snapshots],
            ticks=ticks,
            tick_labels=[format_tick_label(t, self._calendar) for t in ticks],
            lines=self._styler.lines(snapshots),
            x_domain=x_domain(snapshots, self._config.x_axis_padding),
            y_domain=y_domain(snapshots, self._config.axis_rounding),
        )
