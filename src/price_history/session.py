"""Selection-driven chart session.

Every selection change recomputes the chart from scratch. Fetches can
overlap when the selection changes faster than the source answers, so each
fetch is tagged with a generation number and only the newest one is applied.
"""

from __future__ import annotations

import logging

from price_history.chart.builder import ChartBuilder, ChartData
from price_history.core.config import ChartConfig
from price_history.core.models import ChartSelection, ProductCode
from price_history.series.merger import SeriesMerger
from price_history.sources.adapter import PricesResponseAdapter
from price_history.sources.provider import PriceSource, VendorDirectory

logger = logging.getLogger(__name__)


class ChartSession:
    """Turns selections into ChartData, discarding stale fetches.

    Usage:
        session = ChartSession(source, directory, config.chart)
        chart = await session.update(selection)
        if chart is not None and not chart.is_empty:
            render(chart)
    """

    def __init__(
        self,
        source: PriceSource,
        directory: VendorDirectory,
        config: ChartConfig,
    ):
        self._source = source
        self._adapter = PricesResponseAdapter(directory)
        self._builder = ChartBuilder(config)
        self._merger = SeriesMerger(self._builder.calendar)
        self._generation = 0
        self._selection = ChartSelection()
        self._current = ChartData.empty()

    @property
    def current(self) -> ChartData:
        """The last chart that was applied."""
        return self._current

    @property
    def selection(self) -> ChartSelection:
        return self._selection

    @property
    def builder(self) -> ChartBuilder:
        return self._builder

    async def update(self, selection: ChartSelection) -> ChartData | None:
        """Apply a new selection.

        Returns the new chart, or None when a later update superseded this
        one while its fetch was in flight.
        """
        self._generation += 1
        generation = self._generation
        self._selection = selection

        if selection.is_empty:
            self._current = ChartData.empty()
            return self._current

        response = await self._source.get_prices(selection)
        if generation != self._generation:
            logger.debug(
                "Discarding stale prices for generation %d (current %d)",
                generation,
                self._generation,
            )
            return None

        batch = self._adapter.adapt(response)
        snapshots = self._merger.merge(batch)
        self._current = self._builder.build(snapshots)
        return self._current

    async def suggest(self, term: str) -> list[ProductCode]:
        """Product-code suggestions limited to the selected vendors."""
        return await self._source.get_suggestions(term, list(self._selection.vendor_ids))
