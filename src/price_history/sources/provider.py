"""Source and vendor-lookup protocols: the interfaces the core consumes.

    PriceSource → PricesResponse → PricesResponseAdapter → SeriesBatch → SeriesMerger

- **PriceSource** fetches raw interval data and product-code suggestions.
  How it does so (HTTP, file, fixture) is invisible to the merger.
- **VendorDirectory** resolves vendor ids to display names synchronously,
  at adapt time.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from price_history.core.config import PriceHistoryConfig
from price_history.core.models import (
    ChartSelection,
    PricesResponse,
    ProductCode,
    VendorId,
    VendorRecord,
)


@runtime_checkable
class PriceSource(Protocol):
    """Consumer-facing interface for fetching price intervals."""

    async def get_prices(self, selection: ChartSelection) -> PricesResponse:
        """Fetch intervals for every selected vendor and product code.

        Vendors and products without data may be omitted from the response.
        """
        ...

    async def get_suggestions(
        self, term: str, vendor_ids: list[VendorId]
    ) -> list[ProductCode]:
        """Product codes containing ``term``, in source order."""
        ...


@runtime_checkable
class VendorDirectory(Protocol):
    """Synchronous vendor-id → vendor-name lookup."""

    def name_for(self, vendor_id: VendorId) -> str | None:
        """Return the vendor's display name, or None if unknown."""
        ...


class StaticVendorDirectory:
    """Dict-backed VendorDirectory, usually loaded from config."""

    def __init__(self, names: dict[VendorId, str] | None = None) -> None:
        self._names = dict(names or {})

    @classmethod
    def from_config(cls, config: PriceHistoryConfig) -> StaticVendorDirectory:
        return cls(config.vendors)

    def name_for(self, vendor_id: VendorId) -> str | None:
        return self._names.get(vendor_id)

    def records(self) -> list[VendorRecord]:
        return [VendorRecord(id=vid, name=name) for vid, name in self._names.items()]

    def ids(self) -> list[VendorId]:
        return list(self._names)

    def __len__(self) -> int:
        return len(self._names)
