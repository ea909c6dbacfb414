"""Saved prices responses: loading from disk and serving as a PriceSource."""

from __future__ import annotations

import json
import re
from pathlib import Path

from pydantic import ValidationError

from price_history.core.exceptions import SourceError
from price_history.core.models import (
    ChartSelection,
    PricesResponse,
    ProductCode,
    VendorId,
    VendorPrices,
)


def load_prices_response(filepath: str | Path) -> PricesResponse:
    """Read a JSON file holding a prices endpoint response.

    Raises:
        FileNotFoundError: if the file does not exist.
        SourceError: if the content is not a valid prices response.
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Prices file not found: {filepath}")

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        return PricesResponse.model_validate(raw)
    except (json.JSONDecodeError, ValidationError) as e:
        raise SourceError(
            f"Invalid prices file {filepath}: {e}",
            context={"url": str(path), "status_code": None},
        ) from e


_DIGITS = re.compile(r"(\d+)")


def natural_key(code: str) -> list[str | int]:
    """Sort key comparing digit runs numerically: SKU2 before SKU10."""
    return [int(part) if part.isdigit() else part for part in _DIGITS.split(code)]


class FilePriceSource:
    """PriceSource serving a saved prices response.

    Prices are filtered to the selected vendors and product codes. The
    saved intervals are returned as stored; the date range is not applied.
    """

    def __init__(self, response: PricesResponse, max_suggestions: int = 20) -> None:
        self._response = response
        self._max_suggestions = max_suggestions

    @classmethod
    def from_file(cls, filepath: str | Path, max_suggestions: int = 20) -> FilePriceSource:
        return cls(load_prices_response(filepath), max_suggestions)

    async def get_prices(self, selection: ChartSelection) -> PricesResponse:
        vendor_ids = set(selection.vendor_ids)
        codes = set(selection.product_codes)
        stores = [
            VendorPrices(
                id=vendor.id,
                skus=[p for p in vendor.skus if p.sku in codes],
            )
            for vendor in self._response.stores or []
            if vendor.id in vendor_ids
        ]
        return PricesResponse(stores=stores)

    async def get_suggestions(
        self, term: str, vendor_ids: list[VendorId]
    ) -> list[ProductCode]:
        if not term:
            return []
        wanted = set(vendor_ids)
        seen: dict[ProductCode, None] = {}
        for vendor in self._response.stores or []:
            if vendor.id not in wanted:
                continue
            for product in vendor.skus:
                if term in product.sku:
                    seen.setdefault(product.sku, None)
        return sorted(seen, key=natural_key)[: self._max_suggestions]
