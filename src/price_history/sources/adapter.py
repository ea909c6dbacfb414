"""Converts a prices response into an ordered SeriesBatch."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from price_history.core.exceptions import SourceError
from price_history.core.models import (
    IntervalPayload,
    PriceInterval,
    PriceKind,
    PricesResponse,
    SeriesBatch,
    SeriesSelector,
)
from price_history.sources.provider import VendorDirectory

logger = logging.getLogger(__name__)


class PricesResponseAdapter:
    """Turns vendor → product → interval lists into selector/interval pairs.

    Order follows the response: vendors, then products, then the regular
    series before the sale series of each product. Vendors the directory
    cannot name are skipped, since vendor configuration may lag behind
    stored prices.
    """

    def __init__(self, directory: VendorDirectory) -> None:
        self._directory = directory

    def adapt(self, response: PricesResponse) -> SeriesBatch:
        batch = SeriesBatch()
        skipped = 0

        for vendor in response.stores or []:
            vendor_name = self._directory.name_for(vendor.id)
            if not vendor_name:
                logger.warning(
                    "Skipping %d products for unknown vendor id %s",
                    len(vendor.skus),
                    vendor.id,
                )
                skipped += 1
                continue

            for product in vendor.skus:
                regular = SeriesSelector(
                    vendor_name=vendor_name,
                    product_code=product.sku,
                    price_kind=PriceKind.REGULAR,
                )
                batch.add(regular, _to_intervals(product.prices, regular))

                if product.sale_prices is not None:
                    sale = SeriesSelector(
                        vendor_name=vendor_name,
                        product_code=product.sku,
                        price_kind=PriceKind.SALE,
                    )
                    batch.add(sale, _to_intervals(product.sale_prices, sale))

        logger.debug(
            "Adapted %d series (%d intervals), skipped %d vendors",
            len(batch.entries),
            batch.interval_count,
            skipped,
        )
        return batch


def _to_intervals(
    payloads: list[IntervalPayload], selector: SeriesSelector
) -> list[PriceInterval]:
    try:
        return [
            PriceInterval(start=p.start, end=p.end, price=p.price) for p in payloads
        ]
    except ValidationError as e:
        raise SourceError(
            f"Invalid interval for '{selector.key}': {e}",
            context={"series_key": selector.key},
        ) from e
