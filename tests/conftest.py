"""Shared pytest fixtures for price-history."""

from datetime import datetime, timezone

import pytest

from price_history.core.config import ChartConfig, PriceHistoryConfig, SourceConfig
from price_history.core.models import (
    PriceInterval,
    PriceKind,
    SeriesBatch,
    SeriesSelector,
)
from price_history.series.calendar import DayCalendar
from price_history.sources.provider import StaticVendorDirectory


def _utc_ts(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> int:
    """Epoch seconds for a UTC wall-clock time."""
    return int(datetime(year, month, day, hour, minute, tzinfo=timezone.utc).timestamp())


JAN1 = _utc_ts(2024, 1, 1)
JAN2 = _utc_ts(2024, 1, 2)
JAN3 = _utc_ts(2024, 1, 3)


@pytest.fixture
def utc_calendar() -> DayCalendar:
    return DayCalendar("UTC")


@pytest.fixture
def chart_config() -> ChartConfig:
    return ChartConfig(timezone="UTC")


@pytest.fixture
def vendor_names() -> dict[str, str]:
    return {"v1": "VendorA", "v2": "VendorB"}


@pytest.fixture
def directory(vendor_names) -> StaticVendorDirectory:
    return StaticVendorDirectory(vendor_names)


@pytest.fixture
def app_config(chart_config, vendor_names) -> PriceHistoryConfig:
    return PriceHistoryConfig(
        chart=chart_config,
        source=SourceConfig(base_url="http://test.local/api"),
        vendors=vendor_names,
    )


@pytest.fixture
def regular_a() -> SeriesSelector:
    return SeriesSelector(vendor_name="VendorA", product_code="SKU1")


@pytest.fixture
def sale_a() -> SeriesSelector:
    return SeriesSelector(
        vendor_name="VendorA", product_code="SKU1", price_kind=PriceKind.SALE
    )


@pytest.fixture
def scenario_batch(regular_a, sale_a) -> SeriesBatch:
    """Regular Jan 1–3 at 100 and a one-day sale on Jan 2 at 80."""
    batch = SeriesBatch()
    batch.add(regular_a, [PriceInterval(start=JAN1, end=JAN3, price=100)])
    batch.add(sale_a, [PriceInterval(start=JAN2, end=JAN2, price=80)])
    return batch


@pytest.fixture
def prices_payload() -> dict:
    """A prices endpoint response covering two known vendors and one unknown."""
    return {
        "stores": [
            {
                "id": "v1",
                "skus": [
                    {
                        "sku": "SKU1",
                        "prices": [{"start": JAN1, "end": JAN3, "price": 100}],
                        "salePrices": [{"start": JAN2, "end": JAN2, "price": 80}],
                    },
                    {
                        "sku": "SKU2",
                        "prices": [{"start": JAN2, "end": JAN3, "price": 25000}],
                    },
                ],
            },
            {
                "id": "v2",
                "skus": [
                    {
                        "sku": "SKU1",
                        "prices": [{"start": JAN1, "end": JAN2, "price": 120}],
                    },
                ],
            },
            {
                "id": "v9",
                "skus": [
                    {
                        "sku": "SKU1",
                        "prices": [{"start": JAN1, "end": JAN3, "price": 1}],
                    },
                ],
            },
        ]
    }


@pytest.fixture
def utc_ts():
    """Factory: epoch seconds for a UTC wall-clock time."""
    return _utc_ts
