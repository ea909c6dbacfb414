"""Tests for price_history.core.models."""

import pytest
from pydantic import ValidationError

from price_history.core.models import (
    SERIES_KEY_SEPARATOR,
    TIMESTAMP_FIELD,
    AutocompleteResponse,
    ChartSelection,
    DaySnapshot,
    PriceInterval,
    PriceKind,
    PricesResponse,
    ProductPrices,
    SeriesBatch,
    SeriesSelector,
)


class TestPriceKind:
    def test_labels(self):
        assert PriceKind.REGULAR.value == "price"
        assert PriceKind.SALE.value == "salePrice"


class TestPriceInterval:
    def test_valid(self):
        interval = PriceInterval(start=10, end=20, price=1500)
        assert interval.price == 1500

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="price must be >= 0"):
            PriceInterval(start=10, end=20, price=-1)

    def test_start_after_end_allowed_on_model(self):
        # ordering is checked by the merger for the whole batch
        assert PriceInterval(start=20, end=10, price=1).start == 20

    def test_frozen(self):
        interval = PriceInterval(start=10, end=20, price=1)
        with pytest.raises(ValidationError):
            interval.price = 2


class TestSeriesSelector:
    def test_regular_key(self):
        selector = SeriesSelector(vendor_name="VendorA", product_code="SKU1")
        assert selector.key == "VendorA - SKU1 - price"

    def test_sale_key(self):
        selector = SeriesSelector(
            vendor_name="VendorA", product_code="SKU1", price_kind=PriceKind.SALE
        )
        assert selector.key == "VendorA - SKU1 - salePrice"

    def test_key_never_equals_timestamp_field(self):
        selector = SeriesSelector(vendor_name="timestamp", product_code="x")
        assert SERIES_KEY_SEPARATOR in selector.key
        assert selector.key != TIMESTAMP_FIELD

    def test_hashable(self):
        a = SeriesSelector(vendor_name="A", product_code="1")
        b = SeriesSelector(vendor_name="A", product_code="1")
        assert {a, b} == {a}


class TestDaySnapshot:
    def test_set_and_get(self):
        snapshot = DaySnapshot(timestamp=100)
        snapshot.set("A - 1 - price", 5)
        assert snapshot.get("A - 1 - price") == 5
        assert snapshot.get("B - 1 - price") is None

    def test_set_overwrites(self):
        snapshot = DaySnapshot(timestamp=100, values={"A - 1 - price": 5})
        snapshot.set("A - 1 - price", 7)
        assert snapshot.values == {"A - 1 - price": 7}

    def test_keys(self):
        snapshot = DaySnapshot(timestamp=100, values={"x": 1, "y": 2})
        assert snapshot.keys() == ["x", "y"]

    def test_to_record(self):
        snapshot = DaySnapshot(timestamp=100, values={"A - 1 - price": 5})
        assert snapshot.to_record() == {"timestamp": 100, "A - 1 - price": 5}

    def test_default_values_not_shared(self):
        a, b = DaySnapshot(timestamp=1), DaySnapshot(timestamp=2)
        a.set("k", 1)
        assert b.values == {}


class TestSeriesBatch:
    def test_empty(self):
        batch = SeriesBatch()
        assert batch.is_empty
        assert batch.interval_count == 0

    def test_add_keeps_order(self):
        batch = SeriesBatch()
        a = SeriesSelector(vendor_name="A", product_code="1")
        b = SeriesSelector(vendor_name="B", product_code="1")
        batch.add(b, [PriceInterval(start=1, end=2, price=1)])
        batch.add(a, [])
        assert [s for s, _ in batch.entries] == [b, a]
        assert batch.interval_count == 1
        assert not batch.is_empty

    def test_add_copies_interval_list(self):
        batch = SeriesBatch()
        intervals = [PriceInterval(start=1, end=2, price=1)]
        batch.add(SeriesSelector(vendor_name="A", product_code="1"), intervals)
        intervals.clear()
        assert batch.interval_count == 1


class TestChartSelection:
    def test_empty_without_products(self):
        assert ChartSelection(vendor_ids=["v1"]).is_empty

    def test_empty_without_vendors(self):
        assert ChartSelection(product_codes=["SKU1"]).is_empty

    def test_not_empty(self):
        assert not ChartSelection(product_codes=["SKU1"], vendor_ids=["v1"]).is_empty

    def test_open_ended_range(self):
        selection = ChartSelection(product_codes=["SKU1"], vendor_ids=["v1"], start=10)
        assert selection.end is None

    def test_end_before_start_rejected(self):
        with pytest.raises(ValidationError, match="must not be before start"):
            ChartSelection(product_codes=["SKU1"], vendor_ids=["v1"], start=20, end=10)


class TestResponseModels:
    def test_sale_prices_alias(self):
        product = ProductPrices.model_validate(
            {"sku": "SKU1", "prices": [], "salePrices": [{"start": 1, "end": 2, "price": 3}]}
        )
        assert product.sale_prices[0].price == 3

    def test_sale_prices_absent(self):
        product = ProductPrices.model_validate({"sku": "SKU1", "prices": []})
        assert product.sale_prices is None

    def test_prices_response_without_stores(self):
        assert PricesResponse.model_validate({}).stores is None

    def test_prices_response(self, prices_payload):
        response = PricesResponse.model_validate(prices_payload)
        assert [v.id for v in response.stores] == ["v1", "v2", "v9"]
        assert response.stores[0].skus[1].sale_prices is None

    def test_autocomplete_response(self):
        assert AutocompleteResponse.model_validate({"terms": ["a", "b"]}).terms == ["a", "b"]
