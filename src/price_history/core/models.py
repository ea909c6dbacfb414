"""Pydantic data models — the system's type contracts."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# --- Type Aliases ---

VendorId = str
ProductCode = str
SeriesKey = str

SERIES_KEY_SEPARATOR = " - "
TIMESTAMP_FIELD = "timestamp"

# --- Enumerations ---


class PriceKind(StrEnum):
    """Kinds of price a vendor publishes for a product.

    The value is the label used as the last segment of a series key.
    """

    REGULAR = "price"
    SALE = "salePrice"


# --- Series Models ---


class PriceInterval(BaseModel):
    """One contiguous price validity window.

    ``start`` and ``end`` are inclusive epoch seconds. Ordering of the two is
    checked by the merger for the whole batch, not per interval.
    """

    model_config = ConfigDict(frozen=True)

    start: int
    end: int
    price: int

    @field_validator("price")
    @classmethod
    def price_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"price must be >= 0, got {v}")
        return v


class SeriesSelector(BaseModel):
    """Identifies one logical price series for a vendor and product."""

    model_config = ConfigDict(frozen=True)

    vendor_name: str
    product_code: ProductCode
    price_kind: PriceKind = PriceKind.REGULAR

    @property
    def key(self) -> SeriesKey:
        """Join key used for day snapshots, colors and line styles."""
        return SERIES_KEY_SEPARATOR.join(
            (self.vendor_name, self.product_code, self.price_kind.value)
        )


class DaySnapshot(BaseModel):
    """Prices of every series that covers one day.

    Values are sparse: a snapshot only holds keys whose interval covers
    the day starting at ``timestamp``.
    """

    timestamp: int
    values: dict[SeriesKey, int] = Field(default_factory=dict)

    def set(self, key: SeriesKey, price: int) -> None:
        """Store a price for ``key``, replacing any earlier value."""
        self.values[key] = price

    def get(self, key: SeriesKey) -> int | None:
        return self.values.get(key)

    def keys(self) -> list[SeriesKey]:
        return list(self.values)

    def to_record(self) -> dict[str, int]:
        """Flatten into the renderer's row format."""
        return {TIMESTAMP_FIELD: self.timestamp, **self.values}


class SeriesBatch(BaseModel):
    """Selectors paired with their intervals, in processing order."""

    entries: list[tuple[SeriesSelector, list[PriceInterval]]] = Field(
        default_factory=list
    )

    def add(self, selector: SeriesSelector, intervals: list[PriceInterval]) -> None:
        self.entries.append((selector, list(intervals)))

    @property
    def is_empty(self) -> bool:
        return not any(intervals for _, intervals in self.entries)

    @property
    def interval_count(self) -> int:
        return sum(len(intervals) for _, intervals in self.entries)


class ChartSelection(BaseModel):
    """What the user picked: product codes, vendors and an optional range."""

    model_config = ConfigDict(frozen=True)

    product_codes: list[ProductCode] = Field(default_factory=list)
    vendor_ids: list[VendorId] = Field(default_factory=list)
    start: int | None = None
    end: int | None = None

    @model_validator(mode="after")
    def end_not_before_start(self) -> ChartSelection:
        if self.start is not None and self.end is not None and self.end < self.start:
            raise ValueError(
                f"end ({self.end}) must not be before start ({self.start})"
            )
        return self

    @property
    def is_empty(self) -> bool:
        """True when there is nothing to fetch or render."""
        return not self.product_codes or not self.vendor_ids


class VendorRecord(BaseModel):
    """A vendor known to the vendor directory."""

    model_config = ConfigDict(frozen=True)

    id: VendorId
    name: str


# --- Source Response Models ---


class IntervalPayload(BaseModel):
    """One interval as delivered by the prices endpoint."""

    start: int
    end: int
    price: int


class ProductPrices(BaseModel):
    """Regular and optional sale intervals of one product at one vendor."""

    model_config = ConfigDict(populate_by_name=True)

    sku: ProductCode
    prices: list[IntervalPayload] = Field(default_factory=list)
    sale_prices: list[IntervalPayload] | None = Field(default=None, alias="salePrices")


class VendorPrices(BaseModel):
    """All requested products of one vendor."""

    id: VendorId
    skus: list[ProductPrices] = Field(default_factory=list)


class PricesResponse(BaseModel):
    """Body returned by the prices endpoint."""

    stores: list[VendorPrices] | None = None


class AutocompleteResponse(BaseModel):
    """Body returned by the autocomplete endpoint."""

    terms: list[ProductCode] = Field(default_factory=list)
