"""price_history.core — Foundation types, config, and exceptions."""

from price_history.core.config import (
    ChartConfig,
    PriceHistoryConfig,
    SourceConfig,
    load_config,
)
from price_history.core.exceptions import (
    ConfigError,
    EmptySeriesError,
    InvalidIntervalError,
    PriceHistoryError,
    SeriesError,
    SourceError,
)
from price_history.core.models import (
    SERIES_KEY_SEPARATOR,
    TIMESTAMP_FIELD,
    AutocompleteResponse,
    ChartSelection,
    DaySnapshot,
    IntervalPayload,
    PriceInterval,
    PriceKind,
    PricesResponse,
    ProductCode,
    ProductPrices,
    SeriesBatch,
    SeriesKey,
    SeriesSelector,
    VendorId,
    VendorPrices,
    VendorRecord,
)

__all__ = [
    # Type aliases and constants
    "VendorId",
    "ProductCode",
    "SeriesKey",
    "SERIES_KEY_SEPARATOR",
    "TIMESTAMP_FIELD",
    # Enums
    "PriceKind",
    # Series models
    "PriceInterval",
    "SeriesSelector",
    "DaySnapshot",
    "SeriesBatch",
    "ChartSelection",
    "VendorRecord",
    # Source response models
    "IntervalPayload",
    "ProductPrices",
    "VendorPrices",
    "PricesResponse",
    "AutocompleteResponse",
    # Config
    "PriceHistoryConfig",
    "ChartConfig",
    "SourceConfig",
    "load_config",
    # Exceptions
    "PriceHistoryError",
    "ConfigError",
    "SeriesError",
    "InvalidIntervalError",
    "EmptySeriesError",
    "SourceError",
]
