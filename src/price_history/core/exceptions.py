"""Custom exception hierarchy for price-history."""

from typing import Any


class PriceHistoryError(Exception):
    """Base exception for all price-history errors.

    All exceptions carry an optional `context` dict for structured error
    metadata that can be logged or serialized without parsing the message.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class ConfigError(PriceHistoryError):
    """Invalid or missing configuration.

    Raised by load_config() during startup. Should be treated as fatal.

    Context keys:
        field: str — the config field that failed validation
        value: Any — the invalid value
    """


class SeriesError(PriceHistoryError):
    """A merged price series could not be built or derived from."""


class InvalidIntervalError(SeriesError):
    """A price interval ends before it starts.

    Policy: reject the whole batch. A partially merged series would render
    as a complete-looking chart with missing data.

    Context keys:
        series_key: str — the series the interval belongs to
        index: int — position of the interval in its series
        start: int — interval start (epoch seconds)
        end: int — interval end (epoch seconds)
    """


class EmptySeriesError(SeriesError):
    """Axis derivation was requested for a series with no snapshots.

    Policy: programming error in the caller, which must short-circuit an
    empty series before deriving ticks or domains.
    """


class SourceError(PriceHistoryError):
    """The price source failed to deliver a usable response.

    Policy: raise immediately. No retry is attempted.

    Context keys:
        url: str — the endpoint that was called
        status_code: int | None — HTTP status code if applicable
    """
