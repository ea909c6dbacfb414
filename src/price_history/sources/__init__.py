"""Price sources, vendor lookup and response adaptation."""

from price_history.sources.adapter import PricesResponseAdapter
from price_history.sources.http import HttpPriceSource
from price_history.sources.json_file import FilePriceSource, load_prices_response
from price_history.sources.provider import (
    PriceSource,
    StaticVendorDirectory,
    VendorDirectory,
)

__all__ = [
    # Protocols
    "PriceSource",
    "VendorDirectory",
    # Implementations
    "HttpPriceSource",
    "FilePriceSource",
    "StaticVendorDirectory",
    "PricesResponseAdapter",
    "load_prices_response",
]
