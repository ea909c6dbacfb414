"""price-history: merged per-day price series for product codes across vendors."""

__version__ = "0.1.0"
