"""Presentation metadata derived from a merged day series."""

from price_history.chart.builder import ChartBuilder, ChartData
from price_history.chart.colors import (
    LineStyle,
    SeriesStyler,
    char_code_sum,
    color_for,
    is_sale_key,
    series_keys,
    series_prefix,
)
from price_history.chart.formatting import (
    format_day_label,
    format_price,
    format_price_label,
    format_tick_label,
    x_domain,
    y_domain,
)
from price_history.chart.ticks import month_ticks, timestamp_extent

__all__ = [
    # Builder
    "ChartBuilder",
    "ChartData",
    # Colors and styles
    "LineStyle",
    "SeriesStyler",
    "char_code_sum",
    "color_for",
    "is_sale_key",
    "series_keys",
    "series_prefix",
    # Formatting
    "format_day_label",
    "format_price",
    "format_price_label",
    "format_tick_label",
    "x_domain",
    "y_domain",
    # Ticks
    "month_ticks",
    "timestamp_extent",
]
