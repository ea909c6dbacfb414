"""Deterministic colors and stroke styles per series key.

The color of a series depends only on its vendor-product prefix, so the
regular and sale lines of one product share a color and differ by dash
pattern. The hash is a plain sum of UTF-16 code units modulo the palette
size. It collides often and is kept as is: changing it would recolor
every existing series.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pydantic import BaseModel, ConfigDict

from price_history.core.config import DEFAULT_PALETTE, ChartConfig
from price_history.core.models import (
    SERIES_KEY_SEPARATOR,
    TIMESTAMP_FIELD,
    DaySnapshot,
    PriceKind,
    SeriesKey,
)

SOLID = "0"
_SALE_SUFFIX = SERIES_KEY_SEPARATOR + PriceKind.SALE.value


class LineStyle(BaseModel):
    """How one series is drawn."""

    model_config = ConfigDict(frozen=True)

    key: SeriesKey
    color: str
    dash: str = SOLID
    width: int = 2
    interpolation: str = "stepAfter"


def series_prefix(key: SeriesKey) -> str:
    """Strip the trailing price-kind segment from a series key."""
    cut = key.rfind(SERIES_KEY_SEPARATOR)
    if cut < 0:
        return key
    return key[:cut]


def char_code_sum(text: str) -> int:
    """Sum of the UTF-16 code units of ``text``."""
    data = text.encode("utf-16-le")
    return sum(int.from_bytes(data[i : i + 2], "little") for i in range(0, len(data), 2))


def color_for(prefix: str, palette: Sequence[str] = DEFAULT_PALETTE) -> str:
    return palette[char_code_sum(prefix) % len(palette)]


def is_sale_key(key: SeriesKey) -> bool:
    return key.endswith(_SALE_SUFFIX)


def series_keys(snapshots: Iterable[DaySnapshot]) -> list[SeriesKey]:
    """Distinct series keys in first-seen order; one line each."""
    seen: dict[SeriesKey, None] = {}
    for snapshot in snapshots:
        for key in snapshot.keys():
            if key != TIMESTAMP_FIELD:
                seen.setdefault(key, None)
    return list(seen)


class SeriesStyler:
    """Resolves a series key to its LineStyle.

    Parameters
    ----------
    palette : Sequence[str]
        Ordered colors indexed by the prefix hash.
    sale_dash : str
        Dash pattern for sale-price lines. Regular lines are solid.
    width : int
        Stroke width for every line.
    """

    def __init__(
        self,
        palette: Sequence[str] = DEFAULT_PALETTE,
        sale_dash: str = "4 2",
        width: int = 2,
    ) -> None:
        if not palette:
            raise ValueError("palette must contain at least one color")
        self._palette = tuple(palette)
        self._sale_dash = sale_dash
        self._width = width

    @classmethod
    def from_config(cls, config: ChartConfig) -> SeriesStyler:
        return cls(config.palette, config.sale_dash, config.stroke_width)

    def __call__(self, key: SeriesKey) -> LineStyle:
        return LineStyle(
            key=key,
            color=color_for(series_prefix(key), self._palette),
            dash=self._sale_dash if is_sale_key(key) else SOLID,
            width=self._width,
        )

    def lines(self, snapshots: Iterable[DaySnapshot]) -> list[LineStyle]:
        return [self(key) for key in series_keys(snapshots)]
