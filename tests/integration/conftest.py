"""Integration fixtures: real files through the full pipeline, no network."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from price_history.core.config import ChartConfig, PriceHistoryConfig


@pytest.fixture
def reykjavik_config() -> PriceHistoryConfig:
    """Default calendar (Atlantic/Reykjavik) with two vendors."""
    return PriceHistoryConfig(
        chart=ChartConfig(),
        vendors={"65a1f0c2": "Bónus", "65a1f0c3": "Krónan"},
    )


@pytest.fixture
def berlin_config() -> PriceHistoryConfig:
    return PriceHistoryConfig(
        chart=ChartConfig(timezone="Europe/Berlin"),
        vendors={"65a1f0c2": "Bónus", "65a1f0c3": "Krónan"},
    )


@pytest.fixture
def saved_response(tmp_path: Path, utc_ts) -> Path:
    """Three months of prices for two vendors, with a sale and an unknown vendor."""
    payload = {
        "stores": [
            {
                "id": "65a1f0c2",
                "skus": [
                    {
                        "sku": "8690632",
                        "prices": [
                            {"start": utc_ts(2024, 1, 15, 10), "end": utc_ts(2024, 2, 20, 10), "price": 189900},
                            {"start": utc_ts(2024, 2, 20, 10), "end": utc_ts(2024, 4, 10, 10), "price": 199900},
                        ],
                        "salePrices": [
                            {"start": utc_ts(2024, 3, 1), "end": utc_ts(2024, 3, 8), "price": 149900},
                        ],
                    }
                ],
            },
            {
                "id": "65a1f0c3",
                "skus": [
                    {
                        "sku": "8690632",
                        "prices": [
                            {"start": utc_ts(2024, 2, 1), "end": utc_ts(2024, 4, 11), "price": 195000},
                        ],
                    }
                ],
            },
            {
                "id": "deadbeef",
                "skus": [
                    {
                        "sku": "8690632",
                        "prices": [
                            {"start": utc_ts(2023, 1, 1), "end": utc_ts(2025, 1, 1), "price": 1},
                        ],
                    }
                ],
            },
        ]
    }
    path = tmp_path / "prices.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
