"""Configuration loading, validation, and access."""

from __future__ import annotations

import os
import re
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

from price_history.core.exceptions import ConfigError

DEFAULT_PALETTE: tuple[str, ...] = (
    "#c10000",
    "#c15b00",
    "#c1ae00",
    "#5dc100",
    "#00c184",
    "#003ac1",
    "#7800c1",
    "#c100ab",
    "#000000",
    "#525252",
    "#003fff",
    "#ff0000",
    "#ff00fb",
    "#27ff00",
)

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


class ChartConfig(BaseModel):
    """Calendar, palette and label settings for chart derivation."""

    model_config = ConfigDict(frozen=True)

    timezone: str = "Atlantic/Reykjavik"
    palette: tuple[str, ...] = DEFAULT_PALETTE
    thousands_separator: str = "."
    currency_suffix: str = " kr."
    axis_rounding: int = 10000
    x_axis_padding: int = 500000
    sale_dash: str = "4 2"
    stroke_width: int = 2

    @field_validator("timezone")
    @classmethod
    def timezone_exists(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown timezone: {v!r}") from e
        return v

    @field_validator("palette")
    @classmethod
    def palette_is_hex_colors(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v:
            raise ValueError("palette must contain at least one color")
        bad = [c for c in v if not _HEX_COLOR.match(c)]
        if bad:
            raise ValueError(f"palette colors must be #rrggbb, got {bad}")
        return v

    @field_validator("axis_rounding", "stroke_width")
    @classmethod
    def positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be >= 1")
        return v

    @field_validator("x_axis_padding")
    @classmethod
    def padding_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("x_axis_padding must be >= 0")
        return v


class SourceConfig(BaseModel):
    """Price source (HTTP API) configuration."""

    model_config = ConfigDict(frozen=True)

    base_url: str = "http://localhost:3000/api"
    timeout: float = 15.0
    max_suggestions: int = 20

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must be an http(s) URL")
        return v.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def timeout_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout must be > 0")
        return v

    @field_validator("max_suggestions")
    @classmethod
    def max_suggestions_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_suggestions must be >= 1")
        return v


class PriceHistoryConfig(BaseModel):
    """Root configuration for price-history."""

    model_config = ConfigDict(frozen=True)

    chart: ChartConfig = ChartConfig()
    source: SourceConfig = SourceConfig()
    vendors: dict[str, str] = {}


def load_config(
    config_path: str | None = None,
    env_prefix: str = "PRICE_HISTORY_",
) -> PriceHistoryConfig:
    """Load configuration from environment + YAML file + defaults.

    Resolution order (highest priority first):
    1. Environment variables (PRICE_HISTORY_CHART__TIMEZONE, etc.)
    2. YAML file at config_path
    3. Built-in defaults

    Nested keys use double-underscore in env vars:
        PRICE_HISTORY_SOURCE__TIMEOUT=5  ->  source.timeout = 5
    """
    try:
        yaml_path = _resolve_config_path(config_path)
        base: dict = {}
        if yaml_path is not None:
            base = _load_yaml(yaml_path)

        merged = _merge_env_vars(base, env_prefix)
        return PriceHistoryConfig.model_validate(merged)
    except Exception as e:
        if isinstance(e, ConfigError):
            raise
        raise ConfigError(str(e), context={"source": "load_config"}) from e


def _resolve_config_path(explicit: str | None) -> Path | None:
    """Determine config file path."""
    if explicit is not None:
        p = Path(explicit)
        if not p.exists():
            raise ConfigError(
                f"Config file not found: {explicit}",
                context={"field": "config_path", "value": explicit},
            )
        return p

    env_path = os.environ.get("PRICE_HISTORY_CONFIG")
    if env_path:
        p = Path(env_path)
        if not p.exists():
            raise ConfigError(
                f"Config file from PRICE_HISTORY_CONFIG not found: {env_path}",
                context={"field": "PRICE_HISTORY_CONFIG", "value": env_path},
            )
        return p

    default = Path("price-history.yml")
    if default.exists():
        return default

    return None


def _load_yaml(path: Path) -> dict:
    """Load and parse YAML file."""
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"YAML config must be a mapping, got {type(data).__name__}",
                context={"field": "config_file", "value": str(path)},
            )
        return data
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Failed to parse YAML config: {e}",
            context={"field": "config_file", "value": str(path)},
        ) from e


def _merge_env_vars(base: dict, prefix: str) -> dict:
    """Overlay environment variables onto base config dict.

    Double-underscore separates nesting levels.
    Numeric strings are cast to int or float.
    Vendor ids are kept verbatim: PRICE_HISTORY_VENDORS__<id>=<name>.
    """
    result = dict(base)

    for key, value in os.environ.items():
        if not key.startswith(prefix):
            continue

        remainder = key[len(prefix) :]
        raw_parts = remainder.split("__")
        parts = [p.lower() for p in raw_parts]

        if parts == ["config"]:
            continue

        # Vendor ids are data, not field names
        if parts[0] == "vendors" and len(parts) == 2:
            vendors = dict(result.get("vendors") or {})
            vendors[raw_parts[1]] = value
            result["vendors"] = vendors
            continue

        cast_value = _auto_cast(value)

        target = result
        for part in parts[:-1]:
            if part not in target:
                target[part] = {}
            else:
                target[part] = dict(target[part])
            target = target[part]
        target[parts[-1]] = cast_value

    return result


def _auto_cast(value: str) -> str | int | float:
    """Auto-cast numeric strings from environment variables."""
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        pass
    return value
