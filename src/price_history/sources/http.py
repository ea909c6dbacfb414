"""Async HTTP client for the prices and autocomplete endpoints."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

from price_history.core.config import SourceConfig
from price_history.core.exceptions import SourceError
from price_history.core.models import (
    AutocompleteResponse,
    ChartSelection,
    PricesResponse,
    ProductCode,
    VendorId,
)

logger = logging.getLogger(__name__)

_PRICES_PATH = "/prices"
_AUTOCOMPLETE_PATH = "/autocomplete"

M = TypeVar("M", bound=BaseModel)


class HttpPriceSource:
    """PriceSource backed by the site's JSON API.

    Both endpoints take a JSON body via POST. Failures are not retried.

    Use via `async with HttpPriceSource(config) as source:`.
    """

    def __init__(self, config: SourceConfig) -> None:
        self._config = config
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=httpx.Timeout(config.timeout),
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> HttpPriceSource:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client. Called automatically by __aexit__."""
        await self._client.aclose()

    async def get_prices(self, selection: ChartSelection) -> PricesResponse:
        body: dict[str, Any] = {
            "skus": list(selection.product_codes),
            "stores": list(selection.vendor_ids),
        }
        if selection.start is not None:
            body["start"] = selection.start
        if selection.end is not None:
            body["end"] = selection.end

        return await self._post(_PRICES_PATH, body, PricesResponse)

    async def get_suggestions(
        self, term: str, vendor_ids: list[VendorId]
    ) -> list[ProductCode]:
        """Product codes containing ``term``; an empty term returns [] locally."""
        if not term:
            return []

        body = {"term": term, "stores": list(vendor_ids)}
        response = await self._post(_AUTOCOMPLETE_PATH, body, AutocompleteResponse)
        return response.terms[: self._config.max_suggestions]

    async def _post(self, path: str, body: dict[str, Any], model: type[M]) -> M:
        url = f"{self._config.base_url}{path}"
        try:
            response = await self._client.post(path, json=body)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Price source HTTP error for %s: %s %s",
                url,
                e.response.status_code,
                e.response.text[:200],
            )
            raise SourceError(
                f"HTTP {e.response.status_code} from {url}",
                context={"url": url, "status_code": e.response.status_code},
            ) from e
        except httpx.RequestError as e:
            logger.error("Price source request error for %s: %s", url, e)
            raise SourceError(
                f"Request to {url} failed: {e}",
                context={"url": url, "status_code": None},
            ) from e

        try:
            return model.model_validate(response.json())
        except ValueError as e:
            raise SourceError(
                f"Malformed response from {url}: {e}",
                context={"url": url, "status_code": response.status_code},
            ) from e
