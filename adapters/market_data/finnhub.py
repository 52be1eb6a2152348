"""Finnhub REST lookups used to enrich dashboard holdings.

Both resolvers make a single attempt per call and never raise: a missing
token, a transport error, a non-2xx answer, an unparseable body or a body
without the wanted field all end in ``None``. The reason is logged.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from core.credentials import Configured, ProviderCredential
from core.ports.asset_price import AssetPriceResolver
from core.ports.asset_profile import AssetProfileResolver
from core.settings import DEFAULT_FINNHUB_BASE_URL

logger = logging.getLogger(__name__)

_MISSING = object()


class FinnhubResource:
    """Single-endpoint GET against the Finnhub API."""

    endpoint: str = ""

    def __init__(
        self,
        credential: ProviderCredential,
        *,
        base_url: str = DEFAULT_FINNHUB_BASE_URL,
        timeout_seconds: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._credential = credential
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._client = client

    @property
    def url(self) -> str:
        return f"{self._base_url}/{self.endpoint}"

    async def _send(self, client: httpx.AsyncClient, params: dict[str, str]) -> httpx.Response:
        if self._timeout_seconds is None:
            return await client.get(self.url, params=params)
        return await client.get(self.url, params=params, timeout=self._timeout_seconds)

    async def _fetch_json(self, symbol: str) -> Any:
        """Return the decoded body, or ``_MISSING`` when there is nothing usable."""
        if not isinstance(self._credential, Configured):
            logger.warning(
                "Finnhub %s lookup skipped for %s: %s", self.endpoint, symbol, self._credential.reason
            )
            return _MISSING

        params = {"symbol": symbol, "token": self._credential.token}
        logger.debug("HTTP GET %s symbol=%s", self.url, symbol)
        try:
            if self._client is not None:
                response = await self._send(self._client, params)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._send(client, params)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as exc:
            # Request construction failures (bad symbol or base URL) land here too.
            logger.error(
                "Failed to fetch %s for %s from Finnhub: %s: %s", self.endpoint, symbol, type(exc).__name__, exc
            )
            return _MISSING

        if not response.is_success:
            logger.error(
                "Finnhub %s error for %s: %s %s", self.endpoint, symbol, response.status_code, response.text
            )
            return _MISSING

        try:
            return response.json()
        except ValueError:
            logger.error(
                "Finnhub %s returned a non-JSON body for %s: %s %s",
                self.endpoint,
                symbol,
                response.status_code,
                response.text,
            )
            return _MISSING


class FinnhubProfileResolver(FinnhubResource, AssetProfileResolver):
    """Company/fund name lookup via ``stock/profile2``."""

    endpoint = "stock/profile2"

    async def resolve_name(self, symbol: str) -> str | None:
        normalized = symbol.upper()
        data = await self._fetch_json(normalized)
        if data is _MISSING:
            return None

        name = data.get("name") if isinstance(data, dict) else None
        if isinstance(name, str) and name.strip():
            return name

        # Indices and many funds are valid symbols without a profile; Finnhub answers {}.
        logger.warning("Finnhub: company name not found for %s. Response: %r", normalized, data)
        return None


class FinnhubQuoteResolver(FinnhubResource, AssetPriceResolver):
    """Current price lookup via ``quote`` (field ``c``)."""

    endpoint = "quote"

    async def resolve_price(self, symbol: str) -> float | None:
        normalized = symbol.upper()
        data = await self._fetch_json(normalized)
        if data is _MISSING:
            return None

        price = data.get("c") if isinstance(data, dict) else None
        if isinstance(price, bool) or not isinstance(price, int | float) or price == 0:
            logger.warning("Finnhub: current price (c) not found for %s. Response: %r", normalized, data)
            return None
        return float(price)


__all__ = ["FinnhubProfileResolver", "FinnhubQuoteResolver", "FinnhubResource"]
