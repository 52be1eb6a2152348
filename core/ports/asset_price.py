from __future__ import annotations

from typing import Protocol


class AssetPriceResolver(Protocol):
    """Latest price lookup against a market-data provider."""

    async def resolve_price(self, symbol: str) -> float | None:
        """Return the current price per unit, or None when unavailable."""
