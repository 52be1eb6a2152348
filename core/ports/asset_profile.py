from __future__ import annotations

from typing import Protocol


class AssetProfileResolver(Protocol):
    """Symbol to display-name lookup against a market-data provider."""

    async def resolve_name(self, symbol: str) -> str | None:
        """Return the asset's display name, or None when none can be found."""
