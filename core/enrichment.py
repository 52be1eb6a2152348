"""Best-effort enrichment of holdings with provider data.

Lookups for different symbols are independent and run concurrently; each
resolver call already degrades to ``None`` on failure, so nothing here needs
its own error handling. Results are not cached between calls.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Sequence

from core.domain.asset import Asset
from core.ports import AssetPriceResolver, AssetProfileResolver

logger = logging.getLogger(__name__)


def _unique_symbols(symbols: Iterable[str]) -> list[str]:
    unique: list[str] = []
    for symbol in symbols:
        item = symbol.strip().upper()
        if item and item not in unique:
            unique.append(item)
    return unique


async def resolve_names(resolver: AssetProfileResolver, symbols: Iterable[str]) -> dict[str, str | None]:
    """Resolve display names for ``symbols``, keyed by the uppercased symbol."""
    unique = _unique_symbols(symbols)
    if not unique:
        return {}
    names = await asyncio.gather(*(resolver.resolve_name(symbol) for symbol in unique))
    resolved = dict(zip(unique, names, strict=True))
    missing = [symbol for symbol, name in resolved.items() if name is None]
    if missing:
        logger.info("No profile name for %d of %d symbols: %s", len(missing), len(unique), ", ".join(missing))
    return resolved


async def label_asset(resolver: AssetProfileResolver, asset: Asset) -> Asset:
    """Replace the asset's name with the provider's, when the provider has one."""
    if not asset.is_priceable or not asset.symbol.strip():
        return asset
    name = await resolver.resolve_name(asset.symbol)
    if name is None:
        return asset
    return asset.model_copy(update={"name": name})


async def fetch_prices(resolver: AssetPriceResolver, assets: Sequence[Asset]) -> dict[str, float | None]:
    """Fetch current prices keyed by asset id; crypto holdings are not looked up."""
    priceable = [asset for asset in assets if asset.is_priceable and asset.symbol.strip()]
    prices: dict[str, float | None] = {asset.id: None for asset in assets}
    if not priceable:
        return prices

    results = await asyncio.gather(*(resolver.resolve_price(asset.symbol) for asset in priceable))
    for asset, price in zip(priceable, results, strict=True):
        prices[asset.id] = price
        if price is None:
            logger.warning("Price unavailable for %s (%s)", asset.symbol, asset.type.value)
    return prices


__all__ = ["fetch_prices", "label_asset", "resolve_names"]
