"""Sample holdings shown when the dashboard has no user assets yet."""

from __future__ import annotations

from core.domain.asset import Asset, AssetType

SAMPLE_ASSETS: tuple[Asset, ...] = (
    Asset(
        id="1",
        name="Apple Inc.",
        symbol="AAPL",
        quantity=10,
        purchase_price=150,
        current_value=175,
        type=AssetType.STOCK,
    ),
    Asset(
        id="2",
        name="Vanguard S&P 500 ETF",
        symbol="VOO",
        quantity=5,
        purchase_price=380,
        current_value=420,
        type=AssetType.FUND,
    ),
    Asset(
        id="3",
        name="Bitcoin",
        symbol="BTC",
        quantity=0.1,
        purchase_price=30000,
        current_value=40000,
        type=AssetType.CRYPTO,
    ),
    Asset(
        id="4",
        name="Microsoft Corp.",
        symbol="MSFT",
        quantity=8,
        purchase_price=280,
        current_value=330,
        type=AssetType.STOCK,
    ),
)

__all__ = ["SAMPLE_ASSETS"]
