from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AssetType(str, Enum):
    STOCK = "stock"
    FUND = "fund"
    CRYPTO = "crypto"


class Asset(BaseModel):
    """A single holding as supplied by the dashboard.

    ``current_value`` is the current price per unit, not the position value.
    """

    id: str
    name: str
    symbol: str
    quantity: float
    purchase_price: float
    current_value: float
    type: AssetType

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    @property
    def is_priceable(self) -> bool:
        """Equities and funds can be looked up by ticker; crypto cannot."""
        return self.type in (AssetType.STOCK, AssetType.FUND)


class AssetHolding(Asset):
    """Asset plus valuation figures derived from it."""

    total_value: float
    profit_loss: float
    profit_loss_percentage: float


class AssetPortfolio(BaseModel):
    """Holdings in input order plus aggregate totals."""

    holdings: list[AssetHolding]
    total_portfolio_value: float
    total_profit_loss: float
    total_profit_loss_percentage: float

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


__all__ = ["Asset", "AssetHolding", "AssetPortfolio", "AssetType"]
