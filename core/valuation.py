"""Portfolio valuation over a list of holdings.

Everything here is synchronous and side-effect free. Inputs are never
mutated and nothing is validated: negative or non-finite numbers flow through
the arithmetic unchanged.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from core.domain.asset import Asset, AssetHolding, AssetPortfolio


def profit_loss_percentage(profit_loss: float, initial_cost: float) -> float:
    """Profit/loss relative to cost, in percent; 0 when nothing was paid."""
    if initial_cost == 0:
        return 0.0
    return (profit_loss / initial_cost) * 100


def value_holding(asset: Asset) -> AssetHolding:
    initial_cost = asset.quantity * asset.purchase_price
    current_total = asset.quantity * asset.current_value
    profit_loss = current_total - initial_cost
    return AssetHolding(
        **asset.model_dump(),
        total_value=current_total,
        profit_loss=profit_loss,
        profit_loss_percentage=profit_loss_percentage(profit_loss, initial_cost),
    )


def compute_portfolio(assets: Iterable[Asset]) -> AssetPortfolio:
    """Value each asset and sum the results into portfolio totals.

    Holdings come back in input order; nothing is sorted, filtered or merged.
    """
    holdings: list[AssetHolding] = []
    total_value = 0.0
    total_cost = 0.0

    for asset in assets:
        holding = value_holding(asset)
        holdings.append(holding)
        total_value += holding.total_value
        total_cost += asset.quantity * asset.purchase_price

    total_profit_loss = total_value - total_cost
    return AssetPortfolio(
        holdings=holdings,
        total_portfolio_value=total_value,
        total_profit_loss=total_profit_loss,
        total_profit_loss_percentage=profit_loss_percentage(total_profit_loss, total_cost),
    )


def reprice_assets(assets: Iterable[Asset], prices: Mapping[str, float | None]) -> list[Asset]:
    """Return assets with ``current_value`` taken from ``prices`` (keyed by asset id).

    Assets without a fetched price keep the value they were supplied with.
    """
    repriced: list[Asset] = []
    for asset in assets:
        price = prices.get(asset.id)
        if isinstance(price, bool) or not isinstance(price, int | float):
            repriced.append(asset)
            continue
        repriced.append(asset.model_copy(update={"current_value": float(price)}))
    return repriced


__all__ = ["compute_portfolio", "profit_loss_percentage", "reprice_assets", "value_holding"]
