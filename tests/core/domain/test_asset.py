from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.domain import Asset, AssetType
from core.valuation import compute_portfolio


def test_asset_accepts_camel_case_payload() -> None:
    asset = Asset.model_validate(
        {
            "id": "1",
            "name": "Apple Inc.",
            "symbol": "AAPL",
            "quantity": 10,
            "purchasePrice": 150,
            "currentValue": 175,
            "type": "stock",
        }
    )

    assert asset.purchase_price == 150
    assert asset.current_value == 175
    assert asset.type is AssetType.STOCK


def test_asset_rejects_unknown_type() -> None:
    with pytest.raises(ValidationError):
        Asset.model_validate(
            {"id": "1", "name": "x", "symbol": "X", "quantity": 1, "purchasePrice": 1, "currentValue": 1, "type": "bond"}
        )


def test_asset_is_read_only(make_asset) -> None:
    asset = make_asset()

    with pytest.raises(ValidationError):
        asset.quantity = 5


@pytest.mark.parametrize(
    ("asset_type", "expected"),
    [(AssetType.STOCK, True), (AssetType.FUND, True), (AssetType.CRYPTO, False)],
    ids=["stock", "fund", "crypto"],
)
def test_is_priceable_by_type(make_asset, asset_type: AssetType, expected: bool) -> None:
    assert make_asset(asset_type=asset_type).is_priceable is expected


def test_portfolio_serializes_with_wire_names(make_asset) -> None:
    payload = compute_portfolio([make_asset()]).model_dump(by_alias=True, mode="json")

    assert set(payload) == {"holdings", "totalPortfolioValue", "totalProfitLoss", "totalProfitLossPercentage"}
    holding = payload["holdings"][0]
    assert holding["purchasePrice"] == 150
    assert holding["totalValue"] == 1750
    assert holding["profitLoss"] == 250
    assert holding["type"] == "stock"
