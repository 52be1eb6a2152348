"""Domain models."""

from core.domain.asset import Asset, AssetHolding, AssetPortfolio, AssetType
from core.domain.samples import SAMPLE_ASSETS

__all__ = ["SAMPLE_ASSETS", "Asset", "AssetHolding", "AssetPortfolio", "AssetType"]
