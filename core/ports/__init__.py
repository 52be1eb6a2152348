"""Port interfaces for adapters."""

from core.ports.asset_price import AssetPriceResolver
from core.ports.asset_profile import AssetProfileResolver

__all__ = ["AssetPriceResolver", "AssetProfileResolver"]
