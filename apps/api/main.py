from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Annotated

import httpx
from fastapi import Depends, FastAPI, Query, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from adapters.market_data.finnhub import FinnhubProfileResolver, FinnhubQuoteResolver
from core.credentials import ProviderCredential, check_credential
from core.domain import SAMPLE_ASSETS, Asset, AssetPortfolio
from core.enrichment import fetch_prices
from core.ports import AssetPriceResolver, AssetProfileResolver
from core.settings import Settings
from core.valuation import compute_portfolio, reprice_assets

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AssetProfileResponse(_CamelModel):
    symbol: str
    asset_name: str | None


class AssetQuoteResponse(_CamelModel):
    symbol: str
    current_price: float | None


class MarketDataStatus(_CamelModel):
    provider: str
    configured: bool


@asynccontextmanager
async def lifespan(app: FastAPI):
    _configure_logging()
    settings = Settings()
    credential = check_credential(settings)
    http_client = httpx.AsyncClient()
    resolver_kwargs = {
        "base_url": settings.finnhub_base_url,
        "timeout_seconds": settings.finnhub_timeout_seconds,
        "client": http_client,
    }

    app.state.settings = settings
    app.state.credential = credential
    app.state.profile_resolver = FinnhubProfileResolver(credential, **resolver_kwargs)
    app.state.price_resolver = FinnhubQuoteResolver(credential, **resolver_kwargs)

    try:
        yield
    finally:
        await http_client.aclose()


app = FastAPI(title="Portfolio Dashboard API", version="0.1.0", lifespan=lifespan)


def get_credential() -> ProviderCredential:
    return app.state.credential


def get_profile_resolver() -> AssetProfileResolver:
    return app.state.profile_resolver


def get_price_resolver() -> AssetPriceResolver:
    return app.state.price_resolver


CredentialDep = Annotated[ProviderCredential, Depends(get_credential)]
ProfileResolverDep = Annotated[AssetProfileResolver, Depends(get_profile_resolver)]
PriceResolverDep = Annotated[AssetPriceResolver, Depends(get_price_resolver)]


@app.get("/health", summary="Health check", status_code=status.HTTP_200_OK)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/config/market-data", summary="Market data configuration", status_code=status.HTTP_200_OK)
async def read_market_data_status(credential: CredentialDep) -> MarketDataStatus:
    return MarketDataStatus(provider=credential.provider, configured=credential.is_configured)


@app.get("/assets/{symbol}/profile", summary="Resolve asset name", status_code=status.HTTP_200_OK)
async def read_asset_profile(symbol: str, resolver: ProfileResolverDep) -> AssetProfileResponse:
    name = await resolver.resolve_name(symbol)
    return AssetProfileResponse(symbol=symbol.upper(), asset_name=name)


@app.get("/assets/{symbol}/quote", summary="Current asset price", status_code=status.HTTP_200_OK)
async def read_asset_quote(symbol: str, resolver: PriceResolverDep) -> AssetQuoteResponse:
    price = await resolver.resolve_price(symbol)
    return AssetQuoteResponse(symbol=symbol.upper(), current_price=price)


@app.post("/portfolio", summary="Value holdings", status_code=status.HTTP_200_OK)
async def value_portfolio(
    assets: list[Asset],
    resolver: PriceResolverDep,
    refresh_prices: Annotated[bool, Query()] = False,
) -> AssetPortfolio:
    if refresh_prices and assets:
        prices = await fetch_prices(resolver, assets)
        assets = reprice_assets(assets, prices)
    return compute_portfolio(assets)


@app.get("/portfolio/sample", summary="Sample portfolio", status_code=status.HTTP_200_OK)
async def read_sample_portfolio() -> AssetPortfolio:
    return compute_portfolio(SAMPLE_ASSETS)
