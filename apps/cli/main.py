"""Command line access to name resolution and portfolio valuation."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from pydantic import TypeAdapter, ValidationError

from adapters.market_data.finnhub import FinnhubProfileResolver, FinnhubQuoteResolver
from core.credentials import check_credential
from core.domain import SAMPLE_ASSETS, Asset, AssetPortfolio
from core.enrichment import fetch_prices, resolve_names
from core.settings import Settings
from core.valuation import compute_portfolio, reprice_assets

logger = logging.getLogger(__name__)

_ASSET_LIST = TypeAdapter(list[Asset])


def load_assets(path: str | None) -> list[Asset]:
    """Read a JSON array of assets; the sample holdings when no path is given."""
    if not path:
        logger.info("No assets file given, using sample holdings")
        return list(SAMPLE_ASSETS)
    asset_path = Path(path)
    try:
        payload = asset_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Cannot read assets file: {asset_path}") from exc
    try:
        return _ASSET_LIST.validate_json(payload)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid assets file {asset_path}: {exc.error_count()} error(s)") from exc


async def _run_profile(symbols: Sequence[str], settings: Settings) -> dict[str, str | None]:
    resolver = FinnhubProfileResolver(
        check_credential(settings),
        base_url=settings.finnhub_base_url,
        timeout_seconds=settings.finnhub_timeout_seconds,
    )
    return await resolve_names(resolver, symbols)


async def _run_portfolio(assets: list[Asset], settings: Settings, *, refresh_prices: bool) -> AssetPortfolio:
    if refresh_prices:
        resolver = FinnhubQuoteResolver(
            check_credential(settings),
            base_url=settings.finnhub_base_url,
            timeout_seconds=settings.finnhub_timeout_seconds,
        )
        prices = await fetch_prices(resolver, assets)
        assets = reprice_assets(assets, prices)
    return compute_portfolio(assets)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Portfolio dashboard tools")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    profile = subparsers.add_parser("profile", help="Resolve display names for ticker symbols.")
    profile.add_argument("symbols", nargs="+", help="Ticker symbols, e.g. AAPL MSFT")

    portfolio = subparsers.add_parser("portfolio", help="Value a list of holdings.")
    portfolio.add_argument("--assets", metavar="PATH", help="JSON array of assets (default: sample holdings).")
    portfolio.add_argument(
        "--refresh-prices", action="store_true", help="Replace current values with Finnhub quotes first."
    )
    return parser


def main(args: Sequence[str] | None = None, *, out: TextIO | None = None) -> int:
    parsed = build_parser().parse_args(args=args)
    logging.basicConfig(
        level=getattr(logging, parsed.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    stream = out or sys.stdout
    settings = Settings()

    if parsed.command == "profile":
        names = asyncio.run(_run_profile(parsed.symbols, settings))
        stream.write(json.dumps(names, indent=2, ensure_ascii=False) + "\n")
        return 0

    assets = load_assets(parsed.assets)
    portfolio = asyncio.run(_run_portfolio(assets, settings, refresh_prices=parsed.refresh_prices))
    stream.write(portfolio.model_dump_json(by_alias=True, indent=2) + "\n")
    return 0


__all__ = ["build_parser", "load_assets", "main"]
