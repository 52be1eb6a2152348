from __future__ import annotations

import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

# Ensure the application package is importable when running tests directly via pytest.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.domain import Asset, AssetType  # noqa: E402


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture(autouse=True)
def _clear_finnhub_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("FINNHUB_API_KEY", "FINNHUB_TOKEN", "FINNHUB_BASE_URL", "FINNHUB_TIMEOUT_SECONDS"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def recording_transport() -> Callable[..., RecordingTransport]:
    """Build a transport answering every request with ``payload`` as JSON (or raw ``body``)."""

    def _build(
        payload: Any = None,
        *,
        status_code: int = 200,
        body: bytes | None = None,
        error: Exception | None = None,
    ) -> RecordingTransport:
        def _handler(request: httpx.Request) -> httpx.Response:
            if error is not None:
                raise error
            content = body if body is not None else json.dumps(payload).encode("utf-8")
            return httpx.Response(status_code, content=content, request=request)

        return RecordingTransport(_handler)

    return _build


@pytest.fixture
def make_asset() -> Callable[..., Asset]:
    def _make(
        asset_id: str = "1",
        *,
        symbol: str = "AAPL",
        name: str = "Apple Inc.",
        quantity: float = 10,
        purchase_price: float = 150,
        current_value: float = 175,
        asset_type: AssetType = AssetType.STOCK,
    ) -> Asset:
        return Asset(
            id=asset_id,
            name=name,
            symbol=symbol,
            quantity=quantity,
            purchase_price=purchase_price,
            current_value=current_value,
            type=asset_type,
        )

    return _make
