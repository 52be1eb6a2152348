"""Provider credential checks, evaluated once and passed to the market-data adapters."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from core.settings import Settings

logger = logging.getLogger(__name__)

FINNHUB = "finnhub"
_PLACEHOLDER_PREFIX = "your_"


@dataclass(frozen=True, slots=True)
class Configured:
    """A usable credential for ``provider``."""

    provider: str
    token: str

    @property
    def is_configured(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Configured(provider={self.provider!r}, token='***')"


@dataclass(frozen=True, slots=True)
class NotConfigured:
    """No usable credential; enrichment for ``provider`` is disabled."""

    provider: str
    reason: str

    @property
    def is_configured(self) -> bool:
        return False


ProviderCredential = Configured | NotConfigured


def check_token(provider: str, env_var: str, token: str | None) -> ProviderCredential:
    if token is None or not token.strip():
        return NotConfigured(provider, f"{env_var} is not set")
    cleaned = token.strip()
    if cleaned.startswith(_PLACEHOLDER_PREFIX):
        logger.warning("%s appears to be a placeholder value, treating as not configured", env_var)
        return NotConfigured(provider, f"{env_var} holds a placeholder value")
    return Configured(provider, cleaned)


def check_credential(settings: Settings) -> ProviderCredential:
    """Return whether the Finnhub token is usable."""
    credential = check_token(FINNHUB, "FINNHUB_API_KEY (or FINNHUB_TOKEN)", settings.finnhub_api_key)
    if not credential.is_configured:
        logger.warning("Finnhub enrichment disabled: %s", credential.reason)
    return credential


__all__ = ["FINNHUB", "Configured", "NotConfigured", "ProviderCredential", "check_credential", "check_token"]
