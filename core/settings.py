import logging
import os
from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_FINNHUB_BASE_URL = "https://finnhub.io/api/v1"

_KNOWN_FINNHUB_ENV_KEYS = {
    "FINNHUB_API_KEY",
    "FINNHUB_TOKEN",
    "FINNHUB_BASE_URL",
    "FINNHUB_TIMEOUT_SECONDS",
}


def _warn_unknown_prefixed_env(prefix: str, known_keys: set[str]) -> None:
    unknown = sorted(key for key in os.environ if key.startswith(prefix) and key not in known_keys)
    if unknown:
        logger.warning("Unknown %s env vars ignored: %s", prefix, ", ".join(unknown))


class Settings(BaseSettings):
    """Application settings sourced from environment variables."""

    finnhub_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("finnhub_api_key", "FINNHUB_API_KEY", "finnhub_token", "FINNHUB_TOKEN"),
    )
    finnhub_base_url: str = Field(
        default=DEFAULT_FINNHUB_BASE_URL,
        validation_alias=AliasChoices("finnhub_base_url", "FINNHUB_BASE_URL"),
    )
    finnhub_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        validation_alias=AliasChoices("finnhub_timeout_seconds", "FINNHUB_TIMEOUT_SECONDS"),
    )

    @field_validator("finnhub_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")

    @model_validator(mode="after")
    def _warn_on_suspicious_config(self) -> "Settings":
        if not self.finnhub_base_url.startswith(("http://", "https://")):
            logger.warning("FINNHUB_BASE_URL does not look like an HTTP endpoint: %s", self.finnhub_base_url)
        _warn_unknown_prefixed_env("FINNHUB_", _KNOWN_FINNHUB_ENV_KEYS)
        return self

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Cached accessor so we only load settings once per process."""
    return Settings()
