"""
Client configuration.

Every tunable value lives here as a typed, documented field.
Any field can be overridden at runtime via an environment variable with the
MITRAVERIFY_ prefix (case-insensitive), e.g.:

    export MITRAVERIFY_API_URL=https://api.mitraverify.example
    MITRAVERIFY_API_TIMEOUT=60000 python -m myapp     # slow staging backend

A `.env` file at the project root is loaded automatically.

`resolve_config()` turns the ambient settings into an immutable ClientConfig.
The client itself never reads the environment.
"""

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_DEV_API_URL = "http://localhost:8000"
DEFAULT_PROD_API_URL = "https://your-backend-api.herokuapp.com"
DEFAULT_TIMEOUT_MS = 30_000
DEFAULT_MAX_FILE_SIZE = 10_485_760  # 10 MiB

LOCAL_HOSTNAMES = frozenset({"localhost", "127.0.0.1", "::1"})


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MITRAVERIFY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_url: Optional[str] = Field(
        None, description="Backend base URL (used for both local and deployed hosts)"
    )
    api_timeout: int = Field(
        DEFAULT_TIMEOUT_MS, description="Per-request deadline (ms)"
    )
    max_file_size: int = Field(
        DEFAULT_MAX_FILE_SIZE, description="Max upload size (bytes)"
    )
    hostname: Optional[str] = Field(
        None, description="Host the calling app is served from; unset means local"
    )

    @field_validator("api_timeout", "max_file_size", mode="before")
    @classmethod
    def _fallback_on_bad_int(cls, value, info):
        defaults = {
            "api_timeout": DEFAULT_TIMEOUT_MS,
            "max_file_size": DEFAULT_MAX_FILE_SIZE,
        }
        try:
            parsed = int(value)
        except (TypeError, ValueError):
            logger.warning(f"[CONFIG] Invalid {info.field_name}={value!r}, using default")
            return defaults[info.field_name]
        if parsed <= 0:
            logger.warning(f"[CONFIG] Non-positive {info.field_name}={parsed}, using default")
            return defaults[info.field_name]
        return parsed

    @field_validator("api_url", "hostname", mode="before")
    @classmethod
    def _blank_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ClientConfig(BaseModel):
    """Read-only configuration owned by one client instance."""

    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_DEV_API_URL
    # aiohttp treats a zero total timeout as "no deadline"
    timeout_ms: int = Field(DEFAULT_TIMEOUT_MS, gt=0)
    max_file_size: int = Field(DEFAULT_MAX_FILE_SIZE, gt=0)

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000

    @property
    def max_file_size_mb(self) -> float:
        return self.max_file_size / 1024 / 1024


def is_local_host(hostname: Optional[str]) -> bool:
    return not hostname or hostname.lower() in LOCAL_HOSTNAMES


def resolve_config(hostname: Optional[str] = None, settings: Optional[Settings] = None) -> ClientConfig:
    """
    Build a ClientConfig from the ambient environment.

    A deployed (non-local) hostname falls back to the placeholder production
    host when no API URL is configured; otherwise the local dev server is used.
    """
    settings = settings or Settings()
    host = hostname if hostname is not None else settings.hostname

    if is_local_host(host):
        base_url = settings.api_url or DEFAULT_DEV_API_URL
    else:
        base_url = settings.api_url or DEFAULT_PROD_API_URL

    config = ClientConfig(
        base_url=base_url.rstrip("/"),
        timeout_ms=settings.api_timeout,
        max_file_size=settings.max_file_size,
    )
    logger.debug(f"[CONFIG] Resolved base_url={config.base_url} timeout_ms={config.timeout_ms}")
    return config
