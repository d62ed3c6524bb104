"""
Process configuration for the Intervals.icu gateway.

Settings are read from the environment once per process (``get_settings`` is
cached) and handed to the client by reference. Nothing re-reads the
environment per request.

Environment variables:
- INTERVALS_ICU_API_KEY: Intervals.icu API key (required to serve requests)
- INTERVALS_ICU_BASE_URL: API base URL (default: https://intervals.icu/api/v1)
- INTERVALS_ICU_TIMEOUT: per-call upstream timeout in seconds (default: 30)
- MCP_API_KEY: shared secret for the MCP endpoint (optional)
- WEBHOOK_SECRET: shared secret for the webhook (optional, falls back to MCP_API_KEY)
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

from intervals_gateway.errors import ConfigurationError


DEFAULT_BASE_URL = "https://intervals.icu/api/v1"
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class Credentials:
    """Upstream API key and base URL."""
    api_key: str
    base_url: str = DEFAULT_BASE_URL


@dataclass(frozen=True)
class Settings:
    """Everything the gateway reads from its environment."""
    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    mcp_api_key: Optional[str] = None
    webhook_secret: Optional[str] = None

    @property
    def credentials(self) -> Credentials:
        """
        Resolved upstream credentials.

        Raises:
            ConfigurationError: If no API key is configured
        """
        if not self.api_key:
            raise ConfigurationError("Missing INTERVALS_ICU_API_KEY environment variable")
        return Credentials(api_key=self.api_key, base_url=self.base_url)

    @property
    def effective_webhook_secret(self) -> Optional[str]:
        return self.webhook_secret or self.mcp_api_key


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from an environment mapping (default: os.environ)."""
    env = os.environ if environ is None else environ

    timeout_raw = env.get("INTERVALS_ICU_TIMEOUT")
    try:
        timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT_SECONDS
    except ValueError:
        raise ConfigurationError(f"INTERVALS_ICU_TIMEOUT must be a number, got {timeout_raw!r}")

    return Settings(
        api_key=env.get("INTERVALS_ICU_API_KEY") or None,
        base_url=(env.get("INTERVALS_ICU_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
        timeout=timeout,
        mcp_api_key=env.get("MCP_API_KEY") or None,
        webhook_secret=env.get("WEBHOOK_SECRET") or None,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read from the environment on first use."""
    return load_settings()
