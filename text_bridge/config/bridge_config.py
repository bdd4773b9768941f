"""Settings for the remote endpoint the bridge forwards to.

The endpoint used to be a constant baked into the build.  It now lives in
a :class:`BridgeConfig` that is read from ``BRIDGE_*`` environment
variables (or ``.env``) and handed to the bridge explicitly, so tests and
hosts can point it at any server.
"""

from functools import lru_cache
from typing import Optional

import httpx
from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.enums import EnvelopeField

load_dotenv()

DEFAULT_ENDPOINT_URL = "https://httpbin.org/post"


class BridgeConfig(BaseSettings):
    """Configuration for the outbound request."""

    endpoint_url: str = Field(DEFAULT_ENDPOINT_URL)
    envelope_field: EnvelopeField = Field(EnvelopeField.BODY)
    # None keeps httpx's own default timeout policy.
    timeout: Optional[float] = Field(None)

    @field_validator("endpoint_url")
    def validate_endpoint_url(cls, value: str) -> str:
        try:
            url = httpx.URL(value)
        except httpx.InvalidURL as exc:
            raise ValueError(f"BRIDGE_ENDPOINT_URL is not a valid URL: {exc}") from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise ValueError("BRIDGE_ENDPOINT_URL must be an absolute http(s) URL")
        return value

    @field_validator("timeout")
    def validate_timeout(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            raise ValueError("BRIDGE_TIMEOUT must be positive")
        return value

    model_config = SettingsConfigDict(env_prefix="BRIDGE_", env_file=".env", extra="ignore")


@lru_cache()
def get_bridge_config() -> BridgeConfig:
    """Return a cached bridge configuration."""

    return BridgeConfig()
