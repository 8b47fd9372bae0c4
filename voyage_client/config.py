"""Client configuration."""
from typing import Optional

import requests
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.voyageai.com"


class Settings(BaseSettings):
    """Environment-driven defaults (``VOYAGE_API_KEY``, ``VOYAGE_BASE_URL``)."""

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL

    model_config = SettingsConfigDict(env_prefix="VOYAGE_")


def load_settings() -> Settings:
    """Read a fresh :class:`Settings` from the process environment."""

    return Settings()


class ClientConfig(BaseModel):
    """Explicit client options. Empty values fall back to :class:`Settings`."""

    api_key: str = Field("", description="API key sent as a bearer token")
    base_url: str = Field("", description="Service root, e.g. https://api.voyageai.com")
    transport: Optional[requests.Session] = Field(None, description="HTTP session used for requests")
    timeout: Optional[float] = Field(None, gt=0, description="Per-request timeout in seconds; unset means none")

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
