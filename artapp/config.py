from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Optional

from pydantic import AnyUrl, Field, validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Central application configuration parsed from environment variables."""

    api_host: str = Field("0.0.0.0", description="Host interface for the API server.")
    api_port: int = Field(8080, description="Port for the API server.")
    log_level: str = Field("INFO", description="Root logging level used by the API process.")

    database_url: AnyUrl = Field(
        "sqlite:///./data/artapp.db", description="SQL database URL backing the local settings store."
    )

    catalog_base_url: str = Field(
        "https://collectionapi.metmuseum.org/public/collection/v1",
        description="Base URL of the public museum collection API.",
    )
    search_limit: Annotated[int, Field(ge=1)] = Field(
        20, description="Maximum number of detail records fetched per search."
    )
    favorites_key: str = Field("saved_art_v1", description="Settings key holding the serialized favorites list.")

    http_timeout_seconds: Optional[float] = Field(
        None,
        description="Per-request timeout for catalog calls. Leave unset to use the HTTP client's default.",
    )
    max_concurrency: Optional[int] = Field(
        None,
        description="Optional cap on simultaneous detail fetches per search. Unset means no cap.",
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "ARTAPP_"

    @validator("catalog_base_url", pre=True)
    def strip_trailing_slash(cls, value: str) -> str:
        """Endpoint paths are appended with a leading slash."""
        return str(value).rstrip("/")

    @validator("http_timeout_seconds", "max_concurrency", pre=True)
    def normalize_optional_limit(cls, value):
        """Interpret falsy values as leaving the limit unset."""
        if value in (None, "", "None", 0, "0"):
            return None
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached `Settings` instance to avoid reparsing the environment."""
    return Settings()


settings = get_settings()
