"""Runtime configuration for the API Explorer service."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .utils.paths import default_database_url


class ExplorerSettings(BaseSettings):
    """Environment-aware settings for the API Explorer service."""

    catalog_source: str = Field(
        "./data/apis.json",
        description="Filesystem path or http(s) URL of the JSON catalog.",
    )
    catalog_timeout: float = Field(
        default=10.0, gt=0, description="Timeout in seconds when fetching a remote catalog."
    )
    database_url: str = Field(
        default_factory=default_database_url,
        description="Connection URL for the bookmark SQLite database.",
    )
    database_echo: bool = Field(
        default=False, description="Enable SQL echo for debugging queries."
    )
    bookmark_storage_key: str = Field(
        default="bookmarkedAPIs",
        description="Storage key holding the serialized bookmark list.",
    )
    search_debounce_ms: int = Field(
        default=300, ge=0, description="Delay applied to search-as-you-type input."
    )
    host: str = Field(default="127.0.0.1", description="Interface bound by the development server.")
    port: int = Field(default=8000, description="Port bound by the development server.")
    log_level: str = Field(default="INFO", description="Root logging level for the service.")

    model_config = SettingsConfigDict(
        env_prefix="API_EXPLORER_",
        env_file=".env",
        env_file_encoding="utf-8",
    )
