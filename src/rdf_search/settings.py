from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RdfSearchSettings(BaseSettings):
    """Unified configuration for RDF Search.

    Environment variables are prefixed with RDF_SEARCH_.
    """

    model_config = SettingsConfigDict(env_prefix="RDF_SEARCH_", extra="ignore")

    # --- Core ---
    log_level: str = Field(default="INFO", description="Python logging level")

    # --- Ingestion ---
    default_format: str = Field(default="xml", description="rdflib parser name: xml|turtle|nt|n3|json-ld")

    # --- HTTP ---
    user_agent: str = Field(default="rdf-search/0.1")
    http_connect_timeout: float = Field(default=10.0)
    http_read_timeout: float = Field(default=60.0)
    http_max_bytes: int = Field(default=32_000_000, description="Bodies larger than this are rejected")
    http_retry_attempts: int = Field(default=5, ge=1)


settings = RdfSearchSettings()
