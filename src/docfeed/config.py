"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from docfeed.domain.value_objects import CodecMode


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Read once at process start; nothing in docfeed mutates them afterwards.
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCFEED_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # DocId encoding
    codec_mode: CodecMode = Field(
        default=CodecMode.PREFIXED,
        description="opaque: DocIds are already URLs; prefixed: DocIds live under base_url",
    )
    base_url: str = Field(
        default="http://localhost:5678/",
        description="Base URL the connector is reachable at",
    )
    doc_id_path: str = Field(
        default="/doc/",
        description="Fixed path segment between base_url and the DocId",
    )

    # Application
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Environment name",
    )
    log_level: str = Field(default="INFO", description="Logging level")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
