"""Primitive settings loaded from the environment and .env files.

config.yaml is the structured source of configuration; these values are the
raw environment inputs its placeholders and the CLI read.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentVariables(BaseSettings):
    """Simple primitive values loaded from environment variables and .env files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = Field(
        default="development", validation_alias="APP_ENVIRONMENT"
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    database_url: str = Field(
        default="sqlite:///./storefront.db", validation_alias="DATABASE_URL"
    )
    base_url: str = Field(default="http://localhost:8000", validation_alias="BASE_URL")

    secret_key: str = Field(default="dev-secret-key", validation_alias="SECRET_KEY")
    default_locale: str = Field(default="en", validation_alias="DEFAULT_LOCALE")
