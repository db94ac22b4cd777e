"""Configuration management for Glossa."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Name of the container directive that marks a gloss block
    directive_name: str = Field(
        default="gloss",
        alias="GLOSSA_DIRECTIVE",
    )

    # CSS class prefix for HTML output
    class_prefix: str = Field(
        default="gloss",
        alias="GLOSSA_CLASS_PREFIX",
    )

    # Output extension used when no output path is given
    default_format: str = Field(
        default=".html",
        alias="GLOSSA_FORMAT",
    )

    # Treat any block diagnostic as a failed run
    fail_on_error: bool = Field(
        default=False,
        alias="GLOSSA_STRICT",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
