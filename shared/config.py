"""
Shared configuration management for the session property rules.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_prefix="SESSION_PROPERTIES_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")

    # Rules
    rules_file: Optional[str] = Field(default=None)
    coordinator_version: str = Field(default="0.0")


def get_config(**overrides) -> BaseConfig:
    """Get configuration, with keyword overrides taking precedence over the environment."""
    return BaseConfig(**overrides)
