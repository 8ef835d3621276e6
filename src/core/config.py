"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. Every field has a safe default so the host starts without any
environment in development and tests.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Modules receive the Settings object during service registration

Usage:
    from src.core.config import settings

    # Environment detection
    if settings.is_development:
        # Dev-specific behavior (API docs)
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (detailed errors)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Modular Monolith",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # API configuration
    api_base_url: str = Field(
        default="http://localhost:8000",
        description="API base URL, used to build problem type URIs",
    )

    # Catalog module
    catalog_route_prefix: str = Field(
        default="/v1/catalog",
        description="Route prefix for the catalog module endpoints",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name.

        Returns:
            str: Upper-cased level name.

        Raises:
            ValueError: If the name is not a standard logging level.
        """
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("api_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Remove trailing slashes from URLs."""
        return v.rstrip("/")

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for filtering."""
        return logging.getLevelNamesMapping()[self.log_level]

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """Check if running in CI environment."""
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION


@lru_cache()
def get_settings() -> Settings:
    """Return the cached application settings."""
    return Settings()


settings = get_settings()
