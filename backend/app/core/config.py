"""
Configuration module for the SOLID Document Management System.

Handles environment variables for diagnostic logging. Settings never
change the console transcript or the exit code.
"""

import os
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic_settings for validation and type conversion.
    Settings can be overridden via environment variables with SOLID_DOCS_ prefix.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SOLID_DOCS_",
        case_sensitive=False,
        extra="ignore"
    )

    # Application settings
    debug: bool = Field(default=False, description="Debug mode, forces DEBUG logging")
    environment: str = Field(default="development", description="Environment (development/production/test)")

    # Logging settings
    log_level: str = Field(default="WARNING", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format"
    )


class DevelopmentSettings(Settings):
    """Development environment specific settings."""
    environment: str = "development"


class ProductionSettings(Settings):
    """Production environment specific settings."""
    log_level: str = "ERROR"
    environment: str = "production"


class TestSettings(Settings):
    """Test environment specific settings."""
    environment: str = "test"
    log_level: str = "CRITICAL"  # Reduce test noise


def get_settings() -> Settings:
    """
    Get application settings based on environment.

    Returns:
        Settings: Configured settings instance based on environment

    Raises:
        pydantic.ValidationError: If an environment value fails validation
    """
    env = os.getenv("SOLID_DOCS_ENVIRONMENT", "development").lower()

    if env == "production":
        return ProductionSettings()
    elif env == "test":
        return TestSettings()
    else:
        return DevelopmentSettings()


def get_default_settings() -> Settings:
    """Build settings from field defaults only, ignoring the environment."""
    return Settings.model_construct()


__all__ = [
    "get_settings",
    "get_default_settings",
    "Settings",
    "DevelopmentSettings",
    "ProductionSettings",
    "TestSettings"
]
