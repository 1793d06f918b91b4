"""
Configuration management for EasyMeta.

Loads configuration from environment variables with support for .env files.
Uses Pydantic Settings for validation and type coercion.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every setting can be overridden by an ``EASYMETA_<NAME>`` variable.
    """

    model_config = SettingsConfigDict(
        env_prefix="EASYMETA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Driver Configuration
    default_driver: str = Field(default="PostgreSql", description="Driver used when none is given")

    # Introspection Configuration
    database_url: str | None = Field(default=None, description="SQLAlchemy URL of the source database")
    default_schema: str | None = Field(default=None, description="Schema read when none is given")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: str | None = Field(default=None, description="Log file path")
    log_rotation: str = Field(default="10 MB", description="Size or age at which the log file rolls over")
    log_retention: str = Field(default="7 days", description="How long rolled-over log files are kept")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return upper_v


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Settings: Application settings instance
    """
    return Settings()


def load_settings(env_file: str | Path | None = None) -> Settings:
    """
    Load settings from a specific .env file.

    Args:
        env_file: Path to .env file (optional)

    Returns:
        Settings: Application settings instance
    """
    get_settings.cache_clear()
    if env_file:
        return Settings(_env_file=env_file)
    return get_settings()
