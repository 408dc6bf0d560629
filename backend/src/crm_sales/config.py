"""
Application configuration loaded from environment variables.

Only the driver reads settings; the domain package never does.
Variables use the ``CRM_SALES_`` prefix, e.g. ``CRM_SALES_LOG_LEVEL=DEBUG``.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from crm_sales.errors import ConfigError


class Settings(BaseSettings):
    """
    Application settings with validation.

    Use a .env file for local development.
    """

    model_config = SettingsConfigDict(
        env_prefix="CRM_SALES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level for the driver"
    )
    log_format: str = Field(
        default="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        description="logging.Formatter format string"
    )
    debug: bool = Field(
        default=False,
        description="Log full tracebacks when the scenario fails"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Settings are loaded once and cached for subsequent calls.
    """
    return Settings()


def load_settings() -> Settings:
    """
    Load settings, translating validation failures into ConfigError.

    Raises:
        ConfigError: If an environment variable holds an invalid value
    """
    try:
        return get_settings()
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
