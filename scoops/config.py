"""Configuration loading for the Scoops ordering system.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PackagingOption = Literal["gift_wrap", "special_packaging"]


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv. List settings such as
    PACKAGING are given as JSON, e.g. '["gift_wrap", "special_packaging"]'.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Scenario configuration
    customer_name: str = Field(
        default="Alice",
        description="Customer greeted by the order observer",
    )
    feedback: str = Field(
        default="Great service!",
        description="Feedback recorded after the order is placed",
    )
    packaging: list[PackagingOption] = Field(
        default_factory=lambda: ["gift_wrap"],
        description="Decorators applied to the final order, innermost first",
    )
    status_logging: bool = Field(
        default=False,
        description="Also record status changes in the application log",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    @field_validator("customer_name")
    @classmethod
    def validate_customer_name(cls, v: str) -> str:
        """Ensure the customer name is not blank."""
        if not v.strip():
            raise ValueError("customer_name must be a non-empty string")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper()
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
