from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from tapo_power.exceptions import ConfigurationError


class Settings(BaseSettings):
    # General
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    METER_MODE: Literal["production", "mock"] = "production"

    # Tapo
    TAPO_USERNAME: str = ""
    TAPO_PASSWORD: SecretStr = SecretStr("")
    TAPO_DEVICE_MODEL: Literal["p110", "p115"] = "p115"

    # The plug refreshes its current power reading about once per second,
    # polling faster than that returns duplicates.
    POLL_INTERVAL: float = Field(default=1.0, gt=0)

    # Measure
    SAMPLE_COUNT: int = Field(default=10, ge=1)

    # Monitor
    WINDOW_SIZE: int = Field(default=100, ge=1)
    CHART_WIDTH: int = Field(default=200, ge=10)
    CHART_HEIGHT: int = Field(default=50, ge=5)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def require_credentials(settings: Settings) -> None:
    """Validate that the Tapo cloud credentials are configured."""
    missing = []
    if not settings.TAPO_USERNAME:
        missing.append("TAPO_USERNAME")
    if not settings.TAPO_PASSWORD.get_secret_value():
        missing.append("TAPO_PASSWORD")

    if missing:
        raise ConfigurationError(
            f"Getting Tapo credentials from the environment: missing required configuration: {', '.join(missing)}. "
            "Please set them as environment variables or in your .env file."
        )
