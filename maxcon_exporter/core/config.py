"""Environment-driven settings for the exporter.

Values are read once at startup.  A malformed value is a startup error:
``load_settings`` turns pydantic's ``ValidationError`` into ``ConfigError``
instead of silently falling back to a default.
"""

import logging
from typing import Optional

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from maxcon_exporter.core.exceptions import ConfigError

DEFAULT_AWS_API_INTERVAL = 300
DEFAULT_METRICS_PORT = 8080


class Settings(BaseSettings):
    """Exporter settings.

    Attributes:
        AWS_API_INTERVAL: Seconds between two polling cycles.
        AWS_REGION: Region for the RDS client; the default chain is used when unset.
        METRICS_HOST: Address the metrics server binds to.
        METRICS_PORT: Port the metrics server binds to.
        POLL_ON_STARTUP: Run one cycle right away instead of waiting a full interval.
        LOG_LEVEL: Root log level.
        LOCAL_DEVELOPMENT: Use a human-readable log format.
    """

    model_config = SettingsConfigDict(case_sensitive=True, extra="ignore")

    AWS_API_INTERVAL: int = DEFAULT_AWS_API_INTERVAL
    AWS_REGION: Optional[str] = None

    METRICS_HOST: str = "0.0.0.0"
    METRICS_PORT: int = DEFAULT_METRICS_PORT
    POLL_ON_STARTUP: bool = True

    LOG_LEVEL: str = "INFO"
    LOCAL_DEVELOPMENT: bool = False

    @field_validator("AWS_API_INTERVAL", mode="before")
    @classmethod
    def _empty_interval_means_default(cls, value):
        if isinstance(value, str) and not value.strip():
            return DEFAULT_AWS_API_INTERVAL
        return value

    @field_validator("AWS_API_INTERVAL")
    @classmethod
    def _interval_must_be_positive(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("must be a positive number of seconds")
        return value

    @field_validator("AWS_REGION", mode="before")
    @classmethod
    def _empty_region_means_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {value!r}")
        return level


def load_settings(**overrides) -> Settings:
    """Build settings from the environment, raising ``ConfigError`` on bad input."""
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = ", ".join(".".join(str(x) for x in err["loc"]) for err in e.errors())
        raise ConfigError(f"Invalid configuration for {fields}: {e}") from e
