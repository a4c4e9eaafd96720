"""
Configuration management using pydantic-settings.
All settings loaded from environment variables (12-factor app).

Risk boundaries (1.0 / 2.0 insects per day, 80% of a count threshold) are part
of the engine's contract and live in trapwatch.engine.risk_classifier, not here.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Engine Configuration
    risk_window_days: int = Field(
        default=3, ge=1, le=365, description="Trailing window for the average daily rate"
    )
    chart_range_days: int = Field(
        default=90, ge=1, le=3650, description="Days of history expanded for charts"
    )
    renotify_repeat_warning: bool = Field(
        default=False, description="Re-send alerts when warning persists"
    )

    # Logging
    log_level: str = Field(default="info", description="Log level")
    log_format: str = Field(default="json", description="Log format (json|console)")

    # Development
    dev_mode: bool = Field(default=True, description="Development mode")
    testing: bool = Field(default=False, description="Testing mode")

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Normalise log format to json or console."""
        v = v.strip().lower()
        if v not in {"json", "console"}:
            raise ValueError("log_format must be 'json' or 'console'")
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Uses lru_cache to ensure singleton behavior.
    """
    return Settings()
