"""Configuration management for the cricket analytics engine."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database configuration settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True)

    url: str = Field(default="sqlite:///cricket_analytics.db", validation_alias="DATABASE_URL")
    echo: bool = Field(default=False, validation_alias="DATABASE_ECHO")


class ReportSettings(BaseSettings):
    """Default parameters for the analytical reports."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True)

    default_season: int = Field(default=2021, validation_alias="REPORT_DEFAULT_SEASON")
    min_balls_faced: int = Field(default=100, ge=1, validation_alias="REPORT_MIN_BALLS")
    top_run_scorers_rank: int = Field(default=3, ge=1, validation_alias="REPORT_TOP_RUNS_RANK")
    top_strike_rate_rank: int = Field(default=5, ge=1, validation_alias="REPORT_TOP_STRIKE_RATE_RANK")
    # A match qualifies when its wicket count is strictly greater than this
    high_wicket_threshold: int = Field(default=10, ge=0, validation_alias="REPORT_HIGH_WICKET_THRESHOLD")
    verify_integrity: bool = Field(default=True, validation_alias="REPORT_VERIFY_INTEGRITY")


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True)

    level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    file: Optional[str] = Field(default=None, validation_alias="LOG_FILE")


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore", populate_by_name=True)

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    reports: ReportSettings = Field(default_factory=ReportSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings loaded from environment."""
    return Settings()
