"""
config.py

PURPOSE: Configuration loading and settings management.
DEPENDENCIES: pydantic, pydantic-settings

ARCHITECTURE NOTES:
Configuration comes from multiple sources (in priority order):
1. CLI flags (highest priority)
2. Environment variables (ADVENTURE_*)
3. Defaults (lowest priority)
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class OpenTelemetrySettings(BaseSettings):
    """Settings for tracing."""

    enabled: bool = Field(
        default=False,
        description="Export spans for engine turns and motion",
    )
    service_name: str = Field(
        default="adventure",
        description="service.name resource attribute",
    )
    endpoint: str = Field(
        default="",
        description="OTLP gRPC endpoint (console only when empty)",
    )

    model_config = {"env_prefix": "ADVENTURE_OTEL_"}


class Settings(BaseSettings):
    """Main application settings."""

    data_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory holding the adventure data files",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug output",
    )
    quit_affirmative: str = Field(
        default="Y",
        min_length=1,
        description="Answer that confirms QUIT",
    )
    otel: OpenTelemetrySettings = Field(
        default_factory=OpenTelemetrySettings,
        description="OpenTelemetry settings",
    )

    model_config = {"env_prefix": "ADVENTURE_"}

    @field_validator("log_level")
    @classmethod
    def upper_case_level(cls, v: str) -> str:
        return v.upper()

    @field_validator("quit_affirmative")
    @classmethod
    def normalize_affirmative(cls, v: str) -> str:
        return v.strip().upper()


def get_settings() -> Settings:
    """Get application settings, loading from environment."""
    return Settings()
