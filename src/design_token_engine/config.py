"""Centralized configuration management using pydantic-settings.

Configuration is loaded from environment variables with sensible defaults.
All settings can be overridden via environment variables or a .env file.

The derivation functions never read these settings; they only seed the
defaults used by the service layer.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Engine settings loaded from environment variables.

    Override via environment variables (prefixed with DTE_) or .env file.

    Examples:
        DTE_LOG_LEVEL=DEBUG
        DTE_REFERENCE_BASE_SIZE_PX=18
        DTE_DEFAULT_PALETTE_STEPS=11
    """

    model_config = SettingsConfigDict(
        env_prefix="DTE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Design Token Engine"
    app_version: str = "0.1.0"
    environment: Environment = Environment.DEVELOPMENT

    # Logging
    log_level: LogLevel = LogLevel.INFO
    log_format: Literal["json", "console"] | None = Field(
        default=None,
        validate_default=True,
        description="Log output format: 'json' for production, 'console' for development",
    )
    log_file: Path | None = Field(default=None, description="Optional log file path")

    # Typography
    reference_base_size_px: float = Field(
        default=16.0, gt=0, description="Root font size used for rem/em conversion"
    )
    default_unit: Literal["px", "rem", "em", "pt"] = "px"

    # Color
    default_palette_steps: int = Field(default=9, ge=1, le=20)
    default_lightness_range: tuple[float, float] = (0.05, 0.95)
    default_chroma_range: tuple[float, float] = (0.01, 0.4)
    lock_base_color: bool = True
    min_contrast_body: float = Field(default=4.5, ge=1, le=21)
    min_contrast_large: float = Field(default=3.0, ge=1, le=21)

    @field_validator("log_format", mode="after")
    @classmethod
    def set_log_format_from_environment(cls, v: str | None, info) -> str:
        """Default to JSON logging in production."""
        if v is None:
            env = info.data.get("environment")
            if env == Environment.PRODUCTION:
                return "json"
        return v or "console"

    @field_validator("default_lightness_range", mode="after")
    @classmethod
    def validate_lightness_range(cls, v: tuple[float, float]) -> tuple[float, float]:
        """Lightness bounds must sit inside [0, 1] and be ordered."""
        low, high = v
        if not 0 <= low <= high <= 1:
            raise ValueError(f"lightness range must satisfy 0 <= min <= max <= 1, got {v}")
        return v

    @field_validator("default_chroma_range", mode="after")
    @classmethod
    def validate_chroma_range(cls, v: tuple[float, float]) -> tuple[float, float]:
        """Chroma bounds must be non-negative and ordered."""
        low, high = v
        if not 0 <= low <= high:
            raise ValueError(f"chroma range must satisfy 0 <= min <= max, got {v}")
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == Environment.TESTING


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings.

    Returns:
        Configured Settings instance.
    """
    return Settings()
