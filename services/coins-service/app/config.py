"""
Configuration module for coins service.

This module provides centralized configuration management using Pydantic settings.
All configuration values can be overridden via environment variables or .env file.
The coin universe itself is fixed and deliberately absent from these settings.
"""

from typing import List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings for the coins service.

    All settings can be configured via environment variables.
    Settings are validated on instantiation to ensure correct configuration.

    Attributes:
        SERVICE_NAME: Service identifier reported by the health check
        APP_NAME: Display name reported by the root endpoint
        VERSION: Service version
        DEBUG: Enable debug mode (exposes interactive API docs)
        HOST: Server bind address
        PORT: Server port number
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_JSON: Render logs as JSON instead of console output
        CORS_ORIGINS: Comma-separated list of allowed CORS origins
        ENABLE_TRACING: Export OpenTelemetry traces
        OTEL_EXPORTER_OTLP_ENDPOINT: OTLP collector endpoint
        SLOW_REQUEST_THRESHOLD_MS: Requests slower than this are logged as warnings
    """

    # Service identity
    SERVICE_NAME: str = Field(
        default="coins-api",
        description="Service identifier reported by the health check",
    )
    APP_NAME: str = Field(
        default="Coin Combinations API",
        description="Display name for the application",
    )
    VERSION: str = Field(
        default="0.1.0",
        description="Service version",
    )
    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode",
    )

    # Server configuration
    HOST: str = Field(
        default="0.0.0.0",
        description="Server bind address",
    )
    PORT: int = Field(
        default=3000,
        ge=1,
        le=65535,
        description="Server port number",
    )

    # Logging configuration
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    LOG_JSON: bool = Field(
        default=False,
        description="Render logs as JSON for log aggregation",
    )

    CORS_ORIGINS: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins",
    )

    # Observability
    ENABLE_TRACING: bool = Field(
        default=False,
        description="Enable OpenTelemetry trace export",
    )
    OTEL_EXPORTER_OTLP_ENDPOINT: str = Field(
        default="localhost:4317",
        description="OTLP gRPC endpoint for trace export",
    )
    SLOW_REQUEST_THRESHOLD_MS: float = Field(
        default=500.0,
        gt=0,
        description="Threshold in milliseconds for slow request warnings",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Accept log levels in any case."""
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @property
    def cors_origins_list(self) -> List[str]:
        """CORS origins split into a list, ignoring blanks."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Global settings instance
settings = Settings()
