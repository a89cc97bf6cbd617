"""
Application configuration using Pydantic Settings.
Loads environment variables and provides type-safe configuration.
"""

from typing import List
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: str = Field(default="development", description="Current environment")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO")

    # API Configuration
    api_title: str = Field(default="Billing Tracker")
    api_version: str = Field(default="1.0.0")
    api_prefix: str = Field(default="/api/v1")

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # CORS
    cors_origins: str | List[str] = Field(default=",".join(DEFAULT_CORS_ORIGINS), validate_default=True)

    # Localization
    timezone: str = Field(default="Europe/Rome", description="Zone used to decide what 'today' is")

    # Legacy data
    default_priority: str = Field(default="medium", description="Priority given to records that have none")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string or list."""
        if v is None:
            return list(DEFAULT_CORS_ORIGINS)
        if isinstance(v, str):
            if not v.strip():
                return list(DEFAULT_CORS_ORIGINS)
            return [origin.strip() for origin in v.split(",")]
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Use this function to get settings throughout the application.
    """
    return Settings()


settings = get_settings()
