"""Service settings loaded from environment variables."""

from enum import StrEnum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(StrEnum):
    """Deployment environment."""

    DEV = "dev"
    STAGING = "staging"
    PROD = "prod"


class LogLevel(StrEnum):
    """Supported log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Settings loaded from environment variables / .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Data source ---
    CMS_REPO_BASE_URL: str = Field(
        default="https://raw.githubusercontent.com/gentics/headless-cms-comparison/master/",
        description="Base location of the CMS data repository (trailing slash).",
    )
    CMS_LIST_PATH: str = Field(
        default="cms-list.json",
        description="Manifest path relative to CMS_REPO_BASE_URL.",
    )
    HTTP_TIMEOUT_S: float = Field(
        default=30.0,
        gt=0,
        description="Per-request timeout for the HTTP transport.",
    )

    # --- Logging ---
    LOG_LEVEL: LogLevel = Field(
        default=LogLevel.INFO,
        description="Application log level.",
    )

    # --- Environment ---
    ENVIRONMENT: Environment = Field(
        default=Environment.DEV,
        description="Deployment environment (dev/staging/prod).",
    )


def get_settings() -> Settings:
    """Factory function for dependency injection via FastAPI Depends."""
    return Settings()
