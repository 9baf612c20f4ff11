from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ──────────────────────────────────────────────
# Settings (from environment variables / .env)
# ──────────────────────────────────────────────
class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    app_name: str = "Fargate Hello Service"
    app_version: str = "1.0.0"

    # Listener settings
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)

    # Logging settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    access_log: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()

# ──────────────────────────────────────────────
# Fixed response bodies
# ──────────────────────────────────────────────
GREETING = "Hello from ECS Fargate deployed via GitHub Actions!"
HEALTH_OK = "OK"
