"""
Application configuration.
Environment-driven settings via pydantic-settings; a .env file is honoured.
"""
from functools import lru_cache
from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )

    # Database
    MONGO_URI: str = "mongodb://127.0.0.1:27017/employee"
    DB_NAME: str = "employee"
    MONGO_TIMEOUT_MS: int = 5000

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    API_PREFIX: str = "/api/employee/v1"

    # CORS: comma-separated origins, or "*" for allow-all
    CORS_ORIGINS: str = "*"

    # Validation
    PHONE_REGION: str = "IN"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"
    LOG_FILE: Optional[str] = None

    # 500 responses carry the underlying exception message when enabled
    EXPOSE_ERROR_DETAILS: bool = True

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Only text and json formatters exist."""
        v = v.lower()
        if v not in ("text", "json"):
            raise ValueError("LOG_FORMAT must be 'text' or 'json'")
        return v

    @field_validator("PHONE_REGION")
    @classmethod
    def normalize_region(cls, v: str) -> str:
        return v.strip().upper()

    def cors_origins_list(self) -> List[str]:
        if not self.CORS_ORIGINS or self.CORS_ORIGINS.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
