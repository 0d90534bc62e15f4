# app/core/config.py
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from the environment or a local .env file."""

    # MongoDB
    MONGO_URL: str = "mongodb://localhost:27017"
    DB_NAME: str = "turfbooking"
    MONGO_TLS: bool = False

    # JWT
    ACCESS_TOKEN_SECRET: str = "change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # HTTP
    PORT: int = 8000
    CORS_ORIGINS: List[str] = ["http://localhost:5173"]

    # Periodic jobs
    SCHEDULER_ENABLED: bool = True
    SCHEDULER_TIMEZONE: str = "Asia/Kolkata"
    RECONCILE_EVERY_MINUTES: int = Field(default=5, ge=1, le=59)
    HEALTH_CHECK_EVERY_MINUTES: int = Field(default=5, ge=1, le=59)
    HEALTH_CHECK_URL: Optional[str] = None
    HEALTH_CHECK_TIMEOUT_SECONDS: float = 5.0
    SLOT_DURATION_MINUTES: int = 60

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
