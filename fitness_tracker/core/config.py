"""
Application configuration.
Values loaded from environment variables or a local .env file.
"""
from typing import List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Report labels: en or ru
    REPORT_LOCALE: str = "en"

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: str = "console"  # json or console

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
