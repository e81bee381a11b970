"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Portfolio API"
    VERSION: str = "0.1.0"
    DESCRIPTION: str = "Personal portfolio: projects, case studies, contact inbox and admin panel."

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    # Set DATABASE_URL directly (e.g. "sqlite:///./portfolio.db"), otherwise
    # it is composed from the PostgreSQL parts below.
    DATABASE_URL: str = ""
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "postgres"

    # Security
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    SESSION_TTL_DAYS: int = 7
    SESSION_COOKIE_NAME: str = "portfolio_session"
    SESSION_COOKIE_SECURE: bool = False

    # Default admin account, created on startup when missing
    ADMIN_EMAIL: str = "admin@portfolio.com"
    ADMIN_PASSWORD: str = "admin123"

    # Uploads
    UPLOAD_DIR: str = "uploads"
    UPLOAD_URL_PREFIX: str = "/uploads"
    MAX_UPLOAD_SIZE_BYTES: int = 10 * 1024 * 1024

    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3000"]

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @model_validator(mode="after")
    def _compose_database_url(self) -> "Settings":
        if not self.DATABASE_URL:
            self.DATABASE_URL = (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                                 f":{self.DATABASE_PORT}"
                                 f"/{self.DATABASE_DBNAME}")
        return self


# Global settings instance
settings = Settings()
