"""Application configuration via environment variables."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from .env or environment."""

    DATABASE_URL: str = "sqlite:///./eventhub.db"
    STORAGE_BACKEND: str = "sql"  # sql | memory
    CALENDAR_TIMEZONE: str = "UTC"  # IANA tz in which form dates are stored
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "http://localhost:5173"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
