"""
Application settings.
Loaded from environment variables and an optional .env file.
"""

from functools import lru_cache
from typing import List, Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings. Business constants live in core.constants."""

    # ======================
    # Application
    # ======================
    APP_ENV: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    API_HOST: str = "127.0.0.1"
    API_PORT: int = 5000
    CORS_ORIGINS: str = "http://localhost:5173,http://127.0.0.1:5173"

    # ======================
    # Lead storage
    # ======================
    LEAD_STORE: Literal["none", "memory", "sqlite", "supabase"] = "none"
    SQLITE_PATH: str = "leads.db"
    SUPABASE_URL: Optional[str] = None
    SUPABASE_ANON_KEY: Optional[str] = None
    SUPABASE_TABLE: str = "calculations"
    SUPABASE_TIMEOUT_SECONDS: float = 10.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="MILLION_",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
