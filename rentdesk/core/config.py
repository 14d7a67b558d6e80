"""
Rentdesk Application Configuration
Loads settings from .env file using Pydantic v2 with BaseSettings
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # ==================== Project Info ====================
    PROJECT_NAME: str = "Rentdesk API"
    PROJECT_DESCRIPTION: str = "Rental Property Dashboard - properties, tenants, leases, payments and maintenance"
    VERSION: str = "1.0.0"

    # ==================== Database ====================
    DATABASE_URL: str = "sqlite:///rental.db"
    ENFORCE_FOREIGN_KEYS: bool = True
    SEED_ON_STARTUP: bool = True
    RUN_MIGRATIONS: bool = False

    # ==================== Frontend ====================
    STATIC_DIR: str = "dist"
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
    ]

    # ==================== Server Configuration ====================
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    RELOAD: bool = False

    # ==================== Features ====================
    DEBUG: bool = False

    # ==================== Logging ====================
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
