"""
Centralized configuration for the ProfileDesk backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., JWT_*, SUPABASE_*).
"""

from functools import lru_cache
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "ProfileDesk API"
    app_version: str = "0.1.0"
    environment: Literal["development", "test", "production"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:3002"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["GET", "POST", "PUT", "DELETE"]
    cors_allow_headers: list[str] = ["Content-Type", "Authorization"]

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    supabase_db_url: str = ""  # direct Postgres URL, used by run_migrations.py

    # Session tokens
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    token_ttl_hours: int = 24

    # Password hashing
    bcrypt_rounds: int = 10

    @property
    def expose_error_details(self) -> bool:
        """Whether error responses may carry diagnostic detail."""
        return self.environment != "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
