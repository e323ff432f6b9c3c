"""Configuration settings for Site Service"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Service Info
    service_name: str = "site-service"
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    api_prefix: str = "/api"

    # Persistence
    repository_backend: str = "sql"  # "sql" or "memory"
    database_url: str = "sqlite+aiosqlite:///./sites.db"
    db_pool_size: int = 10
    db_max_overflow: int = 20
    db_echo: bool = False

    # Slugs
    max_slug_attempts: int = 100

    # Surfaces
    graphql_enabled: bool = True
    graphiql: bool = True
    enable_metrics: bool = True

    # CORS
    cors_origins: list[str] = ["*"]


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get settings instance (singleton)"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
