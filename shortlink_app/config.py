from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """

    # Environment: "local" (text logs), "dev" or "prod" (JSON logs)
    environment: str = "local"
    debug: bool = False
    log_level: Optional[str] = None  # Overrides the per-environment default

    # Application
    app_name: str = "Shortlink"
    app_version: str = "1.0.0"

    # Server
    host: str = "127.0.0.1"
    port: int = 8082
    idle_timeout: int = 60  # seconds
    shutdown_timeout: int = 10  # Grace period for in-flight requests

    # Storage
    storage_backend: str = "sqlalchemy"  # Options: "sqlalchemy", "memory"
    database_url: str = "sqlite:///./storage.db"

    # Alias generation
    alias_length: int = 6
    alias_max_length: int = 32  # Upper bound for custom aliases
    max_retries: int = 5  # Attempts before giving up on generated aliases

    # Cache settings
    cache_backend: str = "memory"  # Options: "redis", "memory", "null"
    redis_url: str = "redis://localhost:6379/0"
    cache_ttl: int = 3600  # Cache TTL in seconds (1 hour)
    cache_max_entries: int = 10000  # Bound for the in-memory backend

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
