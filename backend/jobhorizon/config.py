"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - environment == "production" is the only switch for cookie security attributes
"""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://jobhorizon:jobhorizon@db:5432/jobhorizon"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Identity token
    access_token_secret: str = "jobhorizon-placeholder-secret-change-me-in-env"
    token_algorithm: str = "HS256"
    token_cookie_name: str = "token"
    token_ttl_seconds: int | None = None

    # Deployment
    environment: Literal["development", "production"] = "development"
    host: str = "0.0.0.0"
    port: int = 5000

    # API
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:5174",
    ]
    job_delete_requires_owner: bool = False

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()
