"""Application configuration from environment variables."""

from functools import lru_cache
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "Plates API"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # API
    api_v1_prefix: str = "/api/v1"

    # Database (hosted PostgreSQL)
    database_host: str = "localhost"
    database_port: int = 5432
    database_user: str = "postgres"
    database_password: str = ""  # Set in .env - never commit
    database_name: str = "plates"
    database_ssl_mode: str = "require"
    # Full async URL override (e.g. sqlite+aiosqlite:///./plates.db for local runs)
    database_url_override: str = ""

    # Pool (production tuning)
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # CORS: comma-separated list of allowed origins in production
    cors_origins: str = ""

    # Identity provider tokens (HS256 shared secret)
    auth_jwt_secret: str = ""
    auth_jwt_algorithm: str = "HS256"
    auth_jwt_audience: str = "authenticated"

    @property
    def async_database_url(self) -> str:
        """asyncpg URL built from the database_* fields, unless overridden.

        asyncpg takes the libpq mode names (disable, prefer, require, verify-full) as ``ssl=``.
        """
        if self.database_url_override:
            return self.database_url_override
        user = quote_plus(self.database_user)
        password = quote_plus(self.database_password)
        return (
            f"postgresql+asyncpg://{user}:{password}@{self.database_host}:{self.database_port}"
            f"/{self.database_name}?ssl={self.database_ssl_mode}"
        )


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
