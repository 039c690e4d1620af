"""
Application configuration using Pydantic Settings.
Loads from environment variables and .env file.
"""

from functools import lru_cache
from typing import Optional

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
    app_name: str = "Vacation Manager API"
    debug: bool = False
    port: int = 8080
    log_level: str = "INFO"
    api_prefix: str = "/api/v1"

    # Database
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "vacation_manager"
    db_user: str = "vacation_manager"
    db_password: str = ""
    database_url: Optional[str] = None

    # Connection pool settings
    db_pool_size: int = 10
    db_pool_max_overflow: int = 10
    db_pool_timeout: int = 30
    # Create missing tables on startup (development convenience)
    db_auto_create: bool = False

    # Identity headers forwarded by the upstream identity provider / gateway.
    # The token itself is validated before the request reaches us.
    identity_object_id_header: str = "X-MS-CLIENT-PRINCIPAL-ID"
    identity_email_header: str = "X-MS-CLIENT-PRINCIPAL-EMAIL"
    identity_name_header: str = "X-MS-CLIENT-PRINCIPAL-NAME"

    # CORS (SPA dev server)
    cors_origins: list[str] = ["http://localhost:4200"]

    @property
    def async_database_url(self) -> str:
        """Build async database URL for SQLAlchemy."""
        if self.database_url:
            # Convert standard postgres:// to postgresql+asyncpg://
            url = self.database_url
            if url.startswith("postgres://"):
                url = url.replace("postgres://", "postgresql+asyncpg://", 1)
            elif url.startswith("postgresql://"):
                url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
            return url

        return (
            f"postgresql+asyncpg://{self.db_user}:{self.db_password}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}"
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
