"""
Application Configuration

Pydantic Settings for environment variable management.
"""
from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from hopper.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # App
    app_name: str = "Hopper Singers API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Spanner target (reached through PGAdapter)
    spanner_project_id: Optional[str] = None
    spanner_instance: Optional[str] = None
    spanner_database: Optional[str] = None
    pgadapter_host: str = "localhost"
    pgadapter_port: int = 5432

    # Explicit SQLAlchemy URL, overrides the Spanner coordinates
    database_url: Optional[str] = None

    # Where CreatedAt/UpdatedAt values come from
    commit_timestamp: Literal["spanner", "server", "client"] = "spanner"

    # Create the Singers table at startup (local PostgreSQL / emulator only)
    auto_create_tables: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def database_path(self) -> str:
        """Fully qualified Spanner database name"""
        missing = [
            name for name, value in (
                ("SPANNER_PROJECT_ID", self.spanner_project_id),
                ("SPANNER_INSTANCE", self.spanner_instance),
                ("SPANNER_DATABASE", self.spanner_database),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"{', '.join(missing)} environment variable must be set"
            )
        return (
            f"projects/{self.spanner_project_id}"
            f"/instances/{self.spanner_instance}"
            f"/databases/{self.spanner_database}"
        )

    @property
    def sqlalchemy_url(self) -> str:
        """SQLAlchemy URL for the configured database"""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.pgadapter_host}:{self.pgadapter_port}"
            f"/{self.database_path}"
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
