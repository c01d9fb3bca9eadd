"""Tinyblog configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tinyblog.domain.errors import ConfigurationError


class DatabaseConfig(BaseModel):
    """Connection parameters for one environment."""

    environment: str
    url: str
    echo: bool = False
    pool_size: int | None = None
    max_overflow: int | None = None


# Recognized environments and their connection defaults.
# Production has no default URL and must set DATABASE_URL.
DATABASE_CONFIGS: dict[str, DatabaseConfig] = {
    "development": DatabaseConfig(
        environment="development",
        url="sqlite+aiosqlite:///db/development.sqlite3",
        echo=True,
    ),
    "test": DatabaseConfig(
        environment="test",
        url="sqlite+aiosqlite:///db/test.sqlite3",
    ),
    "production": DatabaseConfig(
        environment="production",
        url="",
        pool_size=5,
        max_overflow=10,
    ),
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Environment
    environment: str = "development"

    # Database (empty means use the environment default)
    database_url: str = ""
    database_echo: bool | None = None

    # API key for write endpoints (empty disables auth)
    api_key: str = ""

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        """Accept level names in any case."""
        return value.upper() if isinstance(value, str) else value

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def database_config(self) -> DatabaseConfig:
        """Resolve the database config for the current environment.

        Raises:
            ConfigurationError: If no URL can be determined
        """
        base = DATABASE_CONFIGS.get(self.environment)
        if base is None:
            if not self.database_url:
                raise ConfigurationError(
                    f"Unknown environment '{self.environment}' and DATABASE_URL is not set"
                )
            base = DatabaseConfig(environment=self.environment, url=self.database_url)

        updates: dict = {}
        if self.database_url:
            updates["url"] = self.database_url
        if self.database_echo is not None:
            updates["echo"] = self.database_echo
        config = base.model_copy(update=updates)

        if not config.url:
            raise ConfigurationError(
                f"DATABASE_URL must be set for the '{self.environment}' environment"
            )
        return config


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
