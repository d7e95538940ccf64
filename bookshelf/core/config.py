"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

TEST_ENVIRONMENT = "test"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (serves OpenAPI docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        environment: Deployment environment (development, test, production).
            "test" selects the test database.
        database_echo: Echo every SQL statement to the log.
        create_tables: Create the books table on startup if it is missing.
        rate_limit_enabled: Apply the default per-client rate limit.
        rate_limit_default: Default rate limit for all endpoints.
        host: Interface uvicorn binds to when run as a module.
        port: Port uvicorn binds to when run as a module.

    Database settings accept either a full SQLAlchemy URL or the individual
    postgres_* parts, the same way for the main and the test database.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "Bookshelf"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    environment: str = "development"

    database_url: Optional[str] = None
    test_database_url: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "books"
    postgres_test_db: str = "books_test"
    database_echo: bool = False
    create_tables: bool = True

    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    host: str = "0.0.0.0"
    port: int = 8000

    @property
    def is_test(self) -> bool:
        """Whether the application runs against the test database."""
        return self.environment.lower() == TEST_ENVIRONMENT

    def get_database_url(self) -> str:
        """Return the effective async SQLAlchemy URL for the book store.

        Priority:
        1. Explicit `TEST_DATABASE_URL` / `DATABASE_URL` for the active environment
        2. Build an asyncpg URL from postgres_* values (useful for Docker Compose)
        """
        explicit = self.test_database_url if self.is_test else self.database_url
        if explicit:
            return explicit
        db_name = self.postgres_test_db if self.is_test else self.postgres_db
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{db_name}"
        )


settings = Settings()
