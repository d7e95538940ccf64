"""
Tests for application settings.

Covers how the effective database URL is chosen per environment.
"""

from bookshelf.core.config import Settings


def _settings(**overrides) -> Settings:
    base = {"database_url": None, "test_database_url": None}
    return Settings(_env_file=None, **{**base, **overrides})


class TestDatabaseUrl:
    """Tests for Settings.get_database_url."""

    def test_builds_asyncpg_url_from_parts(self) -> None:
        settings = _settings(
            environment="production",
            postgres_user="books",
            postgres_password="secret",
            postgres_host="db",
            postgres_port=5433,
            postgres_db="catalog",
        )
        assert settings.get_database_url() == (
            "postgresql+asyncpg://books:secret@db:5433/catalog"
        )

    def test_test_environment_uses_test_database(self) -> None:
        settings = _settings(environment="test", postgres_test_db="catalog_test")
        assert settings.get_database_url().endswith("/catalog_test")
        assert settings.is_test

    def test_explicit_url_wins(self) -> None:
        settings = _settings(
            environment="development", database_url="sqlite+aiosqlite:///books.db"
        )
        assert settings.get_database_url() == "sqlite+aiosqlite:///books.db"

    def test_explicit_test_url_only_used_in_test(self) -> None:
        url = "sqlite+aiosqlite://"
        assert _settings(environment="test", test_database_url=url).get_database_url() == url
        assert _settings(
            environment="development", test_database_url=url
        ).get_database_url().startswith("postgresql+asyncpg://")
