"""
Shared fixtures.

Every test gets its own in-memory SQLite store: a fresh engine and
a fresh books table, disposed at the end of the test. No state is
shared between tests.
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from bookshelf.core.config import Settings
from bookshelf.domain.books.entities import Book
from bookshelf.infrastructure.books.book_repository import BookRepositoryAdapter
from bookshelf.infrastructure.database import build_engine, create_tables
from bookshelf.main import create_app
from tests.book_data import NEW_BOOK_DATA, SEED_BOOK_DATA

IN_MEMORY_URL = "sqlite+aiosqlite://"


@pytest.fixture
def seed_book() -> Book:
    return Book(**SEED_BOOK_DATA)


@pytest.fixture
def new_book() -> Book:
    return Book(**NEW_BOOK_DATA)


@pytest_asyncio.fixture
async def engine():
    """An isolated in-memory store with the books table created."""
    engine = build_engine(IN_MEMORY_URL)
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def repo(engine) -> BookRepositoryAdapter:
    return BookRepositoryAdapter(engine)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        environment="test",
        test_database_url=IN_MEMORY_URL,
        rate_limit_enabled=False,
        log_level="WARNING",
    )


@pytest.fixture
def client(test_settings: Settings, seed_book: Book):
    """A running app on its own in-memory store, seeded with one book."""
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        seed_repo = BookRepositoryAdapter(app.state.engine)
        test_client.portal.call(seed_repo.create, seed_book)
        yield test_client
