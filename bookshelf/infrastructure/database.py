"""
Database engine lifecycle.

Builds the pooled async engine shared by every repository and
creates the schema when asked to. The engine is owned by the
application lifespan; nothing here holds global state.
"""

import logging

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from bookshelf.infrastructure.books.tables import metadata

logger = logging.getLogger(__name__)


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Build an async SQLAlchemy engine for the given URL.

    In-memory SQLite databases live inside a single connection, so they
    get a StaticPool to keep every checkout on that connection.

    Args:
        database_url: Async SQLAlchemy URL (postgresql+asyncpg, sqlite+aiosqlite).
        echo: Log every SQL statement.

    Returns:
        A configured AsyncEngine.
    """
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        return create_async_engine(
            url,
            echo=echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_async_engine(url, echo=echo, pool_pre_ping=True)


async def create_tables(engine: AsyncEngine) -> None:
    """Create every table known to the books metadata, if missing."""
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    logger.info("Database schema ready.")


async def ping(engine: AsyncEngine) -> bool:
    """Return True when the store answers a trivial query."""
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError):
        logger.warning("Database ping failed.", exc_info=True)
        return False
    return True
