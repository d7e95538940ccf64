"""
Check that the configured book store is reachable.

Prints the effective database URL (password hidden) and the result
of a trivial query.

Usage:
    python scripts/check_db_connect.py
"""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import sqlalchemy
from sqlalchemy.engine import make_url

from bookshelf.core.config import settings
from bookshelf.infrastructure.database import build_engine, ping


async def check() -> bool:
    url = settings.get_database_url()
    print("environment:", settings.environment)
    print("SQLAlchemy version:", sqlalchemy.__version__)
    print("database url:", make_url(url).render_as_string(hide_password=True))

    engine = build_engine(url)
    try:
        ok = await ping(engine)
    finally:
        await engine.dispose()
    print("connection:", "ok" if ok else "FAILED")
    return ok


if __name__ == "__main__":
    sys.exit(0 if asyncio.run(check()) else 1)
