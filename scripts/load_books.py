#!/usr/bin/env python3
"""
CLI tool: Load books from a JSON file into the catalog.

Reads a JSON array of book objects, validates each one with the same
rules as the API and inserts it. Invalid records and ISBNs that are
already present are reported and skipped.

Usage:
    python scripts/load_books.py books.json [--log-level=INFO]
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from bookshelf.application.books.create_book import CreateBookUseCase
from bookshelf.application.books.dtos import CreateBookCommand
from bookshelf.core.config import settings
from bookshelf.domain.books.errors import BookConflictError, BookValidationError
from bookshelf.infrastructure.books.book_repository import BookRepositoryAdapter
from bookshelf.infrastructure.database import build_engine, create_tables
from bookshelf.interfaces.books.validation import validate_book
from bookshelf.shared.logging import configure_logging

logger = logging.getLogger(__name__)


async def load_books(records: list, use_case: CreateBookUseCase) -> tuple[int, int]:
    """Insert every valid record; return (loaded, failed) counts."""
    loaded = 0
    failed = 0
    for index, record in enumerate(records):
        try:
            book = validate_book(record)
            await use_case.execute(CreateBookCommand(book=book))
        except BookValidationError as exc:
            failed += 1
            for v in exc.violations:
                logger.warning("Record %d: %s %s", index, v.field, v.message)
        except BookConflictError as exc:
            failed += 1
            logger.warning("Record %d: %s", index, exc.message)
        else:
            loaded += 1
    return loaded, failed


async def run(path: Path) -> int:
    records = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(records, list):
        logger.error("%s must contain a JSON array of books", path)
        return 1

    engine = build_engine(settings.get_database_url(), echo=settings.database_echo)
    try:
        if settings.create_tables:
            await create_tables(engine)
        use_case = CreateBookUseCase(book_repo=BookRepositoryAdapter(engine))
        loaded, failed = await load_books(records, use_case)
    finally:
        await engine.dispose()

    logger.info("Loaded %d book(s), skipped %d", loaded, failed)
    return 1 if failed else 0


def main():
    """Load books from the given JSON file."""
    parser = argparse.ArgumentParser(description="Load books into the catalog")
    parser.add_argument("file", type=Path, help="JSON file holding an array of books")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args()

    configure_logging(level=args.log_level, sql_echo=settings.database_echo)
    return asyncio.run(run(args.file))


if __name__ == "__main__":
    sys.exit(main())
