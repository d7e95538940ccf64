"""
Use case: List every book in the catalog.

Input: None
Output: list[Book]
Side effects: None (read-only query).
Failure cases: None.
"""

import logging

from bookshelf.domain.books.entities import Book
from bookshelf.domain.books.ports import BookRepository

logger = logging.getLogger(__name__)


class ListBooksUseCase:
    """Read-only query returning the whole catalog."""

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    async def execute(self) -> list[Book]:
        """Run the list books use case."""
        books = await self._book_repo.list()
        logger.debug("Listed %d books", len(books))
        return books
