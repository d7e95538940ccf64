"""
Use case: Add a book to the catalog.

Input: CreateBookCommand (validated book)
Output: Book
Side effects: Inserts one row.
Failure cases: BookConflictError.
"""

import logging

from bookshelf.application.books.dtos import CreateBookCommand
from bookshelf.domain.books.entities import Book
from bookshelf.domain.books.ports import BookRepository

logger = logging.getLogger(__name__)


class CreateBookUseCase:
    """Orchestrates storing a new book."""

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    async def execute(self, command: CreateBookCommand) -> Book:
        """Run the create book use case.

        Args:
            command: Command carrying the already validated book.

        Returns:
            The stored book.

        Raises:
            BookConflictError: If the ISBN is already in the catalog.
        """
        logger.info("Creating book isbn=%s", command.book.isbn)
        return await self._book_repo.create(command.book)
