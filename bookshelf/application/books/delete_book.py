"""
Use case: Remove a book from the catalog.

Input: DeleteBookCommand (isbn)
Output: None
Side effects: Deletes one row.
Failure cases: BookNotFoundError.
"""

import logging

from bookshelf.application.books.dtos import DeleteBookCommand
from bookshelf.domain.books.ports import BookRepository

logger = logging.getLogger(__name__)


class DeleteBookUseCase:
    """Orchestrates deleting a book."""

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    async def execute(self, command: DeleteBookCommand) -> None:
        """Delete the book or raise BookNotFoundError."""
        logger.info("Deleting book isbn=%s", command.isbn)
        await self._book_repo.remove(command.isbn)
