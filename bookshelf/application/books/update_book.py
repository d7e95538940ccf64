"""
Use case: Replace the data of an existing book.

Input: UpdateBookCommand (path isbn, validated book)
Output: Book
Side effects: Updates one row.
Failure cases: BookValidationError (isbn mismatch), BookNotFoundError.
"""

import logging

from bookshelf.application.books.dtos import UpdateBookCommand
from bookshelf.domain.books.entities import Book, Violation
from bookshelf.domain.books.errors import BookValidationError
from bookshelf.domain.books.ports import BookRepository

logger = logging.getLogger(__name__)


class UpdateBookUseCase:
    """Orchestrates a full replacement of a book's fields.

    The ISBN is immutable: the body may repeat it but must not
    change it.
    """

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    async def execute(self, command: UpdateBookCommand) -> Book:
        """Run the update book use case.

        Args:
            command: Path ISBN plus the validated replacement book.

        Returns:
            The book as stored after the update.

        Raises:
            BookValidationError: If the body ISBN differs from the path ISBN.
            BookNotFoundError: If no book has the path ISBN.
        """
        if command.book.isbn != command.isbn:
            raise BookValidationError(
                [
                    Violation(
                        field="isbn",
                        message=f"must match the isbn in the URL ('{command.isbn}')",
                    )
                ]
            )

        logger.info("Updating book isbn=%s", command.isbn)
        return await self._book_repo.update(command.isbn, command.book)
