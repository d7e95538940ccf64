"""
Use case: Look up a single book by ISBN.

Input: GetBookQuery (isbn)
Output: Book
Side effects: None (read-only query).
Failure cases: BookNotFoundError.
"""

from bookshelf.application.books.dtos import GetBookQuery
from bookshelf.domain.books.entities import Book
from bookshelf.domain.books.ports import BookRepository


class GetBookUseCase:
    """Read-only query for one book."""

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    async def execute(self, query: GetBookQuery) -> Book:
        """Return the requested book or raise BookNotFoundError."""
        return await self._book_repo.get(query.isbn)
