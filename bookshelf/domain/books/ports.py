"""
Port interfaces (ABCs) for the books bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from bookshelf.domain.books.entities import Book


class BookRepository(ABC):
    """Port for persisting and retrieving books by ISBN.

    Every method is a single atomic store operation. Nothing is
    retried; callers decide what to do with a failure.
    """

    @abstractmethod
    async def create(self, book: Book) -> Book:
        """Insert a new book.

        Raises:
            BookConflictError: If a book with the same ISBN exists.
        """
        raise NotImplementedError

    @abstractmethod
    async def list(self) -> list[Book]:
        """Return every stored book, in a stable order."""
        raise NotImplementedError

    @abstractmethod
    async def get(self, isbn: str) -> Book:
        """Return the book with the given ISBN.

        Raises:
            BookNotFoundError: If no such book exists.
        """
        raise NotImplementedError

    @abstractmethod
    async def update(self, isbn: str, book: Book) -> Book:
        """Replace every non-key field of an existing book.

        Raises:
            BookNotFoundError: If no such book exists.
        """
        raise NotImplementedError

    @abstractmethod
    async def remove(self, isbn: str) -> None:
        """Delete the book with the given ISBN.

        Raises:
            BookNotFoundError: If no such book exists.
        """
        raise NotImplementedError
