"""
Adapter: Book persistence.

Implements BookRepository port.
Reads and writes the books table through a pooled async engine.
"""

import logging

from sqlalchemy import text
from sqlalchemy.engine import Row
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from bookshelf.domain.books.entities import Book
from bookshelf.domain.books.errors import (
    BookConflictError,
    BookNotFoundError,
    BookStorageError,
)
from bookshelf.domain.books.ports import BookRepository

logger = logging.getLogger(__name__)

BOOK_COLUMNS = "isbn, amazon_url, author, language, pages, publisher, title, year"


def _row_to_book(row: Row) -> Book:
    """Map a books row to a Book entity."""
    return Book(
        isbn=row.isbn,
        amazon_url=row.amazon_url,
        author=row.author,
        language=row.language,
        pages=row.pages,
        publisher=row.publisher,
        title=row.title,
        year=row.year,
    )


class BookRepositoryAdapter(BookRepository):
    """Stores books in a relational table keyed by ISBN.

    Implements the BookRepository port defined in the domain layer.
    Each method runs exactly one statement inside its own transaction.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine

    async def create(self, book: Book) -> Book:
        """Insert a new book row.

        Args:
            book: Validated book to store.

        Returns:
            The stored book as read back from the database.

        Raises:
            BookConflictError: If the ISBN is already present.
            BookStorageError: If the store fails for any other reason.
        """
        query = text(
            f"""
            INSERT INTO books ({BOOK_COLUMNS})
            VALUES (:isbn, :amazon_url, :author, :language,
                    :pages, :publisher, :title, :year)
            RETURNING {BOOK_COLUMNS}
            """
        )

        try:
            async with self._engine.begin() as conn:
                row = (await conn.execute(query, book.to_dict())).one()
        except IntegrityError as exc:
            logger.info("Duplicate isbn rejected: %s", book.isbn)
            raise BookConflictError(book.isbn) from exc
        except SQLAlchemyError as exc:
            raise BookStorageError(type(exc).__name__) from exc

        logger.info("Created book isbn=%s", book.isbn)
        return _row_to_book(row)

    async def list(self) -> list[Book]:
        """Return every book ordered by title, then ISBN."""
        query = text(f"SELECT {BOOK_COLUMNS} FROM books ORDER BY title, isbn")

        try:
            async with self._engine.connect() as conn:
                rows = (await conn.execute(query)).fetchall()
        except SQLAlchemyError as exc:
            raise BookStorageError(type(exc).__name__) from exc

        return [_row_to_book(row) for row in rows]

    async def get(self, isbn: str) -> Book:
        """Return the book with the given ISBN.

        Raises:
            BookNotFoundError: If no row matches.
            BookStorageError: If the store fails.
        """
        query = text(f"SELECT {BOOK_COLUMNS} FROM books WHERE isbn = :isbn")

        try:
            async with self._engine.connect() as conn:
                row = (await conn.execute(query, {"isbn": isbn})).first()
        except SQLAlchemyError as exc:
            raise BookStorageError(type(exc).__name__) from exc

        if row is None:
            raise BookNotFoundError(isbn)
        return _row_to_book(row)

    async def update(self, isbn: str, book: Book) -> Book:
        """Replace every non-key column of an existing book.

        The ISBN in the WHERE clause comes from the caller, never from
        the payload, so the key itself cannot change.

        Raises:
            BookNotFoundError: If no row matches.
            BookStorageError: If the store fails.
        """
        query = text(
            f"""
            UPDATE books
            SET amazon_url = :amazon_url,
                author = :author,
                language = :language,
                pages = :pages,
                publisher = :publisher,
                title = :title,
                year = :year
            WHERE isbn = :isbn
            RETURNING {BOOK_COLUMNS}
            """
        )
        params = {**book.to_dict(), "isbn": isbn}

        try:
            async with self._engine.begin() as conn:
                row = (await conn.execute(query, params)).first()
        except SQLAlchemyError as exc:
            raise BookStorageError(type(exc).__name__) from exc

        if row is None:
            raise BookNotFoundError(isbn)
        logger.info("Updated book isbn=%s", isbn)
        return _row_to_book(row)

    async def remove(self, isbn: str) -> None:
        """Delete the book with the given ISBN.

        Raises:
            BookNotFoundError: If no row matches.
            BookStorageError: If the store fails.
        """
        query = text("DELETE FROM books WHERE isbn = :isbn RETURNING isbn")

        try:
            async with self._engine.begin() as conn:
                row = (await conn.execute(query, {"isbn": isbn})).first()
        except SQLAlchemyError as exc:
            raise BookStorageError(type(exc).__name__) from exc

        if row is None:
            raise BookNotFoundError(isbn)
        logger.info("Deleted book isbn=%s", isbn)
