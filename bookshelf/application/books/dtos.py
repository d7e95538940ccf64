"""
Data Transfer Objects for the books application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass

from bookshelf.domain.books.entities import Book


@dataclass(frozen=True)
class CreateBookCommand:
    """Input DTO for adding a book to the catalog.

    Attributes:
        book: The validated book to store.
    """

    book: Book


@dataclass(frozen=True)
class GetBookQuery:
    """Input DTO for looking up a single book.

    Attributes:
        isbn: ISBN taken from the request path.
    """

    isbn: str


@dataclass(frozen=True)
class UpdateBookCommand:
    """Input DTO for replacing a book's data.

    Attributes:
        isbn: ISBN taken from the request path; identifies the row.
        book: The validated replacement data, including its own isbn.
    """

    isbn: str
    book: Book


@dataclass(frozen=True)
class DeleteBookCommand:
    """Input DTO for removing a book.

    Attributes:
        isbn: ISBN taken from the request path.
    """

    isbn: str
