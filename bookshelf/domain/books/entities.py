"""
Domain entities for the books bounded context.

Entities represent core business objects.
They contain no framework imports and no IO operations.
"""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Book:
    """A catalog book, identified by its ISBN.

    The ISBN is the primary key and never changes once the
    book is created. Every other field is replaced on update.
    """

    isbn: str
    amazon_url: str
    author: str
    language: str
    pages: int
    publisher: str
    title: str
    year: int

    def to_dict(self) -> dict:
        """Return the book as a plain dict keyed by column name."""
        return asdict(self)


@dataclass(frozen=True)
class Violation:
    """A single field-level validation failure.

    Attributes:
        field: Top-level payload key that failed, or "body" when the
            payload itself is not an object.
        message: Human readable reason.
    """

    field: str
    message: str
