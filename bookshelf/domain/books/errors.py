"""
Domain-specific errors for the books bounded context.

All errors raised from the domain, application and infrastructure
layers for books are defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from bookshelf.domain.books.entities import Violation


class BookDomainError(Exception):
    """Base error for all books domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class BookValidationError(BookDomainError):
    """Raised when book data fails schema validation."""

    def __init__(self, violations: list[Violation]) -> None:
        fields = ", ".join(v.field for v in violations)
        super().__init__(f"Invalid book data: {fields}")
        self.violations = list(violations)


class BookNotFoundError(BookDomainError):
    """Raised when no book exists for the requested ISBN."""

    def __init__(self, isbn: str) -> None:
        # Matches the wording clients already rely on, unbalanced quote included.
        super().__init__(f"There is no book with an isbn '{isbn}")
        self.isbn = isbn


class BookConflictError(BookDomainError):
    """Raised when creating a book whose ISBN is already taken."""

    def __init__(self, isbn: str) -> None:
        super().__init__(f"A book with isbn '{isbn}' already exists")
        self.isbn = isbn


class BookStorageError(BookDomainError):
    """Raised when the book store fails for a reason other than the data."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Book storage failed: {reason}")
        self.reason = reason
