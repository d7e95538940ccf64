"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses share one envelope: {"error": {"message", "status"}},
plus "violations" for validation failures.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookshelf.domain.books.entities import Violation
from bookshelf.domain.books.errors import (
    BookConflictError,
    BookDomainError,
    BookNotFoundError,
    BookStorageError,
    BookValidationError,
)
from bookshelf.interfaces.books.validation import violation_from_error
from bookshelf.shared.security.headers import SECURE_HEADERS

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500

INVALID_BOOK_MESSAGE = "Invalid book data"
INTERNAL_ERROR_MESSAGE = "Internal server error"


def _error_response(
    status_code: int,
    message: str,
    violations: list[Violation] | None = None,
) -> JSONResponse:
    """Build a consistent JSON error response.

    Carries the secure headers itself: the catch-all handler runs outside
    SecurityHeadersMiddleware.
    """
    error: dict = {"message": message, "status": status_code}
    if violations is not None:
        error["violations"] = [
            {"field": v.field, "message": v.message} for v in violations
        ]
    return JSONResponse(
        status_code=status_code, content={"error": error}, headers=SECURE_HEADERS
    )


def _request_violations(exc: RequestValidationError) -> list[Violation]:
    """Turn FastAPI's body parsing errors into violations.

    Locations look like ("body", <field>, ...); the leading "body" is dropped
    so that a missing or unparsable body reports the "body" field itself.
    """
    violations = []
    for err in exc.errors():
        loc = tuple(err.get("loc") or ())
        if loc and loc[0] == "body":
            loc = loc[1:]
        if loc and not isinstance(loc[0], str):
            # JSON decode errors point at a character offset, not a field.
            loc = ()
        violations.append(violation_from_error({**err, "loc": loc}))
    return violations


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(BookValidationError)
    async def handle_book_validation(
        _request: Request, exc: BookValidationError
    ) -> JSONResponse:
        """Handle schema violations in book data."""
        logger.warning(
            "Book validation failed: %s", ", ".join(v.field for v in exc.violations)
        )
        return _error_response(HTTP_400, INVALID_BOOK_MESSAGE, exc.violations)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle bodies FastAPI could not even parse (bad JSON, no body)."""
        violations = _request_violations(exc)
        logger.warning("Request body rejected: %d error(s)", len(violations))
        return _error_response(HTTP_400, INVALID_BOOK_MESSAGE, violations)

    @app.exception_handler(BookNotFoundError)
    async def handle_book_not_found(
        _request: Request, exc: BookNotFoundError
    ) -> JSONResponse:
        """Handle lookups of an ISBN that has no row."""
        logger.warning("Book not found: %s", exc.isbn)
        return _error_response(HTTP_404, exc.message)

    @app.exception_handler(BookConflictError)
    async def handle_book_conflict(
        _request: Request, exc: BookConflictError
    ) -> JSONResponse:
        """Handle creation of an ISBN that already exists."""
        logger.warning("Duplicate book: %s", exc.isbn)
        return _error_response(HTTP_400, exc.message)

    @app.exception_handler(BookStorageError)
    async def handle_book_storage(
        _request: Request, exc: BookStorageError
    ) -> JSONResponse:
        """Handle store failures. The reason is logged, never returned."""
        logger.error("Book storage error: %s", exc.reason, exc_info=exc)
        return _error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(BookDomainError)
    async def handle_book_domain(
        _request: Request, exc: BookDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled books domain errors."""
        logger.error("Unhandled books domain error: %s", exc.message)
        return _error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Wrap routing errors (unknown path, wrong method) in the envelope."""
        response = _error_response(exc.status_code, str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, INTERNAL_ERROR_MESSAGE)
