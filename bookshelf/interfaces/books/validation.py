"""
Book payload validation.

Turns untrusted request data into a Book entity, or raises
BookValidationError listing one Violation per broken field.
Pure function: no IO, same input always gives the same result.
"""

from typing import Any

from pydantic import ValidationError

from bookshelf.domain.books.entities import Book, Violation
from bookshelf.domain.books.errors import BookValidationError
from bookshelf.interfaces.books.schemas import BookSchema

BODY_FIELD = "body"


def violation_from_error(error: dict[str, Any]) -> Violation:
    """Map one pydantic error entry to a domain Violation."""
    loc = error.get("loc") or ()
    field = str(loc[0]) if loc else BODY_FIELD
    if error.get("type") == "value_error":
        # Raised by our own validators; keep their wording without the prefix.
        message = str(error.get("ctx", {}).get("error", error["msg"]))
    else:
        message = error["msg"]
    return Violation(field=field, message=message)


def validate_book(payload: Any) -> Book:
    """Validate a request payload and build the Book it describes.

    Violations are reported in schema field order, one per broken field.

    Args:
        payload: Decoded JSON body. Unknown keys are ignored.

    Returns:
        The validated Book.

    Raises:
        BookValidationError: If the payload is not an object, or any field
            is missing, mistyped or out of range.
    """
    if not isinstance(payload, dict):
        raise BookValidationError(
            [Violation(field=BODY_FIELD, message="Book data must be a JSON object")]
        )
    try:
        schema = BookSchema.model_validate(payload)
    except ValidationError as exc:
        raise BookValidationError(
            [violation_from_error(err) for err in exc.errors()]
        ) from None
    return Book(**schema.model_dump())
