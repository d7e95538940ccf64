"""
Pydantic schemas for books API request/response validation.

These schemas define the API contract. BookSchema is the single
description of what a valid book looks like; the validator consumes
it so that every write route enforces the same rules.
No business logic belongs here.
"""

from typing import Annotated

from pydantic import (
    AfterValidator,
    AnyHttpUrl,
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    TypeAdapter,
    ValidationError,
)

_HTTP_URL = TypeAdapter(AnyHttpUrl)

# Upper bounds keep values inside a 32-bit INTEGER column.
MAX_PAGES = 2_147_483_647
MAX_YEAR = 9999


def _storable(value: str) -> str:
    if "\x00" in value:
        raise ValueError("must not contain NUL characters")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise ValueError("must be valid UTF-8 text") from None
    return value


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


def _absolute_url(value: str) -> str:
    try:
        _HTTP_URL.validate_python(value)
    except ValidationError:
        raise ValueError("must be an absolute http(s) URL") from None
    # Stored as sent; the parsed form may add a trailing slash.
    return value


NonBlankStr = Annotated[str, AfterValidator(_storable), AfterValidator(_not_blank)]
HttpUrlStr = Annotated[str, AfterValidator(_storable), AfterValidator(_absolute_url)]


class BookSchema(BaseModel):
    """Schema every incoming book must satisfy.

    Attributes:
        isbn: Primary key; any non-blank string.
        amazon_url: Absolute http(s) URL.
        author: Non-blank author name.
        language: Non-blank language name.
        pages: Positive integer (at most MAX_PAGES). Numeric strings are rejected.
        publisher: Non-blank publisher name.
        title: Non-blank title.
        year: Positive integer, at most MAX_YEAR. Numeric strings are rejected.

    Unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    isbn: NonBlankStr
    amazon_url: HttpUrlStr
    author: NonBlankStr
    language: NonBlankStr
    pages: StrictInt = Field(..., gt=0, le=MAX_PAGES)
    publisher: NonBlankStr
    title: NonBlankStr
    year: StrictInt = Field(..., gt=0, le=MAX_YEAR)


class BookItem(BaseModel):
    """A single book in a response."""

    isbn: str
    amazon_url: str
    author: str
    language: str
    pages: int
    publisher: str
    title: str
    year: int


class BookResponse(BaseModel):
    """Envelope for a single book."""

    book: BookItem


class BookListResponse(BaseModel):
    """Envelope for the whole catalog."""

    books: list[BookItem]


class MessageResponse(BaseModel):
    """Envelope for operations that return only a message."""

    message: str


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    database: str


class ViolationItem(BaseModel):
    """A single field-level validation failure."""

    field: str
    message: str


class ErrorBody(BaseModel):
    """Content of the error envelope."""

    message: str
    status: int
    violations: list[ViolationItem] | None = None


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: ErrorBody
