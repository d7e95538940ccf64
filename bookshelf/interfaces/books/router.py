"""
FastAPI router for the books bounded context.

All routes delegate to use cases. No business logic here.
Write routes validate their body with validate_book before
anything touches the store.
Error mapping is handled by centralized error handlers.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from bookshelf.application.books.create_book import CreateBookUseCase
from bookshelf.application.books.delete_book import DeleteBookUseCase
from bookshelf.application.books.dtos import (
    CreateBookCommand,
    DeleteBookCommand,
    GetBookQuery,
    UpdateBookCommand,
)
from bookshelf.application.books.get_book import GetBookUseCase
from bookshelf.application.books.list_books import ListBooksUseCase
from bookshelf.application.books.update_book import UpdateBookUseCase
from bookshelf.domain.books.entities import Book
from bookshelf.interfaces.books.dependencies import (
    get_create_book_use_case,
    get_delete_book_use_case,
    get_get_book_use_case,
    get_list_books_use_case,
    get_update_book_use_case,
)
from bookshelf.interfaces.books.schemas import (
    BookItem,
    BookListResponse,
    BookResponse,
    ErrorResponse,
    MessageResponse,
)
from bookshelf.interfaces.books.validation import validate_book
from bookshelf.shared.security.rate_limiting import enforce_rate_limit

router = APIRouter(
    prefix="/books",
    tags=["books"],
    dependencies=[Depends(enforce_rate_limit)],
)

BOOK_BODY_DESCRIPTION = "Full book object: isbn, amazon_url, author, language, pages, publisher, title, year"


def _to_item(book: Book) -> BookItem:
    return BookItem(**book.to_dict())


@router.get(
    "",
    response_model=BookListResponse,
    responses={500: {"model": ErrorResponse}},
    summary="List books",
    description="Return every book in the catalog.",
)
async def list_books(
    use_case: ListBooksUseCase = Depends(get_list_books_use_case),
) -> BookListResponse:
    """List all books."""
    books = await use_case.execute()
    return BookListResponse(books=[_to_item(b) for b in books])


@router.get(
    "/{isbn}",
    response_model=BookResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a book",
    description="Return the book with the given ISBN.",
)
async def get_book(
    isbn: str,
    use_case: GetBookUseCase = Depends(get_get_book_use_case),
) -> BookResponse:
    """Get a single book by ISBN."""
    book = await use_case.execute(GetBookQuery(isbn=isbn))
    return BookResponse(book=_to_item(book))


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create a book",
    description="Add a book to the catalog. Fails if the ISBN is already taken.",
)
async def create_book(
    payload: Any = Body(..., description=BOOK_BODY_DESCRIPTION),
    use_case: CreateBookUseCase = Depends(get_create_book_use_case),
) -> BookResponse:
    """Validate and store a new book."""
    book = validate_book(payload)
    created = await use_case.execute(CreateBookCommand(book=book))
    return BookResponse(book=_to_item(created))


@router.put(
    "/{isbn}",
    response_model=BookResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update a book",
    description="Replace every field of an existing book. The body isbn must match the path.",
)
async def update_book(
    isbn: str,
    payload: Any = Body(..., description=BOOK_BODY_DESCRIPTION),
    use_case: UpdateBookUseCase = Depends(get_update_book_use_case),
) -> BookResponse:
    """Validate and apply a full update."""
    book = validate_book(payload)
    updated = await use_case.execute(UpdateBookCommand(isbn=isbn, book=book))
    return BookResponse(book=_to_item(updated))


@router.delete(
    "/{isbn}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Delete a book",
    description="Remove the book with the given ISBN.",
)
async def delete_book(
    isbn: str,
    use_case: DeleteBookUseCase = Depends(get_delete_book_use_case),
) -> MessageResponse:
    """Delete a book by ISBN."""
    await use_case.execute(DeleteBookCommand(isbn=isbn))
    return MessageResponse(message="Book deleted")
