"""
Dependency injection for the books bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the books context.
"""

from fastapi import Depends, Request

from bookshelf.application.books.create_book import CreateBookUseCase
from bookshelf.application.books.delete_book import DeleteBookUseCase
from bookshelf.application.books.get_book import GetBookUseCase
from bookshelf.application.books.list_books import ListBooksUseCase
from bookshelf.application.books.update_book import UpdateBookUseCase
from bookshelf.domain.books.ports import BookRepository
from bookshelf.infrastructure.books.book_repository import BookRepositoryAdapter


def get_book_repository(request: Request) -> BookRepository:
    """Build the book repository on the engine owned by the app lifespan."""
    return BookRepositoryAdapter(engine=request.app.state.engine)


def get_create_book_use_case(
    book_repo: BookRepository = Depends(get_book_repository),
) -> CreateBookUseCase:
    """Build CreateBookUseCase with its infrastructure dependencies."""
    return CreateBookUseCase(book_repo=book_repo)


def get_list_books_use_case(
    book_repo: BookRepository = Depends(get_book_repository),
) -> ListBooksUseCase:
    """Build ListBooksUseCase with its infrastructure dependencies."""
    return ListBooksUseCase(book_repo=book_repo)


def get_get_book_use_case(
    book_repo: BookRepository = Depends(get_book_repository),
) -> GetBookUseCase:
    """Build GetBookUseCase with its infrastructure dependencies."""
    return GetBookUseCase(book_repo=book_repo)


def get_update_book_use_case(
    book_repo: BookRepository = Depends(get_book_repository),
) -> UpdateBookUseCase:
    """Build UpdateBookUseCase with its infrastructure dependencies."""
    return UpdateBookUseCase(book_repo=book_repo)


def get_delete_book_use_case(
    book_repo: BookRepository = Depends(get_book_repository),
) -> DeleteBookUseCase:
    """Build DeleteBookUseCase with its infrastructure dependencies."""
    return DeleteBookUseCase(book_repo=book_repo)
