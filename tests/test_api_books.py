"""
Tests for the books API endpoints.

Each test runs against its own app instance and in-memory store,
seeded with one book by the client fixture.
Validates status codes, envelopes and error mapping.
"""

import json

from fastapi.testclient import TestClient

from bookshelf.domain.books.errors import BookStorageError
from bookshelf.domain.books.ports import BookRepository
from bookshelf.interfaces.books.dependencies import get_book_repository
from bookshelf.main import create_app
from bookshelf.shared.security.headers import SECURE_HEADERS
from tests.book_data import MISSING_ISBN, NEW_BOOK_DATA, SEED_BOOK_DATA


class TestListBooks:
    """Tests for GET /books."""

    def test_returns_all_books(self, client: TestClient) -> None:
        response = client.get("/books")
        assert response.status_code == 200
        assert response.json() == {"books": [SEED_BOOK_DATA]}


class TestGetBook:
    """Tests for GET /books/{isbn}."""

    def test_returns_book_if_exists(self, client: TestClient) -> None:
        response = client.get(f"/books/{SEED_BOOK_DATA['isbn']}")
        assert response.status_code == 200
        assert response.json() == {"book": SEED_BOOK_DATA}

    def test_missing_book_returns_404(self, client: TestClient) -> None:
        response = client.get(f"/books/{MISSING_ISBN}")
        assert response.status_code == 404
        assert response.json()["error"] == {
            "message": f"There is no book with an isbn '{MISSING_ISBN}",
            "status": 404,
        }


class TestCreateBook:
    """Tests for POST /books."""

    def test_adds_book_if_valid(self, client: TestClient) -> None:
        response = client.post("/books", json=NEW_BOOK_DATA)
        assert response.status_code == 201
        assert response.json() == {"book": NEW_BOOK_DATA}

        fetched = client.get(f"/books/{NEW_BOOK_DATA['isbn']}")
        assert fetched.json() == {"book": NEW_BOOK_DATA}
        assert len(client.get("/books").json()["books"]) == 2

    def test_invalid_data_returns_400_with_violations(self, client: TestClient) -> None:
        response = client.post(
            "/books",
            json={
                "isbn": "dlsjafo13jr09",
                "amazon_url": "FAKEURL",
                "author": 1,
                "language": 1,
                "publisher": 12039481203123,
                "title": 123123,
                "year": "sadflkjsdflkjsdlfkj",
            },
        )
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["status"] == 400
        assert error["message"] == "Invalid book data"
        fields = {v["field"] for v in error["violations"]}
        assert fields == {
            "amazon_url", "author", "language", "pages", "publisher", "title", "year",
        }
        # Nothing was stored.
        assert client.get("/books/dlsjafo13jr09").status_code == 404

    def test_numeric_string_pages_rejected(self, client: TestClient) -> None:
        response = client.post("/books", json={**NEW_BOOK_DATA, "pages": "233"})
        assert response.status_code == 400
        assert [v["field"] for v in response.json()["error"]["violations"]] == ["pages"]

    def test_duplicate_isbn_returns_400(self, client: TestClient) -> None:
        response = client.post("/books", json={**SEED_BOOK_DATA, "title": "Copy"})
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["status"] == 400
        assert SEED_BOOK_DATA["isbn"] in error["message"]
        # The original row is untouched.
        book = client.get(f"/books/{SEED_BOOK_DATA['isbn']}").json()["book"]
        assert book["title"] == SEED_BOOK_DATA["title"]

    def test_malformed_json_returns_400(self, client: TestClient) -> None:
        response = client.post(
            "/books",
            content=b'{"isbn": ',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["status"] == 400
        assert [v["field"] for v in error["violations"]] == ["body"]

    def test_unencodable_isbn_returns_400(self, client: TestClient) -> None:
        # json.dumps escapes the lone surrogate as "\ud800".
        body = json.dumps({**NEW_BOOK_DATA, "isbn": "\ud800"})
        response = client.post(
            "/books", content=body, headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json()["error"]["status"] == 400
        assert len(client.get("/books").json()["books"]) == 1

    def test_nul_character_returns_400(self, client: TestClient) -> None:
        response = client.post("/books", json={**NEW_BOOK_DATA, "title": "a\x00b"})
        assert response.status_code == 400
        assert [v["field"] for v in response.json()["error"]["violations"]] == ["title"]

    def test_non_object_body_returns_400(self, client: TestClient) -> None:
        response = client.post("/books", json=[NEW_BOOK_DATA])
        assert response.status_code == 400
        assert [v["field"] for v in response.json()["error"]["violations"]] == ["body"]


class TestUpdateBook:
    """Tests for PUT /books/{isbn}."""

    def test_updates_book(self, client: TestClient) -> None:
        changed = {**SEED_BOOK_DATA, "author": "Test Update", "publisher": "Test Update"}

        response = client.put(f"/books/{SEED_BOOK_DATA['isbn']}", json=changed)

        assert response.status_code == 200
        assert response.json() == {"book": changed}
        assert client.get(f"/books/{SEED_BOOK_DATA['isbn']}").json() == {"book": changed}

    def test_missing_book_returns_404(self, client: TestClient) -> None:
        response = client.put("/books/123", json={**SEED_BOOK_DATA, "isbn": "123"})
        assert response.status_code == 404
        assert response.json()["error"] == {
            "message": "There is no book with an isbn '123",
            "status": 404,
        }

    def test_invalid_data_returns_400(self, client: TestClient) -> None:
        payload = {**SEED_BOOK_DATA, "amazon_url": "WRONG"}
        del payload["publisher"]

        response = client.put(f"/books/{SEED_BOOK_DATA['isbn']}", json=payload)

        assert response.status_code == 400
        fields = [v["field"] for v in response.json()["error"]["violations"]]
        assert fields == ["amazon_url", "publisher"]

    def test_isbn_mismatch_returns_400(self, client: TestClient) -> None:
        response = client.put(
            f"/books/{SEED_BOOK_DATA['isbn']}", json={**SEED_BOOK_DATA, "isbn": "999"}
        )
        assert response.status_code == 400
        assert [v["field"] for v in response.json()["error"]["violations"]] == ["isbn"]


class TestDeleteBook:
    """Tests for DELETE /books/{isbn}."""

    def test_deletes_book(self, client: TestClient) -> None:
        response = client.delete(f"/books/{SEED_BOOK_DATA['isbn']}")
        assert response.status_code == 200
        assert response.json() == {"message": "Book deleted"}
        assert client.get(f"/books/{SEED_BOOK_DATA['isbn']}").status_code == 404

    def test_missing_book_returns_404(self, client: TestClient) -> None:
        response = client.delete(f"/books/{MISSING_ISBN}")
        assert response.status_code == 404
        assert response.json()["error"]["message"] == (
            f"There is no book with an isbn '{MISSING_ISBN}"
        )


class _BrokenRepository(BookRepository):
    """Repository whose store is always down, or always explodes."""

    def __init__(self, error: Exception) -> None:
        self._error = error

    async def create(self, book):
        raise self._error

    async def list(self):
        raise self._error

    async def get(self, isbn):
        raise self._error

    async def update(self, isbn, book):
        raise self._error

    async def remove(self, isbn):
        raise self._error


class TestInternalErrors:
    """Failures that must map to an opaque 500."""

    def test_storage_error_returns_generic_500(self, test_settings) -> None:
        app = create_app(test_settings)
        app.dependency_overrides[get_book_repository] = lambda: _BrokenRepository(
            BookStorageError("connection refused by db-host:5432")
        )
        with TestClient(app) as client:
            response = client.get("/books")

        assert response.status_code == 500
        assert response.json() == {
            "error": {"message": "Internal server error", "status": 500}
        }
        assert "db-host" not in response.text

    def test_unexpected_error_returns_generic_500(self, test_settings) -> None:
        app = create_app(test_settings)
        app.dependency_overrides[get_book_repository] = lambda: _BrokenRepository(
            RuntimeError("secret internals")
        )
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get(f"/books/{SEED_BOOK_DATA['isbn']}")

        assert response.status_code == 500
        assert response.json()["error"] == {
            "message": "Internal server error",
            "status": 500,
        }
        assert "secret" not in response.text

    def test_unexpected_error_keeps_security_headers(self, test_settings) -> None:
        app = create_app(test_settings)
        app.dependency_overrides[get_book_repository] = lambda: _BrokenRepository(
            RuntimeError("boom")
        )
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/books")

        assert response.status_code == 500
        for header_name, header_value in SECURE_HEADERS.items():
            assert response.headers[header_name] == header_value
