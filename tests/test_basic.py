"""
Basic application tests.

Validates that the FastAPI app starts correctly, the health
endpoint responds as expected and cross-cutting middleware applies.
"""

from fastapi.testclient import TestClient

from bookshelf.shared.security.headers import SECURE_HEADERS


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self, client: TestClient) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/health")
        assert response.status_code == 200

    def test_health_response_body(self, client: TestClient) -> None:
        """Health endpoint must return status, version and database fields."""
        body = client.get("/health").json()
        assert body["status"] == "ok"
        assert "version" in body
        assert body["database"] == "ok"


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self, client: TestClient) -> None:
        """All security headers must be present on every response."""
        response = client.get("/books")
        for header_name, header_value in SECURE_HEADERS.items():
            assert response.headers[header_name] == header_value

    def test_security_headers_on_errors(self, client: TestClient) -> None:
        response = client.get("/books/does-not-exist")
        assert response.status_code == 404
        assert response.headers["X-Frame-Options"] == "DENY"


class TestRoutingErrors:
    """Framework-level errors share the error envelope."""

    def test_unknown_route_uses_envelope(self, client: TestClient) -> None:
        response = client.get("/nope")
        assert response.status_code == 404
        assert response.json() == {"error": {"message": "Not Found", "status": 404}}

    def test_wrong_method_uses_envelope(self, client: TestClient) -> None:
        response = client.patch("/books")
        assert response.status_code == 405
        assert response.json()["error"]["status"] == 405

    def test_docs_disabled_outside_debug(self, client: TestClient) -> None:
        assert client.get("/docs").status_code == 404
