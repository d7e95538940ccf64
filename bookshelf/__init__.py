"""
Bookshelf: CRUD service for a catalog of books keyed by ISBN.

Application package root. This is a small monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - books: Book validation, persistence and HTTP exposure.

Layers:
    - domain: Entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (database) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, input validation.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
