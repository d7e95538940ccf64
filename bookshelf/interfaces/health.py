"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
No business logic. Returns application status, version and
whether the book store answers.
"""

from fastapi import APIRouter, Depends, Request

from bookshelf.infrastructure.database import ping
from bookshelf.interfaces.books.schemas import HealthResponse
from bookshelf.shared.security.rate_limiting import enforce_rate_limit

router = APIRouter(tags=["health"], dependencies=[Depends(enforce_rate_limit)])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status, version and database reachability.",
)
async def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    database_ok = await ping(request.app.state.engine)
    return HealthResponse(
        status="ok",
        version=request.app.state.settings.version,
        database="ok" if database_ok else "unavailable",
    )
