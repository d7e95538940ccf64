"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client rate limit on every route.
Protects against denial-of-service and resource abuse.

The limit is checked by enforce_rate_limit, attached as a dependency
to every router.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

HTTP_429 = 429


def build_limiter(default_limit: str, enabled: bool = True) -> Limiter:
    """Create the limiter stored on app.state and checked on every route.

    Args:
        default_limit: slowapi limit string, e.g. "60/minute".
        enabled: When False every request passes through unchecked.

    Returns:
        A Limiter keyed on the client address.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[default_limit],
        enabled=enabled,
    )


async def enforce_rate_limit(request: Request) -> None:
    """Route dependency: count this request against the default limit.

    Raises:
        RateLimitExceeded: When the client is over its limit.
    """
    limiter: Limiter = request.app.state.limiter
    if not limiter.enabled:
        return
    limiter._check_request_limit(request, request.scope.get("endpoint"), True)


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response in the standard error envelope.
    """
    return JSONResponse(
        status_code=HTTP_429,
        content={
            "error": {
                "message": f"Rate limit exceeded: {exc.detail}",
                "status": HTTP_429,
            }
        },
    )
