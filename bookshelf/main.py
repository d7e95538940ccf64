"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- Database engine lifecycle

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from bookshelf.core.config import Settings, settings as default_settings
from bookshelf.infrastructure.database import build_engine, create_tables
from bookshelf.interfaces.books.router import router as books_router
from bookshelf.interfaces.health import router as health_router
from bookshelf.shared.errors.handlers import register_error_handlers
from bookshelf.shared.logging import configure_logging
from bookshelf.shared.security.headers import SecurityHeadersMiddleware
from bookshelf.shared.security.rate_limiting import (
    build_limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: own the pooled database engine.

    The server finishes in-flight requests before shutdown runs, so
    disposing the engine here never cuts a store call short. Disposal
    sits in a finally block so the pool is released on failure too.
    """
    app_settings: Settings = app.state.settings
    engine = build_engine(
        app_settings.get_database_url(), echo=app_settings.database_echo
    )
    app.state.engine = engine
    try:
        if app_settings.create_tables:
            await create_tables(engine)
        logger.info(
            "%s %s started (environment=%s)",
            app_settings.project_name,
            app_settings.version,
            app_settings.environment,
        )
        yield
    finally:
        await engine.dispose()
        logger.info("Database engine disposed.")


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        app_settings: Settings to run with. Defaults to the environment-loaded
            module settings.

    Returns:
        A fully configured FastAPI application instance.
    """
    app_settings = app_settings or default_settings
    configure_logging(
        level=app_settings.log_level, sql_echo=app_settings.database_echo
    )

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    # --- Rate Limiting (checked per route by enforce_rate_limit) ---
    app.state.limiter = build_limiter(
        app_settings.rate_limit_default, enabled=app_settings.rate_limit_enabled
    )
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(books_router)

    return app


app = create_app()
