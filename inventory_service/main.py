"""
Application entry point.

Creates the FastAPI application and wires together:
- The application context (engine, repositories, services, token codec)
- Routers (health, auth, persons, items, invoices)
- Error handlers (centralized service-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from slowapi.middleware import SlowAPIMiddleware

from inventory_service.core.config import settings
from inventory_service.core.context import AppContext, build_context
from inventory_service.infrastructure.inventory.database import verify_connection
from inventory_service.interfaces.auth.router import router as auth_router
from inventory_service.interfaces.health import router as health_router
from inventory_service.interfaces.inventory.invoices import router as invoices_router
from inventory_service.interfaces.inventory.items import router as items_router
from inventory_service.interfaces.inventory.persons import router as persons_router
from inventory_service.shared.errors.handlers import register_error_handlers
from inventory_service.shared.logging import configure_logging
from inventory_service.shared.security.headers import SecurityHeadersMiddleware
from inventory_service.shared.security.rate_limiting import limiter

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Check storage on startup and release the pool on shutdown.

    An unreachable database aborts startup.
    """
    context: AppContext = app.state.context
    if context.engine is not None:
        await verify_connection(context.engine)

    yield

    if context.engine is not None:
        await context.engine.dispose()
        logger.info("Database pool disposed")


def create_app(context: Optional[AppContext] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        context: Prebuilt application context. Built from settings when
            omitted. Rate limits always come from the process settings.

    Returns:
        A fully configured FastAPI application instance.

    Raises:
        MissingSecretError: No JWT secret is configured.
    """
    configure_logging(level=settings.log_level, debug=settings.debug)

    if context is None:
        context = build_context(settings)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.context = context

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(auth_router, prefix=API_PREFIX)
    app.include_router(persons_router, prefix=API_PREFIX)
    app.include_router(items_router, prefix=API_PREFIX)
    app.include_router(invoices_router, prefix=API_PREFIX)

    return app


app = create_app()
