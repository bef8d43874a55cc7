"""
Health check router.

``/health`` is the liveness probe and never touches storage.
``/ready`` is the readiness probe and pings the database.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from inventory_service.core.context import AppContext, get_context
from inventory_service.infrastructure.inventory.database import verify_connection
from inventory_service.interfaces.inventory.schemas import (
    ErrorResponse,
    HealthResponse,
    ReadinessResponse,
)
from inventory_service.shared.errors.handlers import error_response

logger = logging.getLogger(__name__)

HTTP_503 = 503

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check(context: AppContext = Depends(get_context)) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(status="ok", version=context.settings.version)


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"model": ErrorResponse}},
    summary="Readiness check",
    description="Returns 503 when the database cannot be reached.",
)
async def readiness_check(
    context: AppContext = Depends(get_context),
) -> ReadinessResponse | JSONResponse:
    if context.engine is None:
        return ReadinessResponse(status="ok", database="not configured")
    try:
        await verify_connection(context.engine)
    except (SQLAlchemyError, OSError) as exc:
        logger.error("Readiness check failed: %s", type(exc).__name__)
        return error_response(HTTP_503, "Database unavailable")
    return ReadinessResponse(status="ok", database="ok")
