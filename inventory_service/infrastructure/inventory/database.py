"""
Async engine construction and startup checks.

The engine owns the bounded connection pool shared by every request.
Waiting longer than ``pool_timeout`` for a connection raises a
SQLAlchemy TimeoutError, which repositories surface as a storage failure.
"""

import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from inventory_service.core.config import Settings

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> AsyncEngine:
    """Build the async SQLAlchemy engine from application settings."""
    if settings.database_url.startswith("sqlite"):
        return create_async_engine(settings.database_url)
    return create_async_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout_seconds,
        pool_pre_ping=True,
    )


async def verify_connection(engine: AsyncEngine) -> None:
    """Run a trivial query; raises if storage is unreachable."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    logger.info("Database connection verified")
