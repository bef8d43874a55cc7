"""
Rate limiting configuration.

One slowapi Limiter keyed by client address. The default limit applies to
every route through SlowAPIMiddleware; the token endpoint carries its own,
stricter limit. Exceeded limits are rendered by the centralized handlers.

Limits are process-wide: route limits are registered on this instance at
import time, so they follow the environment settings and not the
settings of a context passed to ``create_app``.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from inventory_service.core.config import settings

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit_default],
    enabled=settings.rate_limit_enabled,
)
