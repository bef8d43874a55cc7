"""
Bearer authentication dependency.

Extracts the ``Authorization: Bearer <token>`` header and verifies it
with the application's token codec. Produces Claims or rejects the
request with InvalidTokenError. Never touches storage.
"""

import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from inventory_service.core.context import AppContext, get_context
from inventory_service.shared.security.tokens import Claims, InvalidTokenError

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False, description="Bearer token")


def require_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    context: AppContext = Depends(get_context),
) -> Claims:
    """Return verified claims for the current request.

    Raises:
        InvalidTokenError: Header missing, not a Bearer header, or the
            token fails verification.
    """
    if credentials is None or not credentials.credentials:
        logger.info("Request rejected: missing or malformed Authorization header")
        raise InvalidTokenError("Missing bearer token")
    return context.token_codec.verify(credentials.credentials)
