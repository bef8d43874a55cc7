"""
FastAPI router for bearer token issuance.

Exchanges configured client credentials for a signed token whose subject
is the client id. Rate limited separately from the resource routes.
"""

import logging
import secrets

from fastapi import APIRouter, Depends, Request

from inventory_service.core.config import settings
from inventory_service.core.context import AppContext, get_context
from inventory_service.interfaces.auth.schemas import TokenRequest, TokenResponse
from inventory_service.interfaces.inventory.schemas import ErrorResponse
from inventory_service.shared.errors.exceptions import (
    MissingCredentialsError,
    WrongCredentialsError,
)
from inventory_service.shared.security.rate_limiting import limiter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _credentials_match(context: AppContext, client_id: str, client_secret: str) -> bool:
    expected_secret = context.settings.auth_client_secret
    if expected_secret is None:
        return False
    id_ok = secrets.compare_digest(
        client_id.encode(), context.settings.auth_client_id.encode()
    )
    secret_ok = secrets.compare_digest(
        client_secret.encode(), expected_secret.get_secret_value().encode()
    )
    return id_ok and secret_ok


@router.post(
    "/token",
    response_model=TokenResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
    },
    summary="Issue a bearer token",
)
@limiter.limit(settings.rate_limit_token)
async def issue_token(
    request: Request,
    body: TokenRequest | None = None,
    context: AppContext = Depends(get_context),
) -> TokenResponse:
    """Issue a token for valid client credentials.

    Raises:
        MissingCredentialsError: The body or either credential is missing.
        WrongCredentialsError: The credentials are not the configured ones.
    """
    if body is None or not body.client_id or not body.client_secret:
        raise MissingCredentialsError()
    if not _credentials_match(context, body.client_id, body.client_secret):
        raise WrongCredentialsError(body.client_id)

    logger.info("Issued token for client %s", body.client_id)
    return TokenResponse(token=context.token_codec.issue(body.client_id))
