"""
Bearer token codec.

Signs and verifies HS256 JWTs carrying a subject and an expiry.
The signing secret is supplied once at startup; a missing secret
is a startup failure, never a per-request one.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional

import jwt as pyjwt

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
DEFAULT_TTL_SECONDS = 60 * 60 * 24


class MissingSecretError(RuntimeError):
    """Raised at startup when no token signing secret is configured."""


class InvalidTokenError(Exception):
    """Raised when a bearer token is absent, malformed, forged or expired."""

    def __init__(self, reason: str = "Invalid token") -> None:
        super().__init__(reason)
        self.reason = reason


@dataclass(frozen=True)
class Claims:
    """Verified payload of a bearer token."""

    subject: str
    expires_at: int

    def __str__(self) -> str:
        return f"Subject: {self.subject}\nExpiration: {self.expires_at}"


class TokenCodec:
    """Issues and verifies signed bearer tokens with a single shared secret."""

    def __init__(self, secret: Optional[str], ttl_seconds: int = DEFAULT_TTL_SECONDS) -> None:
        if not secret:
            raise MissingSecretError("JWT_SECRET must be set")
        self._secret = secret
        self._ttl_seconds = ttl_seconds

    def issue(self, subject: str, now: Optional[int] = None) -> str:
        """Sign a token for ``subject`` expiring ``ttl_seconds`` from now.

        Args:
            subject: Identity the token is issued to.
            now: Issue time in unix seconds. Defaults to the current time.

        Returns:
            The encoded token string.
        """
        issued_at = int(time.time()) if now is None else now
        payload = {"sub": subject, "exp": issued_at + self._ttl_seconds}
        return pyjwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str) -> Claims:
        """Decode and validate a token.

        Args:
            token: The raw token string from the Authorization header.

        Returns:
            Claims with subject and expiry.

        Raises:
            InvalidTokenError: Signature mismatch, malformed token,
                missing claims, or expired token.
        """
        try:
            payload = pyjwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"require": ["exp", "sub"]},
            )
        except pyjwt.ExpiredSignatureError as exc:
            logger.info("Rejected expired token")
            raise InvalidTokenError("Token expired") from exc
        except pyjwt.PyJWTError as exc:
            logger.info("Rejected token: %s", type(exc).__name__)
            raise InvalidTokenError() from exc

        return Claims(subject=str(payload["sub"]), expires_at=int(payload["exp"]))
