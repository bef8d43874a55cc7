"""
Tests for the bearer token codec.

Covers issue/verify, expiry, forged and malformed tokens, and the
startup failure on a missing secret.
"""

import time

import jwt as pyjwt
import pytest

from inventory_service.shared.security.tokens import (
    Claims,
    InvalidTokenError,
    MissingSecretError,
    TokenCodec,
)

SECRET = "unit-test-secret"


class TestTokenCodec:
    """Tests for TokenCodec.issue and TokenCodec.verify."""

    def test_issued_token_verifies(self) -> None:
        """A freshly issued token yields its subject."""
        codec = TokenCodec(SECRET)
        claims = codec.verify(codec.issue("alice"))
        assert claims.subject == "alice"

    def test_expiry_is_issue_time_plus_ttl(self) -> None:
        """exp is exactly the issue time plus the configured TTL."""
        codec = TokenCodec(SECRET, ttl_seconds=600)
        now = int(time.time())
        claims = codec.verify(codec.issue("alice", now=now))
        assert claims.expires_at == now + 600

    def test_default_ttl_is_one_day(self) -> None:
        codec = TokenCodec(SECRET)
        now = int(time.time())
        assert codec.verify(codec.issue("bob", now=now)).expires_at == now + 86400

    def test_expired_token_rejected(self) -> None:
        """A token past its expiry is rejected."""
        codec = TokenCodec(SECRET, ttl_seconds=60)
        token = codec.issue("alice", now=int(time.time()) - 3600)
        with pytest.raises(InvalidTokenError) as exc_info:
            codec.verify(token)
        assert exc_info.value.reason == "Token expired"

    def test_token_signed_with_other_secret_rejected(self) -> None:
        """Signature mismatch is rejected."""
        token = TokenCodec("another-secret").issue("mallory")
        with pytest.raises(InvalidTokenError):
            TokenCodec(SECRET).verify(token)

    def test_garbage_token_rejected(self) -> None:
        with pytest.raises(InvalidTokenError):
            TokenCodec(SECRET).verify("not.a.token")

    def test_token_without_subject_rejected(self) -> None:
        """Tokens lacking the sub claim are rejected."""
        token = pyjwt.encode(
            {"exp": int(time.time()) + 60}, SECRET, algorithm="HS256"
        )
        with pytest.raises(InvalidTokenError):
            TokenCodec(SECRET).verify(token)

    def test_token_without_expiry_rejected(self) -> None:
        """Tokens lacking the exp claim are rejected."""
        token = pyjwt.encode({"sub": "alice"}, SECRET, algorithm="HS256")
        with pytest.raises(InvalidTokenError):
            TokenCodec(SECRET).verify(token)


class TestMissingSecret:
    """A codec cannot be built without a secret."""

    @pytest.mark.parametrize("secret", [None, ""])
    def test_missing_secret_raises(self, secret) -> None:
        with pytest.raises(MissingSecretError):
            TokenCodec(secret)


class TestClaims:
    def test_str_lists_subject_and_expiration(self) -> None:
        claims = Claims(subject="alice", expires_at=1700000000)
        assert str(claims) == "Subject: alice\nExpiration: 1700000000"
