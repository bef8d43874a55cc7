"""
Transport-level exceptions for the token endpoint.

Raised by the auth router and translated by the centralized handlers.
"""


class MissingCredentialsError(Exception):
    """Raised when a token request lacks a client id or secret."""


class WrongCredentialsError(Exception):
    """Raised when a token request carries unknown client credentials."""

    def __init__(self, client_id: str) -> None:
        super().__init__(f"Wrong credentials for client {client_id}")
        self.client_id = client_id
