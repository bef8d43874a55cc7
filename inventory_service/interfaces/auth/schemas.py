"""
Pydantic schemas for the token endpoint.
"""

from pydantic import BaseModel


class TokenRequest(BaseModel):
    """Client credentials exchanged for a bearer token.

    Both fields are optional in the schema so that an incomplete request
    is reported as missing credentials rather than a body error.
    """

    client_id: str | None = None
    client_secret: str | None = None


class TokenResponse(BaseModel):
    token: str
