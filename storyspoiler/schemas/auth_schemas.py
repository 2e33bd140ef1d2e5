"""Authentication Pydantic schemas.

Request/response schemas for the token exchange endpoint.
"""

from pydantic import BaseModel, ConfigDict, Field


class AuthenticationRequest(BaseModel):
    """Request to exchange credentials for a bearer token.

    Attributes:
        username: Account username.
        password: Account password.
    """

    username: str = Field(..., description="Account username")
    password: str = Field(..., description="Account password")


class TokenResponse(BaseModel):
    """Response of the token exchange.

    The token is optional at the schema level; an absent or empty token is
    reported by the authentication client, not by validation.

    Attributes:
        access_token: JWT bearer token (wire name ``accessToken``).
    """

    access_token: str | None = Field(
        default=None, alias="accessToken", description="JWT access token"
    )

    model_config = ConfigDict(populate_by_name=True, extra="ignore")
