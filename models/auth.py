"""Models for login and token issuance."""

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Request model for POST /auth/login."""

    username: str
    password: str


class AuthTokenResponse(BaseModel):
    """Bearer token returned on login and refresh."""

    model_config = ConfigDict(populate_by_name=True)

    auth_token: str = Field(alias="authToken")
