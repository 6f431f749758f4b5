"""
Authentication router.

- Exchange username/password for a bearer token
- Refresh a still-valid token
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import get_auth_service, get_token_claims
from models.auth import AuthTokenResponse, LoginRequest
from services import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/auth",
    tags=["Auth"],
)


@router.post("/login", response_model=AuthTokenResponse)
async def login(
    credentials: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthTokenResponse:
    """
    Log in with username and password.

    Raises:
        401: Unknown username or wrong password
    """
    logger.info(f"Login attempt for {credentials.username!r}")
    token = auth_service.login(credentials.username, credentials.password)
    return AuthTokenResponse(auth_token=token)


@router.post("/refresh", response_model=AuthTokenResponse)
async def refresh(
    claims: dict = Depends(get_token_claims),
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthTokenResponse:
    """
    Issue a fresh token for the bearer of a valid one.

    Raises:
        401: Missing, invalid or expired token
    """
    logger.info(f"Refreshing token for user {claims['sub']}")
    token = auth_service.refresh(claims["sub"], claims.get("userName"))
    return AuthTokenResponse(auth_token=token)
