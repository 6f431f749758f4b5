"""
Authentication service.

Verifies login credentials and issues and validates the HS256 bearer
tokens that gate every /programs and /exercises request.

Token payload:
    sub       user ID
    userName  login name at issue time
    iat/exp   issue and expiry timestamps
    iss       settings.jwt_issuer
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from application.exceptions import AuthenticationError
from application.ports import UserRepository
from backend.settings import Settings
from core.security import verify_password

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


def issue_token(settings: Settings, user_id: str, user_name: Optional[str] = None) -> str:
    """Sign a token for user_id that expires after settings.jwt_expiry_seconds."""
    now = datetime.now(timezone.utc)
    expiry = now + timedelta(seconds=settings.jwt_expiry_seconds)
    payload = {
        "sub": user_id,
        "userName": user_name,
        "iat": int(now.timestamp()),
        "exp": int(expiry.timestamp()),
        "iss": settings.jwt_issuer,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(settings: Settings, token: Optional[str]) -> dict:
    """
    Validate a token and return its claims.

    Needs only the signing settings, never the user store.

    Raises:
        AuthenticationError: If the token is missing, malformed, expired,
            carries a bad signature or issuer, or has no subject
    """
    if not token:
        raise AuthenticationError("Missing token")
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            issuer=settings.jwt_issuer,
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token expired")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Rejected token: {e}")
        raise AuthenticationError("Invalid token")

    if not payload.get("sub"):
        raise AuthenticationError("Token missing user ID")
    return payload


class AuthService:
    """
    Login and token handling.

    Usage:
        >>> auth = AuthService(user_repo=user_repo, settings=settings)
        >>> token = auth.login("authuser", "password")
        >>> auth.verify(token)
        'a3f1...'
    """

    def __init__(self, user_repo: UserRepository, settings: Settings) -> None:
        """
        Initialize the service with required dependencies.

        Args:
            user_repo: Repository used to look up credentials
            settings: Source of the signing secret, algorithm, issuer and lifetime
        """
        self._user_repo = user_repo
        self._settings = settings

    def login(self, user_name: str, password: str) -> str:
        """
        Exchange credentials for a bearer token.

        Unknown user and wrong password produce the same error so the
        response does not reveal which usernames exist.

        Raises:
            AuthenticationError: If the credentials do not match
        """
        user = self._user_repo.get_by_user_name(user_name)
        if user is None or not verify_password(user.get("password_hash", ""), password):
            logger.info(f"Failed login for user_name {user_name!r}")
            raise AuthenticationError(INVALID_CREDENTIALS)

        logger.info(f"User {user['id']} logged in")
        return self.issue_token(user["id"], user["user_name"])

    def refresh(self, user_id: str, user_name: Optional[str] = None) -> str:
        """Issue a new token for an identity that has already been verified."""
        return self.issue_token(user_id, user_name)

    def issue_token(self, user_id: str, user_name: Optional[str] = None) -> str:
        """Sign a token for user_id that expires after jwt_expiry_seconds."""
        return issue_token(self._settings, user_id, user_name)

    def decode(self, token: Optional[str]) -> dict:
        """Validate a token and return its claims. See decode_token()."""
        return decode_token(self._settings, token)

    def verify(self, token: Optional[str]) -> str:
        """
        Validate a token and return the user ID it was issued to.

        Raises:
            AuthenticationError: See decode()
        """
        return self.decode(token)["sub"]
