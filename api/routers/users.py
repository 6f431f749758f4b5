"""
User registration router.

- Register a new user (public)
- Get the authenticated user's own profile
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import get_current_user, get_user_service
from models.user import UserPublic, UserRegister
from services import UserService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/users",
    tags=["Users"],
)


def _build_user(user: dict) -> UserPublic:
    """Project a stored user row onto the public shape (no password hash)."""
    return UserPublic(
        id=user["id"],
        first_name=user["first_name"],
        last_name=user["last_name"],
        user_name=user["user_name"],
    )


@router.post("/register", response_model=UserPublic, status_code=201)
async def register_user(
    body: UserRegister,
    user_service: UserService = Depends(get_user_service),
) -> UserPublic:
    """
    Register a new user.

    Raises:
        400: Missing or invalid field
        409: userName already taken
    """
    logger.info(f"Registering user {body.user_name!r}")
    created = user_service.create_user(
        first_name=body.first_name,
        last_name=body.last_name,
        user_name=body.user_name,
        password=body.password,
    )
    return _build_user(created)


@router.get("/me", response_model=UserPublic)
async def get_me(
    user_id: str = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> UserPublic:
    """
    Get the authenticated user.

    Raises:
        401: Missing or invalid token
        404: The token's user no longer exists
    """
    return _build_user(user_service.find_by_id(user_id))
