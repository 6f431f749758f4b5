"""
User registration service.

Owns the only code path that turns a raw password into a stored hash.
"""

import logging
from typing import Dict

from application.exceptions import ConflictError, NotFoundError
from application.ports import UserRepository
from core.security import hash_password

logger = logging.getLogger(__name__)


class UserService:
    """Creates users and resolves them by userName or ID."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def create_user(
        self,
        first_name: str,
        last_name: str,
        user_name: str,
        password: str,
    ) -> Dict:
        """
        Register a new user.

        The pre-check gives a clean error in the common case; the
        repository still maps a unique-constraint race to ConflictError.

        Returns:
            The stored user row (including password_hash)

        Raises:
            ConflictError: If user_name is already registered
        """
        if self._user_repo.get_by_user_name(user_name) is not None:
            raise ConflictError("Username already taken")

        user = self._user_repo.create(
            {
                "first_name": first_name,
                "last_name": last_name,
                "user_name": user_name,
                "password_hash": hash_password(password),
            }
        )
        logger.info(f"Registered user {user['id']} ({user_name!r})")
        return user

    def find_by_user_name(self, user_name: str) -> Dict:
        """
        Raises:
            NotFoundError: If no user has this userName
        """
        user = self._user_repo.get_by_user_name(user_name)
        if user is None:
            raise NotFoundError(f"User {user_name} not found")
        return user

    def find_by_id(self, user_id: str) -> Dict:
        """
        Raises:
            NotFoundError: If no user has this ID
        """
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        return user
