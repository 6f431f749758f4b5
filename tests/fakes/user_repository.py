"""
Fake UserRepository for testing.

In-memory implementation of UserRepository for fast, isolated testing
without database dependencies.
"""
from typing import Optional, List, Dict, Any
from datetime import datetime, timezone
import uuid
import copy

from application.exceptions import ConflictError


class FakeUserRepository:
    """
    In-memory fake implementation of UserRepository for testing.

    Stores users in a dict keyed by user ID. user_name is unique, like the
    column constraint in the real table.

    Usage:
        repo = FakeUserRepository()
        repo.seed([{"id": "u1", "user_name": "authuser", ...}])
        user = repo.get_by_user_name("authuser")
    """

    def __init__(self):
        """Initialize with empty storage."""
        self._users: Dict[str, Dict[str, Any]] = {}

    def reset(self) -> None:
        """Clear all stored users."""
        self._users.clear()

    def seed(self, users: List[Dict[str, Any]]) -> None:
        """
        Seed the repository with test data.

        Args:
            users: List of user dicts. An 'id' is generated when missing.
        """
        for user in users:
            user_id = user.get("id") or str(uuid.uuid4())
            self._users[user_id] = {**user, "id": user_id}

    def get_all(self) -> List[Dict[str, Any]]:
        """Get all stored users (test helper)."""
        return list(self._users.values())

    def remove(self, user_id: str) -> None:
        """Drop a user without touching programs that reference it (test helper)."""
        self._users.pop(user_id, None)

    # =========================================================================
    # UserRepository Protocol Methods
    # =========================================================================

    def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a user, enforcing unique user_name."""
        if any(u["user_name"] == data["user_name"] for u in self._users.values()):
            raise ConflictError("Username already taken")

        user_id = str(uuid.uuid4())
        user = {
            **data,
            "id": user_id,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        self._users[user_id] = user
        return copy.deepcopy(user)

    def get_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        user = self._users.get(user_id)
        return copy.deepcopy(user) if user else None

    def get_by_ids(self, user_ids: List[str]) -> List[Dict[str, Any]]:
        return [copy.deepcopy(self._users[i]) for i in dict.fromkeys(user_ids) if i in self._users]

    def get_by_user_name(self, user_name: str) -> Optional[Dict[str, Any]]:
        for user in self._users.values():
            if user["user_name"] == user_name:
                return copy.deepcopy(user)
        return None
