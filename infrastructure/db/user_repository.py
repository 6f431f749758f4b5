"""
Supabase implementation of UserRepository.

This implementation uses the Supabase Python client to interact with
the users table. The user_name column carries a unique constraint which
is the final arbiter for duplicate registrations.
"""

import logging
from typing import Dict, List, Optional

from postgrest.exceptions import APIError
from supabase import Client

from application.exceptions import ConflictError
from core.identifiers import is_valid_id, valid_ids

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"


class SupabaseUserRepository:
    """
    Supabase-backed user repository implementation.

    Queries against the users table.
    """

    def __init__(self, client: Client):
        """
        Initialize repository with Supabase client.

        Args:
            client: Authenticated Supabase client
        """
        self._client = client

    def create(self, data: Dict) -> Dict:
        """
        Create a new user.

        Args:
            data: User row (first_name, last_name, user_name, password_hash)

        Returns:
            Created user dictionary with generated ID

        Raises:
            ConflictError: If user_name is already taken
        """
        try:
            response = self._client.table("users").insert(data).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                logger.info(f"Duplicate registration for user_name {data.get('user_name')!r}")
                raise ConflictError("Username already taken") from e
            raise
        return response.data[0]

    def get_by_id(self, user_id: str) -> Optional[Dict]:
        """
        Get a user by ID.

        Args:
            user_id: The user's UUID as string

        Returns:
            User dictionary if found, None otherwise
        """
        if not is_valid_id(user_id):
            return None
        response = (
            self._client.table("users")
            .select("*")
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    def get_by_ids(self, user_ids: List[str]) -> List[Dict]:
        """
        Get all users whose ID is in user_ids.

        Args:
            user_ids: List of user UUIDs as strings

        Returns:
            List of user dictionaries
        """
        ids = valid_ids(user_ids)
        if not ids:
            return []
        response = (
            self._client.table("users")
            .select("*")
            .in_("id", ids)
            .execute()
        )
        return response.data

    def get_by_user_name(self, user_name: str) -> Optional[Dict]:
        """
        Get a user by their exact userName.

        Args:
            user_name: The login name

        Returns:
            User dictionary if found, None otherwise
        """
        response = (
            self._client.table("users")
            .select("*")
            .eq("user_name", user_name)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None
