"""
User repository port (interface).

This Protocol defines the contract for user persistence.
Infrastructure implementations (e.g., Supabase) must satisfy this interface.
"""

from typing import Dict, List, Optional, Protocol


class UserRepository(Protocol):
    """
    Repository interface for registered users.

    Rows carry the stored credential hash under "password_hash"; callers
    are responsible for never serialising it.
    """

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
        ...

    def get_by_id(self, user_id: str) -> Optional[Dict]:
        """
        Get a user by ID.

        Args:
            user_id: The user's UUID as string

        Returns:
            User dictionary if found, None otherwise
        """
        ...

    def get_by_ids(self, user_ids: List[str]) -> List[Dict]:
        """
        Get all users whose ID is in user_ids.

        Unknown IDs are silently skipped.

        Args:
            user_ids: List of user UUIDs as strings

        Returns:
            List of user dictionaries (order not guaranteed)
        """
        ...

    def get_by_user_name(self, user_name: str) -> Optional[Dict]:
        """
        Get a user by their exact (case-sensitive) userName.

        Args:
            user_name: The login name

        Returns:
            User dictionary if found, None otherwise
        """
        ...
