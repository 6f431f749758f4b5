"""
Supabase implementation of ProgramRepository.

This implementation uses the Supabase Python client to interact with
the programs table. The schedule is a jsonb column, so every create,
update and delete is a single-row write.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

from postgrest.exceptions import APIError
from supabase import Client

from application.exceptions import InternalError
from core.identifiers import is_valid_id

logger = logging.getLogger(__name__)


def _apply_filters(query, filters: Optional[Dict]):
    """Add equality predicates to a query builder."""
    for column, value in (filters or {}).items():
        if column == "categories":
            query = query.contains("categories", [value])
        else:
            query = query.eq(column, value)
    return query


class SupabaseProgramRepository:
    """
    Supabase-backed program repository implementation.

    Queries against the programs table:
    - program_name, categories: free text
    - author_id: FK to users.id
    - schedule: jsonb list of days with embedded exercise references
    """

    def __init__(self, client: Client):
        """
        Initialize repository with Supabase client.

        Args:
            client: Authenticated Supabase client
        """
        self._client = client

    def list(self, filters: Optional[Dict] = None) -> List[Dict]:
        """
        Get programs matching filters, oldest first.

        Args:
            filters: Optional equality predicates

        Returns:
            List of program dictionaries
        """
        query = self._client.table("programs").select("*")
        response = (
            _apply_filters(query, filters)
            .order("created_at")
            .order("id")
            .execute()
        )
        return response.data

    def count(self, filters: Optional[Dict] = None) -> int:
        """
        Count programs matching filters.

        Args:
            filters: Optional equality predicates

        Returns:
            Number of matching programs
        """
        query = self._client.table("programs").select("id", count="exact")
        response = _apply_filters(query, filters).execute()
        return response.count or 0

    def get_by_id(self, program_id: str) -> Optional[Dict]:
        """
        Get a program by its ID.

        Args:
            program_id: The program's UUID as string

        Returns:
            Program dictionary if found, None otherwise
        """
        if not is_valid_id(program_id):
            return None
        response = (
            self._client.table("programs")
            .select("*")
            .eq("id", program_id)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    def create(self, data: Dict) -> Dict:
        """
        Create a new program.

        Args:
            data: Program data dictionary

        Returns:
            Created program dictionary with generated ID
        """
        try:
            response = self._client.table("programs").insert(data).execute()
        except APIError as e:
            raise InternalError(f"Program insert failed: {e}") from e
        return response.data[0]

    def update(self, program_id: str, data: Dict) -> Optional[Dict]:
        """
        Update an existing program.

        Args:
            program_id: The program's UUID as string
            data: Columns to replace

        Returns:
            Updated program dictionary, None if not found
        """
        if not is_valid_id(program_id):
            return None
        try:
            response = (
                self._client.table("programs")
                .update({**data, "updated_at": datetime.now(timezone.utc).isoformat()})
                .eq("id", program_id)
                .execute()
            )
        except APIError as e:
            raise InternalError(f"Program update failed: {e}") from e
        return response.data[0] if response.data else None

    def delete(self, program_id: str) -> bool:
        """
        Delete a program.

        Args:
            program_id: The program's UUID as string

        Returns:
            True if deleted, False if not found
        """
        if not is_valid_id(program_id):
            return False
        try:
            response = (
                self._client.table("programs")
                .delete()
                .eq("id", program_id)
                .execute()
            )
        except APIError as e:
            raise InternalError(f"Program delete failed: {e}") from e
        return len(response.data) > 0
