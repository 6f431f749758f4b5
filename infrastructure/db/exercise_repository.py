"""
Supabase implementation of ExerciseRepository.

This implementation uses the Supabase Python client to interact with
the exercises catalog table.
"""

import logging
from typing import Dict, List, Optional

from supabase import Client

from core.identifiers import is_valid_id, valid_ids

logger = logging.getLogger(__name__)


class SupabaseExerciseRepository:
    """
    Supabase-backed exercise repository implementation.

    Queries against the exercises table which stores the catalog entries
    that program schedules reference.
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
        Create a new exercise.

        Args:
            data: Exercise data dictionary

        Returns:
            Created exercise dictionary with generated ID
        """
        response = self._client.table("exercises").insert(data).execute()
        return response.data[0]

    def get_by_id(self, exercise_id: str) -> Optional[Dict]:
        """
        Get an exercise by its ID.

        Args:
            exercise_id: The exercise's UUID as string

        Returns:
            Exercise dictionary if found, None otherwise
        """
        if not is_valid_id(exercise_id):
            return None
        response = (
            self._client.table("exercises")
            .select("*")
            .eq("id", exercise_id)
            .limit(1)
            .execute()
        )
        return response.data[0] if response.data else None

    def get_by_ids(self, exercise_ids: List[str]) -> List[Dict]:
        """
        Get all exercises whose ID is in exercise_ids.

        Args:
            exercise_ids: List of exercise UUIDs as strings

        Returns:
            List of exercise dictionaries
        """
        ids = valid_ids(exercise_ids)
        if not ids:
            return []
        response = (
            self._client.table("exercises")
            .select("*")
            .in_("id", ids)
            .execute()
        )
        return response.data

    def get_all(self) -> List[Dict]:
        """
        Get the full catalog in creation order.

        Returns:
            List of exercise dictionaries
        """
        response = (
            self._client.table("exercises")
            .select("*")
            .order("created_at")
            .order("id")
            .execute()
        )
        return response.data
