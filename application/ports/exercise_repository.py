"""
Exercise repository port (interface).

This Protocol defines the contract for the exercise catalog.
Infrastructure implementations (e.g., Supabase) must satisfy this interface.
"""

from typing import Dict, List, Optional, Protocol


class ExerciseRepository(Protocol):
    """
    Repository interface for catalog exercises.

    Exercises are reference data: programs point at them by ID from their
    schedule entries. They are created by catalog seeding and never mutated.
    """

    def create(self, data: Dict) -> Dict:
        """
        Create a new exercise.

        Args:
            data: Exercise data dictionary (name)

        Returns:
            Created exercise dictionary with generated ID
        """
        ...

    def get_by_id(self, exercise_id: str) -> Optional[Dict]:
        """
        Get an exercise by its ID.

        Args:
            exercise_id: The exercise's UUID as string

        Returns:
            Exercise dictionary if found, None otherwise
        """
        ...

    def get_by_ids(self, exercise_ids: List[str]) -> List[Dict]:
        """
        Get all exercises whose ID is in exercise_ids.

        Unknown IDs are silently skipped; callers compare the result
        against the request to find unresolved references.

        Args:
            exercise_ids: List of exercise UUIDs as strings

        Returns:
            List of exercise dictionaries (order not guaranteed)
        """
        ...

    def get_all(self) -> List[Dict]:
        """
        Get the full catalog in creation order.

        Returns:
            List of exercise dictionaries
        """
        ...
