"""
Program repository port (interface).

This Protocol defines the contract for program persistence operations.
Infrastructure implementations (e.g., Supabase) must satisfy this interface.
"""

from typing import Dict, List, Optional, Protocol


class ProgramRepository(Protocol):
    """
    Repository interface for training program persistence.

    All methods work with dictionaries for flexibility.
    The schedule is stored as an embedded document; references to users
    and exercises are plain ID fields resolved by the service layer.

    Filters are dictionaries of equality predicates on top-level columns.
    The special key "categories" matches programs whose categories
    contain the given value.
    """

    def list(self, filters: Optional[Dict] = None) -> List[Dict]:
        """
        Get programs matching filters, oldest first.

        Args:
            filters: Optional equality predicates

        Returns:
            List of program dictionaries in creation order
        """
        ...

    def count(self, filters: Optional[Dict] = None) -> int:
        """
        Count programs matching filters.

        Must agree with len(list(filters)).

        Args:
            filters: Optional equality predicates

        Returns:
            Number of matching programs
        """
        ...

    def get_by_id(self, program_id: str) -> Optional[Dict]:
        """
        Get a program by its ID.

        Args:
            program_id: The program's UUID as string

        Returns:
            Program dictionary if found, None otherwise
        """
        ...

    def create(self, data: Dict) -> Dict:
        """
        Create a new program.

        Args:
            data: Program data dictionary

        Returns:
            Created program dictionary with generated ID
        """
        ...

    def update(self, program_id: str, data: Dict) -> Optional[Dict]:
        """
        Update an existing program.

        Args:
            program_id: The program's UUID as string
            data: Columns to replace

        Returns:
            Updated program dictionary, None if not found
        """
        ...

    def delete(self, program_id: str) -> bool:
        """
        Delete a program.

        Args:
            program_id: The program's UUID as string

        Returns:
            True if deleted, False if not found
        """
        ...
