"""
Infrastructure layer for the program tracker.

This package contains concrete implementations of the port interfaces:
- db/: Supabase database implementations
"""

from infrastructure.db import (
    SupabaseExerciseRepository,
    SupabaseProgramRepository,
    SupabaseUserRepository,
)

__all__ = [
    "SupabaseExerciseRepository",
    "SupabaseProgramRepository",
    "SupabaseUserRepository",
]
