"""
Database infrastructure package.

Supabase-backed implementations of the repository interfaces defined in
application.ports. Tables:
- users: registered users and their credential hashes
- exercises: the exercise catalog
- programs: training programs with an embedded jsonb schedule
"""

from infrastructure.db.exercise_repository import SupabaseExerciseRepository
from infrastructure.db.program_repository import SupabaseProgramRepository
from infrastructure.db.user_repository import SupabaseUserRepository

__all__ = [
    "SupabaseExerciseRepository",
    "SupabaseProgramRepository",
    "SupabaseUserRepository",
]
