"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeProgramRepository, create_exercise_repo

    # Direct instantiation
    repo = FakeProgramRepository()
    repo.seed([{"id": "p1", "author_id": "user1", "program_name": "PPL"}])

    # Factory function with pre-populated data
    repo = create_exercise_repo(names=["Squat", "Running"])
"""
from typing import List, Optional

from core.security import hash_password
from tests.fakes.exercise_repository import FakeExerciseRepository
from tests.fakes.program_repository import FakeProgramRepository
from tests.fakes.user_repository import FakeUserRepository


# =============================================================================
# Factory Functions
# =============================================================================


def create_exercise_repo(
    *,
    names: Optional[List[str]] = None,
) -> FakeExerciseRepository:
    """
    Create a FakeExerciseRepository with one catalog entry per name.

    Args:
        names: Exercise names to add, in catalog order

    Returns:
        Pre-populated FakeExerciseRepository
    """
    repo = FakeExerciseRepository()
    for name in names or []:
        repo.create({"name": name})
    return repo


def create_user_repo(
    *,
    user_name: Optional[str] = None,
    password: str = "password",
) -> FakeUserRepository:
    """
    Create a FakeUserRepository, optionally with one registered user.

    The stored password is hashed exactly like a real registration.

    Args:
        user_name: userName of the user to create, or None for an empty store
        password: Plain password for that user

    Returns:
        Pre-populated FakeUserRepository
    """
    repo = FakeUserRepository()
    if user_name:
        repo.create({
            "first_name": "Test",
            "last_name": "User",
            "user_name": user_name,
            "password_hash": hash_password(password),
        })
    return repo


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Fake implementations
    "FakeExerciseRepository",
    "FakeProgramRepository",
    "FakeUserRepository",
    # Factory functions
    "create_exercise_repo",
    "create_user_repo",
]
