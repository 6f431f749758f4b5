"""
Port interfaces (Protocols) for the program tracker.

This package defines the interface contracts that the infrastructure
layer must implement. Using Protocols enables:
- Clean separation of concerns
- Easy testing with fake implementations
- Dependency inversion (depend on abstractions, not concretions)
"""

from application.ports.exercise_repository import ExerciseRepository
from application.ports.program_repository import ProgramRepository
from application.ports.user_repository import UserRepository

__all__ = [
    "ExerciseRepository",
    "ProgramRepository",
    "UserRepository",
]
