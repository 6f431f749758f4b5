"""
API package for the program tracker.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_current_user,
    get_exercise_repo,
    get_program_repo,
    get_program_service,
    get_settings,
    get_user_repo,
)

__all__ = [
    "get_current_user",
    "get_exercise_repo",
    "get_program_repo",
    "get_program_service",
    "get_settings",
    "get_user_repo",
]
