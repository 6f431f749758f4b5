"""
Router package for the program tracker API.

This package contains all API routers organized by domain:
- health: Health check endpoints
- users: Registration and the current user's profile
- auth: Login and token refresh
- exercises: Exercise catalog
- programs: Training program CRUD operations
"""

from api.routers.auth import router as auth_router
from api.routers.exercises import router as exercises_router
from api.routers.health import router as health_router
from api.routers.programs import router as programs_router
from api.routers.users import router as users_router

__all__ = [
    "auth_router",
    "exercises_router",
    "health_router",
    "programs_router",
    "users_router",
]
