"""
FastAPI Dependency Providers for the program tracker API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository and service providers create new instances per-request
- The auth guard resolves the bearer token to a user ID before any
  handler touches the store

Usage in routers:
    from api.deps import get_current_user, get_program_service
    from services import ProgramService

    @router.get("/programs")
    async def list_programs(
        user_id: str = Depends(get_current_user),
        service: ProgramService = Depends(get_program_service),
    ):
        return service.list()

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_program_repo] = lambda: FakeProgramRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

from application.exceptions import AuthenticationError
from application.ports import ExerciseRepository, ProgramRepository, UserRepository
from backend.settings import Settings, get_settings as _get_settings
from infrastructure.db import (
    SupabaseExerciseRepository,
    SupabaseProgramRepository,
    SupabaseUserRepository,
)
from services import AuthService, ProgramService, UserService
from services.auth_service import decode_token


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_user_repo(
    client: Client = Depends(get_supabase_client_required),
) -> UserRepository:
    """Get UserRepository implementation."""
    return SupabaseUserRepository(client)


def get_exercise_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ExerciseRepository:
    """Get ExerciseRepository implementation."""
    return SupabaseExerciseRepository(client)


def get_program_repo(
    client: Client = Depends(get_supabase_client_required),
) -> ProgramRepository:
    """
    Get ProgramRepository implementation.

    Returns a SupabaseProgramRepository instance with injected client.
    The return type is the Protocol to enable easy mocking.

    Args:
        client: Supabase client (injected)

    Returns:
        ProgramRepository: Repository for program persistence
    """
    return SupabaseProgramRepository(client)


# =============================================================================
# Service Providers
# =============================================================================


def get_auth_service(
    user_repo: UserRepository = Depends(get_user_repo),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    """Get AuthService wired to the user store and token settings."""
    return AuthService(user_repo=user_repo, settings=settings)


def get_user_service(
    user_repo: UserRepository = Depends(get_user_repo),
) -> UserService:
    """Get UserService wired to the user store."""
    return UserService(user_repo=user_repo)


def get_program_service(
    program_repo: ProgramRepository = Depends(get_program_repo),
    user_repo: UserRepository = Depends(get_user_repo),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
) -> ProgramService:
    """Get ProgramService wired to the program, user and exercise stores."""
    return ProgramService(
        program_repo=program_repo,
        user_repo=user_repo,
        exercise_repo=exercise_repo,
    )


# =============================================================================
# Authentication Providers
# =============================================================================


def _bearer_token(authorization: Optional[str]) -> str:
    """
    Extract the token from an Authorization header.

    Raises:
        AuthenticationError: If the header is missing or not a Bearer credential
    """
    if not authorization:
        raise AuthenticationError("Missing authorization header")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError("Invalid authorization header format")

    return token.strip()


async def get_token_claims(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> dict:
    """
    Validate the bearer token and return its claims.

    Only settings are needed to check a token, so this guard runs without
    touching the database.

    Raises:
        AuthenticationError: 401 if authentication fails
    """
    return decode_token(settings, _bearer_token(authorization))


async def get_current_user(
    claims: dict = Depends(get_token_claims),
) -> str:
    """
    Get the current authenticated user ID.

    Returns:
        str: User ID from the token's sub claim

    Raises:
        AuthenticationError: 401 if authentication fails
    """
    return claims["sub"]


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_exercise_repo",
    "get_program_repo",
    "get_user_repo",
    # Services
    "get_auth_service",
    "get_program_service",
    "get_user_service",
    # Authentication
    "get_current_user",
    "get_token_claims",
]
