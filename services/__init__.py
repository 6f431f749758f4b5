"""
Services for the program tracker.

- auth_service: Login, token issuance and verification
- user_service: Registration and user lookup
- program_service: Program CRUD with reference checks and the author join
"""

from services.auth_service import AuthService
from services.program_service import ProgramFilter, ProgramService
from services.user_service import UserService

__all__ = [
    "AuthService",
    "ProgramFilter",
    "ProgramService",
    "UserService",
]
