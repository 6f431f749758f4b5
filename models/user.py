"""
Models for user registration.

Every registration field is a required string. Names are trimmed, and
credentials must not carry leading or trailing whitespace.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.constants import (
    MAX_PASSWORD_LENGTH,
    MAX_PERSON_NAME_LENGTH,
    MAX_USER_NAME_LENGTH,
    MIN_PASSWORD_LENGTH,
)
from core.sanitization import has_surrounding_whitespace


class UserRegister(BaseModel):
    """Request model for POST /users/register."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(
        alias="firstName", min_length=1, max_length=MAX_PERSON_NAME_LENGTH
    )
    last_name: str = Field(
        alias="lastName", min_length=1, max_length=MAX_PERSON_NAME_LENGTH
    )
    user_name: str = Field(
        alias="userName", min_length=1, max_length=MAX_USER_NAME_LENGTH
    )
    password: str = Field(
        min_length=MIN_PASSWORD_LENGTH, max_length=MAX_PASSWORD_LENGTH
    )

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def trim_names(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @field_validator("user_name", "password", mode="before")
    @classmethod
    def reject_surrounding_whitespace(cls, v: Any) -> Any:
        """Credentials are compared verbatim, so silent trimming would lock users out."""
        if isinstance(v, str) and has_surrounding_whitespace(v):
            raise ValueError("Cannot start or end with whitespace")
        return v


class UserPublic(BaseModel):
    """Public projection of a user. The credential hash is never included."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    user_name: str = Field(alias="userName")
