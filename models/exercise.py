"""Models for the exercise catalog."""

from pydantic import BaseModel, Field

from core.constants import MAX_EXERCISE_NAME_LENGTH


class ExerciseCreate(BaseModel):
    """Request model for adding a catalog exercise."""

    name: str = Field(min_length=1, max_length=MAX_EXERCISE_NAME_LENGTH)


class ExercisePublic(BaseModel):
    """Public projection of a catalog exercise."""

    id: str
    name: str
