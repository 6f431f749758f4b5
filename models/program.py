"""
Domain models for training programs.

A program embeds its schedule: an ordered list of days, each holding an
ordered list of exercise entries. An entry references a catalog exercise
by ID and takes exactly one of two shapes, sets/reps or distance/time.
Field names on the wire are camelCase (programName); storage columns are
snake_case (program_name).
"""

from typing import Annotated, Any, List, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    field_validator,
)

from core.constants import (
    MAX_CATEGORIES_COUNT,
    MAX_CATEGORY_LENGTH,
    MAX_DAY_NAME_LENGTH,
    MAX_PROGRAM_NAME_LENGTH,
    MAX_SCHEDULE_DAYS,
)
from core.sanitization import unique_tags


# =============================================================================
# Schedule
# =============================================================================


# Strict: "3" or 10.0 is not a count. An int measure stays an int.
Count = Annotated[StrictInt, Field(ge=0)]
Measure = Union[Annotated[StrictInt, Field(ge=0)], Annotated[StrictFloat, Field(ge=0)]]


class SetsRepsEntry(BaseModel):
    """Strength-style schedule entry: sets x reps of a catalog exercise."""

    model_config = ConfigDict(extra="forbid")

    exercise: str = Field(min_length=1, description="Exercise ID")
    sets: Count
    reps: Count


class DistanceTimeEntry(BaseModel):
    """Cardio-style schedule entry: distance covered in a given time."""

    model_config = ConfigDict(extra="forbid")

    exercise: str = Field(min_length=1, description="Exercise ID")
    distance: Measure
    time: Measure


# Both variants forbid extra keys, so a mixed or partial shape matches neither.
ScheduleExercise = Union[SetsRepsEntry, DistanceTimeEntry]


class ScheduleDay(BaseModel):
    """A named training day within a program schedule."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=MAX_DAY_NAME_LENGTH)
    exercises: List[ScheduleExercise] = Field(default_factory=list)


def schedule_exercise_ids(schedule: List[ScheduleDay]) -> List[str]:
    """Every exercise ID referenced by schedule, in schedule order."""
    return [entry.exercise for day in schedule for entry in day.exercises]


def _clean_categories(v: Any) -> Any:
    if isinstance(v, list):
        if len(v) > MAX_CATEGORIES_COUNT:
            raise ValueError(
                f"Too many categories. Maximum allowed: {MAX_CATEGORIES_COUNT}"
            )
        if all(isinstance(item, str) for item in v):
            tags = unique_tags(v)
            too_long = [tag for tag in tags if len(tag) > MAX_CATEGORY_LENGTH]
            if too_long:
                raise ValueError(
                    f"Category too long (max {MAX_CATEGORY_LENGTH} characters): {too_long[0]!r}"
                )
            return tags
    return v


# =============================================================================
# Requests
# =============================================================================


class ProgramCreate(BaseModel):
    """Request model for creating a program. The author comes from the token."""

    model_config = ConfigDict(populate_by_name=True)

    program_name: str = Field(
        alias="programName", min_length=1, max_length=MAX_PROGRAM_NAME_LENGTH
    )
    categories: List[str] = Field(default_factory=list)
    schedule: List[ScheduleDay] = Field(
        default_factory=list, max_length=MAX_SCHEDULE_DAYS
    )

    @field_validator("categories", mode="before")
    @classmethod
    def validate_categories(cls, v: Any) -> Any:
        """Treat categories as an ordered set of trimmed tags."""
        return _clean_categories(v)


class ProgramUpdate(BaseModel):
    """
    Request model for PUT updates to a program.

    Only the fields present in the body are applied. The author cannot be
    changed; an "author" key is ignored. If "id" is present it must match
    the path.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[str] = None
    program_name: Optional[str] = Field(
        None, alias="programName", min_length=1, max_length=MAX_PROGRAM_NAME_LENGTH
    )
    categories: Optional[List[str]] = None
    schedule: Optional[List[ScheduleDay]] = Field(None, max_length=MAX_SCHEDULE_DAYS)

    @field_validator("program_name", "categories", "schedule")
    @classmethod
    def reject_explicit_null(cls, v: Any) -> Any:
        """A field that is sent must carry a value."""
        if v is None:
            raise ValueError("Field may be omitted but not null")
        return v

    @field_validator("categories", mode="before")
    @classmethod
    def validate_categories(cls, v: Any) -> Any:
        """Treat categories as an ordered set of trimmed tags."""
        return _clean_categories(v)


# =============================================================================
# Responses
# =============================================================================


class ProgramPublic(BaseModel):
    """
    Public projection of a program.

    author is the author's userName (None if the user cannot be resolved);
    schedule entries carry the exercise ID.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    program_name: str = Field(alias="programName")
    author: Optional[str] = None
    categories: List[str] = Field(default_factory=list)
    schedule: List[ScheduleDay] = Field(default_factory=list)
