"""Models package for the program tracker API."""

from models.auth import AuthTokenResponse, LoginRequest
from models.exercise import ExerciseCreate, ExercisePublic
from models.program import (
    DistanceTimeEntry,
    ProgramCreate,
    ProgramPublic,
    ProgramUpdate,
    ScheduleDay,
    ScheduleExercise,
    SetsRepsEntry,
)
from models.user import UserPublic, UserRegister

__all__ = [
    "AuthTokenResponse",
    "LoginRequest",
    "ExerciseCreate",
    "ExercisePublic",
    "DistanceTimeEntry",
    "ProgramCreate",
    "ProgramPublic",
    "ProgramUpdate",
    "ScheduleDay",
    "ScheduleExercise",
    "SetsRepsEntry",
    "UserPublic",
    "UserRegister",
]
