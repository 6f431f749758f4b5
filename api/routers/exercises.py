"""
Exercise catalog router.

Program schedules reference these entries by ID. All endpoints require
a bearer token.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from api.deps import get_current_user, get_exercise_repo
from application.exceptions import NotFoundError
from application.ports import ExerciseRepository
from models.exercise import ExerciseCreate, ExercisePublic

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/exercises",
    tags=["Exercises"],
)


@router.get("", response_model=List[ExercisePublic])
async def list_exercises(
    user_id: str = Depends(get_current_user),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
) -> List[ExercisePublic]:
    """List the catalog in creation order."""
    return [ExercisePublic(id=e["id"], name=e["name"]) for e in exercise_repo.get_all()]


@router.get("/{exercise_id}", response_model=ExercisePublic)
async def get_exercise(
    exercise_id: str,
    user_id: str = Depends(get_current_user),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
) -> ExercisePublic:
    """
    Get a catalog exercise.

    Raises:
        404: Exercise not found
    """
    exercise = exercise_repo.get_by_id(exercise_id)
    if exercise is None:
        raise NotFoundError(f"Exercise {exercise_id} not found")
    return ExercisePublic(id=exercise["id"], name=exercise["name"])


@router.post("", response_model=ExercisePublic, status_code=201)
async def create_exercise(
    body: ExerciseCreate,
    user_id: str = Depends(get_current_user),
    exercise_repo: ExerciseRepository = Depends(get_exercise_repo),
) -> ExercisePublic:
    """Add an entry to the catalog."""
    created = exercise_repo.create({"name": body.name})
    logger.info(f"User {user_id} added exercise {created['id']} ({body.name!r})")
    return ExercisePublic(id=created["id"], name=created["name"])
