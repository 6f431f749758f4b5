"""
Training programs CRUD router.

This router provides endpoints for managing training programs:
- List programs (with optional equality filters)
- Get a single program
- Create new programs (author taken from the bearer token)
- Update programs (partial field replacement)
- Delete programs (hard delete)

Every endpoint requires a valid bearer token. The author field of the
response is the author's userName, joined at read time.
"""

import logging
from typing import Dict, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response

from api.deps import get_current_user, get_program_service
from application.exceptions import ValidationError
from models.program import ProgramCreate, ProgramPublic, ProgramUpdate
from services import ProgramFilter, ProgramService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/programs",
    tags=["Programs"],
)


# =============================================================================
# Helper Functions
# =============================================================================


def _build_program(program: dict, author_names: Dict[str, str]) -> ProgramPublic:
    """
    Build the public projection of a stored program.

    Args:
        program: Program dictionary from the repository
        author_names: author_id -> userName lookup from ProgramService.author_names

    Returns:
        ProgramPublic model instance
    """
    return ProgramPublic(
        id=program["id"],
        program_name=program["program_name"],
        author=author_names.get(program.get("author_id")),
        categories=program.get("categories") or [],
        schedule=program.get("schedule") or [],
    )


def _same_id(body_id: str, program_id: str) -> bool:
    """Compare ids as UUIDs when both parse, so letter case does not matter."""
    try:
        return UUID(body_id) == UUID(program_id)
    except ValueError:
        return body_id == program_id


# =============================================================================
# List Programs
# =============================================================================


@router.get("", response_model=List[ProgramPublic])
async def list_programs(
    user_id: str = Depends(get_current_user),
    service: ProgramService = Depends(get_program_service),
    program_name: Optional[str] = Query(
        None, alias="programName", description="Exact program name"
    ),
    author: Optional[str] = Query(None, description="Author userName"),
    category: Optional[str] = Query(
        None, description="Programs tagged with this category"
    ),
) -> List[ProgramPublic]:
    """
    List training programs in creation order.

    Query parameters are equality filters; omitted parameters match anything.
    """
    program_filter = ProgramFilter(
        program_name=program_name,
        author=author,
        category=category,
    )
    logger.info(f"Listing programs for user {user_id}, filter={program_filter}")

    programs = service.list(program_filter)
    names = service.author_names(programs)
    return [_build_program(p, names) for p in programs]


# =============================================================================
# Get Program
# =============================================================================


@router.get("/{program_id}", response_model=ProgramPublic)
async def get_program(
    program_id: str,
    user_id: str = Depends(get_current_user),
    service: ProgramService = Depends(get_program_service),
) -> ProgramPublic:
    """
    Get a specific training program by ID.

    Raises:
        404: Program not found
    """
    program = service.find_by_id(program_id)
    return _build_program(program, service.author_names([program]))


# =============================================================================
# Create Program
# =============================================================================


@router.post("", response_model=ProgramPublic, status_code=201)
async def create_program(
    program: ProgramCreate,
    user_id: str = Depends(get_current_user),
    service: ProgramService = Depends(get_program_service),
) -> ProgramPublic:
    """
    Create a new training program owned by the authenticated user.

    Any author in the body is ignored. The schedule is stored and echoed
    exactly as submitted.

    Raises:
        400: Validation failure or an exercise/author that does not exist
    """
    logger.info(f"Creating program '{program.program_name}' for user {user_id}")

    created = service.create(
        author_id=user_id,
        program_name=program.program_name,
        categories=program.categories,
        schedule=program.schedule,
    )
    return _build_program(created, service.author_names([created]))


# =============================================================================
# Update Program
# =============================================================================


@router.put("/{program_id}", response_model=ProgramPublic)
async def update_program(
    program_id: str,
    update: ProgramUpdate,
    user_id: str = Depends(get_current_user),
    service: ProgramService = Depends(get_program_service),
) -> ProgramPublic:
    """
    Update an existing training program.

    Only programName, categories and schedule present in the body are
    replaced; the author never changes.

    Raises:
        400: Body id differs from path id, or validation failure
        404: Program not found
    """
    if update.id is not None and not _same_id(update.id, program_id):
        raise ValidationError(
            f"Request path id ({program_id}) and request body id ({update.id}) must match"
        )

    logger.info(f"Updating program {program_id} for user {user_id}")

    fields = {
        key: getattr(update, key)
        for key in ("program_name", "categories", "schedule")
        if key in update.model_fields_set
    }
    updated = service.update(program_id, fields)
    return _build_program(updated, service.author_names([updated]))


# =============================================================================
# Delete Program
# =============================================================================


@router.delete("/{program_id}", status_code=204)
async def delete_program(
    program_id: str,
    user_id: str = Depends(get_current_user),
    service: ProgramService = Depends(get_program_service),
) -> Response:
    """
    Delete a training program permanently.

    Raises:
        404: Program not found (including a repeated delete)
    """
    logger.info(f"Deleting program {program_id} for user {user_id}")
    service.delete(program_id)
    return Response(status_code=204)
