"""
Program service.

Orchestrates program persistence with referential checks:
1. The author must resolve to an existing user
2. Every schedule entry must resolve to an existing catalog exercise
3. Only then is the single program row written

Reads join the author back to a userName. A missing author at read time
is an internal consistency fault; it is logged and rendered as None rather
than failing the request.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from application.exceptions import NotFoundError, ValidationError
from application.ports import ExerciseRepository, ProgramRepository, UserRepository
from models.program import ScheduleDay, schedule_exercise_ids

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("program_name", "categories", "schedule")


@dataclass
class ProgramFilter:
    """Equality predicates for listing programs. None means "any"."""

    program_name: Optional[str] = None
    author: Optional[str] = None  # userName, not ID
    category: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.program_name is None and self.author is None and self.category is None


def _dump_schedule(schedule: List[ScheduleDay]) -> List[Dict]:
    return [day.model_dump() for day in schedule]


class ProgramService:
    """
    CRUD over programs with reference validation and the author join.

    Dependencies are injected via constructor for testability.

    Usage:
        >>> service = ProgramService(program_repo, user_repo, exercise_repo)
        >>> program = service.create(user_id, "Push Pull Legs", ["legs"], schedule)
        >>> service.author_names([program])
        {'a3f1...': 'authuser'}
    """

    def __init__(
        self,
        program_repo: ProgramRepository,
        user_repo: UserRepository,
        exercise_repo: ExerciseRepository,
    ) -> None:
        self._program_repo = program_repo
        self._user_repo = user_repo
        self._exercise_repo = exercise_repo

    # -------------------------------------------------------------------------
    # Reference checks
    # -------------------------------------------------------------------------

    def _check_author(self, author_id: str) -> None:
        if self._user_repo.get_by_id(author_id) is None:
            raise ValidationError(f"Unknown author {author_id}")

    def _check_exercises(self, schedule: List[ScheduleDay]) -> None:
        requested = list(dict.fromkeys(schedule_exercise_ids(schedule)))
        if not requested:
            return
        found = {e["id"] for e in self._exercise_repo.get_by_ids(requested)}
        missing = [exercise_id for exercise_id in requested if exercise_id not in found]
        if missing:
            raise ValidationError(f"Unknown exercise id(s): {', '.join(missing)}")

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def create(
        self,
        author_id: str,
        program_name: str,
        categories: List[str],
        schedule: List[ScheduleDay],
    ) -> Dict:
        """
        Create a program owned by author_id.

        Raises:
            ValidationError: If the author or any schedule exercise does not exist
        """
        self._check_author(author_id)
        self._check_exercises(schedule)

        created = self._program_repo.create(
            {
                "program_name": program_name,
                "author_id": author_id,
                "categories": list(categories),
                "schedule": _dump_schedule(schedule),
            }
        )
        logger.info(f"Created program {created['id']} for user {author_id}")
        return created

    def update(self, program_id: str, fields: Dict) -> Dict:
        """
        Apply a partial update.

        Only program_name, categories and schedule are considered; any other
        key (notably author_id) is ignored. A replaced schedule is validated
        like on create.

        Raises:
            NotFoundError: If the program does not exist
            ValidationError: If the new schedule references unknown exercises
        """
        existing = self.find_by_id(program_id)

        changes = {key: fields[key] for key in UPDATABLE_FIELDS if key in fields}
        if not changes:
            return existing

        if "schedule" in changes:
            self._check_exercises(changes["schedule"])
            changes["schedule"] = _dump_schedule(changes["schedule"])
        if "categories" in changes:
            changes["categories"] = list(changes["categories"])

        updated = self._program_repo.update(program_id, changes)
        if updated is None:
            # Deleted between the read and the write
            raise NotFoundError(f"Program {program_id} not found")
        logger.info(f"Updated program {program_id}: {sorted(changes)}")
        return updated

    def delete(self, program_id: str) -> None:
        """
        Delete a program.

        Raises:
            NotFoundError: If the program does not exist (including a repeat delete)
        """
        if not self._program_repo.delete(program_id):
            raise NotFoundError(f"Program {program_id} not found")
        logger.info(f"Deleted program {program_id}")

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def find_by_id(self, program_id: str) -> Dict:
        """
        Raises:
            NotFoundError: If the program does not exist
        """
        program = self._program_repo.get_by_id(program_id)
        if program is None:
            raise NotFoundError(f"Program {program_id} not found")
        return program

    def _predicates(self, program_filter: Optional[ProgramFilter]) -> Optional[Dict]:
        """
        Translate a filter into repository predicates.

        Returns None when the filter cannot match anything (unknown author).
        """
        predicates: Dict = {}
        if program_filter is None or program_filter.is_empty:
            return predicates
        if program_filter.program_name is not None:
            predicates["program_name"] = program_filter.program_name
        if program_filter.category is not None:
            predicates["categories"] = program_filter.category
        if program_filter.author is not None:
            author = self._user_repo.get_by_user_name(program_filter.author)
            if author is None:
                return None
            predicates["author_id"] = author["id"]
        return predicates

    def list(self, program_filter: Optional[ProgramFilter] = None) -> List[Dict]:
        """Programs matching program_filter in creation order."""
        predicates = self._predicates(program_filter)
        if predicates is None:
            return []
        return self._program_repo.list(predicates or None)

    def count(self, program_filter: Optional[ProgramFilter] = None) -> int:
        """Number of programs list() would return for the same filter."""
        predicates = self._predicates(program_filter)
        if predicates is None:
            return 0
        return self._program_repo.count(predicates or None)

    def author_names(self, programs: Iterable[Dict]) -> Dict[str, str]:
        """
        Resolve author IDs to userNames with one batch lookup.

        IDs that do not resolve are logged and left out of the result.
        """
        author_ids = list(dict.fromkeys(p["author_id"] for p in programs if p.get("author_id")))
        if not author_ids:
            return {}
        names = {u["id"]: u["user_name"] for u in self._user_repo.get_by_ids(author_ids)}
        for author_id in author_ids:
            if author_id not in names:
                logger.error(f"Program author {author_id} does not resolve to a user")
        return names
