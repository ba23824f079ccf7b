"""
ManageRoutines Use Case.

Thin orchestration over the routine table: lookups raise instead of
returning None so the HTTP layer can answer 404.
"""

import logging
from typing import List

from application.ports import RoutineRepository
from domain.errors import EntityNotFoundError
from domain.models import Routine, RoutineCreate, RoutinePatch

logger = logging.getLogger(__name__)


class ManageRoutinesUseCase:
    """
    Use case for routine CRUD.

    Deleting a routine leaves workouts that reference it untouched.
    """

    def __init__(self, routine_repo: RoutineRepository):
        """
        Initialize with required dependencies.

        Args:
            routine_repo: Repository for routine persistence
        """
        self._routine_repo = routine_repo

    def list_routines(self, user_id: int) -> List[Routine]:
        return self._routine_repo.get_routines_by_user(user_id)

    def get_routine(self, routine_id: int) -> Routine:
        """
        Get a routine by ID.

        Raises:
            EntityNotFoundError: If no routine has this ID
        """
        routine = self._routine_repo.get_routine(routine_id)
        if routine is None:
            raise EntityNotFoundError("Routine", routine_id)
        return routine

    def create_routine(self, data: RoutineCreate) -> Routine:
        routine = self._routine_repo.create_routine(data)
        logger.info(
            "Created routine %s for user %s with %d exercises",
            routine.id,
            routine.user_id,
            len(routine.exercises),
        )
        return routine

    def update_routine(self, routine_id: int, patch: RoutinePatch) -> Routine:
        return self._routine_repo.update_routine(routine_id, patch)

    def delete_routine(self, routine_id: int) -> None:
        self._routine_repo.delete_routine(routine_id)
        logger.info("Deleted routine %s", routine_id)
