"""
Routine Repository Interface (Port).

This module defines the abstract interface for routine persistence.
Exercise IDs inside a routine are not validated against the catalog.
"""
from typing import List, Optional, Protocol

from domain.models import Routine, RoutineCreate, RoutinePatch


class RoutineRepository(Protocol):
    """
    Abstract interface for routine persistence operations.
    """

    def get_routine(self, routine_id: int) -> Optional[Routine]:
        """
        Get a single routine by ID.

        Args:
            routine_id: Routine ID

        Returns:
            Routine or None if not found
        """
        ...

    def get_routines_by_user(self, user_id: int) -> List[Routine]:
        """
        Get all routines owned by a user.

        Args:
            user_id: Owning user ID

        Returns:
            The user's routines
        """
        ...

    def create_routine(self, data: RoutineCreate) -> Routine:
        """
        Store a new routine, assigning an ID and stamping ``created_at``.

        Args:
            data: Routine payload

        Returns:
            The stored routine
        """
        ...

    def update_routine(self, routine_id: int, patch: RoutinePatch) -> Routine:
        """
        Merge the fields set on ``patch`` into an existing routine.

        Args:
            routine_id: Routine ID
            patch: Fields to change

        Returns:
            The merged routine

        Raises:
            EntityNotFoundError: If no routine has this ID
        """
        ...

    def delete_routine(self, routine_id: int) -> None:
        """
        Delete a routine. Workouts referencing it are left untouched.

        Args:
            routine_id: Routine ID

        Raises:
            EntityNotFoundError: If no routine has this ID
        """
        ...
