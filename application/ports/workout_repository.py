"""
Workout Repository Interface (Port).

This module defines the abstract interface for workout persistence.
``complete_workout`` is the only operation that touches another table: it
bumps the parent routine's ``last_completed``.
"""
from typing import List, Optional, Protocol

from domain.models import CompletedExercisePatch, Workout, WorkoutCreate, WorkoutPatch


class WorkoutRepository(Protocol):
    """
    Abstract interface for workout persistence operations.

    At most one active (uncompleted) workout per user is expected by
    convention; implementations do not enforce it.
    """

    def get_workout(self, workout_id: int) -> Optional[Workout]:
        """
        Get a single workout by ID.

        Args:
            workout_id: Workout ID

        Returns:
            Workout or None if not found
        """
        ...

    def get_workouts_by_user(self, user_id: int) -> List[Workout]:
        """
        Get all workouts for a user.

        Args:
            user_id: User ID

        Returns:
            The user's workouts
        """
        ...

    def get_active_workout_by_user(self, user_id: int) -> Optional[Workout]:
        """
        Get the first uncompleted workout for a user.

        No recency ordering is implied.

        Args:
            user_id: User ID

        Returns:
            Workout or None if the user has no active workout
        """
        ...

    def create_workout(self, data: WorkoutCreate) -> Workout:
        """
        Store a new workout, assigning an ID and stamping ``completed_at``.

        Args:
            data: Workout payload

        Returns:
            The stored workout
        """
        ...

    def update_workout(self, workout_id: int, patch: WorkoutPatch) -> Workout:
        """
        Merge the fields set on ``patch`` into an existing workout.

        Args:
            workout_id: Workout ID
            patch: Fields to change

        Returns:
            The merged workout

        Raises:
            EntityNotFoundError: If no workout has this ID
        """
        ...

    def update_workout_exercise(
        self,
        workout_id: int,
        exercise_id: int,
        patch: CompletedExercisePatch,
    ) -> Workout:
        """
        Merge ``patch`` into the workout entries whose exercise ID matches.

        An exercise ID with no matching entry leaves the workout unchanged.
        Never completes the workout by itself.

        Args:
            workout_id: Workout ID
            exercise_id: Exercise ID of the entry to change
            patch: Entry fields to change

        Returns:
            The updated workout

        Raises:
            EntityNotFoundError: If no workout has this ID
        """
        ...

    def complete_workout(self, workout_id: int, *, only_if_active: bool = False) -> Workout:
        """
        Mark a workout and all of its entries completed.

        Stamps ``completed_at`` and sets the referenced routine's
        ``last_completed`` to the same timestamp when the routine exists.

        Args:
            workout_id: Workout ID
            only_if_active: Leave an already completed workout untouched
                (no restamp); the check and the update are one atomic step

        Returns:
            The completed workout

        Raises:
            EntityNotFoundError: If no workout has this ID
        """
        ...
