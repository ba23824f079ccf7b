"""
RunWorkout Use Case.

Orchestrates a workout from start to finish:
1. Start: copy the routine's exercise list into a new workout, every entry
   not completed
2. Progress: update single entries as the user works through them
3. Finish: once every entry is completed (or the client flips ``completed``
   on the workout), complete it through the store, which also bumps the
   routine's ``last_completed``

The store only mutates what it is told to; deciding *when* a workout is
finished lives here.
"""

import logging
from typing import List

from application.ports import FitnessStore
from domain.errors import EntityNotFoundError
from domain.models import (
    CompletedExercise,
    CompletedExercisePatch,
    Workout,
    WorkoutCreate,
    WorkoutPatch,
)

logger = logging.getLogger(__name__)


class RunWorkoutUseCase:
    """
    Use case for starting, progressing and completing workouts.

    Usage:
        >>> use_case = RunWorkoutUseCase(store=store)
        >>> workout = use_case.start_workout(user_id=1, routine_id=3)
        >>> workout = use_case.complete_exercise(workout.id, exercise_id=1)
        >>> workout.completed
        True
    """

    def __init__(self, store: FitnessStore):
        """
        Initialize with required dependencies.

        Args:
            store: Store providing the routine and workout tables
        """
        self._store = store

    # =========================================================================
    # Lookups
    # =========================================================================

    def list_workouts(self, user_id: int) -> List[Workout]:
        return self._store.get_workouts_by_user(user_id)

    def get_workout(self, workout_id: int) -> Workout:
        """
        Get a workout by ID.

        Raises:
            EntityNotFoundError: If no workout has this ID
        """
        workout = self._store.get_workout(workout_id)
        if workout is None:
            raise EntityNotFoundError("Workout", workout_id)
        return workout

    def get_active_workout(self, user_id: int) -> Workout:
        """
        Get the user's uncompleted workout.

        Raises:
            EntityNotFoundError: If the user has no active workout
        """
        workout = self._store.get_active_workout_by_user(user_id)
        if workout is None:
            raise EntityNotFoundError("Active workout", user_id)
        return workout

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def start_workout(self, user_id: int, routine_id: int) -> Workout:
        """
        Start a workout from a routine.

        Args:
            user_id: User running the workout
            routine_id: Routine to copy exercises and duration from

        Returns:
            The new, uncompleted workout

        Raises:
            EntityNotFoundError: If the routine does not exist
        """
        routine = self._store.get_routine(routine_id)
        if routine is None:
            raise EntityNotFoundError("Routine", routine_id)

        active = self._store.get_active_workout_by_user(user_id)
        if active is not None:
            logger.warning(
                "User %s starts routine %s while workout %s is still active",
                user_id,
                routine_id,
                active.id,
            )

        workout = self._store.create_workout(
            WorkoutCreate(
                user_id=user_id,
                routine_id=routine.id,
                completed_exercises=[
                    CompletedExercise(**entry.model_dump(), completed=False)
                    for entry in routine.exercises
                ],
                duration=routine.duration,
                completed=False,
            )
        )
        logger.info("Started workout %s from routine %s", workout.id, routine.id)
        return workout

    def update_workout(self, workout_id: int, patch: WorkoutPatch) -> Workout:
        """
        Apply a partial update to a workout.

        When the patch flips ``completed`` from false to true the workout is
        completed through the store, so every entry is marked done and the
        routine's ``last_completed`` is bumped.

        Raises:
            EntityNotFoundError: If no workout has this ID
        """
        current = self.get_workout(workout_id)
        completing = patch.completed is True and not current.completed

        if not completing:
            return self._store.update_workout(workout_id, patch)

        remaining = {
            name: value for name, value in patch.changes().items() if name != "completed"
        }
        if remaining:
            self._store.update_workout(workout_id, WorkoutPatch.model_validate(remaining))
        return self._finish(workout_id)

    def update_exercise(
        self,
        workout_id: int,
        exercise_id: int,
        patch: CompletedExercisePatch,
    ) -> Workout:
        """
        Update one workout entry, completing the workout once all are done.

        An exercise ID that matches no entry changes nothing and is not an
        error.

        Raises:
            EntityNotFoundError: If no workout has this ID
        """
        workout = self._store.update_workout_exercise(workout_id, exercise_id, patch)
        if not workout.completed and workout.all_exercises_completed:
            logger.info("All exercises done in workout %s", workout_id)
            workout = self._finish(workout_id)
        return workout

    def complete_exercise(self, workout_id: int, exercise_id: int) -> Workout:
        """Mark one entry completed (see ``update_exercise``)."""
        return self.update_exercise(
            workout_id, exercise_id, CompletedExercisePatch(completed=True)
        )

    def complete_workout(self, workout_id: int) -> Workout:
        """
        Complete a workout and bump its routine's ``last_completed``.

        Raises:
            EntityNotFoundError: If no workout has this ID
        """
        workout = self._store.complete_workout(workout_id)
        logger.info("Completed workout %s (routine %s)", workout.id, workout.routine_id)
        return workout

    def _finish(self, workout_id: int) -> Workout:
        # Concurrent requests may both see the last entry done; only the first completes.
        workout = self._store.complete_workout(workout_id, only_if_active=True)
        logger.info("Finished workout %s (routine %s)", workout.id, workout.routine_id)
        return workout
