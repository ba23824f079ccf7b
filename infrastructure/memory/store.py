"""
In-memory implementation of the fitness store.

Holds the four entity tables (users, exercises, routines, workouts) as dicts
keyed by integer ID. Each table has its own counter starting at 1; IDs are
never reused, even after a delete.

Every operation runs under one re-entrant lock so that a call, including the
two-table ``complete_workout``, is applied as a unit when FastAPI serves
requests from its thread pool. Entities handed out are copies; mutating them
never changes stored state.

Usage:
    store = InMemoryFitnessStore(exercises=load_exercise_catalog())
    user = store.create_user(UserCreate(username="sam", password="x", age=34, name="Sam"))
    store.update_user(user.id, UserPatch(age=35))
"""
import logging
import threading
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional, TypeVar, Union

from pydantic import BaseModel

from domain.errors import EntityNotFoundError
from domain.models import (
    CompletedExercise,
    CompletedExercisePatch,
    Exercise,
    ExerciseCreate,
    PatchModel,
    Routine,
    RoutineCreate,
    RoutinePatch,
    User,
    UserCreate,
    UserPatch,
    Workout,
    WorkoutCreate,
    WorkoutPatch,
)

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=BaseModel)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _merge(entity: EntityT, patch: PatchModel) -> EntityT:
    """Shallow-merge the fields set on ``patch`` over ``entity`` and re-validate."""
    if patch.is_empty():
        return entity
    return type(entity).model_validate({**entity.model_dump(), **patch.changes()})


class InMemoryFitnessStore:
    """
    Dict-backed store implementing the ``FitnessStore`` protocol.

    Args:
        exercises: Optional catalog to seed at construction
        clock: Source of timestamps (defaults to timezone-aware UTC now)
    """

    def __init__(
        self,
        exercises: Optional[Iterable[Union[ExerciseCreate, Dict[str, Any]]]] = None,
        *,
        clock: Optional[Clock] = None,
    ):
        self._lock = threading.RLock()
        self._clock = clock or _utcnow

        self._users: Dict[int, User] = {}
        self._exercises: Dict[int, Exercise] = {}
        self._routines: Dict[int, Routine] = {}
        self._workouts: Dict[int, Workout] = {}

        self._next_ids: Dict[str, int] = {
            "users": 1,
            "exercises": 1,
            "routines": 1,
            "workouts": 1,
        }

        if exercises is not None:
            self.seed_exercises(exercises)

    # =========================================================================
    # Store Helpers
    # =========================================================================

    def seed_exercises(
        self,
        records: Iterable[Union[ExerciseCreate, Dict[str, Any]]],
    ) -> List[Exercise]:
        """
        Add a catalog of exercises.

        Args:
            records: ExerciseCreate models or raw dicts (camelCase or snake_case keys)

        Returns:
            The stored exercises
        """
        created = [
            self.create_exercise(
                record if isinstance(record, ExerciseCreate)
                else ExerciseCreate.model_validate(record)
            )
            for record in records
        ]
        logger.info("Seeded %d exercises", len(created))
        return created

    def reset(self) -> None:
        """Clear every table. Counters keep running so IDs stay unique."""
        with self._lock:
            self._users.clear()
            self._exercises.clear()
            self._routines.clear()
            self._workouts.clear()

    def _next_id(self, table: str) -> int:
        next_id = self._next_ids[table]
        self._next_ids[table] = next_id + 1
        return next_id

    @staticmethod
    def _require(table: Dict[int, EntityT], entity: str, entity_id: int) -> EntityT:
        record = table.get(entity_id)
        if record is None:
            raise EntityNotFoundError(entity, entity_id)
        return record

    @staticmethod
    def _copy(record: Optional[EntityT]) -> Optional[EntityT]:
        return record.model_copy(deep=True) if record is not None else None

    def _copies(self, records: Iterable[EntityT]) -> List[EntityT]:
        return [record.model_copy(deep=True) for record in records]

    # =========================================================================
    # Users
    # =========================================================================

    def get_user(self, user_id: int) -> Optional[User]:
        with self._lock:
            return self._copy(self._users.get(user_id))

    def get_user_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            for user in self._users.values():
                if user.username == username:
                    return self._copy(user)
            return None

    def create_user(self, data: UserCreate) -> User:
        with self._lock:
            user = User(id=self._next_id("users"), **data.model_dump())
            self._users[user.id] = user
            return self._copy(user)

    def update_user(self, user_id: int, patch: UserPatch) -> User:
        with self._lock:
            user = _merge(self._require(self._users, "User", user_id), patch)
            self._users[user_id] = user
            return self._copy(user)

    # =========================================================================
    # Exercises
    # =========================================================================

    def get_exercise(self, exercise_id: int) -> Optional[Exercise]:
        with self._lock:
            return self._copy(self._exercises.get(exercise_id))

    def get_all_exercises(self) -> List[Exercise]:
        with self._lock:
            exercises = self._copies(self._exercises.values())
        logger.debug("Returning %d exercises", len(exercises))
        return exercises

    def get_exercises_by_category(self, category: str) -> List[Exercise]:
        with self._lock:
            return self._copies(
                exercise for exercise in self._exercises.values()
                if exercise.category == category
            )

    def get_exercises_by_age_range(self, min_age: int, max_age: int) -> List[Exercise]:
        with self._lock:
            return self._copies(
                exercise for exercise in self._exercises.values()
                if exercise.matches_age_range(min_age, max_age)
            )

    def create_exercise(self, data: ExerciseCreate) -> Exercise:
        with self._lock:
            exercise = Exercise(id=self._next_id("exercises"), **data.model_dump())
            self._exercises[exercise.id] = exercise
            return self._copy(exercise)

    # =========================================================================
    # Routines
    # =========================================================================

    def get_routine(self, routine_id: int) -> Optional[Routine]:
        with self._lock:
            return self._copy(self._routines.get(routine_id))

    def get_routines_by_user(self, user_id: int) -> List[Routine]:
        with self._lock:
            return self._copies(
                routine for routine in self._routines.values()
                if routine.user_id == user_id
            )

    def create_routine(self, data: RoutineCreate) -> Routine:
        with self._lock:
            routine = Routine(
                id=self._next_id("routines"),
                created_at=self._clock(),
                **data.model_dump(),
            )
            self._routines[routine.id] = routine
            return self._copy(routine)

    def update_routine(self, routine_id: int, patch: RoutinePatch) -> Routine:
        with self._lock:
            routine = _merge(self._require(self._routines, "Routine", routine_id), patch)
            self._routines[routine_id] = routine
            return self._copy(routine)

    def delete_routine(self, routine_id: int) -> None:
        with self._lock:
            self._require(self._routines, "Routine", routine_id)
            del self._routines[routine_id]

    # =========================================================================
    # Workouts
    # =========================================================================

    def get_workout(self, workout_id: int) -> Optional[Workout]:
        with self._lock:
            return self._copy(self._workouts.get(workout_id))

    def get_workouts_by_user(self, user_id: int) -> List[Workout]:
        with self._lock:
            return self._copies(
                workout for workout in self._workouts.values()
                if workout.user_id == user_id
            )

    def get_active_workout_by_user(self, user_id: int) -> Optional[Workout]:
        with self._lock:
            for workout in self._workouts.values():
                if workout.user_id == user_id and not workout.completed:
                    return self._copy(workout)
            return None

    def create_workout(self, data: WorkoutCreate) -> Workout:
        with self._lock:
            workout = Workout(
                id=self._next_id("workouts"),
                completed_at=self._clock(),
                **data.model_dump(),
            )
            self._workouts[workout.id] = workout
            return self._copy(workout)

    def update_workout(self, workout_id: int, patch: WorkoutPatch) -> Workout:
        with self._lock:
            workout = _merge(self._require(self._workouts, "Workout", workout_id), patch)
            self._workouts[workout_id] = workout
            return self._copy(workout)

    def update_workout_exercise(
        self,
        workout_id: int,
        exercise_id: int,
        patch: CompletedExercisePatch,
    ) -> Workout:
        with self._lock:
            workout = self._require(self._workouts, "Workout", workout_id)
            # Every entry with this exercise ID is updated; no match is a no-op.
            entries = [
                _merge(entry, patch) if entry.exercise_id == exercise_id else entry
                for entry in workout.completed_exercises
            ]
            workout = workout.model_copy(update={"completed_exercises": entries})
            self._workouts[workout_id] = workout
            return self._copy(workout)

    def complete_workout(self, workout_id: int, *, only_if_active: bool = False) -> Workout:
        with self._lock:
            workout = self._require(self._workouts, "Workout", workout_id)
            if only_if_active and workout.completed:
                return self._copy(workout)
            now = self._clock()

            entries: List[CompletedExercise] = [
                entry.model_copy(update={"completed": True})
                for entry in workout.completed_exercises
            ]
            workout = workout.model_copy(
                update={
                    "completed": True,
                    "completed_exercises": entries,
                    "completed_at": now,
                }
            )
            self._workouts[workout_id] = workout

            # The workout stays completed even when its routine is gone.
            routine = self._routines.get(workout.routine_id)
            if routine is not None:
                self._routines[routine.id] = routine.model_copy(
                    update={"last_completed": now}
                )
            else:
                logger.warning(
                    "Workout %s completed but routine %s no longer exists",
                    workout_id,
                    workout.routine_id,
                )
            return self._copy(workout)
