"""
Domain models for the WebFitness API.

Pure pydantic models, independent of storage and HTTP concerns:
- User: identity and onboarding profile
- Exercise: catalog entry with instructions, modifications and an age range
- Routine: ordered template of exercises owned by one user
- Workout: one run of a routine, tracking which entries are done

Each mutable entity has an explicit ``*Patch`` type listing the fields a
partial update may change.

Usage:
    >>> from domain.models import RoutineCreate, RoutineExercise

    >>> routine = RoutineCreate(
    ...     user_id=1,
    ...     name="Monday Morning Routine",
    ...     exercises=[RoutineExercise(exercise_id=1, sets=3, reps=10)],
    ...     duration=1800,
    ... )
    >>> routine.model_dump(by_alias=True)["userId"]
    1
"""

from domain.models.base import DomainModel, PatchModel
from domain.models.exercise import (
    ALL_AGES,
    Exercise,
    ExerciseCategory,
    ExerciseCreate,
    ExerciseDifficulty,
    ExerciseInstruction,
    ExerciseModification,
    parse_age_range,
)
from domain.models.routine import Routine, RoutineCreate, RoutineExercise, RoutinePatch
from domain.models.user import User, UserCreate, UserPatch, UserPublic
from domain.models.workout import (
    CompletedExercise,
    CompletedExercisePatch,
    Workout,
    WorkoutCreate,
    WorkoutPatch,
)

__all__ = [
    "DomainModel",
    "PatchModel",
    # Users
    "User",
    "UserCreate",
    "UserPatch",
    "UserPublic",
    # Exercises
    "ALL_AGES",
    "Exercise",
    "ExerciseCategory",
    "ExerciseCreate",
    "ExerciseDifficulty",
    "ExerciseInstruction",
    "ExerciseModification",
    "parse_age_range",
    # Routines
    "Routine",
    "RoutineCreate",
    "RoutineExercise",
    "RoutinePatch",
    # Workouts
    "CompletedExercise",
    "CompletedExercisePatch",
    "Workout",
    "WorkoutCreate",
    "WorkoutPatch",
]
