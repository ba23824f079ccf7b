"""
Domain layer for the WebFitness API.

This package contains pure domain models and errors that are independent of
infrastructure concerns (storage, HTTP).
"""

from domain.errors import EntityNotFoundError, ValidationFailure
from domain.models import (
    CompletedExercise,
    Exercise,
    Routine,
    RoutineExercise,
    User,
    Workout,
)

__all__ = [
    "EntityNotFoundError",
    "ValidationFailure",
    "CompletedExercise",
    "Exercise",
    "Routine",
    "RoutineExercise",
    "User",
    "Workout",
]
