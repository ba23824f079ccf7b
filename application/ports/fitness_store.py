"""
Fitness Store Interface (Port).

The combined contract of all four entity tables. Use cases depend on this
protocol; the in-memory store in ``infrastructure.memory`` provides it.
"""
from typing import Protocol

from application.ports.exercises_repository import ExerciseRepository
from application.ports.routine_repository import RoutineRepository
from application.ports.user_repository import UserRepository
from application.ports.workout_repository import WorkoutRepository


class FitnessStore(
    UserRepository,
    ExerciseRepository,
    RoutineRepository,
    WorkoutRepository,
    Protocol,
):
    """All entity tables behind one store."""
