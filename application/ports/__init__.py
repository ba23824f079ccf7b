"""
Repository Interfaces (Ports) for the WebFitness API.

This package defines abstract interfaces that decouple the use cases from
the storage implementation. Implementations are provided in the
infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the use cases need)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import FitnessStore

    class WorkoutService:
        def __init__(self, store: FitnessStore):
            self._store = store
"""

from application.ports.user_repository import UserRepository
from application.ports.exercises_repository import ExerciseRepository
from application.ports.routine_repository import RoutineRepository
from application.ports.workout_repository import WorkoutRepository
from application.ports.fitness_store import FitnessStore

__all__ = [
    "UserRepository",
    "ExerciseRepository",
    "RoutineRepository",
    "WorkoutRepository",
    "FitnessStore",
]
