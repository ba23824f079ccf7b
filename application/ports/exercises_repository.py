"""
Exercise Repository Interface (Port).

This module defines the abstract interface for the exercise catalog.
Catalog entries are created but never updated or deleted.
"""
from typing import List, Optional, Protocol

from domain.models import Exercise, ExerciseCreate


class ExerciseRepository(Protocol):
    """
    Abstract interface for exercise catalog lookups.
    """

    def get_exercise(self, exercise_id: int) -> Optional[Exercise]:
        """
        Get a single exercise by ID.

        Args:
            exercise_id: Exercise ID

        Returns:
            Exercise or None if not found
        """
        ...

    def get_all_exercises(self) -> List[Exercise]:
        """
        Get every exercise in the catalog.

        Returns:
            All exercises, in an order that is stable across calls
        """
        ...

    def get_exercises_by_category(self, category: str) -> List[Exercise]:
        """
        Get exercises whose category matches exactly.

        Args:
            category: Category name (e.g., "Upper Body", "Cardio")

        Returns:
            Matching exercises
        """
        ...

    def get_exercises_by_age_range(self, min_age: int, max_age: int) -> List[Exercise]:
        """
        Get exercises suitable for anyone aged ``min_age`` to ``max_age``.

        Includes "All Ages" exercises and exercises whose encoded range
        overlaps the query. Exercises with an unparseable range are excluded.

        Args:
            min_age: Lower bound (inclusive)
            max_age: Upper bound (inclusive)

        Returns:
            Matching exercises
        """
        ...

    def create_exercise(self, data: ExerciseCreate) -> Exercise:
        """
        Add an exercise to the catalog.

        Args:
            data: Exercise payload

        Returns:
            The stored exercise including its ID
        """
        ...
