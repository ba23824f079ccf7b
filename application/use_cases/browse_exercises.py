"""
BrowseExercises Use Case.

Catalog lookups with the category and age-range filters the exercise
library offers, plus catalog creation.
"""

import logging
from typing import List, Optional

from application.ports import ExerciseRepository
from domain.errors import EntityNotFoundError, ValidationFailure
from domain.models import Exercise, ExerciseCreate

logger = logging.getLogger(__name__)

MIN_AGE = 0
MAX_AGE = 130


class BrowseExercisesUseCase:
    """
    Use case for listing, fetching and adding catalog exercises.
    """

    def __init__(self, exercise_repo: ExerciseRepository):
        """
        Initialize with required dependencies.

        Args:
            exercise_repo: Repository for the exercise catalog
        """
        self._exercise_repo = exercise_repo

    def list_exercises(
        self,
        category: Optional[str] = None,
        min_age: Optional[int] = None,
        max_age: Optional[int] = None,
    ) -> List[Exercise]:
        """
        List catalog exercises, optionally filtered.

        Filters combine. When only one age bound is given the other is open
        (``MIN_AGE`` / ``MAX_AGE``).

        Args:
            category: Exact category match
            min_age: Lower age bound (inclusive)
            max_age: Upper age bound (inclusive)

        Returns:
            Matching exercises in catalog order

        Raises:
            ValidationFailure: If ``min_age`` is greater than ``max_age``
        """
        if min_age is None and max_age is None:
            if category is not None:
                return self._exercise_repo.get_exercises_by_category(category)
            return self._exercise_repo.get_all_exercises()

        low = MIN_AGE if min_age is None else min_age
        high = MAX_AGE if max_age is None else max_age
        if low > high:
            raise ValidationFailure(
                "Exercise query",
                errors=[
                    {
                        "loc": ["query", "minAge"],
                        "msg": "minAge must not be greater than maxAge",
                        "type": "value_error",
                    }
                ],
            )
        exercises = self._exercise_repo.get_exercises_by_age_range(low, high)

        if category is not None:
            exercises = [exercise for exercise in exercises if exercise.category == category]
        return exercises

    def get_exercise(self, exercise_id: int) -> Exercise:
        """
        Get an exercise by ID.

        Raises:
            EntityNotFoundError: If no exercise has this ID
        """
        exercise = self._exercise_repo.get_exercise(exercise_id)
        if exercise is None:
            raise EntityNotFoundError("Exercise", exercise_id)
        return exercise

    def create_exercise(self, data: ExerciseCreate) -> Exercise:
        """Add an exercise to the catalog."""
        exercise = self._exercise_repo.create_exercise(data)
        logger.info("Added exercise %s (%s)", exercise.id, exercise.name)
        return exercise
