"""
Exercises router for the exercise library.

This router contains endpoints for:
- GET /api/exercises - List exercises, optionally by category and age range
- GET /api/exercises/{exercise_id} - Get one exercise
- POST /api/exercises - Add an exercise to the catalog
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_browse_exercises_use_case
from application.use_cases import BrowseExercisesUseCase
from application.use_cases.browse_exercises import MAX_AGE, MIN_AGE
from domain.models import Exercise, ExerciseCreate

router = APIRouter(
    prefix="/api/exercises",
    tags=["Exercises"],
)


@router.get("", response_model=List[Exercise])
def list_exercises_endpoint(
    category: Optional[str] = Query(None, description="Exact category, e.g. 'Core'"),
    min_age: Optional[int] = Query(
        None, alias="minAge", ge=MIN_AGE, le=MAX_AGE, description="Youngest age to cover"
    ),
    max_age: Optional[int] = Query(
        None, alias="maxAge", ge=MIN_AGE, le=MAX_AGE, description="Oldest age to cover"
    ),
    use_case: BrowseExercisesUseCase = Depends(get_browse_exercises_use_case),
):
    """
    List catalog exercises.

    Age filtering keeps "All Ages" exercises and any exercise whose range
    overlaps ``[minAge, maxAge]``.
    """
    return use_case.list_exercises(category=category, min_age=min_age, max_age=max_age)


@router.get("/{exercise_id}", response_model=Exercise)
def get_exercise_endpoint(
    exercise_id: int,
    use_case: BrowseExercisesUseCase = Depends(get_browse_exercises_use_case),
):
    """Get a single exercise with instructions and modifications."""
    return use_case.get_exercise(exercise_id)


@router.post("", response_model=Exercise, status_code=201)
def create_exercise_endpoint(
    request: ExerciseCreate,
    use_case: BrowseExercisesUseCase = Depends(get_browse_exercises_use_case),
):
    """Add an exercise to the catalog."""
    return use_case.create_exercise(request)
