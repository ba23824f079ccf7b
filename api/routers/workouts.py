"""
Workouts router for running routines.

This router contains endpoints for:
- GET /api/workouts - List the current user's workouts
- GET /api/workouts/active - Get the current user's active workout
- GET /api/workouts/{workout_id} - Get one workout
- POST /api/workouts - Start a workout from a routine
- PATCH /api/workouts/{workout_id} - Update a workout
- POST /api/workouts/{workout_id}/complete - Complete a workout
- PATCH /api/workouts/{workout_id}/exercise/{exercise_id} - Update one exercise

Completing a workout, whether explicitly, by PATCHing ``completed: true``
or by finishing its last exercise, also stamps the routine's
``lastCompleted``.

Note: /api/workouts/active must be registered before /api/workouts/{workout_id}.
"""

from typing import List

from fastapi import APIRouter, Depends
from pydantic import Field

from api.deps import get_current_user, get_run_workout_use_case
from application.use_cases import RunWorkoutUseCase
from domain.models import CompletedExercisePatch, DomainModel, Workout, WorkoutPatch

router = APIRouter(
    prefix="/api/workouts",
    tags=["Workouts"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class StartWorkoutRequest(DomainModel):
    """Request for starting a workout."""
    routine_id: int = Field(..., ge=1)


# =============================================================================
# Workout Endpoints
# =============================================================================


@router.get("", response_model=List[Workout])
def list_workouts_endpoint(
    user_id: int = Depends(get_current_user),
    use_case: RunWorkoutUseCase = Depends(get_run_workout_use_case),
):
    """List the current user's workouts, completed or not."""
    return use_case.list_workouts(user_id)


@router.get("/active", response_model=Workout)
def get_active_workout_endpoint(
    user_id: int = Depends(get_current_user),
    use_case: RunWorkoutUseCase = Depends(get_run_workout_use_case),
):
    """
    Get the current user's uncompleted workout.

    Returns 404 when there is none.
    """
    return use_case.get_active_workout(user_id)


@router.get("/{workout_id}", response_model=Workout)
def get_workout_endpoint(
    workout_id: int,
    use_case: RunWorkoutUseCase = Depends(get_run_workout_use_case),
):
    """Get a single workout."""
    return use_case.get_workout(workout_id)


@router.post("", response_model=Workout, status_code=201)
def start_workout_endpoint(
    request: StartWorkoutRequest,
    user_id: int = Depends(get_current_user),
    use_case: RunWorkoutUseCase = Depends(get_run_workout_use_case),
):
    """
    Start a workout from one of the routines.

    Args:
        request: The routine to run

    Returns:
        The new workout, every exercise not yet completed
    """
    return use_case.start_workout(user_id, request.routine_id)


@router.patch("/{workout_id}", response_model=Workout)
def update_workout_endpoint(
    workout_id: int,
    request: WorkoutPatch,
    use_case: RunWorkoutUseCase = Depends(get_run_workout_use_case),
):
    """
    Update a workout.

    Setting ``completed: true`` on an active workout completes it.
    """
    return use_case.update_workout(workout_id, request)


@router.post("/{workout_id}/complete", response_model=Workout)
def complete_workout_endpoint(
    workout_id: int,
    use_case: RunWorkoutUseCase = Depends(get_run_workout_use_case),
):
    """Complete a workout and every exercise in it."""
    return use_case.complete_workout(workout_id)


@router.patch("/{workout_id}/exercise/{exercise_id}", response_model=Workout)
def update_workout_exercise_endpoint(
    workout_id: int,
    exercise_id: int,
    request: CompletedExercisePatch,
    use_case: RunWorkoutUseCase = Depends(get_run_workout_use_case),
):
    """
    Update one exercise within a workout.

    An exercise ID not in the workout leaves it unchanged. When this update
    leaves every exercise completed, the workout is completed too.
    """
    return use_case.update_exercise(workout_id, exercise_id, request)
