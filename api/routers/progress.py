"""
Progress router.

This router contains endpoints for:
- GET /api/progress - Stats for the current user's Progress page
"""

from typing import Dict

from fastapi import APIRouter, Depends

from api.deps import get_current_user, get_progress_use_case
from application.use_cases import GetProgressUseCase
from domain.models import DomainModel

router = APIRouter(
    prefix="/api/progress",
    tags=["Progress"],
)


class ProgressResponse(DomainModel):
    """Response for the progress summary."""
    workouts_completed: int
    workout_streak: int
    routines_created: int
    total_duration: int
    workouts_by_category: Dict[str, int]
    weekly_activity: Dict[str, int]


@router.get("", response_model=ProgressResponse)
def get_progress_endpoint(
    user_id: int = Depends(get_current_user),
    use_case: GetProgressUseCase = Depends(get_progress_use_case),
):
    """
    Summarize the current user's completed workouts.

    ``weeklyActivity`` covers the last seven days, keyed Mon..Sun.
    ``totalDuration`` is in seconds.
    """
    summary = use_case.summarize(user_id)
    return ProgressResponse(
        workouts_completed=summary.workouts_completed,
        workout_streak=summary.workout_streak,
        routines_created=summary.routines_created,
        total_duration=summary.total_duration,
        workouts_by_category=summary.workouts_by_category,
        weekly_activity=summary.weekly_activity,
    )
