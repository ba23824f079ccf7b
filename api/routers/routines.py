"""
Routines router for the current user's workout routines.

This router contains endpoints for:
- GET /api/routines - List the current user's routines
- GET /api/routines/{routine_id} - Get one routine
- POST /api/routines - Create a routine for the current user
- PATCH /api/routines/{routine_id} - Update a routine
- DELETE /api/routines/{routine_id} - Delete a routine

Ownership is not checked; see the authentication note in api/deps.py.
"""

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Response
from pydantic import Field

from api.deps import get_current_user, get_manage_routines_use_case
from application.use_cases import ManageRoutinesUseCase
from domain.models import DomainModel, Routine, RoutineCreate, RoutineExercise, RoutinePatch

router = APIRouter(
    prefix="/api/routines",
    tags=["Routines"],
)


# =============================================================================
# Request/Response Models
# =============================================================================


class CreateRoutineRequest(DomainModel):
    """Request for creating a routine; the owner is the current user."""
    name: str = Field(..., min_length=1)
    exercises: List[RoutineExercise]
    duration: int = Field(..., ge=0)
    last_completed: Optional[datetime] = None


# =============================================================================
# Routine Endpoints
# =============================================================================


@router.get("", response_model=List[Routine])
def list_routines_endpoint(
    user_id: int = Depends(get_current_user),
    use_case: ManageRoutinesUseCase = Depends(get_manage_routines_use_case),
):
    """List the current user's routines."""
    return use_case.list_routines(user_id)


@router.get("/{routine_id}", response_model=Routine)
def get_routine_endpoint(
    routine_id: int,
    use_case: ManageRoutinesUseCase = Depends(get_manage_routines_use_case),
):
    """Get a single routine."""
    return use_case.get_routine(routine_id)


@router.post("", response_model=Routine, status_code=201)
def create_routine_endpoint(
    request: CreateRoutineRequest,
    user_id: int = Depends(get_current_user),
    use_case: ManageRoutinesUseCase = Depends(get_manage_routines_use_case),
):
    """
    Create a routine owned by the current user.

    Args:
        request: Name, ordered exercises and estimated duration in seconds

    Returns:
        The created routine with ``id`` and ``createdAt``
    """
    return use_case.create_routine(
        RoutineCreate(user_id=user_id, **request.model_dump())
    )


@router.patch("/{routine_id}", response_model=Routine)
def update_routine_endpoint(
    routine_id: int,
    request: RoutinePatch,
    use_case: ManageRoutinesUseCase = Depends(get_manage_routines_use_case),
):
    """Update any subset of a routine's mutable fields."""
    return use_case.update_routine(routine_id, request)


@router.delete("/{routine_id}", status_code=204)
def delete_routine_endpoint(
    routine_id: int,
    use_case: ManageRoutinesUseCase = Depends(get_manage_routines_use_case),
):
    """Delete a routine. Workouts started from it are kept."""
    use_case.delete_routine(routine_id)
    return Response(status_code=204)
