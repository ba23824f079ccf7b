"""
Users router for onboarding and profile updates.

This router contains endpoints for:
- GET /api/users/current - Get the current user
- POST /api/users - Create a user (onboarding)
- PATCH /api/users/{user_id} - Update name, age or credentials

Passwords are accepted on input and never returned.
"""

from fastapi import APIRouter, Depends

from api.deps import get_current_user, get_manage_users_use_case
from application.use_cases import ManageUsersUseCase
from domain.models import UserCreate, UserPatch, UserPublic

router = APIRouter(
    prefix="/api/users",
    tags=["Users"],
)


@router.get("/current", response_model=UserPublic)
def get_current_user_endpoint(
    user_id: int = Depends(get_current_user),
    use_case: ManageUsersUseCase = Depends(get_manage_users_use_case),
):
    """
    Get the current user's profile.

    Returns:
        The user without its password
    """
    return use_case.get_user(user_id)


@router.post("", response_model=UserPublic, status_code=201)
def create_user_endpoint(
    request: UserCreate,
    use_case: ManageUsersUseCase = Depends(get_manage_users_use_case),
):
    """
    Create a user during onboarding.

    Args:
        request: Username, password, age and name

    Returns:
        The created user without its password
    """
    return use_case.create_user(request)


@router.patch("/{user_id}", response_model=UserPublic)
def update_user_endpoint(
    user_id: int,
    request: UserPatch,
    use_case: ManageUsersUseCase = Depends(get_manage_users_use_case),
):
    """
    Update any subset of a user's fields.

    Args:
        user_id: User to update
        request: Fields to change

    Returns:
        The updated user without its password
    """
    return use_case.update_user(user_id, request)
