"""
FastAPI Dependency Providers for the WebFitness API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with other stores.

Architecture:
- Settings and the store are owned by the application instance
  (``app.state``), set up once in ``backend.main.create_app``
- Use case providers create new instances per-request around that store
- The current user is a configured placeholder ID (no authentication)

Usage in routers:
    from api.deps import get_current_user, get_run_workout_use_case

    @router.get("/api/workouts")
    def list_workouts(
        user_id: int = Depends(get_current_user),
        use_case: RunWorkoutUseCase = Depends(get_run_workout_use_case),
    ):
        return use_case.list_workouts(user_id)

Testing:
    # Build the app around a store you control
    store = InMemoryFitnessStore()
    app = create_app(settings=test_settings, store=store)

    # Or override a single provider
    app.dependency_overrides[get_current_user] = lambda: 2
"""

from fastapi import Depends, Request

from application.ports import FitnessStore
from application.use_cases import (
    BrowseExercisesUseCase,
    GetProgressUseCase,
    ManageRoutinesUseCase,
    ManageUsersUseCase,
    RunWorkoutUseCase,
)
from backend.settings import Settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings(request: Request) -> Settings:
    """
    Get the settings the running application was created with.

    Returns:
        Settings: Application settings instance
    """
    return request.app.state.settings


# =============================================================================
# Store Provider
# =============================================================================


def get_store(request: Request) -> FitnessStore:
    """
    Get the application's fitness store.

    The store lives for the lifetime of the application instance; there is
    no module-level store.

    Returns:
        FitnessStore: The store backing every router
    """
    return request.app.state.store


# =============================================================================
# Current User Provider
# =============================================================================


def get_current_user(settings: Settings = Depends(get_settings)) -> int:
    """
    Get the current user ID.

    Authentication is out of scope; the configured placeholder ID stands in
    for the signed-in user.

    Returns:
        int: Current user ID
    """
    return settings.current_user_id


# =============================================================================
# Use Case Providers
# =============================================================================


def get_manage_users_use_case(
    store: FitnessStore = Depends(get_store),
) -> ManageUsersUseCase:
    return ManageUsersUseCase(user_repo=store)


def get_browse_exercises_use_case(
    store: FitnessStore = Depends(get_store),
) -> BrowseExercisesUseCase:
    return BrowseExercisesUseCase(exercise_repo=store)


def get_manage_routines_use_case(
    store: FitnessStore = Depends(get_store),
) -> ManageRoutinesUseCase:
    return ManageRoutinesUseCase(routine_repo=store)


def get_run_workout_use_case(
    store: FitnessStore = Depends(get_store),
) -> RunWorkoutUseCase:
    return RunWorkoutUseCase(store=store)


def get_progress_use_case(
    store: FitnessStore = Depends(get_store),
) -> GetProgressUseCase:
    return GetProgressUseCase(store=store)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Store
    "get_store",
    # Current user
    "get_current_user",
    # Use cases
    "get_manage_users_use_case",
    "get_browse_exercises_use_case",
    "get_manage_routines_use_case",
    "get_run_workout_use_case",
    "get_progress_use_case",
]
