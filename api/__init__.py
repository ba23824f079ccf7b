"""
API package for the WebFitness API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- errors.py: Mapping of domain errors to HTTP responses
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_store,
    get_current_user,
    get_manage_users_use_case,
    get_browse_exercises_use_case,
    get_manage_routines_use_case,
    get_run_workout_use_case,
    get_progress_use_case,
)

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
