"""
Router package for the WebFitness API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- users: Current user, onboarding and profile updates
- exercises: Exercise library browsing and age/category filters
- routines: Routine CRUD for the current user
- workouts: Starting, updating and completing workouts
- progress: Progress page statistics
"""

from api.routers.exercises import router as exercises_router
from api.routers.health import router as health_router
from api.routers.progress import router as progress_router
from api.routers.routines import router as routines_router
from api.routers.users import router as users_router
from api.routers.workouts import router as workouts_router

__all__ = [
    "health_router",
    "users_router",
    "exercises_router",
    "routines_router",
    "workouts_router",
    "progress_router",
]
