"""
Application Use Cases for the WebFitness API.

This package contains application-level use cases that orchestrate the
fitness store. Use cases are the entry points for business operations and
contain the application's workflow logic (notably the workout completion
cascade).

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return domain models and raise domain errors, never HTTP responses

Usage:
    from application.use_cases import RunWorkoutUseCase

    run_workout = RunWorkoutUseCase(store=store)
    workout = run_workout.start_workout(user_id=1, routine_id=3)
    workout = run_workout.complete_exercise(workout.id, exercise_id=1)
"""

from application.use_cases.browse_exercises import BrowseExercisesUseCase
from application.use_cases.get_progress import GetProgressUseCase, ProgressSummary
from application.use_cases.manage_routines import ManageRoutinesUseCase
from application.use_cases.manage_users import ManageUsersUseCase
from application.use_cases.run_workout import RunWorkoutUseCase

__all__ = [
    "BrowseExercisesUseCase",
    "GetProgressUseCase",
    "ProgressSummary",
    "ManageRoutinesUseCase",
    "ManageUsersUseCase",
    "RunWorkoutUseCase",
]
