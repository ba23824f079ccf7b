"""
Test doubles and factory functions.

This package provides a controllable clock for the store and builders for
valid payloads, so tests only spell out the fields they care about.

Usage:
    from tests.fakes import FakeClock, make_exercise, make_routine

    clock = FakeClock()
    store = InMemoryFitnessStore(clock=clock)
    store.create_exercise(make_exercise(category="Core"))
    clock.advance(days=1)
"""
from datetime import datetime, timedelta, timezone
from typing import Iterable

from domain.models import ExerciseCreate, RoutineCreate, RoutineExercise, UserCreate

FIXED_NOW = datetime(2024, 5, 15, 9, 30, tzinfo=timezone.utc)  # a Wednesday


class FakeClock:
    """Clock that returns a fixed instant until advanced."""

    def __init__(self, now: datetime = FIXED_NOW):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        """Move the clock forward by ``timedelta(**kwargs)``."""
        self.now = self.now + timedelta(**kwargs)
        return self.now


def make_user(**overrides) -> UserCreate:
    data = {"username": "sam", "password": "secret", "age": 34, "name": "Sam"}
    data.update(overrides)
    return UserCreate(**data)


def make_exercise(**overrides) -> ExerciseCreate:
    """Build a valid exercise payload, overriding any field."""
    data = {
        "name": "Squats",
        "description": "Lower body basic",
        "image_url": "https://example.com/squats.jpg",
        "category": "Lower Body",
        "difficulty": "Beginner",
        "age_range": "All Ages",
        "muscle_groups": "Quadriceps, Glutes",
    }
    data.update(overrides)
    return ExerciseCreate(**data)


def make_routine(
    user_id: int = 1,
    exercise_ids: Iterable[int] = (1, 2),
    **overrides,
) -> RoutineCreate:
    """Build a routine payload with one 3x10 entry per exercise ID."""
    data = {
        "user_id": user_id,
        "name": "Morning",
        "exercises": [
            RoutineExercise(exercise_id=exercise_id, sets=3, reps=10)
            for exercise_id in exercise_ids
        ],
        "duration": 600,
    }
    data.update(overrides)
    return RoutineCreate(**data)


__all__ = [
    "FIXED_NOW",
    "FakeClock",
    "make_user",
    "make_exercise",
    "make_routine",
]
