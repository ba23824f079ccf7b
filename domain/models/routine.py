"""
Routine entity: a user-authored, ordered template of exercises.

Exercise ids inside a routine are not checked against the catalog.
"""

from datetime import datetime
from typing import ClassVar, FrozenSet, List, Optional

from pydantic import Field

from domain.models.base import DomainModel, PatchModel


class RoutineExercise(DomainModel):
    """One entry of a routine: which exercise, how many sets, reps or duration."""

    exercise_id: int = Field(..., ge=1)
    sets: int = Field(..., ge=1)
    reps: Optional[int] = Field(default=None, ge=0)
    duration: Optional[int] = Field(default=None, ge=0, description="Seconds per set")


class RoutineCreate(DomainModel):
    """Payload for creating a routine."""

    user_id: int = Field(..., ge=1)
    name: str = Field(..., min_length=1)
    exercises: List[RoutineExercise]
    duration: int = Field(..., ge=0, description="Estimated total duration in seconds")
    last_completed: Optional[datetime] = None


class Routine(RoutineCreate):
    """A stored routine."""

    id: int = Field(..., ge=1)
    created_at: datetime


class RoutinePatch(PatchModel):
    """Mutable routine fields."""

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"last_completed"})

    name: Optional[str] = Field(default=None, min_length=1)
    exercises: Optional[List[RoutineExercise]] = None
    duration: Optional[int] = Field(default=None, ge=0)
    last_completed: Optional[datetime] = None
