"""
Workout entity: one in-progress or completed run of a routine.

``completed_exercises`` mirrors the routine's exercise list at the time the
workout started, with a per-entry ``completed`` flag. ``completed_at`` is
stamped when the workout is created and stamped again when it completes.
"""

from datetime import datetime
from typing import ClassVar, FrozenSet, List, Optional

from pydantic import Field

from domain.models.base import DomainModel, PatchModel
from domain.models.routine import RoutineExercise


class CompletedExercise(RoutineExercise):
    """A routine entry plus whether it has been done in this workout."""

    completed: bool = False


class WorkoutCreate(DomainModel):
    """Payload for creating a workout record."""

    user_id: int = Field(..., ge=1)
    routine_id: int = Field(..., ge=1)
    completed_exercises: List[CompletedExercise]
    duration: int = Field(..., ge=0)
    completed: bool = False

    @property
    def all_exercises_completed(self) -> bool:
        """True when there is at least one entry and every entry is done."""
        return bool(self.completed_exercises) and all(
            entry.completed for entry in self.completed_exercises
        )


class Workout(WorkoutCreate):
    """A stored workout."""

    id: int = Field(..., ge=1)
    completed_at: datetime


class WorkoutPatch(PatchModel):
    """Mutable workout fields."""

    completed_exercises: Optional[List[CompletedExercise]] = None
    duration: Optional[int] = Field(default=None, ge=0)
    completed: Optional[bool] = None


class CompletedExercisePatch(PatchModel):
    """Mutable fields of a single workout entry."""

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"reps", "duration"})

    sets: Optional[int] = Field(default=None, ge=1)
    reps: Optional[int] = Field(default=None, ge=0)
    duration: Optional[int] = Field(default=None, ge=0)
    completed: Optional[bool] = None
