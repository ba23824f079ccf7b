"""
Exercise catalog entries.

Exercises are reference data: seeded when the store is built, created
through the API, never updated or deleted. Each carries an ``age_range``
that is either the literal ``"All Ages"`` or an inclusive range encoded
as ``"Age <min>-<max>"`` (e.g. ``"Age 30-45"``).
"""

import re
from typing import List, Literal, Optional, Tuple

from pydantic import Field

from domain.models.base import DomainModel


ALL_AGES = "All Ages"

_AGE_RANGE_PATTERN = re.compile(r"Age (\d+)-(\d+)")

ExerciseCategory = Literal["Upper Body", "Lower Body", "Core", "Cardio"]
ExerciseDifficulty = Literal["Beginner", "Intermediate", "Advanced", "All Levels"]


def parse_age_range(age_range: str) -> Optional[Tuple[int, int]]:
    """
    Parse an encoded age range into ``(min_age, max_age)``.

    Returns None for ``"All Ages"`` and for strings that do not encode a
    numeric range.

    Examples:
        >>> parse_age_range("Age 30-45")
        (30, 45)
        >>> parse_age_range("Teens") is None
        True
    """
    match = _AGE_RANGE_PATTERN.search(age_range)
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


class ExerciseInstruction(DomainModel):
    """One numbered step of an exercise's instructions."""

    step: int = Field(..., ge=1)
    title: str
    description: str
    key_point: str


class ExerciseModification(DomainModel):
    """An easier or harder variation of an exercise."""

    type: Literal["easier", "harder"]
    name: str
    description: str


class ExerciseCreate(DomainModel):
    """Payload for adding an exercise to the catalog."""

    name: str = Field(..., min_length=1)
    description: str
    image_url: str
    video_url: Optional[str] = None
    instructions: List[ExerciseInstruction] = Field(default_factory=list)
    category: ExerciseCategory
    difficulty: ExerciseDifficulty
    age_range: str = Field(..., min_length=1, description='"All Ages" or "Age <min>-<max>"')
    muscle_groups: str
    modifications: List[ExerciseModification] = Field(default_factory=list)


class Exercise(ExerciseCreate):
    """A stored catalog exercise."""

    id: int = Field(..., ge=1)

    def matches_age_range(self, min_age: int, max_age: int) -> bool:
        """
        Check whether this exercise suits anyone in ``[min_age, max_age]``.

        "All Ages" always matches. An encoded range matches when it overlaps
        the query range. Unparseable ranges never match.
        """
        if self.age_range == ALL_AGES:
            return True
        bounds = parse_age_range(self.age_range)
        if bounds is None:
            return False
        exercise_min, exercise_max = bounds
        return min_age <= exercise_max and max_age >= exercise_min
