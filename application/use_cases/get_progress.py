"""
GetProgress Use Case.

Aggregates a user's completed workouts into the numbers the Progress page
charts: totals, day streak, per-category and per-weekday counts.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from typing import Callable, Dict, List, Optional

from application.ports import FitnessStore
from domain.models import Workout

WEEKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
CATEGORIES = ["Upper Body", "Lower Body", "Core", "Cardio"]


@dataclass
class ProgressSummary:
    """Result of summarizing a user's progress."""

    workouts_completed: int = 0
    workout_streak: int = 0
    routines_created: int = 0
    total_duration: int = 0
    workouts_by_category: Dict[str, int] = field(
        default_factory=lambda: {category: 0 for category in CATEGORIES}
    )
    weekly_activity: Dict[str, int] = field(
        default_factory=lambda: {day: 0 for day in WEEKDAYS}
    )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def count_streak(days: set, today: date) -> int:
    """
    Count consecutive workout days ending today.

    A streak that ended yesterday is still running: the user has the rest
    of today to extend it.
    """
    cursor = today if today in days else today - timedelta(days=1)
    streak = 0
    while cursor in days:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


class GetProgressUseCase:
    """
    Use case for computing progress stats.

    Only completed workouts count. Exercises are attributed to their catalog
    category; entries referencing an unknown exercise are skipped.
    """

    def __init__(
        self,
        store: FitnessStore,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize with required dependencies.

        Args:
            store: Store providing workouts, routines and the catalog
            clock: Source of "now" (defaults to UTC now)
        """
        self._store = store
        self._clock = clock or _utcnow

    def summarize(self, user_id: int) -> ProgressSummary:
        """
        Summarize a user's progress.

        Args:
            user_id: User to summarize

        Returns:
            ProgressSummary with all counters filled
        """
        completed: List[Workout] = [
            workout
            for workout in self._store.get_workouts_by_user(user_id)
            if workout.completed
        ]
        today = self._clock().date()
        week_start = today - timedelta(days=6)

        summary = ProgressSummary(
            workouts_completed=len(completed),
            routines_created=len(self._store.get_routines_by_user(user_id)),
            total_duration=sum(workout.duration for workout in completed),
        )

        categories: Dict[int, Optional[str]] = {}
        for workout in completed:
            day = workout.completed_at.date()
            if week_start <= day <= today:
                summary.weekly_activity[WEEKDAYS[day.weekday()]] += 1

            for entry in workout.completed_exercises:
                if entry.exercise_id not in categories:
                    exercise = self._store.get_exercise(entry.exercise_id)
                    categories[entry.exercise_id] = exercise.category if exercise else None
                category = categories[entry.exercise_id]
                if category is not None:
                    summary.workouts_by_category[category] = (
                        summary.workouts_by_category.get(category, 0) + 1
                    )

        summary.workout_streak = count_streak(
            {workout.completed_at.date() for workout in completed}, today
        )
        return summary
