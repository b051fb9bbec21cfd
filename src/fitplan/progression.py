"""Progressive overload for catalog exercises."""

import logging

from .models import CatalogExercise

logger = logging.getLogger(__name__)

MAX_SETS = 5
MAX_EXTRA_REPS = 5
MAX_EXTRA_SECONDS = 30


def week_number(day_number: int) -> int:
    return (day_number - 1) // 7 + 1


def progress_exercise(exercise: CatalogExercise, week: int) -> CatalogExercise:
    """
    Add a set from week 2 on (never above MAX_SETS), ``week`` reps and
    ``5 * week`` seconds, each capped above the catalog default.
    Descriptive reps such as "10 each leg" are left as-is.
    """
    update: dict[str, int] = {}
    if week >= 2 and exercise.sets is not None and exercise.sets < MAX_SETS:
        update["sets"] = exercise.sets + 1
    if isinstance(exercise.reps, int):
        update["reps"] = exercise.reps + min(week, MAX_EXTRA_REPS)
    if exercise.duration is not None:
        update["duration"] = exercise.duration + min(week * 5, MAX_EXTRA_SECONDS)
    return exercise.model_copy(update=update)


def apply_progression(exercises: list[CatalogExercise], day_number: int) -> list[CatalogExercise]:
    week = week_number(day_number)
    logger.debug(
        "Applying progression: day=%s week=%s exercises=%s", day_number, week, len(exercises)
    )
    return [progress_exercise(ex, week) for ex in exercises]
