"""
Read-only content catalog of exercises and meals.

The engines depend only on the ``CatalogRepository`` query shapes; the
bundled JSON catalog is the default implementation.
"""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path
from typing import Any, Protocol

from pydantic import ValidationError

from .config import SETTINGS
from .models import CatalogExercise, CatalogMeal, DifficultyLevel, MealType, MuscleGroup

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path(__file__).parent / "data"


class CatalogError(RuntimeError):
    """Raised when catalog data cannot be loaded."""


class CatalogRepository(Protocol):
    """Query access the plan engines need from a content store."""

    def get_exercises_by_difficulty(self, difficulty: DifficultyLevel) -> list[CatalogExercise]: ...

    def get_exercises_by_muscle_groups(
        self, muscle_groups: Iterable[MuscleGroup], difficulty: DifficultyLevel
    ) -> list[CatalogExercise]: ...

    def get_meals_by_type_and_calorie_range(
        self, meal_type: MealType, min_calories: float, max_calories: float
    ) -> list[CatalogMeal]: ...


class InMemoryCatalog:
    """
    Catalog backed by immutable tuples. Results keep catalog order, which the
    engines rely on for deterministic selection.
    """

    def __init__(self, exercises: Iterable[CatalogExercise], meals: Iterable[CatalogMeal]):
        self.exercises: tuple[CatalogExercise, ...] = tuple(exercises)
        self.meals: tuple[CatalogMeal, ...] = tuple(meals)

    def get_exercises_by_difficulty(self, difficulty: DifficultyLevel) -> list[CatalogExercise]:
        return [ex for ex in self.exercises if ex.difficulty == difficulty]

    def get_exercises_by_muscle_groups(
        self, muscle_groups: Iterable[MuscleGroup], difficulty: DifficultyLevel
    ) -> list[CatalogExercise]:
        wanted = set(muscle_groups)
        return [
            ex
            for ex in self.exercises
            if ex.difficulty == difficulty and any(mg in wanted for mg in ex.muscle_groups)
        ]

    def get_meals_by_type_and_calorie_range(
        self, meal_type: MealType, min_calories: float = 0, max_calories: float = math.inf
    ) -> list[CatalogMeal]:
        return [
            meal
            for meal in self.meals
            if meal.meal_type == meal_type and min_calories <= meal.calories <= max_calories
        ]

    def get_exercise(self, exercise_id: str) -> CatalogExercise | None:
        for ex in self.exercises:
            if ex.id == exercise_id:
                return ex
        return None

    def get_meal(self, meal_id: str) -> CatalogMeal | None:
        for meal in self.meals:
            if meal.id == meal_id:
                return meal
        return None


def _load_json(path: Path) -> list[dict[str, Any]]:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"Failed to load catalog file {path}: {e}") from e
    if not isinstance(data, list):
        raise CatalogError(f"Catalog file {path} must contain a JSON list")
    return data


def load_catalog(data_dir: str | Path | None = None) -> InMemoryCatalog:
    """Load exercises.json and meals.json from ``data_dir`` (bundled data by default)."""
    base = Path(data_dir) if data_dir else DEFAULT_DATA_DIR
    try:
        exercises = [CatalogExercise.model_validate(e) for e in _load_json(base / "exercises.json")]
        meals = [CatalogMeal.model_validate(m) for m in _load_json(base / "meals.json")]
    except ValidationError as e:
        raise CatalogError(f"Invalid catalog entry in {base}: {e}") from e
    logger.info("Loaded catalog from %s: %d exercises, %d meals", base, len(exercises), len(meals))
    return InMemoryCatalog(exercises, meals)


@lru_cache(maxsize=1)
def get_catalog() -> InMemoryCatalog:
    """Process-wide catalog singleton, configured by ``CATALOG_DIR``."""
    return load_catalog(SETTINGS.CATALOG_DIR)
