"""Shared builders for catalog entries and profiles."""

from __future__ import annotations

from datetime import datetime

import pytest

from fitplan.catalog import InMemoryCatalog
from fitplan.models import (
    CatalogExercise,
    CatalogMeal,
    DifficultyLevel,
    ExerciseModality,
    MealType,
    MuscleGroup,
)

NOW = datetime(2025, 6, 1, 9, 0, 0)


def make_exercise(
    ex_id: str,
    muscles: tuple[MuscleGroup, ...] = (MuscleGroup.CHEST,),
    difficulty: DifficultyLevel = DifficultyLevel.BEGINNER,
    **kwargs,
) -> CatalogExercise:
    data = {
        "id": ex_id,
        "name": ex_id.replace("-", " ").title(),
        "muscle_groups": muscles,
        "difficulty": difficulty,
        "modality": ExerciseModality.STRENGTH,
        "sets": 3,
        "reps": 10,
        "rest_seconds": 45,
        "calories": 30,
    }
    data.update(kwargs)
    return CatalogExercise(**data)


def make_meal(meal_id: str, meal_type: MealType, calories: int, protein: float = 30) -> CatalogMeal:
    return CatalogMeal(
        id=meal_id,
        name=meal_id,
        meal_type=meal_type,
        calories=calories,
        protein=protein,
        carbs=50,
        fat=20,
    )


@pytest.fixture
def banded_catalog() -> InMemoryCatalog:
    """Catalog whose lunches and dinners cover a ~2300 kcal day."""
    meals = [
        make_meal("lunch-600", MealType.LUNCH, 600),
        make_meal("lunch-800", MealType.LUNCH, 800),
        make_meal("lunch-900", MealType.LUNCH, 900),
        make_meal("lunch-1500", MealType.LUNCH, 1500),
        make_meal("dinner-1400", MealType.DINNER, 1400),
        make_meal("dinner-1500", MealType.DINNER, 1500),
        make_meal("dinner-2000", MealType.DINNER, 2000),
        make_meal("breakfast-800", MealType.BREAKFAST, 800),
    ]
    exercises = [
        make_exercise("push-1", (MuscleGroup.CHEST, MuscleGroup.TRICEPS)),
        make_exercise("push-2", (MuscleGroup.SHOULDERS,)),
        make_exercise("pull-1", (MuscleGroup.BACK,)),
        make_exercise("legs-1", (MuscleGroup.LEGS, MuscleGroup.GLUTES)),
        make_exercise("core-1", (MuscleGroup.CORE,), reps=None, duration=30),
        make_exercise("cardio-1", (MuscleGroup.CARDIO,), reps=None, duration=45),
        make_exercise("full-1", (MuscleGroup.FULL_BODY,)),
        make_exercise("adv-1", (MuscleGroup.CHEST,), difficulty=DifficultyLevel.ADVANCED),
    ]
    return InMemoryCatalog(exercises, meals)
