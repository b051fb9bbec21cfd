"""
Read-only catalog API routes.
"""

from fastapi import APIRouter, HTTPException, Query

from ...catalog import get_catalog
from ...models import DifficultyLevel, MealType, MuscleGroup

router = APIRouter()


@router.get("/catalog/exercises")
async def catalog_exercises(
    difficulty: DifficultyLevel | None = Query(None),
    muscle_group: list[MuscleGroup] | None = Query(None),
) -> dict:
    """
    List catalog exercises, optionally by difficulty tier and muscle groups.
    Muscle group filtering requires a difficulty tier.
    """
    catalog = get_catalog()
    if muscle_group:
        if difficulty is None:
            raise HTTPException(status_code=422, detail="muscle_group filter requires difficulty")
        items = catalog.get_exercises_by_muscle_groups(muscle_group, difficulty)
    elif difficulty is not None:
        items = catalog.get_exercises_by_difficulty(difficulty)
    else:
        items = list(catalog.exercises)
    return {"ok": True, "items": [ex.model_dump(mode="json") for ex in items], "total": len(items)}


@router.get("/catalog/exercises/{exercise_id}")
async def catalog_exercise(exercise_id: str) -> dict:
    exercise = get_catalog().get_exercise(exercise_id)
    if exercise is None:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return {"ok": True, "item": exercise.model_dump(mode="json")}


@router.get("/catalog/meals")
async def catalog_meals(
    meal_type: MealType | None = Query(None),
    min_calories: float = Query(0, ge=0),
    max_calories: float | None = Query(None, ge=0),
) -> dict:
    """List catalog meals, optionally by meal type and calorie range."""
    catalog = get_catalog()
    upper = max_calories if max_calories is not None else float("inf")
    if meal_type is not None:
        items = catalog.get_meals_by_type_and_calorie_range(meal_type, min_calories, upper)
    else:
        items = [m for m in catalog.meals if min_calories <= m.calories <= upper]
    return {"ok": True, "items": [m.model_dump(mode="json") for m in items], "total": len(items)}
