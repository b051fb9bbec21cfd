"""
Service for the daily meal plan.

Every day gets exactly two meals: a light lunch carrying 35% of the calorie
and protein targets and a main dinner carrying 65%. The eating window is
taken from the fasting plan, and each meal is given a clock time for the
day's fasting protocol.
"""

import logging
from datetime import date, datetime

from ..catalog import CatalogRepository
from ..models import (
    CatalogMeal,
    EatingWindow,
    FastingRatio,
    MealSlot,
    MealType,
    PersonalizedFastingPlan,
    PersonalizedMealPlan,
    PlannedMeal,
    UserProfile,
)
from ..nutrition import calculate_calorie_target, calculate_protein_target

logger = logging.getLogger(__name__)

# slot -> (catalog meal type, share of daily targets)
MEAL_SLOTS: dict[MealSlot, tuple[MealType, float]] = {
    MealSlot.LIGHT: (MealType.LUNCH, 0.35),
    MealSlot.MAIN: (MealType.DINNER, 0.65),
}

# clock time of each meal type under each fasting protocol
MEAL_TIMES: dict[FastingRatio, dict[MealType, str]] = {
    FastingRatio.R12_12: {
        MealType.BREAKFAST: "08:00",
        MealType.LUNCH: "12:00",
        MealType.DINNER: "18:00",
    },
    FastingRatio.R14_10: {
        MealType.BREAKFAST: "10:00",
        MealType.LUNCH: "13:00",
        MealType.DINNER: "18:00",
    },
    FastingRatio.R16_8: {
        MealType.BREAKFAST: "12:00",
        MealType.LUNCH: "15:00",
        MealType.DINNER: "19:00",
    },
    FastingRatio.R18_6: {
        MealType.BREAKFAST: "14:00",
        MealType.LUNCH: "16:00",
        MealType.DINNER: "19:30",
    },
}

CALORIE_TOLERANCE = 0.2
FALLBACK_MEALS = 3
MAX_OPTIONS = 3


def _minutes(clock: str) -> int:
    hours, minutes = clock.split(":")
    return int(hours) * 60 + int(minutes)


def is_within_eating_window(clock: str, window: EatingWindow) -> bool:
    """True when ``clock`` falls in [start, end) of the eating window."""
    return _minutes(window.start) <= _minutes(clock) < _minutes(window.end)


class MealService:
    """Assigns catalog meals to the two daily slots."""

    def __init__(self, catalog: CatalogRepository):
        self.catalog = catalog

    def candidates(self, meal_type: MealType, target_calories: float) -> list[CatalogMeal]:
        """
        Meals of ``meal_type`` within +/-20% of the target, or the three
        closest by calories when none fall inside that band.
        """
        matching = self.catalog.get_meals_by_type_and_calorie_range(
            meal_type,
            target_calories * (1 - CALORIE_TOLERANCE),
            target_calories * (1 + CALORIE_TOLERANCE),
        )
        if matching:
            return matching
        every = self.catalog.get_meals_by_type_and_calorie_range(meal_type, 0, float("inf"))
        closest = sorted(every, key=lambda m: abs(m.calories - target_calories))[:FALLBACK_MEALS]
        logger.debug(
            "No %s meals near %.0f kcal; falling back to %s",
            meal_type.value,
            target_calories,
            [m.id for m in closest],
        )
        return closest

    def meal_options(
        self, slot: MealSlot, target_calories: float, day_number: int
    ) -> list[CatalogMeal]:
        """Up to three distinct swap options for a slot, rotating with the day."""
        meal_type, _ = MEAL_SLOTS[slot]
        pool = self.candidates(meal_type, target_calories)
        options: list[CatalogMeal] = []
        seen: set[str] = set()
        for i in range(len(pool)):
            meal = pool[(day_number + i) % len(pool)]
            if meal.id not in seen:
                seen.add(meal.id)
                options.append(meal)
            if len(options) >= MAX_OPTIONS:
                break
        return options

    def generate_meal_plan(
        self,
        profile: UserProfile,
        fasting: PersonalizedFastingPlan,
        day_number: int,
        now: datetime | date,
    ) -> PersonalizedMealPlan:
        calorie_target = calculate_calorie_target(profile, now)
        protein_target = calculate_protein_target(profile)

        window = EatingWindow(start=fasting.window.eating_start, end=fasting.window.eating_end)
        meals: list[PlannedMeal] = []
        for slot, (meal_type, share) in MEAL_SLOTS.items():
            slot_calories = calorie_target * share
            pool = self.candidates(meal_type, slot_calories)
            if not pool:
                logger.warning("No %s meals in catalog for the %s slot", meal_type.value, slot.value)
                continue
            scheduled = MEAL_TIMES[fasting.ratio][meal_type]
            in_window = is_within_eating_window(scheduled, window)
            if not in_window:
                logger.warning(
                    "%s meal at %s falls outside the %s-%s eating window",
                    slot.value,
                    scheduled,
                    window.start,
                    window.end,
                )
            meals.append(
                PlannedMeal(
                    slot=slot,
                    target_calories=round(slot_calories, 1),
                    target_protein=round(protein_target * share, 1),
                    meal=pool[day_number % len(pool)],
                    scheduled_time=scheduled,
                    in_eating_window=in_window,
                )
            )

        if fasting.meals_per_day != len(MEAL_SLOTS):
            logger.info(
                "Fasting plan %s intends %s meal(s) per day; meal plan allocates %s slots",
                fasting.ratio.value,
                fasting.meals_per_day,
                len(MEAL_SLOTS),
            )

        return PersonalizedMealPlan(
            day_number=day_number,
            meals=meals,
            intended_meals_per_day=fasting.meals_per_day,
            calorie_target=calorie_target,
            protein_target=protein_target,
            total_calories=sum(m.meal.calories for m in meals),
            total_protein=sum(m.meal.protein for m in meals),
            total_carbs=sum(m.meal.carbs for m in meals),
            total_fat=sum(m.meal.fat for m in meals),
            eating_window=window,
        )
