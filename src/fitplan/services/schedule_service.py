"""
Service composing the fasting, exercise and meal engines into daily and
weekly schedules.
"""

import logging
from datetime import date, datetime

from ..catalog import CatalogRepository
from ..models import DailySchedule, TrainingFrequency, UserProfile
from ..progression import week_number
from .exercise_service import ExerciseService
from .fasting_service import FastingService
from .meal_service import MEAL_SLOTS, MealService

logger = logging.getLogger(__name__)

# weekday numbers (1-7, where day_number % 7 == 0 maps to 7) that are rest days
REST_DAYS: dict[TrainingFrequency, frozenset[int]] = {
    TrainingFrequency.LOW: frozenset({3, 6, 7}),
    TrainingFrequency.MEDIUM: frozenset({4, 7}),
    TrainingFrequency.HIGH: frozenset({7}),
}

DAYS_PER_WEEK = 7


def is_rest_day(frequency: TrainingFrequency | None, day_number: int) -> bool:
    weekday = day_number % DAYS_PER_WEEK or DAYS_PER_WEEK
    return weekday in REST_DAYS[frequency or TrainingFrequency.MEDIUM]


def week_start_day(week_index: int) -> int:
    """First day number of the 1-based ``week_index``."""
    return (week_index - 1) * DAYS_PER_WEEK + 1


class ScheduleService:
    """Builds day-by-day plans; every call is a pure function of its arguments."""

    def __init__(self, catalog: CatalogRepository):
        self.fasting = FastingService()
        self.exercises = ExerciseService(catalog)
        self.meals = MealService(catalog)

    def daily_schedule(
        self, profile: UserProfile, day_number: int, now: datetime | date
    ) -> DailySchedule:
        rest = is_rest_day(profile.training_frequency, day_number)
        fasting = self.fasting.determine_fasting_plan(profile)
        meals = self.meals.generate_meal_plan(profile, fasting, day_number, now)
        if rest:
            workout = self.exercises.rest_day_plan(profile, day_number)
        else:
            workout = self.exercises.generate_workout(profile, day_number)

        under_populated = (not rest and not workout.exercises) or len(meals.meals) < len(
            MEAL_SLOTS
        )
        if under_populated:
            logger.warning(
                "Day %s is under-populated: exercises=%s meals=%s",
                day_number,
                len(workout.exercises),
                len(meals.meals),
            )

        if rest:
            reasoning = (
                f"Rest day: recover and keep the {fasting.ratio.value} fasting schedule. "
                f"{fasting.reasoning}"
            )
        else:
            focus = ", ".join(mg.value for mg in workout.focus_areas) or "general conditioning"
            reasoning = (
                f"Week {workout.week_number} training day: {len(workout.exercises)} "
                f"{workout.difficulty.value} exercises focused on {focus}. {fasting.reasoning}"
            )

        today = now.date() if isinstance(now, datetime) else now
        return DailySchedule(
            day_number=day_number,
            week_number=week_number(day_number),
            generated_on=today,
            is_rest_day=rest,
            under_populated=under_populated,
            exercises=workout,
            meals=meals,
            fasting=fasting,
            reasoning=reasoning,
        )

    def week_schedule(
        self, profile: UserProfile, start_day: int, now: datetime | date
    ) -> list[DailySchedule]:
        logger.debug("Building week schedule from day %s", start_day)
        return [
            self.daily_schedule(profile, start_day + offset, now)
            for offset in range(DAYS_PER_WEEK)
        ]
