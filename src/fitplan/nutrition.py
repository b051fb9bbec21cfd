"""Calorie and protein targets (Mifflin-St Jeor BMR scaled by activity and goal)."""

import logging
from datetime import date, datetime

from .measures import round_half_up
from .models import ActivityLevel, Gender, PrimaryGoal, UserProfile

logger = logging.getLogger(__name__)

DEFAULT_WEIGHT_KG = 70.0
DEFAULT_HEIGHT_CM = 170.0
DEFAULT_AGE = 30

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
}

GOAL_CALORIE_MULTIPLIERS: dict[PrimaryGoal, float] = {
    PrimaryGoal.LOSE_WEIGHT: 0.8,
    PrimaryGoal.BUILD_MUSCLE: 1.15,
    PrimaryGoal.GAIN_MUSCLE_LOSE_WEIGHT: 0.95,
    PrimaryGoal.GET_FIT_TONED: 1.0,
}

# grams of protein per kg of body weight
GOAL_PROTEIN_MULTIPLIERS: dict[PrimaryGoal, float] = {
    PrimaryGoal.BUILD_MUSCLE: 2.0,
    PrimaryGoal.GAIN_MUSCLE_LOSE_WEIGHT: 1.8,
    PrimaryGoal.LOSE_WEIGHT: 1.5,
    PrimaryGoal.GET_FIT_TONED: 1.4,
}


def age_on(date_of_birth: date, now: datetime | date) -> int:
    """Whole calendar years between ``date_of_birth`` and ``now``."""
    today = now.date() if isinstance(now, datetime) else now
    return (
        today.year
        - date_of_birth.year
        - ((today.month, today.day) < (date_of_birth.month, date_of_birth.day))
    )


def calculate_bmr(weight_kg: float, height_cm: float, age: int, gender: Gender) -> float:
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    return base + 5 if gender == Gender.MALE else base - 161


def calculate_tdee(bmr: float, activity_level: ActivityLevel) -> float:
    return bmr * ACTIVITY_MULTIPLIERS[activity_level]


def calculate_calorie_target(profile: UserProfile, now: datetime | date) -> int:
    weight = profile.weight_kg or DEFAULT_WEIGHT_KG
    height = profile.height_cm or DEFAULT_HEIGHT_CM
    gender = profile.gender or Gender.MALE
    activity = profile.activity_level or ActivityLevel.LIGHTLY_ACTIVE
    goal = profile.primary_goal or PrimaryGoal.GET_FIT_TONED
    age = age_on(profile.date_of_birth, now) if profile.date_of_birth else DEFAULT_AGE

    bmr = calculate_bmr(weight, height, age, gender)
    tdee = calculate_tdee(bmr, activity)
    target = round_half_up(tdee * GOAL_CALORIE_MULTIPLIERS[goal])
    logger.debug(
        "Calorie target: bmr=%.2f tdee=%.2f goal=%s target=%s", bmr, tdee, goal.value, target
    )
    return target


def calculate_protein_target(profile: UserProfile) -> int:
    weight = profile.weight_kg or DEFAULT_WEIGHT_KG
    goal = profile.primary_goal or PrimaryGoal.GET_FIT_TONED
    return round_half_up(weight * GOAL_PROTEIN_MULTIPLIERS[goal])
