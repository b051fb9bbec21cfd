"""
Fasting protocol assignment from BMI category, goal, activity and metabolism.
"""

import logging

from ..models import (
    ActivityLevel,
    BMICategory,
    FastingRatio,
    FastingWindow,
    MetabolicType,
    PersonalizedFastingPlan,
    PrimaryGoal,
    UserProfile,
)

logger = logging.getLogger(__name__)

DEFAULT_BMI = 25.0

FASTING_WINDOWS: dict[FastingRatio, FastingWindow] = {
    FastingRatio.R12_12: FastingWindow(
        ratio=FastingRatio.R12_12,
        eating_start="08:00",
        eating_end="20:00",
        fasting_start="20:00",
        fasting_end="08:00",
        eating_hours=12,
        fasting_hours=12,
    ),
    FastingRatio.R14_10: FastingWindow(
        ratio=FastingRatio.R14_10,
        eating_start="10:00",
        eating_end="20:00",
        fasting_start="20:00",
        fasting_end="10:00",
        eating_hours=10,
        fasting_hours=14,
    ),
    FastingRatio.R16_8: FastingWindow(
        ratio=FastingRatio.R16_8,
        eating_start="12:00",
        eating_end="20:00",
        fasting_start="20:00",
        fasting_end="12:00",
        eating_hours=8,
        fasting_hours=16,
    ),
    FastingRatio.R18_6: FastingWindow(
        ratio=FastingRatio.R18_6,
        eating_start="14:00",
        eating_end="20:00",
        fasting_start="20:00",
        fasting_end="14:00",
        eating_hours=6,
        fasting_hours=18,
    ),
}

WEIGHT_LOSS_GOALS = frozenset({PrimaryGoal.LOSE_WEIGHT, PrimaryGoal.GAIN_MUSCLE_LOSE_WEIGHT})

# (ratio, meal-count intent, reasoning) per BMI category and goal
_BASE_PROTOCOLS: dict[BMICategory, dict[PrimaryGoal, tuple[FastingRatio, int, str]]] = {
    BMICategory.OBESE: {
        goal: (
            FastingRatio.R18_6,
            1,
            "Aggressive intermittent fasting recommended for significant weight loss. "
            "One meal per day within a 6-hour window.",
        )
        for goal in PrimaryGoal
    },
    BMICategory.OVERWEIGHT: {
        goal: (
            (
                FastingRatio.R18_6,
                2,
                "Extended fasting window to accelerate fat loss while maintaining muscle.",
            )
            if goal in WEIGHT_LOSS_GOALS
            else (
                FastingRatio.R16_8,
                2,
                "Standard intermittent fasting for gradual weight management.",
            )
        )
        for goal in PrimaryGoal
    },
    BMICategory.NORMAL: {
        goal: (
            (
                FastingRatio.R14_10,
                2,
                "Shorter fasting window to support muscle growth with adequate nutrition timing.",
            )
            if goal == PrimaryGoal.BUILD_MUSCLE
            else (
                FastingRatio.R16_8,
                2,
                "Balanced fasting protocol for maintenance and general fitness.",
            )
        )
        for goal in PrimaryGoal
    },
    BMICategory.UNDERWEIGHT: {
        goal: (
            FastingRatio.R12_12,
            2,
            "Minimal fasting to allow maximum nutrient intake for healthy weight gain.",
        )
        for goal in PrimaryGoal
    },
}


def bmi_category(bmi: float) -> BMICategory:
    if bmi < 18.5:
        return BMICategory.UNDERWEIGHT
    if bmi < 25:
        return BMICategory.NORMAL
    if bmi < 30:
        return BMICategory.OVERWEIGHT
    return BMICategory.OBESE


class FastingService:
    """Assigns one of the four fixed fasting protocols to a profile."""

    def determine_fasting_plan(self, profile: UserProfile) -> PersonalizedFastingPlan:
        bmi = profile.resolved_bmi() or DEFAULT_BMI
        category = bmi_category(bmi)
        activity = profile.activity_level or ActivityLevel.LIGHTLY_ACTIVE
        metabolism = profile.metabolic_type or MetabolicType.NORMAL
        goal = profile.primary_goal or PrimaryGoal.GET_FIT_TONED

        ratio, meals_per_day, reasoning = _BASE_PROTOCOLS[category][goal]

        if activity == ActivityLevel.VERY_ACTIVE and ratio == FastingRatio.R18_6:
            ratio = FastingRatio.R16_8
            reasoning += " Adjusted for high activity level to ensure adequate energy intake."

        if metabolism == MetabolicType.SLOW and ratio == FastingRatio.R12_12:
            ratio = FastingRatio.R14_10
            reasoning += " Extended slightly due to slower metabolism."

        logger.debug(
            "Fasting plan: bmi=%s category=%s goal=%s activity=%s metabolism=%s -> %s (%s meals)",
            bmi,
            category.value,
            goal.value,
            activity.value,
            metabolism.value,
            ratio.value,
            meals_per_day,
        )
        return PersonalizedFastingPlan(
            ratio=ratio,
            window=FASTING_WINDOWS[ratio],
            bmi_category=category,
            meals_per_day=meals_per_day,
            reasoning=reasoning,
        )
