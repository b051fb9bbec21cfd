import pytest

from fitplan.models import (
    ActivityLevel,
    BMICategory,
    FastingRatio,
    MetabolicType,
    PrimaryGoal,
    UserProfile,
)
from fitplan.services.fasting_service import (
    _BASE_PROTOCOLS,
    FASTING_WINDOWS,
    FastingService,
    bmi_category,
)

service = FastingService()


def test_tables_are_exhaustive():
    assert set(FASTING_WINDOWS) == set(FastingRatio)
    assert set(_BASE_PROTOCOLS) == set(BMICategory)
    for by_goal in _BASE_PROTOCOLS.values():
        assert set(by_goal) == set(PrimaryGoal)


@pytest.mark.parametrize(
    ("bmi", "expected"),
    [
        (18.4, BMICategory.UNDERWEIGHT),
        (18.5, BMICategory.NORMAL),
        (24.9, BMICategory.NORMAL),
        (25.0, BMICategory.OVERWEIGHT),
        (29.9, BMICategory.OVERWEIGHT),
        (30.0, BMICategory.OBESE),
    ],
)
def test_bmi_category_boundaries(bmi, expected):
    assert bmi_category(bmi) == expected


def test_obese_sedentary_weight_loss():
    plan = service.determine_fasting_plan(
        UserProfile(
            bmi=32, activity_level=ActivityLevel.SEDENTARY, primary_goal=PrimaryGoal.LOSE_WEIGHT
        )
    )
    assert plan.ratio == FastingRatio.R18_6
    assert plan.meals_per_day == 1
    assert "Aggressive" in plan.reasoning
    assert (plan.window.eating_start, plan.window.eating_end) == ("14:00", "20:00")


@pytest.mark.parametrize("goal", list(PrimaryGoal))
@pytest.mark.parametrize(
    "activity",
    [ActivityLevel.SEDENTARY, ActivityLevel.LIGHTLY_ACTIVE, ActivityLevel.MODERATELY_ACTIVE, None],
)
def test_obese_not_very_active_is_18_6_one_meal(goal, activity):
    plan = service.determine_fasting_plan(
        UserProfile(bmi=35, activity_level=activity, primary_goal=goal)
    )
    assert plan.ratio == FastingRatio.R18_6
    assert plan.meals_per_day == 1


@pytest.mark.parametrize("goal", list(PrimaryGoal))
def test_obese_very_active_downgraded(goal):
    plan = service.determine_fasting_plan(
        UserProfile(bmi=30, activity_level=ActivityLevel.VERY_ACTIVE, primary_goal=goal)
    )
    assert plan.ratio == FastingRatio.R16_8
    assert plan.meals_per_day == 1
    assert "high activity" in plan.reasoning
    assert plan.window.eating_start == "12:00"


def test_overweight_by_goal():
    loss = service.determine_fasting_plan(
        UserProfile(bmi=27, primary_goal=PrimaryGoal.GAIN_MUSCLE_LOSE_WEIGHT)
    )
    assert loss.ratio == FastingRatio.R18_6
    assert loss.meals_per_day == 2

    toned = service.determine_fasting_plan(UserProfile(bmi=27, primary_goal=PrimaryGoal.BUILD_MUSCLE))
    assert toned.ratio == FastingRatio.R16_8


def test_normal_by_goal():
    muscle = service.determine_fasting_plan(UserProfile(bmi=22, primary_goal=PrimaryGoal.BUILD_MUSCLE))
    assert muscle.ratio == FastingRatio.R14_10
    assert muscle.window.eating_start == "10:00"

    fit = service.determine_fasting_plan(UserProfile(bmi=22))
    assert fit.ratio == FastingRatio.R16_8


def test_underweight_slow_metabolism_extended():
    base = service.determine_fasting_plan(UserProfile(bmi=17))
    assert base.ratio == FastingRatio.R12_12
    assert base.window.eating_start == "08:00"

    slow = service.determine_fasting_plan(UserProfile(bmi=17, metabolic_type=MetabolicType.SLOW))
    assert slow.ratio == FastingRatio.R14_10
    assert slow.reasoning.endswith("Extended slightly due to slower metabolism.")


def test_sparse_profile_uses_defaults():
    plan = service.determine_fasting_plan(UserProfile())
    # BMI 25 is overweight; default goal is not weight-loss oriented
    assert plan.bmi_category == BMICategory.OVERWEIGHT
    assert plan.ratio == FastingRatio.R16_8
    assert plan.meals_per_day == 2


def test_bmi_derived_from_body_metrics():
    plan = service.determine_fasting_plan(UserProfile(weight_kg=100, height_cm=170))
    assert plan.bmi_category == BMICategory.OBESE
