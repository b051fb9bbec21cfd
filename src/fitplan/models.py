"""
Pydantic value objects shared by the plan engines, the catalog and the API.
"""

from __future__ import annotations

import enum
from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .measures import calculate_bmi


class Gender(str, enum.Enum):
    MALE = "male"
    FEMALE = "female"


class AgeCategory(str, enum.Enum):
    AGE_18_29 = "18-29"
    AGE_30_39 = "30-39"
    AGE_40_49 = "40-49"
    AGE_50_PLUS = "50+"


class PrimaryGoal(str, enum.Enum):
    BUILD_MUSCLE = "build_muscle"
    LOSE_WEIGHT = "lose_weight"
    GAIN_MUSCLE_LOSE_WEIGHT = "gain_muscle_lose_weight"
    GET_FIT_TONED = "get_fit_toned"


class BodyType(str, enum.Enum):
    SLIM = "slim"
    AVERAGE = "average"
    BIG = "big"
    HEAVY = "heavy"


class ProblemArea(str, enum.Enum):
    WEAK_CHEST = "weak_chest"
    SLIM_ARMS = "slim_arms"
    BEER_BELLY = "beer_belly"
    SLIM_LEGS = "slim_legs"
    FLABBY_ARMS = "flabby_arms"
    BELLY_FAT = "belly_fat"
    HIP_FAT = "hip_fat"
    THIGH_FAT = "thigh_fat"


class DesiredBody(str, enum.Enum):
    FIT = "fit"
    STRONG = "strong"
    ATHLETIC = "athletic"
    TONED = "toned"
    LEAN = "lean"
    CURVY_FIT = "curvy_fit"


class ExperienceLevel(str, enum.Enum):
    NEVER = "never"
    BEGINNER = "beginner"
    SOME = "some"
    REGULAR = "regular"
    ADVANCED = "advanced"


class MetabolicType(str, enum.Enum):
    FAST = "fast"
    NORMAL = "normal"
    SLOW = "slow"


class ActivityLevel(str, enum.Enum):
    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"


class TrainingFrequency(str, enum.Enum):
    LOW = "2-3"
    MEDIUM = "4-5"
    HIGH = "6-7"


class WorkoutDuration(str, enum.Enum):
    SHORT = "15-20"
    MEDIUM = "20-30"
    LONG = "30-45"
    EXTENDED = "45-60"


class WorkoutTime(str, enum.Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    FLEXIBLE = "flexible"


class DifficultyLevel(str, enum.Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ExerciseModality(str, enum.Enum):
    STRENGTH = "strength"
    CARDIO = "cardio"
    FLEXIBILITY = "flexibility"
    HIIT = "hiit"


class MuscleGroup(str, enum.Enum):
    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    LEGS = "legs"
    GLUTES = "glutes"
    CORE = "core"
    CARDIO = "cardio"
    FULL_BODY = "full_body"


class MealType(str, enum.Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"


class MealSlot(str, enum.Enum):
    """The two daily eating slots: a lighter first meal and the main meal."""

    LIGHT = "light"
    MAIN = "main"


class FastingRatio(str, enum.Enum):
    R12_12 = "12:12"
    R14_10 = "14:10"
    R16_8 = "16:8"
    R18_6 = "18:6"


class BMICategory(str, enum.Enum):
    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---- Onboarding profile ------------------------------------------------------


class FitnessAssessment(_Frozen):
    """Self-assessment result: push-up/pull-up counts and the derived tier."""

    push_ups: int = Field(0, ge=0)
    pull_ups: int = Field(0, ge=0)
    strength_score: int = Field(0, ge=0, le=100)
    stamina_score: int = Field(0, ge=0, le=100)
    overall_level: DifficultyLevel = DifficultyLevel.BEGINNER


class UserProfile(_Frozen):
    """
    Onboarding answers for one user.

    Every field is optional; engines substitute documented defaults for
    anything missing.
    """

    gender: Gender | None = None
    age_category: AgeCategory | None = None
    date_of_birth: date | None = None
    primary_goal: PrimaryGoal | None = None
    body_type: BodyType | None = None
    problem_areas: tuple[ProblemArea, ...] = ()
    desired_body: DesiredBody | None = None
    experience_level: ExperienceLevel | None = None
    fitness_assessment: FitnessAssessment | None = None
    push_up_count: int | None = Field(None, ge=0)
    pull_up_count: int | None = Field(None, ge=0)
    metabolic_type: MetabolicType | None = None
    activity_level: ActivityLevel | None = None
    training_frequency: TrainingFrequency | None = None
    workout_duration: WorkoutDuration | None = None
    workout_time: WorkoutTime | None = None
    height_cm: float | None = Field(None, gt=0)
    weight_kg: float | None = Field(None, gt=0)
    bmi: float | None = Field(None, gt=0)

    def resolved_bmi(self) -> float | None:
        """Provided BMI, else the value derived from height and weight."""
        if self.bmi is not None:
            return self.bmi
        if self.height_cm and self.weight_kg:
            return calculate_bmi(self.weight_kg, self.height_cm)
        return None


# ---- Catalog entries ---------------------------------------------------------


class CatalogExercise(_Frozen):
    id: str
    name: str
    muscle_groups: tuple[MuscleGroup, ...]
    difficulty: DifficultyLevel
    modality: ExerciseModality
    sets: int | None = None
    # Either a count or a descriptive string such as "10 each leg"
    reps: int | str | None = None
    duration: int | None = None
    rest_seconds: int | None = None
    calories: int | None = None


class CatalogMeal(_Frozen):
    id: str
    name: str
    meal_type: MealType
    calories: int
    protein: float
    carbs: float
    fat: float
    fiber: float | None = None
    region: str | None = None
    tags: tuple[str, ...] = ()


# ---- Engine outputs ----------------------------------------------------------


class FastingWindow(_Frozen):
    ratio: FastingRatio
    eating_start: str
    eating_end: str
    fasting_start: str
    fasting_end: str
    eating_hours: int
    fasting_hours: int


class PersonalizedFastingPlan(_Frozen):
    ratio: FastingRatio
    window: FastingWindow
    bmi_category: BMICategory
    meals_per_day: Literal[1, 2]
    reasoning: str


class PersonalizedExercisePlan(_Frozen):
    day_number: int
    week_number: int
    exercises: list[CatalogExercise] = Field(default_factory=list)
    total_sets: int = 0
    total_reps: int = 0
    estimated_duration: int = 0
    estimated_calories: int = 0
    difficulty: DifficultyLevel
    focus_areas: list[MuscleGroup] = Field(default_factory=list)


class EatingWindow(_Frozen):
    start: str
    end: str


class PlannedMeal(_Frozen):
    slot: MealSlot
    target_calories: float
    target_protein: float
    meal: CatalogMeal
    scheduled_time: str
    in_eating_window: bool


class PersonalizedMealPlan(_Frozen):
    day_number: int
    meals: list[PlannedMeal] = Field(default_factory=list)
    meals_per_day: Literal[2] = 2
    intended_meals_per_day: Literal[1, 2]
    calorie_target: int
    protein_target: int
    total_calories: int = 0
    total_protein: float = 0
    total_carbs: float = 0
    total_fat: float = 0
    eating_window: EatingWindow


class DailySchedule(_Frozen):
    day_number: int
    week_number: int
    generated_on: date
    is_rest_day: bool
    under_populated: bool = False
    exercises: PersonalizedExercisePlan
    meals: PersonalizedMealPlan
    fasting: PersonalizedFastingPlan
    reasoning: str
