"""
Service for daily exercise selection.

Target muscles come from the user's goal, gender and problem areas; a fixed
weekly template picks the day's focus, and the pool of same-tier catalog
exercises is shuffled with a day-seeded permutation before progression.
"""

import logging

from ..assessment import resolve_difficulty
from ..catalog import CatalogRepository
from ..measures import round_half_up
from ..models import (
    CatalogExercise,
    DifficultyLevel,
    Gender,
    MuscleGroup,
    PersonalizedExercisePlan,
    PrimaryGoal,
    ProblemArea,
    UserProfile,
    WorkoutDuration,
)
from ..progression import apply_progression, week_number
from ..shuffle import seeded_permutation

logger = logging.getLogger(__name__)

MG = MuscleGroup

GOAL_MUSCLES: dict[Gender, dict[PrimaryGoal, tuple[MuscleGroup, ...]]] = {
    Gender.MALE: {
        PrimaryGoal.BUILD_MUSCLE: (MG.CHEST, MG.BACK, MG.SHOULDERS, MG.BICEPS, MG.TRICEPS, MG.LEGS),
        PrimaryGoal.LOSE_WEIGHT: (MG.CARDIO, MG.FULL_BODY, MG.CORE),
        PrimaryGoal.GAIN_MUSCLE_LOSE_WEIGHT: (MG.CHEST, MG.BACK, MG.LEGS, MG.CORE, MG.CARDIO),
        PrimaryGoal.GET_FIT_TONED: (MG.FULL_BODY, MG.CORE, MG.CARDIO),
    },
    Gender.FEMALE: {
        PrimaryGoal.BUILD_MUSCLE: (MG.GLUTES, MG.LEGS, MG.CORE, MG.SHOULDERS),
        PrimaryGoal.LOSE_WEIGHT: (MG.CARDIO, MG.FULL_BODY, MG.GLUTES),
        PrimaryGoal.GAIN_MUSCLE_LOSE_WEIGHT: (MG.GLUTES, MG.LEGS, MG.CORE, MG.CARDIO),
        PrimaryGoal.GET_FIT_TONED: (MG.GLUTES, MG.CORE, MG.LEGS, MG.FULL_BODY),
    },
}

PROBLEM_AREA_MUSCLES: dict[ProblemArea, tuple[MuscleGroup, ...]] = {
    ProblemArea.WEAK_CHEST: (MG.CHEST, MG.SHOULDERS),
    ProblemArea.SLIM_ARMS: (MG.BICEPS, MG.TRICEPS, MG.SHOULDERS),
    ProblemArea.BEER_BELLY: (MG.CORE,),
    ProblemArea.SLIM_LEGS: (MG.LEGS, MG.GLUTES),
    ProblemArea.FLABBY_ARMS: (MG.TRICEPS, MG.BICEPS),
    ProblemArea.BELLY_FAT: (MG.CORE, MG.CARDIO),
    ProblemArea.HIP_FAT: (MG.GLUTES, MG.CORE),
    ProblemArea.THIGH_FAT: (MG.LEGS, MG.GLUTES, MG.CARDIO),
}

# weekday (1-7) -> template muscle groups
DAY_TEMPLATES: dict[int, tuple[MuscleGroup, ...]] = {
    1: (MG.CHEST, MG.TRICEPS, MG.SHOULDERS),  # push
    2: (MG.BACK, MG.BICEPS),  # pull
    3: (MG.LEGS, MG.GLUTES),  # legs
    4: (MG.CORE, MG.CARDIO),  # core / cardio
    5: (MG.CHEST, MG.BACK, MG.FULL_BODY),  # upper
    6: (MG.LEGS, MG.GLUTES, MG.CORE),  # lower + core
    7: (MG.FULL_BODY,),  # light full body
}

ANCHOR_MUSCLES = frozenset({MG.FULL_BODY, MG.CARDIO})

EXERCISE_COUNTS: dict[WorkoutDuration, int] = {
    WorkoutDuration.SHORT: 4,
    WorkoutDuration.MEDIUM: 6,
    WorkoutDuration.LONG: 8,
    WorkoutDuration.EXTENDED: 10,
}

DEFAULT_SETS = 3
DEFAULT_REST_SECONDS = 45
DEFAULT_CALORIES = 30
# per-set reps assumed for descriptive reps like "10 each leg"
DEFAULT_REPS = 10
# work seconds per set counted for rep-based exercises
DEFAULT_WORK_SECONDS = 2


def exercise_count(duration: WorkoutDuration | None) -> int:
    return EXERCISE_COUNTS[duration or WorkoutDuration.MEDIUM]


def target_muscles(profile: UserProfile) -> list[MuscleGroup]:
    """Goal muscles followed by problem-area muscles, without duplicates."""
    gender = profile.gender or Gender.MALE
    goal = profile.primary_goal or PrimaryGoal.GET_FIT_TONED
    muscles = list(GOAL_MUSCLES[gender][goal])
    for area in profile.problem_areas:
        muscles.extend(PROBLEM_AREA_MUSCLES[area])
    return list(dict.fromkeys(muscles))


def day_focus(day_number: int, targets: list[MuscleGroup]) -> list[MuscleGroup]:
    weekday = (day_number - 1) % 7 + 1
    return [mg for mg in DAY_TEMPLATES[weekday] if mg in targets or mg in ANCHOR_MUSCLES]


def summarize(exercises: list[CatalogExercise]) -> tuple[int, int, int, int]:
    """Return (total sets, total reps, estimated minutes, estimated calories)."""
    total_sets = 0
    total_reps = 0
    seconds = 0
    calories = 0
    for ex in exercises:
        sets = ex.sets if ex.sets is not None else DEFAULT_SETS
        total_sets += sets
        if isinstance(ex.reps, int):
            total_reps += ex.reps * sets
        elif ex.duration is not None:
            total_reps += ex.duration * sets
        else:
            total_reps += DEFAULT_REPS * sets
        work = ex.duration if ex.duration is not None else DEFAULT_WORK_SECONDS
        rest = ex.rest_seconds if ex.rest_seconds is not None else DEFAULT_REST_SECONDS
        seconds += work * sets + rest * (sets - 1)
        calories += ex.calories if ex.calories is not None else DEFAULT_CALORIES
    return total_sets, total_reps, round_half_up(seconds / 60), calories


class ExerciseService:
    """Builds the per-day personalized workout from the catalog."""

    def __init__(self, catalog: CatalogRepository):
        self.catalog = catalog

    def candidate_pool(
        self, focus: list[MuscleGroup], difficulty: DifficultyLevel, count: int
    ) -> list[CatalogExercise]:
        pool = self.catalog.get_exercises_by_muscle_groups(focus, difficulty)
        if len(pool) < count:
            seen = {ex.id for ex in pool}
            pool = pool + [
                ex
                for ex in self.catalog.get_exercises_by_difficulty(difficulty)
                if ex.id not in seen
            ]
        return pool

    def select_exercises(
        self, pool: list[CatalogExercise], count: int, day_number: int
    ) -> list[CatalogExercise]:
        return seeded_permutation(pool, day_number)[:count]

    def generate_workout(self, profile: UserProfile, day_number: int) -> PersonalizedExercisePlan:
        difficulty = resolve_difficulty(profile)
        count = exercise_count(profile.workout_duration)
        focus = day_focus(day_number, target_muscles(profile))

        pool = self.candidate_pool(focus, difficulty, count)
        selected = self.select_exercises(pool, count, day_number)
        progressed = apply_progression(selected, day_number)
        total_sets, total_reps, minutes, calories = summarize(progressed)

        if not progressed:
            logger.warning(
                "No %s exercises available for day %s (focus=%s)",
                difficulty.value,
                day_number,
                [mg.value for mg in focus],
            )
        logger.debug(
            "Workout day=%s tier=%s focus=%s pool=%s selected=%s",
            day_number,
            difficulty.value,
            [mg.value for mg in focus],
            len(pool),
            [ex.id for ex in progressed],
        )
        return PersonalizedExercisePlan(
            day_number=day_number,
            week_number=week_number(day_number),
            exercises=progressed,
            total_sets=total_sets,
            total_reps=total_reps,
            estimated_duration=minutes,
            estimated_calories=calories,
            difficulty=difficulty,
            focus_areas=focus,
        )

    @staticmethod
    def rest_day_plan(profile: UserProfile, day_number: int) -> PersonalizedExercisePlan:
        return PersonalizedExercisePlan(
            day_number=day_number,
            week_number=week_number(day_number),
            difficulty=resolve_difficulty(profile),
        )
