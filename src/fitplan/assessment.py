"""Onboarding derivations: the push-up/pull-up fitness assessment and difficulty tier."""

import logging

from .models import DifficultyLevel, FitnessAssessment, UserProfile

logger = logging.getLogger(__name__)

# (minimum count, score), checked top-down
_STRENGTH_SCORES = ((50, 100), (40, 90), (30, 75), (20, 60), (10, 45), (5, 30))
_STAMINA_SCORES = ((20, 100), (15, 90), (10, 75), (5, 60), (2, 40), (1, 25))


def _score(count: int, thresholds: tuple[tuple[int, int], ...], floor: int) -> int:
    for minimum, score in thresholds:
        if count >= minimum:
            return score
    return floor


def calculate_fitness_level(push_ups: int, pull_ups: int) -> FitnessAssessment:
    """
    Score push-ups as strength and pull-ups as stamina, then bucket the
    average into a difficulty tier (>=70 advanced, >=45 intermediate).
    """
    strength = _score(push_ups, _STRENGTH_SCORES, 15)
    stamina = _score(pull_ups, _STAMINA_SCORES, 10)
    average = (strength + stamina) / 2
    if average >= 70:
        level = DifficultyLevel.ADVANCED
    elif average >= 45:
        level = DifficultyLevel.INTERMEDIATE
    else:
        level = DifficultyLevel.BEGINNER
    logger.debug(
        "Fitness assessment: push_ups=%s pull_ups=%s strength=%s stamina=%s level=%s",
        push_ups,
        pull_ups,
        strength,
        stamina,
        level.value,
    )
    return FitnessAssessment(
        push_ups=push_ups,
        pull_ups=pull_ups,
        strength_score=strength,
        stamina_score=stamina,
        overall_level=level,
    )


def resolve_difficulty(profile: UserProfile) -> DifficultyLevel:
    """Difficulty tier for the whole plan; beginner when nothing was assessed."""
    if profile.fitness_assessment is not None:
        return profile.fitness_assessment.overall_level
    if profile.push_up_count is not None and profile.pull_up_count is not None:
        return calculate_fitness_level(
            profile.push_up_count, profile.pull_up_count
        ).overall_level
    return DifficultyLevel.BEGINNER
