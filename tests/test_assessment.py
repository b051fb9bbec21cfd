from fitplan.assessment import calculate_fitness_level, resolve_difficulty
from fitplan.models import DifficultyLevel, FitnessAssessment, UserProfile


def test_fitness_level_tiers():
    top = calculate_fitness_level(50, 20)
    assert (top.strength_score, top.stamina_score) == (100, 100)
    assert top.overall_level == DifficultyLevel.ADVANCED

    mid = calculate_fitness_level(20, 5)
    assert (mid.strength_score, mid.stamina_score) == (60, 60)
    assert mid.overall_level == DifficultyLevel.INTERMEDIATE

    low = calculate_fitness_level(10, 1)
    assert (low.strength_score, low.stamina_score) == (45, 25)
    assert low.overall_level == DifficultyLevel.BEGINNER


def test_fitness_level_floor_scores():
    none = calculate_fitness_level(0, 0)
    assert (none.strength_score, none.stamina_score) == (15, 10)


def test_resolve_difficulty_prefers_explicit_assessment():
    profile = UserProfile(
        fitness_assessment=FitnessAssessment(overall_level=DifficultyLevel.INTERMEDIATE),
        push_up_count=60,
        pull_up_count=25,
    )
    assert resolve_difficulty(profile) == DifficultyLevel.INTERMEDIATE


def test_resolve_difficulty_from_counts_and_default():
    assert resolve_difficulty(UserProfile(push_up_count=30, pull_up_count=10)) == (
        DifficultyLevel.ADVANCED
    )
    assert resolve_difficulty(UserProfile()) == DifficultyLevel.BEGINNER


def test_resolved_bmi():
    assert UserProfile(bmi=31.0, height_cm=175, weight_kg=70).resolved_bmi() == 31.0
    assert UserProfile(height_cm=175, weight_kg=70).resolved_bmi() == 22.9
    assert UserProfile(height_cm=175).resolved_bmi() is None
