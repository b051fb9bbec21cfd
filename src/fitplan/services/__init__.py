"""
Services layer: the fasting, exercise, meal and schedule engines.
"""

from .exercise_service import ExerciseService
from .fasting_service import FastingService
from .meal_service import MealService
from .schedule_service import ScheduleService

__all__ = ["ExerciseService", "FastingService", "MealService", "ScheduleService"]
