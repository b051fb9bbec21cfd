"""Body measures and rounding shared by the profile model and the plan engines."""

import math


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    """BMI rounded half up to one decimal, so 29.95 reads as 30.0 (obese)."""
    height_m = height_cm / 100
    return round_half_up(weight_kg / (height_m * height_m) * 10) / 10
