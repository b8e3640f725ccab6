import math

from .models import ACTIVITY_LEVELS, ActivityLevel, MetabolicResult, Sex

# Mifflin-St Jeor sex constants.
SEX_CONSTANTS: dict[Sex, float] = {
    "male": 5.0,
    "female": -161.0,
}


def round_half_up(value: float) -> int:
    """Round to the nearest whole calorie, halves going up."""
    return int(math.floor(value + 0.5))


def calculate_bmr(weight_kg: float, height_cm: float, age_years: float, sex: Sex) -> float:
    """Calculate unrounded Basal Metabolic Rate (Mifflin-St Jeor)."""
    if sex not in SEX_CONSTANTS:
        raise ValueError("sex must be one of: male, female")
    return 10 * weight_kg + 6.25 * height_cm - 5 * age_years + SEX_CONSTANTS[sex]


def calculate_tdee(bmr: float, activity_level: ActivityLevel) -> float:
    """Calculate unrounded Total Daily Energy Expenditure from a raw BMR."""
    return bmr * ACTIVITY_LEVELS[activity_level].multiplier


def compute(
    weight_kg: float,
    height_cm: float,
    age_years: float,
    sex: Sex,
    activity_level: ActivityLevel,
) -> MetabolicResult:
    """Compute the rounded BMR/TDEE result for already validated inputs.

    TDEE is derived from the unrounded BMR, so the two figures are rounded
    independently of each other.
    """
    bmr = calculate_bmr(weight_kg, height_cm, age_years, sex)
    tdee = calculate_tdee(bmr, activity_level)
    return MetabolicResult(
        bmr=round_half_up(bmr),
        tdee=round_half_up(tdee),
        activity_label=ACTIVITY_LEVELS[activity_level].label,
    )
