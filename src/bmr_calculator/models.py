from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Sex = Literal["male", "female"]
ActivityLevel = Literal["sedentary", "light", "moderate", "active", "extreme"]

SEXES: tuple[Sex, ...] = ("male", "female")


@dataclass(frozen=True)
class ActivityFactor:
    multiplier: float
    label: str


# Closed table, in display order.
ACTIVITY_LEVELS: dict[ActivityLevel, ActivityFactor] = {
    "sedentary": ActivityFactor(1.2, "little/no exercise"),
    "light": ActivityFactor(1.375, "light activity 1–3 days/week"),
    "moderate": ActivityFactor(1.55, "moderate activity 3–5 days/week"),
    "active": ActivityFactor(1.725, "heavy activity 6–7 days/week"),
    "extreme": ActivityFactor(1.9, "professional athlete level"),
}

WEIGHT_LOSS_OFFSET = -500
MUSCLE_GAIN_OFFSET = 300


@dataclass
class InputFields:
    """Form state as typed by the user; numeric fields stay raw text."""

    weight_kg: str = ""
    height_cm: str = ""
    age_years: str = ""
    sex: Sex = "male"
    activity_level: ActivityLevel = "moderate"


@dataclass(frozen=True)
class Measurements:
    weight_kg: float
    height_cm: float
    age_years: float


@dataclass(frozen=True)
class MetabolicResult:
    bmr: int
    tdee: int
    activity_label: str

    @property
    def weight_loss_target(self) -> int:
        """Daily intake for roughly 0.5 kg/week loss."""
        return self.tdee + WEIGHT_LOSS_OFFSET

    @property
    def maintenance_target(self) -> int:
        return self.tdee

    @property
    def muscle_gain_target(self) -> int:
        """Daily intake for roughly 0.3 kg/week gain."""
        return self.tdee + MUSCLE_GAIN_OFFSET
