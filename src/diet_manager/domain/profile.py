"""Domain models for the user profile."""

from dataclasses import dataclass, field
from enum import Enum


class Gender(Enum):
    """Gender used by the BMR formulas."""

    MALE = "Male"
    FEMALE = "Female"


class ActivityLevel(Enum):
    """Activity level and its TDEE multiplier."""

    SEDENTARY = "Sedentary"
    LIGHTLY_ACTIVE = "LightlyActive"
    MODERATELY_ACTIVE = "ModeratelyActive"
    VERY_ACTIVE = "VeryActive"
    EXTREMELY_ACTIVE = "ExtremelyActive"

    @property
    def multiplier(self) -> float:
        return _ACTIVITY_MULTIPLIERS[self]


class TargetFormula(Enum):
    """BMR formula used to derive the daily target."""

    MIFFLIN_ST_JEOR = "MifflinStJeor"
    HARRIS_BENEDICT = "HarrisBenedict"


_ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.EXTREMELY_ACTIVE: 1.9,
}


@dataclass(frozen=True)
class Profile:
    """Body profile and per-date calorie target overrides."""

    gender: Gender = Gender.MALE
    age: int = 30
    height_cm: float = 170.0
    weight_kg: float = 70.0
    activity_level: ActivityLevel = ActivityLevel.MODERATELY_ACTIVE
    target_formula: TargetFormula = TargetFormula.MIFFLIN_ST_JEOR
    daily_overrides: dict[str, float] = field(default_factory=dict)
