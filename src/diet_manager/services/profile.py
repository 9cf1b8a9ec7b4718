"""Calorie target calculations for the user profile."""

from dataclasses import dataclass, replace
from typing import Protocol

from diet_manager.domain.profile import Gender, Profile, TargetFormula


class ProfileRepository(Protocol):
    """Persistence interface for the user profile."""

    def load(self) -> Profile:
        """Return the stored profile, or the default profile."""

    def save(self, profile: Profile) -> None:
        """Replace the stored profile."""


@dataclass
class ProfileService:
    """Application service for BMR and daily target calculations."""

    def bmr(self, profile: Profile) -> float:
        """Return basal metabolic rate using the profile's formula."""
        if profile.target_formula is TargetFormula.HARRIS_BENEDICT:
            return _harris_benedict(profile)
        return _mifflin_st_jeor(profile)

    def target_calories(self, profile: Profile) -> float:
        """Return BMR scaled by the activity multiplier."""
        return self.bmr(profile) * profile.activity_level.multiplier

    def daily_target(self, profile: Profile, date: str) -> float:
        """Return the override for ``date`` or the computed target."""
        override = profile.daily_overrides.get(date)
        if override is not None:
            return override
        return self.target_calories(profile)

    def set_daily_override(self, profile: Profile, date: str, target: float) -> Profile:
        """Return a profile with a target override for ``date``."""
        overrides = dict(profile.daily_overrides)
        overrides[date] = target
        return replace(profile, daily_overrides=overrides)

    def remove_daily_override(self, profile: Profile, date: str) -> Profile:
        """Return a profile without an override for ``date``."""
        overrides = dict(profile.daily_overrides)
        overrides.pop(date, None)
        return replace(profile, daily_overrides=overrides)


def _mifflin_st_jeor(profile: Profile) -> float:
    offset = 5.0 if profile.gender is Gender.MALE else -161.0
    return (
        10.0 * profile.weight_kg
        + 6.25 * profile.height_cm
        - 5.0 * profile.age
        + offset
    )


def _harris_benedict(profile: Profile) -> float:
    if profile.gender is Gender.MALE:
        return (
            66.47
            + 13.75 * profile.weight_kg
            + 5.003 * profile.height_cm
            - 6.755 * profile.age
        )
    return (
        655.1
        + 9.563 * profile.weight_kg
        + 1.850 * profile.height_cm
        - 4.676 * profile.age
    )
