"""JSON file repository for the user profile."""

from dataclasses import dataclass
from pathlib import Path

from diet_manager.adapters.json_documents import (
    PROFILE_DOCUMENT,
    ProfileDocument,
    read_document,
    write_document,
)
from diet_manager.domain.profile import Profile
from diet_manager.services.profile import ProfileRepository


@dataclass
class JsonProfileRepository(ProfileRepository):
    """Stores the profile as a single JSON object."""

    path: Path

    def load(self) -> Profile:
        """Return the stored profile or the default one."""
        document = read_document(self.path, PROFILE_DOCUMENT)
        if document is None:
            return Profile()
        return Profile(
            gender=document.gender,
            age=document.age,
            height_cm=document.height_cm,
            weight_kg=document.weight_kg,
            activity_level=document.activity_level,
            target_formula=document.target_formula,
            daily_overrides=dict(document.daily_overrides),
        )

    def save(self, profile: Profile) -> None:
        """Write the profile to the JSON file."""
        document = ProfileDocument(
            gender=profile.gender,
            age=profile.age,
            height_cm=profile.height_cm,
            weight_kg=profile.weight_kg,
            activity_level=profile.activity_level,
            target_formula=profile.target_formula,
            daily_overrides=dict(profile.daily_overrides),
        )
        write_document(self.path, PROFILE_DOCUMENT, document)
