"""Dependency container wiring for the application."""

from dataclasses import dataclass

from diet_manager.adapters.json_food_repository import JsonFoodRepository
from diet_manager.adapters.json_log_repository import JsonLogRepository
from diet_manager.adapters.json_profile_repository import JsonProfileRepository
from diet_manager.config import Settings
from diet_manager.services.session import DietSession


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session: DietSession


def build_container(
    settings: Settings | None = None, current_date: str | None = None
) -> AppContainer:
    """Create the default dependency container and load the stores."""
    resolved_settings = settings or Settings()
    session = DietSession.open(
        food_repository=JsonFoodRepository(resolved_settings.food_db_path),
        log_repository=JsonLogRepository(resolved_settings.log_path),
        profile_repository=JsonProfileRepository(resolved_settings.profile_path),
        current_date=current_date,
    )
    return AppContainer(settings=resolved_settings, session=session)
