"""Dependency container wiring for the application."""

from dataclasses import dataclass

from calorie_tracker.adapters.text_file_storage import TextFileStorage
from calorie_tracker.app_logging import configure_logging
from calorie_tracker.config import Settings
from calorie_tracker.services.entries import EntryLog
from calorie_tracker.services.foods import FoodCatalog
from calorie_tracker.services.persistence import PersistenceService
from calorie_tracker.services.summary import SummaryService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_catalog: FoodCatalog
    entry_log: EntryLog
    persistence_service: PersistenceService
    summary_service: SummaryService

    def save(self) -> None:
        """Persist the catalog and the entry log."""
        self.persistence_service.save_all(self.food_catalog, self.entry_log)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container and preload stored data."""
    configure_logging()
    resolved_settings = settings or Settings()
    storage = TextFileStorage(resolved_settings.data_dir)
    persistence_service = PersistenceService(
        storage=storage,
        food_file=resolved_settings.food_database_file,
        entry_file=resolved_settings.entry_database_file,
    )
    food_catalog = FoodCatalog()
    entry_log = EntryLog()
    persistence_service.load_food_catalog(food_catalog)
    persistence_service.load_entry_log(entry_log)

    return AppContainer(
        settings=resolved_settings,
        food_catalog=food_catalog,
        entry_log=entry_log,
        persistence_service=persistence_service,
        summary_service=SummaryService(entry_log),
    )
