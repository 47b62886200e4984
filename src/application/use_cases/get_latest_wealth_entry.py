"""Use case returning the latest raw wealth snapshot."""

from src.application.ports.wealth_repository import WealthRepositoryPort
from src.domain.models import WealthEntry
from src.domain.services.normalization import normalize_category
from src.infrastructure.logging.logger import get_app_logger


class GetLatestWealthEntryUseCase:
    """Fetch the most recent snapshot of a category."""

    def __init__(self, wealth_repository: WealthRepositoryPort, logger=None):
        self._wealth_repository = wealth_repository
        self._logger = logger or get_app_logger()

    def execute(self, category: str | None = None) -> WealthEntry | None:
        """Return the latest snapshot, or None when nothing is stored.

        Args:
            category: Optional category filter.
        """
        entry = self._wealth_repository.fetch_latest_entry(
            normalize_category(category)
        )
        if entry is None:
            self._logger.info(f"No wealth data for category={category}")
        return entry


__all__ = ["GetLatestWealthEntryUseCase"]
