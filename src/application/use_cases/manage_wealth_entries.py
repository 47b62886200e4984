"""Use case for admin management of wealth snapshots."""

from collections.abc import Mapping

from src.application.ports.wealth_repository import WealthRepositoryPort
from src.domain.errors import EntityNotFoundError
from src.domain.models import WealthEntry
from src.domain.services.normalization import normalize_category
from src.domain.services.validation import validate_wealth_entry
from src.infrastructure.logging.logger import get_app_logger


class ManageWealthEntriesUseCase:
    """Create, update and delete wealth snapshots."""

    def __init__(
        self,
        wealth_repository: WealthRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            wealth_repository: Port providing wealth snapshot storage.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._wealth_repository = wealth_repository
        self._logger = logger or get_app_logger()

    def list_entries(self, category: str | None = None) -> list[WealthEntry]:
        """Return stored snapshots, oldest first."""
        return self._wealth_repository.fetch_entries(
            normalize_category(category)
        )

    def create(self, payload: Mapping[str, object]) -> WealthEntry:
        """Validate and store a new snapshot.

        Raises:
            ValidationError: If the payload is rejected.
        """
        values = validate_wealth_entry(payload)
        entry = self._wealth_repository.create_entry(values)
        self._logger.info(
            f"Wealth entry created: id={entry.id}, category={entry.category}"
        )
        return entry

    def update(
        self,
        entry_id: str,
        payload: Mapping[str, object],
    ) -> WealthEntry:
        """Validate and apply a partial update.

        Raises:
            ValidationError: If the payload is rejected.
            EntityNotFoundError: If the snapshot does not exist.
        """
        values = validate_wealth_entry(payload, partial=True)
        entry = self._wealth_repository.update_entry(entry_id, values)
        if entry is None:
            raise EntityNotFoundError("Wealth entry", entry_id)
        self._logger.info(f"Wealth entry updated: id={entry_id}")
        return entry

    def delete(self, entry_id: str) -> None:
        """Delete a snapshot.

        Raises:
            EntityNotFoundError: If the snapshot does not exist.
        """
        if not self._wealth_repository.delete_entry(entry_id):
            raise EntityNotFoundError("Wealth entry", entry_id)
        self._logger.info(f"Wealth entry deleted: id={entry_id}")


__all__ = ["ManageWealthEntriesUseCase"]
