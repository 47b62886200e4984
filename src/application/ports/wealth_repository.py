"""Port for reading and writing wealth snapshots."""

from typing import Protocol

from src.domain.models import WealthEntry


class WealthRepositoryPort(Protocol):
    """Port exposing wealth snapshot storage."""

    def fetch_entries(self, category: str | None = None) -> list[WealthEntry]:
        """Return snapshots ordered by date ascending."""

    def fetch_latest_entry(
        self,
        category: str | None = None,
    ) -> WealthEntry | None:
        """Return the most recent snapshot, or None when there is none."""

    def fetch_entry(self, entry_id: str) -> WealthEntry | None:
        """Return a snapshot by id."""

    def create_entry(self, values: dict[str, object]) -> WealthEntry:
        """Store a new snapshot and return it."""

    def update_entry(
        self,
        entry_id: str,
        values: dict[str, object],
    ) -> WealthEntry | None:
        """Update a snapshot; None when the id is unknown."""

    def delete_entry(self, entry_id: str) -> bool:
        """Delete a snapshot; False when the id is unknown."""


__all__ = ["WealthRepositoryPort"]
