"""SQLAlchemy-backed repository for wealth snapshots."""

from sqlalchemy import delete, insert, select, update

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.wealth_repository import WealthRepositoryPort
from src.domain.models import WealthEntry
from src.infrastructure._mapping import new_id, row_to_wealth_entry
from src.infrastructure.schema import wealth_data


class SqlAlchemyWealthRepository(WealthRepositoryPort):
    """Repository backed by the ``wealth_data`` table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the dashboard engine.
        """
        self._db_port = db_port

    def fetch_entries(self, category: str | None = None) -> list[WealthEntry]:
        """Return snapshots ordered by date ascending."""
        query = select(wealth_data).order_by(
            wealth_data.c.date.asc(),
            wealth_data.c.id.asc(),
        )
        if category:
            query = query.where(wealth_data.c.category == category)
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [row_to_wealth_entry(row) for row in rows]

    def fetch_latest_entry(
        self,
        category: str | None = None,
    ) -> WealthEntry | None:
        """Return the most recent snapshot."""
        query = (
            select(wealth_data)
            .order_by(wealth_data.c.date.desc(), wealth_data.c.id.desc())
            .limit(1)
        )
        if category:
            query = query.where(wealth_data.c.category == category)
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(query).first()
        return row_to_wealth_entry(row) if row else None

    def fetch_entry(self, entry_id: str) -> WealthEntry | None:
        query = select(wealth_data).where(wealth_data.c.id == entry_id)
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(query).first()
        return row_to_wealth_entry(row) if row else None

    def create_entry(self, values: dict[str, object]) -> WealthEntry:
        entry_id = new_id()
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(insert(wealth_data).values(id=entry_id, **values))
        return self.fetch_entry(entry_id)

    def update_entry(
        self,
        entry_id: str,
        values: dict[str, object],
    ) -> WealthEntry | None:
        if values:
            engine = self._db_port.get_engine()
            with engine.begin() as conn:
                result = conn.execute(
                    update(wealth_data)
                    .where(wealth_data.c.id == entry_id)
                    .values(**values)
                )
            if result.rowcount == 0:
                return None
        return self.fetch_entry(entry_id)

    def delete_entry(self, entry_id: str) -> bool:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                delete(wealth_data).where(wealth_data.c.id == entry_id)
            )
        return result.rowcount > 0


__all__ = ["SqlAlchemyWealthRepository"]
