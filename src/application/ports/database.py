"""Database ports for the PathTwo dashboard.

This module defines the application-layer protocol for accessing the
database engine. Infrastructure implementations are expected to provide a
concrete adapter that satisfies this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the application database engine.

    Application use cases and repositories depend on this protocol instead
    of concrete drivers or configuration details.
    """

    def get_engine(self) -> Engine:
        """Get the engine for the application database.

        Returns:
            Engine: SQLAlchemy engine connected to the dashboard database.
        """


__all__ = ["DatabaseEnginePort"]
