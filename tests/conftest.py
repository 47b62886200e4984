"""Shared fixtures for repository and API tests."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.schema import create_schema


@pytest.fixture
def sqlite_engine():
    """In-memory SQLite engine with the dashboard schema."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_port(sqlite_engine):
    """Database adapter bound to the in-memory engine."""
    return SqlAlchemyDatabaseEngineAdapter(sqlite_engine)
