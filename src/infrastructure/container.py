"""Composition root for wiring infrastructure adapters."""

from src.application.ports.blog_repository import BlogRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.goals_repository import GoalsRepositoryPort
from src.application.ports.messages_repository import MessagesRepositoryPort
from src.application.ports.wealth_repository import WealthRepositoryPort
from src.infrastructure.blog_repository import SqlAlchemyBlogRepository
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.goals_repository import SqlAlchemyGoalsRepository
from src.infrastructure.messages_repository import (
    SqlAlchemyMessagesRepository,
)
from src.infrastructure.settings import DashboardSettings
from src.infrastructure.wealth_repository import SqlAlchemyWealthRepository


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_settings() -> DashboardSettings:
    """Return settings read from the environment."""
    return DashboardSettings.from_env()


def build_wealth_repository(
    db_port: DatabaseEnginePort | None = None,
) -> WealthRepositoryPort:
    """Return the wealth snapshot repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyWealthRepository(resolved_db)


def build_goals_repository(
    db_port: DatabaseEnginePort | None = None,
) -> GoalsRepositoryPort:
    """Return the financial goals repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyGoalsRepository(resolved_db)


def build_blog_repository(
    db_port: DatabaseEnginePort | None = None,
) -> BlogRepositoryPort:
    """Return the blog post repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyBlogRepository(resolved_db)


def build_messages_repository(
    db_port: DatabaseEnginePort | None = None,
) -> MessagesRepositoryPort:
    """Return the contact and newsletter repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyMessagesRepository(resolved_db)


__all__ = [
    "build_database_adapter",
    "build_settings",
    "build_wealth_repository",
    "build_goals_repository",
    "build_blog_repository",
    "build_messages_repository",
]
