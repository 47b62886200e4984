"""Tests for the composition root."""

from src.infrastructure import container
from src.infrastructure.blog_repository import SqlAlchemyBlogRepository
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.goals_repository import SqlAlchemyGoalsRepository
from src.infrastructure.messages_repository import (
    SqlAlchemyMessagesRepository,
)
from src.infrastructure.settings import DashboardSettings
from src.infrastructure.wealth_repository import SqlAlchemyWealthRepository


def test_build_database_adapter_returns_sqlalchemy_adapter() -> None:
    adapter = container.build_database_adapter()

    assert isinstance(adapter, SqlAlchemyDatabaseEngineAdapter)


def test_repositories_share_the_given_adapter(db_port) -> None:
    builders = {
        container.build_wealth_repository: SqlAlchemyWealthRepository,
        container.build_goals_repository: SqlAlchemyGoalsRepository,
        container.build_blog_repository: SqlAlchemyBlogRepository,
        container.build_messages_repository: SqlAlchemyMessagesRepository,
    }

    for builder, expected in builders.items():
        repository = builder(db_port)
        assert isinstance(repository, expected)
        assert repository._db_port is db_port


def test_repositories_default_to_new_adapter(monkeypatch) -> None:
    sentinel = object()
    monkeypatch.setattr(container, "build_database_adapter", lambda: sentinel)

    repository = container.build_wealth_repository()

    assert repository._db_port is sentinel


def test_build_settings_reads_environment(monkeypatch) -> None:
    expected = DashboardSettings(admin_password="pw")
    monkeypatch.setattr(
        container.DashboardSettings,
        "from_env",
        classmethod(lambda cls: expected),
    )

    assert container.build_settings() is expected
