"""Tests for the init_db_cli adapter."""

from unittest.mock import MagicMock

from sqlalchemy import create_engine, inspect

from src.adapters import init_db_cli
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter


def test_main_creates_schema(monkeypatch, capsys) -> None:
    engine = create_engine("sqlite://", future=True)
    monkeypatch.setattr(
        init_db_cli,
        "build_database_adapter",
        lambda: SqlAlchemyDatabaseEngineAdapter(engine),
    )
    logger = MagicMock()
    monkeypatch.setattr(init_db_cli, "get_app_logger", lambda: logger)

    init_db_cli.main()

    assert "wealth_data" in inspect(engine).get_table_names()
    assert "Created or verified 6 tables." in capsys.readouterr().out
    logger.info.assert_called_once()
