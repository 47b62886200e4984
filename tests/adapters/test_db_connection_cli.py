"""Tests for the test_db_connection adapter."""

from sqlalchemy.engine import make_url

from src.adapters import test_db_connection


class _DummyConnection:
    def __init__(self) -> None:
        self.executed: list[str] = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def exec_driver_sql(self, statement: str) -> None:
        self.executed.append(statement)


class _DummyEngine:
    def __init__(self, url: str) -> None:
        self.url = make_url(url)
        self.connection = _DummyConnection()

    def connect(self):
        return self.connection


def test_main_logs_url_without_password(monkeypatch):
    """The CLI should hide the password and execute SELECT 1."""
    engine = _DummyEngine("postgresql://pathtwo:hunter2@db/pathtwo")

    class _Adapter:
        def get_engine(self):
            return engine

    log_messages: list[str] = []

    class _Logger:
        def info(self, msg: str) -> None:
            log_messages.append(msg)

    monkeypatch.setattr(
        test_db_connection,
        "build_database_adapter",
        lambda: _Adapter(),
    )
    monkeypatch.setattr(
        test_db_connection,
        "get_app_logger",
        lambda: _Logger(),
    )

    test_db_connection.main()

    assert "postgresql://pathtwo:***@db/pathtwo" in log_messages[0]
    assert "hunter2" not in log_messages[0]
    assert engine.connection.executed == ["SELECT 1"]
    assert log_messages[-1] == "Connection is working."
