"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def test_builder_writes_dated_file_under_project_logs(tmp_path, monkeypatch):
    """LoggerBuilder should place the log file in logs/<subdir>/."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240315"),
    )

    builder = (
        logger_module.LoggerBuilder()
        .name("pathtwo.test.api")
        .subdir("api")
        .prefix("api_logs")
        .console(False)
        .level(logging.DEBUG)
    )
    built = builder.build()

    assert built.name == "pathtwo.test.api"
    assert built.level == logging.DEBUG
    assert built.propagate is False
    assert len(built.handlers) == 1
    handler = built.handlers[0]
    assert isinstance(handler, logging.FileHandler)
    expected = tmp_path / "logs" / "api" / "20240315_api_logs.log"
    assert handler.baseFilename == str(expected)
    assert builder.build() is built
    assert len(built.handlers) == 1

    handler.close()
    built.handlers.clear()


def test_builder_uses_custom_factories(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    fmt = logging.Formatter("%(message)s")
    file_handler = logging.NullHandler()
    console_handler = logging.NullHandler()

    built = (
        logger_module.LoggerBuilder()
        .name("pathtwo.test.factories")
        .formatter(lambda: fmt)
        .file_handler(lambda path, formatter: file_handler)
        .console_handler(lambda formatter: console_handler)
        .build()
    )

    assert built.handlers == [file_handler, console_handler]
    built.handlers.clear()


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should apply the provided formatter at INFO."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "dashboard.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert console_handler.level == logging.INFO
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_singleton_delegates_every_level(monkeypatch):
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    wrapper = logger_module.Logger("pathtwo.test")
    for level in ("info", "warning", "error", "debug", "critical"):
        getattr(wrapper, level)(f"{level} message")
        getattr(fake_logger, level).assert_called_with(f"{level} message")

    assert logger_module.Logger("other") is wrapper


def test_app_and_usage_loggers_are_distinct_singletons(monkeypatch):
    built_names = []

    def _fake_build(self):
        built_names.append((self._name, self._subdir, self._prefix))
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert built_names == [
        ("pathtwo.app", "app", "app_logs"),
        ("pathtwo.usage", "usage", "usage_logs"),
    ]
