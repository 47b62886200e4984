"""Tests for infrastructure settings."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import DashboardSettings

_VARIABLES = (
    "ADMIN_PASSWORD",
    "ALLOCATION_INCLUDE_ZERO",
    "DEFAULT_FIRE_TARGET",
    "RELATED_POSTS_LIMIT",
    "API_CORS_ORIGINS",
    "API_HOST",
    "API_PORT",
)


@pytest.fixture
def logger(monkeypatch) -> MagicMock:
    fake_logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: fake_logger)
    for name in _VARIABLES:
        monkeypatch.delenv(name, raising=False)
    return fake_logger


def test_from_env_defaults(logger) -> None:
    settings = DashboardSettings.from_env()

    assert settings.admin_password is None
    assert settings.include_zero_allocations is True
    assert settings.default_fire_target == Decimal("1000000")
    assert settings.related_posts_limit == 3
    assert settings.cors_origins == ()
    assert settings.api_host == "127.0.0.1"
    assert settings.api_port == 8000
    logger.warning.assert_not_called()


def test_from_env_reads_values(monkeypatch, logger) -> None:
    monkeypatch.setenv("ADMIN_PASSWORD", "s3cret")
    monkeypatch.setenv("ALLOCATION_INCLUDE_ZERO", "no")
    monkeypatch.setenv("DEFAULT_FIRE_TARGET", "750000")
    monkeypatch.setenv("RELATED_POSTS_LIMIT", "5")
    monkeypatch.setenv(
        "API_CORS_ORIGINS",
        "https://pathtwo.example, http://localhost:3000,",
    )

    settings = DashboardSettings.from_env()

    assert settings.admin_password == "s3cret"
    assert settings.include_zero_allocations is False
    assert settings.default_fire_target == Decimal("750000")
    assert settings.related_posts_limit == 5
    assert settings.cors_origins == (
        "https://pathtwo.example",
        "http://localhost:3000",
    )


def test_from_env_falls_back_on_invalid_values(monkeypatch, logger) -> None:
    monkeypatch.setenv("ALLOCATION_INCLUDE_ZERO", "maybe")
    monkeypatch.setenv("DEFAULT_FIRE_TARGET", "-5")
    monkeypatch.setenv("RELATED_POSTS_LIMIT", "three")

    settings = DashboardSettings.from_env()

    assert settings.include_zero_allocations is True
    assert settings.default_fire_target == Decimal("1000000")
    assert settings.related_posts_limit == 3
    assert logger.warning.call_count == 3


def test_from_env_reads_api_server_address(monkeypatch, logger) -> None:
    monkeypatch.setenv("API_HOST", " 0.0.0.0 ")
    monkeypatch.setenv("API_PORT", "9100")

    settings = DashboardSettings.from_env()

    assert settings.api_host == "0.0.0.0"
    assert settings.api_port == 9100


@pytest.mark.parametrize("raw", ["http", "0", "70000"])
def test_from_env_rejects_invalid_api_port(monkeypatch, logger, raw) -> None:
    monkeypatch.setenv("API_PORT", raw)

    settings = DashboardSettings.from_env()

    assert settings.api_port == 8000
    logger.warning.assert_called_once()
