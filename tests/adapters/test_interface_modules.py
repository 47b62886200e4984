"""Ensure adapter packages expose the expected metadata."""

from importlib import import_module


def test_interface_package_exports_are_empty() -> None:
    module = import_module("src.adapters.interface")
    assert module.__all__ == []


def test_streamlit_package_exports_are_empty() -> None:
    module = import_module("src.adapters.interface.streamlit")
    assert module.__all__ == []


def test_api_package_exports_app_factory() -> None:
    module = import_module("src.adapters.api")
    assert module.__all__ == ["create_app"]
    assert callable(module.create_app)
