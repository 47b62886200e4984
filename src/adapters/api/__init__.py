"""FastAPI adapter exposing the dashboard data as JSON."""

from .app import create_app

__all__ = ["create_app"]
