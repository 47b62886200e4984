"""Application ports package."""

from .blog_repository import BlogRepositoryPort
from .database import DatabaseEnginePort
from .goals_repository import GoalsRepositoryPort
from .messages_repository import MessagesRepositoryPort
from .wealth_repository import WealthRepositoryPort

__all__ = [
    "BlogRepositoryPort",
    "DatabaseEnginePort",
    "GoalsRepositoryPort",
    "MessagesRepositoryPort",
    "WealthRepositoryPort",
]
