"""Port for reading and writing blog posts."""

from typing import Protocol

from src.domain.models import BlogPost


class BlogRepositoryPort(Protocol):
    """Port exposing blog post storage."""

    def fetch_posts(
        self,
        category: str | None = None,
        published_only: bool = True,
    ) -> list[BlogPost]:
        """Return posts, newest first."""

    def fetch_featured_posts(self) -> list[BlogPost]:
        """Return featured published posts, newest first."""

    def fetch_post_by_slug(self, slug: str) -> BlogPost | None:
        """Return a post by slug."""

    def create_post(self, values: dict[str, object]) -> BlogPost:
        """Store a new post and return it."""

    def update_post(
        self,
        post_id: str,
        values: dict[str, object],
    ) -> BlogPost | None:
        """Update a post; None when the id is unknown."""

    def delete_post(self, post_id: str) -> bool:
        """Delete a post; False when the id is unknown."""

    def increment_views(self, post_id: str) -> None:
        """Increase the view counter of a post by one."""


__all__ = ["BlogRepositoryPort"]
