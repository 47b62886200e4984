"""Use case for admin management of blog posts."""

from collections.abc import Mapping

from src.application.ports.blog_repository import BlogRepositoryPort
from src.domain.errors import EntityNotFoundError, ValidationError
from src.domain.models import BlogPost
from src.domain.services.validation import validate_blog_post
from src.infrastructure.logging.logger import get_app_logger


class ManageBlogPostsUseCase:
    """Create, update and delete blog posts."""

    def __init__(self, blog_repository: BlogRepositoryPort, logger=None):
        self._blog_repository = blog_repository
        self._logger = logger or get_app_logger()

    def create(self, payload: Mapping[str, object]) -> BlogPost:
        """Validate and store a new post.

        Raises:
            ValidationError: If the payload is rejected or the slug is taken.
        """
        values = validate_blog_post(payload)
        self._ensure_slug_available(str(values["slug"]))
        post = self._blog_repository.create_post(values)
        self._logger.info(f"Blog post created: slug={post.slug}")
        return post

    def update(self, post_id: str, payload: Mapping[str, object]) -> BlogPost:
        """Validate and apply a partial update."""
        values = validate_blog_post(payload, partial=True)
        if "slug" in values:
            self._ensure_slug_available(str(values["slug"]), post_id)
        post = self._blog_repository.update_post(post_id, values)
        if post is None:
            raise EntityNotFoundError("Blog post", post_id)
        self._logger.info(f"Blog post updated: id={post_id}")
        return post

    def delete(self, post_id: str) -> None:
        """Delete a post."""
        if not self._blog_repository.delete_post(post_id):
            raise EntityNotFoundError("Blog post", post_id)
        self._logger.info(f"Blog post deleted: id={post_id}")

    def _ensure_slug_available(
        self,
        slug: str,
        post_id: str | None = None,
    ) -> None:
        existing = self._blog_repository.fetch_post_by_slug(slug)
        if existing is not None and existing.id != post_id:
            raise ValidationError(f"slug already in use: {slug}", field="slug")


__all__ = ["ManageBlogPostsUseCase"]
