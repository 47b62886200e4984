"""Use case for reading blog posts."""

from src.application.ports.blog_repository import BlogRepositoryPort
from src.domain.constants import RELATED_POSTS_LIMIT
from src.domain.models import BlogPost, RelatedPost
from src.domain.services.relatedness import rank_related_posts
from src.infrastructure.logging.logger import get_app_logger


class GetBlogPostsUseCase:
    """Serve published posts, featured posts and related reading."""

    def __init__(
        self,
        blog_repository: BlogRepositoryPort,
        logger=None,
        related_limit: int = RELATED_POSTS_LIMIT,
    ) -> None:
        """Initialize the use case.

        Args:
            blog_repository: Port providing blog post storage.
            logger: Optional logger compatible with logging.Logger-like API.
            related_limit: Default number of related posts.
        """
        self._blog_repository = blog_repository
        self._logger = logger or get_app_logger()
        self._related_limit = related_limit

    def list_posts(
        self,
        category: str | None = None,
        include_drafts: bool = False,
    ) -> list[BlogPost]:
        """Return posts, newest first."""
        return self._blog_repository.fetch_posts(
            category or None,
            published_only=not include_drafts,
        )

    def featured(self) -> list[BlogPost]:
        """Return featured published posts."""
        return self._blog_repository.fetch_featured_posts()

    def get_by_slug(
        self,
        slug: str,
        count_view: bool = True,
    ) -> BlogPost | None:
        """Return a published post and count the view.

        Returns:
            BlogPost | None: None when the slug is unknown or the post is a
            draft.
        """
        post = self._blog_repository.fetch_post_by_slug(slug)
        if post is None or not post.is_published:
            self._logger.info(f"Blog post not found: slug={slug}")
            return None
        if count_view:
            self._blog_repository.increment_views(post.id)
        return post

    def related(
        self,
        slug: str,
        limit: int | None = None,
    ) -> list[RelatedPost] | None:
        """Return posts related to the post with the given slug.

        Returns:
            list[RelatedPost] | None: None when the anchor post is unknown
            or a draft.
        """
        anchor = self._blog_repository.fetch_post_by_slug(slug)
        if anchor is None or not anchor.is_published:
            return None
        candidates = self._blog_repository.fetch_posts(None, published_only=True)
        return rank_related_posts(
            candidates,
            anchor,
            limit=self._related_limit if limit is None else limit,
        )


__all__ = ["GetBlogPostsUseCase"]
