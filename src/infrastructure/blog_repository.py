"""SQLAlchemy-backed repository for blog posts."""

from collections.abc import Callable
from datetime import datetime

from sqlalchemy import delete, func, insert, select, update

from src.application.ports.blog_repository import BlogRepositoryPort
from src.application.ports.database import DatabaseEnginePort
from src.domain.constants import PUBLISHED_STATUS
from src.domain.models import BlogPost
from src.infrastructure._mapping import new_id, row_to_blog_post
from src.infrastructure.schema import blog_posts


class SqlAlchemyBlogRepository(BlogRepositoryPort):
    """Repository backed by the ``blog_posts`` table."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the dashboard engine.
            clock: Source of creation and update timestamps.
        """
        self._db_port = db_port
        self._clock = clock

    def fetch_posts(
        self,
        category: str | None = None,
        published_only: bool = True,
    ) -> list[BlogPost]:
        """Return posts, newest first."""
        query = select(blog_posts).order_by(
            blog_posts.c.created_at.desc(),
            blog_posts.c.id.asc(),
        )
        if category:
            query = query.where(blog_posts.c.category == category)
        if published_only:
            query = query.where(blog_posts.c.status == PUBLISHED_STATUS)
        return self._fetch_all(query)

    def fetch_featured_posts(self) -> list[BlogPost]:
        query = (
            select(blog_posts)
            .where(blog_posts.c.featured.is_(True))
            .where(blog_posts.c.status == PUBLISHED_STATUS)
            .order_by(blog_posts.c.created_at.desc(), blog_posts.c.id.asc())
        )
        return self._fetch_all(query)

    def fetch_post_by_slug(self, slug: str) -> BlogPost | None:
        return self._fetch_one(select(blog_posts).where(blog_posts.c.slug == slug))

    def fetch_post(self, post_id: str) -> BlogPost | None:
        return self._fetch_one(select(blog_posts).where(blog_posts.c.id == post_id))

    def create_post(self, values: dict[str, object]) -> BlogPost:
        post_id = new_id()
        now = self._clock()
        payload = {
            "views": 0,
            "featured": False,
            "tags": [],
            **values,
        }
        payload["tags"] = list(payload["tags"] or [])
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                insert(blog_posts).values(
                    id=post_id,
                    created_at=now,
                    updated_at=now,
                    **payload,
                )
            )
        return self.fetch_post(post_id)

    def update_post(
        self,
        post_id: str,
        values: dict[str, object],
    ) -> BlogPost | None:
        payload = dict(values)
        if "tags" in payload:
            payload["tags"] = list(payload["tags"] or [])
        payload["updated_at"] = self._clock()
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                update(blog_posts)
                .where(blog_posts.c.id == post_id)
                .values(**payload)
            )
        if result.rowcount == 0:
            return None
        return self.fetch_post(post_id)

    def delete_post(self, post_id: str) -> bool:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                delete(blog_posts).where(blog_posts.c.id == post_id)
            )
        return result.rowcount > 0

    def increment_views(self, post_id: str) -> None:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                update(blog_posts)
                .where(blog_posts.c.id == post_id)
                .values(views=func.coalesce(blog_posts.c.views, 0) + 1)
            )

    def _fetch_all(self, query) -> list[BlogPost]:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [row_to_blog_post(row) for row in rows]

    def _fetch_one(self, query) -> BlogPost | None:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(query).first()
        return row_to_blog_post(row) if row else None


__all__ = ["SqlAlchemyBlogRepository"]
