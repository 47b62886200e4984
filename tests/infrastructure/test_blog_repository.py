"""Tests for the SQLAlchemy blog repository."""

from datetime import datetime, timedelta

from src.infrastructure.blog_repository import SqlAlchemyBlogRepository


class _Clock:
    def __init__(self) -> None:
        self.now = datetime(2024, 1, 1)

    def __call__(self) -> datetime:
        self.now += timedelta(minutes=1)
        return self.now


def _values(slug: str, **overrides):
    values = {
        "title": slug.title(),
        "slug": slug,
        "content": "<p>content</p>",
        "excerpt": "excerpt",
        "category": "Investments",
        "read_time": 1,
        "status": "published",
        "tags": ("etf", "tax"),
    }
    values.update(overrides)
    return values


def test_fetch_posts_filters_drafts_and_category(db_port) -> None:
    repository = SqlAlchemyBlogRepository(db_port, clock=_Clock())
    repository.create_post(_values("one"))
    repository.create_post(_values("two", category="FIRE Strategy"))
    repository.create_post(_values("draft", status="draft"))

    published = repository.fetch_posts()
    everything = repository.fetch_posts(published_only=False)
    fire = repository.fetch_posts("FIRE Strategy")

    assert [post.slug for post in published] == ["two", "one"]
    assert len(everything) == 3
    assert [post.slug for post in fire] == ["two"]
    assert published[1].tags == ("etf", "tax")


def test_featured_posts_are_published_only(db_port) -> None:
    repository = SqlAlchemyBlogRepository(db_port, clock=_Clock())
    repository.create_post(_values("star", featured=True))
    repository.create_post(_values("hidden", featured=True, status="draft"))
    repository.create_post(_values("plain"))

    assert [post.slug for post in repository.fetch_featured_posts()] == [
        "star"
    ]


def test_increment_views_and_update(db_port) -> None:
    repository = SqlAlchemyBlogRepository(db_port, clock=_Clock())
    post = repository.create_post(_values("counted"))

    repository.increment_views(post.id)
    repository.increment_views(post.id)
    updated = repository.update_post(post.id, {"title": "Renamed"})

    assert updated.views == 2
    assert updated.title == "Renamed"
    assert updated.updated_at > post.updated_at
    assert repository.fetch_post_by_slug("counted").id == post.id
    assert repository.update_post("missing", {"title": "x"}) is None


def test_delete_post(db_port) -> None:
    repository = SqlAlchemyBlogRepository(db_port)
    post = repository.create_post(_values("gone"))

    assert repository.delete_post(post.id) is True
    assert repository.fetch_post_by_slug("gone") is None
    assert repository.delete_post(post.id) is False
