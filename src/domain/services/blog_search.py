"""Domain services for searching, filtering and sorting blog posts."""

from collections.abc import Iterable
from datetime import datetime

from src.domain.constants import POST_SORTS
from src.domain.errors import ValidationError
from src.domain.models import BlogPost
from src.utils.date_utils import coerce_datetime

DEFAULT_POST_SORT = "newest"


def search_posts(
    posts: Iterable[BlogPost],
    term: str | None = None,
    category: str | None = None,
    tag: str | None = None,
    sort: str = DEFAULT_POST_SORT,
) -> list[BlogPost]:
    """Filter published posts and order them for the blog listing.

    Args:
        posts: Candidate posts; drafts are always dropped.
        term: Case-insensitive text matched against the title, excerpt,
            content and tags. Blank matches everything.
        category: Exact category to keep, None for all.
        tag: Tag the post must carry, None for all.
        sort: One of ``newest``, ``oldest``, ``popular``, ``shortest`` or
            ``longest``.

    Returns:
        list[BlogPost]: Matching posts. Ties keep their input order and
        posts without a date sort last.

    Raises:
        ValidationError: If the sort key is unknown.
    """
    if sort not in POST_SORTS:
        raise ValidationError(
            f"sort must be one of {', '.join(POST_SORTS)}",
            field="sort",
        )
    needle = (term or "").strip().lower()
    matches = [
        post
        for post in posts
        if post.is_published
        and (not category or post.category == category)
        and (not tag or tag in (post.tags or ()))
        and (not needle or _matches(post, needle))
    ]
    return _sorted(matches, sort)


def collect_facets(posts: Iterable[BlogPost]) -> tuple[list[str], list[str]]:
    """Return the sorted categories and tags used by published posts."""
    categories: set[str] = set()
    tags: set[str] = set()
    for post in posts:
        if not post.is_published:
            continue
        categories.add(post.category)
        tags.update(post.tags or ())
    return sorted(categories), sorted(tags)


def _matches(post: BlogPost, needle: str) -> bool:
    fields = [post.title, post.excerpt, post.content, *(post.tags or ())]
    return any(needle in (field or "").lower() for field in fields)


def _sorted(posts: list[BlogPost], sort: str) -> list[BlogPost]:
    if sort == "newest":
        return sorted(posts, key=_newest_key, reverse=True)
    if sort == "oldest":
        return sorted(posts, key=_oldest_key)
    if sort == "popular":
        return sorted(posts, key=lambda post: post.views or 0, reverse=True)
    if sort == "shortest":
        return sorted(posts, key=lambda post: post.read_time or 0)
    return sorted(posts, key=lambda post: post.read_time or 0, reverse=True)


def _publish_date(post: BlogPost) -> datetime | None:
    return coerce_datetime(post.published_at or post.created_at)


def _newest_key(post: BlogPost) -> tuple[bool, datetime]:
    moment = _publish_date(post)
    return moment is not None, moment or datetime.min


def _oldest_key(post: BlogPost) -> tuple[bool, datetime]:
    moment = _publish_date(post)
    return moment is None, moment or datetime.min


__all__ = [
    "DEFAULT_POST_SORT",
    "search_posts",
    "collect_facets",
]
