"""Tests for blog search and sorting."""

from datetime import datetime

import pytest

from src.domain.errors import ValidationError
from src.domain.models import BlogPost
from src.domain.services.blog_search import collect_facets, search_posts


def _post(post_id: str, **kwargs) -> BlogPost:
    values = {
        "title": post_id,
        "slug": post_id,
        "content": "<p>body</p>",
        "excerpt": "excerpt",
        "category": "Investments",
        "status": "published",
        "published_at": datetime(2024, 1, 1),
    }
    values.update(kwargs)
    return BlogPost(id=post_id, **values)


def _ids(posts) -> list[str]:
    return [post.id for post in posts]


def test_drafts_are_never_returned() -> None:
    posts = [_post("draft", status="draft"), _post("live")]

    assert _ids(search_posts(posts)) == ["live"]


def test_term_matches_every_text_field_case_insensitively() -> None:
    posts = [
        _post("title", title="Index FUNDS explained"),
        _post("excerpt", excerpt="why funds matter"),
        _post("content", content="<p>Funds</p>"),
        _post("tag", tags=("funds",)),
        _post("miss", title="Budgeting"),
    ]

    found = search_posts(posts, term="  funds ")

    assert _ids(found) == ["title", "excerpt", "content", "tag"]


def test_category_and_tag_filters_combine() -> None:
    posts = [
        _post("a", category="FIRE Strategy", tags=("etf",)),
        _post("b", category="FIRE Strategy"),
        _post("c", tags=("etf",)),
    ]

    found = search_posts(posts, category="FIRE Strategy", tag="etf")

    assert _ids(found) == ["a"]


def test_newest_and_oldest_put_undated_posts_last() -> None:
    posts = [
        _post("old", published_at=datetime(2023, 1, 1)),
        _post("undated", published_at=None),
        _post("new", published_at=datetime(2024, 5, 1)),
        _post(
            "created_only",
            published_at=None,
            created_at=datetime(2024, 1, 1),
        ),
    ]

    assert _ids(search_posts(posts, sort="newest")) == [
        "new",
        "created_only",
        "old",
        "undated",
    ]
    assert _ids(search_posts(posts, sort="oldest")) == [
        "old",
        "created_only",
        "new",
        "undated",
    ]


def test_popularity_and_length_sorts() -> None:
    posts = [
        _post("a", views=5, read_time=3),
        _post("b", views=50, read_time=1),
        _post("c", views=10, read_time=9),
    ]

    assert _ids(search_posts(posts, sort="popular")) == ["b", "c", "a"]
    assert _ids(search_posts(posts, sort="shortest")) == ["b", "a", "c"]
    assert _ids(search_posts(posts, sort="longest")) == ["c", "a", "b"]


def test_unknown_sort_is_rejected() -> None:
    with pytest.raises(ValidationError):
        search_posts([], sort="random")


def test_facets_come_from_published_posts() -> None:
    posts = [
        _post("a", category="Investments", tags=("etf", "tax")),
        _post("b", category="FIRE Strategy", tags=("etf",)),
        _post("c", category="Hidden", tags=("secret",), status="draft"),
    ]

    assert collect_facets(posts) == (
        ["FIRE Strategy", "Investments"],
        ["etf", "tax"],
    )
