"""Domain services ranking blog posts by relatedness."""

from collections.abc import Iterable

from src.domain.constants import RELATED_POSTS_LIMIT
from src.domain.models import BlogPost, RelatedPost
from src.utils.date_utils import coerce_datetime

SAME_CATEGORY_SCORE = 10
SAME_SERIES_SCORE = 20
SHARED_TAG_SCORE = 5
RECENT_SCORE = 2
RECENT_WINDOW_DAYS = 30


def score_relatedness(candidate: BlogPost, anchor: BlogPost) -> int:
    """Score how related a candidate post is to an anchor post.

    Args:
        candidate: Post being ranked.
        anchor: Post the reader is looking at.

    Returns:
        int: 10 for the same category, 20 for the same series, 5 per
        shared tag and 2 when published less than 30 days apart.
    """
    score = 0
    if candidate.category == anchor.category:
        score += SAME_CATEGORY_SCORE
    if candidate.series_id and candidate.series_id == anchor.series_id:
        score += SAME_SERIES_SCORE
    anchor_tags = set(anchor.tags or ())
    shared = [tag for tag in candidate.tags or () if tag in anchor_tags]
    score += SHARED_TAG_SCORE * len(shared)

    candidate_date = _publish_date(candidate)
    anchor_date = _publish_date(anchor)
    if candidate_date is not None and anchor_date is not None:
        days_apart = abs((candidate_date - anchor_date).total_seconds()) / 86400
        if days_apart < RECENT_WINDOW_DAYS:
            score += RECENT_SCORE
    return score


def rank_related_posts(
    candidates: Iterable[BlogPost],
    anchor: BlogPost,
    *,
    limit: int = RELATED_POSTS_LIMIT,
) -> list[RelatedPost]:
    """Return the posts most related to the anchor.

    The anchor itself and unpublished posts are skipped. Equal scores keep
    their input order.
    """
    scored = [
        RelatedPost(post=post, score=score_relatedness(post, anchor))
        for post in candidates
        if post.id != anchor.id and post.is_published
    ]
    ranked = sorted(scored, key=lambda item: item.score, reverse=True)
    return ranked[: max(limit, 0)]


def _publish_date(post: BlogPost):
    return coerce_datetime(post.published_at or post.created_at)


__all__ = ["score_relatedness", "rank_related_posts"]
