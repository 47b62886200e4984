"""Domain services package."""

from .blog_search import collect_facets, search_posts
from .goals import (
    build_goals_overview,
    calculate_fire_progress,
    calculate_progress,
    estimate_years_to_fire,
    milestone_completion,
    milestone_share,
    with_progress,
)
from .normalization import (
    estimate_read_time,
    normalize_category,
    normalize_tags,
    slugify,
)
from .relatedness import rank_related_posts, score_relatedness
from .validation import (
    validate_blog_post,
    validate_contact_message,
    validate_email,
    validate_goal,
    validate_milestone,
    validate_wealth_entry,
)
from .wealth import (
    build_summary,
    filter_entries_by_period,
    sort_entries,
    summarize_by_category,
)

__all__ = [
    "build_goals_overview",
    "build_summary",
    "calculate_fire_progress",
    "calculate_progress",
    "collect_facets",
    "estimate_read_time",
    "estimate_years_to_fire",
    "filter_entries_by_period",
    "milestone_completion",
    "milestone_share",
    "normalize_category",
    "normalize_tags",
    "rank_related_posts",
    "score_relatedness",
    "search_posts",
    "slugify",
    "sort_entries",
    "summarize_by_category",
    "validate_blog_post",
    "validate_contact_message",
    "validate_email",
    "validate_goal",
    "validate_milestone",
    "validate_wealth_entry",
    "with_progress",
]
