"""Domain package for business rules and core models."""

from .constants import DEFAULT_FIRE_TARGET, WEALTH_CATEGORIES
from .errors import (
    AdminAuthenticationError,
    DuplicateSubscriptionError,
    EntityNotFoundError,
    PathTwoError,
    ValidationError,
)
from .models import (
    AllocationPoint,
    BlogPost,
    CashFlow,
    ContactMessage,
    DateRange,
    FinancialGoal,
    GoalProgress,
    GoalsOverview,
    LatestSnapshot,
    NewsletterSubscription,
    RelatedPost,
    TrendPoint,
    WealthEntry,
    WealthSummaryCategory,
)
from .services import (
    build_goals_overview,
    build_summary,
    calculate_progress,
    estimate_years_to_fire,
    rank_related_posts,
    score_relatedness,
    summarize_by_category,
)

__all__ = [
    "AdminAuthenticationError",
    "AllocationPoint",
    "BlogPost",
    "CashFlow",
    "ContactMessage",
    "DateRange",
    "DuplicateSubscriptionError",
    "EntityNotFoundError",
    "FinancialGoal",
    "GoalProgress",
    "GoalsOverview",
    "LatestSnapshot",
    "NewsletterSubscription",
    "PathTwoError",
    "RelatedPost",
    "TrendPoint",
    "ValidationError",
    "WealthEntry",
    "WealthSummaryCategory",
    "DEFAULT_FIRE_TARGET",
    "WEALTH_CATEGORIES",
    "build_goals_overview",
    "build_summary",
    "calculate_progress",
    "estimate_years_to_fire",
    "rank_related_posts",
    "score_relatedness",
    "summarize_by_category",
]
