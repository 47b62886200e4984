"""Domain models package."""

from .content import (
    BlogPost,
    ContactMessage,
    NewsletterSubscription,
    RelatedPost,
)
from .goals import (
    FinancialGoal,
    GoalMilestone,
    GoalProgress,
    GoalsOverview,
)
from .wealth import (
    AllocationPoint,
    CashFlow,
    DateRange,
    LatestSnapshot,
    RawAmount,
    TrendPoint,
    WealthEntry,
    WealthSummaryCategory,
)

__all__ = [
    "AllocationPoint",
    "BlogPost",
    "CashFlow",
    "ContactMessage",
    "DateRange",
    "FinancialGoal",
    "GoalMilestone",
    "GoalProgress",
    "GoalsOverview",
    "LatestSnapshot",
    "NewsletterSubscription",
    "RawAmount",
    "RelatedPost",
    "TrendPoint",
    "WealthEntry",
    "WealthSummaryCategory",
]
