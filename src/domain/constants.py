"""Domain constants for wealth tracking and content."""

from decimal import Decimal

WEALTH_CATEGORIES = ("His", "Her", "Both")

DEFAULT_WEALTH_CATEGORY = "Both"

# (field name on WealthEntry, display label)
ASSET_ALLOCATION_FIELDS = (
    ("stocks", "Stocks"),
    ("bonds", "Bonds"),
    ("real_estate", "Real Estate"),
    ("crypto", "Crypto"),
    ("commodities", "Commodities"),
    ("alternative_investments", "Alternative Investments"),
)

DEBT_BREAKDOWN_FIELDS = (
    ("mortgage", "Mortgage"),
    ("credit_cards", "Credit Cards"),
    ("student_loans", "Student Loans"),
    ("auto_loans", "Auto Loans"),
)

DEFAULT_FIRE_TARGET = Decimal("1000000")

GOAL_TYPES = ("net_worth", "savings_rate", "debt_payoff", "custom")

GOAL_PRIORITIES = ("low", "medium", "high")

GOAL_ON_TRACK_THRESHOLD = Decimal("50")

GOAL_DEADLINE_WINDOW_DAYS = 30

UPCOMING_DEADLINES_LIMIT = 3

BLOG_CATEGORIES = (
    "Wealth Progress",
    "FIRE Strategy",
    "Investments",
    "Personal Reflections",
)

POST_STATUSES = ("draft", "published")

POST_SORTS = ("newest", "oldest", "popular", "shortest", "longest")

PUBLISHED_STATUS = "published"

RELATED_POSTS_LIMIT = 3

WORDS_PER_MINUTE = 200

WEALTH_PERIOD_DAYS = {"30d": 30, "90d": 90, "1y": 365}


__all__ = [
    "WEALTH_CATEGORIES",
    "DEFAULT_WEALTH_CATEGORY",
    "ASSET_ALLOCATION_FIELDS",
    "DEBT_BREAKDOWN_FIELDS",
    "DEFAULT_FIRE_TARGET",
    "GOAL_TYPES",
    "GOAL_PRIORITIES",
    "GOAL_ON_TRACK_THRESHOLD",
    "GOAL_DEADLINE_WINDOW_DAYS",
    "UPCOMING_DEADLINES_LIMIT",
    "BLOG_CATEGORIES",
    "POST_STATUSES",
    "POST_SORTS",
    "PUBLISHED_STATUS",
    "RELATED_POSTS_LIMIT",
    "WORDS_PER_MINUTE",
    "WEALTH_PERIOD_DAYS",
]
