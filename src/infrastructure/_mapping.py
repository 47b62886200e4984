"""Row-to-model mapping shared by the SQLAlchemy repositories."""

import uuid

from src.domain.models import (
    BlogPost,
    ContactMessage,
    FinancialGoal,
    GoalMilestone,
    NewsletterSubscription,
    WealthEntry,
)
from src.utils.date_utils import coerce_datetime

WEALTH_FIELDS = (
    "net_worth",
    "investments",
    "cash",
    "liabilities",
    "fire_target",
    "savings_rate",
    "stocks",
    "bonds",
    "real_estate",
    "crypto",
    "commodities",
    "alternative_investments",
    "mortgage",
    "credit_cards",
    "student_loans",
    "auto_loans",
    "monthly_income",
    "monthly_expenses",
    "monthly_savings",
)


def new_id() -> str:
    """Return a new primary key."""
    return str(uuid.uuid4())


def row_to_wealth_entry(row) -> WealthEntry:
    mapping = row._mapping
    return WealthEntry(
        id=str(mapping["id"]),
        date=coerce_datetime(mapping["date"]),
        category=mapping["category"],
        **{name: mapping.get(name) for name in WEALTH_FIELDS},
    )


def row_to_goal(row) -> FinancialGoal:
    mapping = row._mapping
    return FinancialGoal(
        id=str(mapping["id"]),
        title=mapping["title"],
        category=mapping["category"],
        goal_type=mapping["goal_type"],
        target_amount=mapping["target_amount"],
        current_amount=mapping["current_amount"],
        target_date=coerce_datetime(mapping.get("target_date")),
        priority=mapping.get("priority") or "medium",
        is_completed=bool(mapping.get("is_completed")),
        description=mapping.get("description"),
        created_at=coerce_datetime(mapping.get("created_at")),
        completed_at=coerce_datetime(mapping.get("completed_at")),
    )


def row_to_goal_milestone(row) -> GoalMilestone:
    mapping = row._mapping
    return GoalMilestone(
        id=str(mapping["id"]),
        goal_id=str(mapping["goal_id"]),
        title=mapping["title"],
        target_amount=mapping["target_amount"],
        is_completed=bool(mapping.get("is_completed")),
        achieved_at=coerce_datetime(mapping.get("achieved_at")),
        created_at=coerce_datetime(mapping.get("created_at")),
    )

def row_to_blog_post(row) -> BlogPost:
    mapping = row._mapping
    return BlogPost(
        id=str(mapping["id"]),
        title=mapping["title"],
        slug=mapping["slug"],
        content=mapping["content"],
        excerpt=mapping["excerpt"],
        category=mapping["category"],
        read_time=int(mapping.get("read_time") or 1),
        views=int(mapping.get("views") or 0),
        featured=bool(mapping.get("featured")),
        status=mapping.get("status") or "draft",
        tags=tuple(mapping.get("tags") or ()),
        series_id=mapping.get("series_id"),
        image_url=mapping.get("image_url"),
        published_at=coerce_datetime(mapping.get("published_at")),
        created_at=coerce_datetime(mapping.get("created_at")),
        updated_at=coerce_datetime(mapping.get("updated_at")),
    )


def row_to_contact_message(row) -> ContactMessage:
    mapping = row._mapping
    return ContactMessage(
        id=str(mapping["id"]),
        name=mapping["name"],
        email=mapping["email"],
        subject=mapping["subject"],
        message=mapping["message"],
        submitted_at=coerce_datetime(mapping.get("submitted_at")),
    )


def row_to_subscription(row) -> NewsletterSubscription:
    mapping = row._mapping
    return NewsletterSubscription(
        id=str(mapping["id"]),
        email=mapping["email"],
        subscribed_at=coerce_datetime(mapping.get("subscribed_at")),
        active=bool(mapping.get("active")),
    )


__all__ = [
    "WEALTH_FIELDS",
    "new_id",
    "row_to_wealth_entry",
    "row_to_goal",
    "row_to_goal_milestone",
    "row_to_blog_post",
    "row_to_contact_message",
    "row_to_subscription",
]
