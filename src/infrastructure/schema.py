"""Relational schema of the dashboard database."""

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
)
from sqlalchemy.engine import Engine

metadata = MetaData()


def _amount(name: str, nullable: bool = True) -> Column:
    return Column(name, Numeric(14, 2), nullable=nullable)


wealth_data = Table(
    "wealth_data",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("date", DateTime, nullable=False, index=True),
    Column("category", String(8), nullable=False, index=True),
    _amount("net_worth", nullable=False),
    _amount("investments", nullable=False),
    _amount("cash", nullable=False),
    _amount("liabilities", nullable=False),
    _amount("fire_target", nullable=False),
    Column("savings_rate", Numeric(5, 2), nullable=False),
    _amount("stocks"),
    _amount("bonds"),
    _amount("real_estate"),
    _amount("crypto"),
    _amount("commodities"),
    _amount("alternative_investments"),
    _amount("mortgage"),
    _amount("credit_cards"),
    _amount("student_loans"),
    _amount("auto_loans"),
    _amount("monthly_income"),
    _amount("monthly_expenses"),
    _amount("monthly_savings"),
)

financial_goals = Table(
    "financial_goals",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("title", Text, nullable=False),
    Column("description", Text),
    Column("category", String(8), nullable=False, index=True),
    Column("goal_type", String(32), nullable=False),
    _amount("target_amount", nullable=False),
    _amount("current_amount", nullable=False),
    Column("target_date", DateTime),
    Column("priority", String(16), nullable=False),
    Column("is_completed", Boolean, nullable=False, default=False),
    Column("completed_at", DateTime),
    Column("created_at", DateTime, nullable=False),
)

goal_milestones = Table(
    "goal_milestones",
    metadata,
    Column("id", String(36), primary_key=True),
    Column(
        "goal_id",
        String(36),
        ForeignKey("financial_goals.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("title", Text, nullable=False),
    _amount("target_amount", nullable=False),
    Column("is_completed", Boolean, nullable=False, default=False),
    Column("achieved_at", DateTime),
    Column("created_at", DateTime, nullable=False),
)

blog_posts = Table(
    "blog_posts",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("title", Text, nullable=False),
    Column("slug", String(255), nullable=False, unique=True),
    Column("content", Text, nullable=False),
    Column("excerpt", Text, nullable=False),
    Column("category", String(64), nullable=False, index=True),
    Column("read_time", Integer, nullable=False),
    Column("views", Integer, nullable=False, default=0),
    Column("featured", Boolean, nullable=False, default=False),
    Column("status", String(16), nullable=False),
    Column("tags", JSON),
    Column("series_id", String(64)),
    Column("image_url", Text),
    Column("published_at", DateTime),
    Column("created_at", DateTime, nullable=False),
    Column("updated_at", DateTime, nullable=False),
)

contact_submissions = Table(
    "contact_submissions",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", Text, nullable=False),
    Column("email", Text, nullable=False),
    Column("subject", Text, nullable=False),
    Column("message", Text, nullable=False),
    Column("submitted_at", DateTime, nullable=False),
)

newsletter_subscriptions = Table(
    "newsletter_subscriptions",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("email", String(320), nullable=False, unique=True),
    Column("subscribed_at", DateTime, nullable=False),
    Column("active", Boolean, nullable=False, default=True),
)


def create_schema(engine: Engine) -> None:
    """Create every missing table."""
    metadata.create_all(engine)


__all__ = [
    "metadata",
    "wealth_data",
    "financial_goals",
    "goal_milestones",
    "blog_posts",
    "contact_submissions",
    "newsletter_subscriptions",
    "create_schema",
]
