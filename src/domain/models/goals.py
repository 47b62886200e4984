"""Domain models for financial goals."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from .wealth import RawAmount


@dataclass(frozen=True)
class FinancialGoal:
    """A savings, net worth or payoff goal tracked on the dashboard."""

    id: str
    title: str
    category: str
    goal_type: str
    target_amount: RawAmount
    current_amount: RawAmount
    target_date: datetime | None = None
    priority: str = "medium"
    is_completed: bool = False
    description: str | None = None
    created_at: datetime | None = None
    completed_at: datetime | None = None


@dataclass(frozen=True)
class GoalMilestone:
    """An intermediate amount on the way to a goal.

    Attributes:
        goal_id: Goal the milestone belongs to.
        target_amount: Amount marking the milestone.
        achieved_at: When the milestone was marked completed.
    """

    id: str
    goal_id: str
    title: str
    target_amount: RawAmount
    is_completed: bool = False
    achieved_at: datetime | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class GoalProgress:
    """A goal with its capped progress percentage."""

    goal: FinancialGoal
    progress: Decimal


@dataclass(frozen=True)
class GoalsOverview:
    """Aggregate counters for the goals widget."""

    total_goals: int
    completed_goals: int
    active_goals: int
    average_progress: Decimal
    goals_on_track: int
    upcoming_deadlines: list[FinancialGoal] = field(default_factory=list)


__all__ = [
    "FinancialGoal",
    "GoalMilestone",
    "GoalProgress",
    "GoalsOverview",
]
