"""Port for reading and writing financial goals."""

from datetime import datetime
from typing import Protocol

from src.domain.models import FinancialGoal, GoalMilestone


class GoalsRepositoryPort(Protocol):
    """Port exposing financial goal storage."""

    def fetch_goals(self, category: str | None = None) -> list[FinancialGoal]:
        """Return goals, newest first."""

    def fetch_goal(self, goal_id: str) -> FinancialGoal | None:
        """Return a goal by id."""

    def create_goal(self, values: dict[str, object]) -> FinancialGoal:
        """Store a new goal and return it."""

    def update_goal(
        self,
        goal_id: str,
        values: dict[str, object],
    ) -> FinancialGoal | None:
        """Update a goal; None when the id is unknown."""

    def delete_goal(self, goal_id: str) -> bool:
        """Delete a goal; False when the id is unknown."""

    def complete_goal(
        self,
        goal_id: str,
        completed_at: datetime,
    ) -> FinancialGoal | None:
        """Mark a goal completed; None when the id is unknown."""

    def fetch_milestones(self, goal_id: str) -> list[GoalMilestone]:
        """Return a goal's milestones, smallest target first."""

    def fetch_milestone(self, milestone_id: str) -> GoalMilestone | None:
        """Return a milestone by id."""

    def create_milestone(self, values: dict[str, object]) -> GoalMilestone:
        """Store a new milestone and return it."""

    def update_milestone(
        self,
        milestone_id: str,
        values: dict[str, object],
    ) -> GoalMilestone | None:
        """Update a milestone; None when the id is unknown."""

    def delete_milestone(self, milestone_id: str) -> bool:
        """Delete a milestone; False when the id is unknown."""


__all__ = ["GoalsRepositoryPort"]
