"""Use case for admin management of financial goals."""

from collections.abc import Mapping
from datetime import datetime

from src.application.ports.goals_repository import GoalsRepositoryPort
from src.domain.errors import EntityNotFoundError
from src.domain.models import FinancialGoal, GoalMilestone
from src.domain.services.validation import validate_goal, validate_milestone
from src.infrastructure.logging.logger import get_app_logger


class ManageGoalsUseCase:
    """Create, update, complete and delete financial goals."""

    def __init__(self, goals_repository: GoalsRepositoryPort, logger=None):
        self._goals_repository = goals_repository
        self._logger = logger or get_app_logger()

    def create(self, payload: Mapping[str, object]) -> FinancialGoal:
        """Validate and store a new goal."""
        goal = self._goals_repository.create_goal(validate_goal(payload))
        self._logger.info(f"Goal created: id={goal.id}, title={goal.title}")
        return goal

    def update(
        self,
        goal_id: str,
        payload: Mapping[str, object],
    ) -> FinancialGoal:
        """Validate and apply a partial update."""
        values = validate_goal(payload, partial=True)
        goal = self._goals_repository.update_goal(goal_id, values)
        if goal is None:
            raise EntityNotFoundError("Goal", goal_id)
        self._logger.info(f"Goal updated: id={goal_id}")
        return goal

    def complete(
        self,
        goal_id: str,
        now: datetime | None = None,
    ) -> FinancialGoal:
        """Mark a goal completed."""
        goal = self._goals_repository.complete_goal(
            goal_id,
            now or datetime.now(),
        )
        if goal is None:
            raise EntityNotFoundError("Goal", goal_id)
        self._logger.info(f"Goal completed: id={goal_id}")
        return goal

    def delete(self, goal_id: str) -> None:
        """Delete a goal."""
        if not self._goals_repository.delete_goal(goal_id):
            raise EntityNotFoundError("Goal", goal_id)
        self._logger.info(f"Goal deleted: id={goal_id}")


class ManageGoalMilestonesUseCase:
    """List, create, update, complete and delete goal milestones."""

    def __init__(self, goals_repository: GoalsRepositoryPort, logger=None):
        self._goals_repository = goals_repository
        self._logger = logger or get_app_logger()

    def list_milestones(self, goal_id: str) -> list[GoalMilestone]:
        """Return a goal's milestones, smallest target first."""
        return self._goals_repository.fetch_milestones(goal_id)

    def create(self, payload: Mapping[str, object]) -> GoalMilestone:
        """Validate and store a milestone for an existing goal.

        Raises:
            ValidationError: If the payload is malformed.
            EntityNotFoundError: If the goal does not exist.
        """
        values = validate_milestone(payload)
        goal_id = str(values["goal_id"])
        if self._goals_repository.fetch_goal(goal_id) is None:
            raise EntityNotFoundError("Goal", goal_id)
        milestone = self._goals_repository.create_milestone(values)
        self._logger.info(
            f"Milestone created: id={milestone.id}, goal_id={goal_id}"
        )
        return milestone

    def update(
        self,
        milestone_id: str,
        payload: Mapping[str, object],
    ) -> GoalMilestone:
        """Validate and apply a partial update."""
        values = validate_milestone(payload, partial=True)
        milestone = self._goals_repository.update_milestone(
            milestone_id,
            values,
        )
        if milestone is None:
            raise EntityNotFoundError("Milestone", milestone_id)
        self._logger.info(f"Milestone updated: id={milestone_id}")
        return milestone

    def complete(
        self,
        milestone_id: str,
        now: datetime | None = None,
    ) -> GoalMilestone:
        """Mark a milestone achieved."""
        milestone = self._goals_repository.update_milestone(
            milestone_id,
            {"is_completed": True, "achieved_at": now or datetime.now()},
        )
        if milestone is None:
            raise EntityNotFoundError("Milestone", milestone_id)
        self._logger.info(f"Milestone completed: id={milestone_id}")
        return milestone

    def delete(self, milestone_id: str) -> None:
        """Delete a milestone."""
        if not self._goals_repository.delete_milestone(milestone_id):
            raise EntityNotFoundError("Milestone", milestone_id)
        self._logger.info(f"Milestone deleted: id={milestone_id}")


__all__ = ["ManageGoalsUseCase", "ManageGoalMilestonesUseCase"]
