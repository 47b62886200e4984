"""SQLAlchemy-backed repository for financial goals and their milestones."""

from collections.abc import Callable
from datetime import datetime

from sqlalchemy import Table, delete, insert, select, update

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.goals_repository import GoalsRepositoryPort
from src.domain.models import FinancialGoal, GoalMilestone
from src.infrastructure._mapping import (
    new_id,
    row_to_goal,
    row_to_goal_milestone,
)
from src.infrastructure.schema import financial_goals, goal_milestones


class SqlAlchemyGoalsRepository(GoalsRepositoryPort):
    """Repository backed by the ``financial_goals`` and
    ``goal_milestones`` tables."""

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the dashboard engine.
            clock: Source of creation timestamps.
        """
        self._db_port = db_port
        self._clock = clock

    def fetch_goals(self, category: str | None = None) -> list[FinancialGoal]:
        """Return goals, newest first."""
        query = select(financial_goals).order_by(
            financial_goals.c.created_at.desc(),
            financial_goals.c.id.asc(),
        )
        if category:
            query = query.where(financial_goals.c.category == category)
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [row_to_goal(row) for row in rows]

    def fetch_goal(self, goal_id: str) -> FinancialGoal | None:
        query = select(financial_goals).where(financial_goals.c.id == goal_id)
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(query).first()
        return row_to_goal(row) if row else None

    def create_goal(self, values: dict[str, object]) -> FinancialGoal:
        goal_id = new_id()
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                insert(financial_goals).values(
                    id=goal_id,
                    is_completed=False,
                    created_at=self._clock(),
                    **values,
                )
            )
        return self.fetch_goal(goal_id)

    def update_goal(
        self,
        goal_id: str,
        values: dict[str, object],
    ) -> FinancialGoal | None:
        if values and not self._update(financial_goals, goal_id, values):
            return None
        return self.fetch_goal(goal_id)

    def delete_goal(self, goal_id: str) -> bool:
        """Delete a goal together with its milestones."""
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                delete(goal_milestones).where(
                    goal_milestones.c.goal_id == goal_id
                )
            )
            result = conn.execute(
                delete(financial_goals).where(financial_goals.c.id == goal_id)
            )
        return result.rowcount > 0

    def complete_goal(
        self,
        goal_id: str,
        completed_at: datetime,
    ) -> FinancialGoal | None:
        updated = self._update(
            financial_goals,
            goal_id,
            {"is_completed": True, "completed_at": completed_at},
        )
        return self.fetch_goal(goal_id) if updated else None

    def fetch_milestones(self, goal_id: str) -> list[GoalMilestone]:
        """Return a goal's milestones, smallest target first."""
        query = (
            select(goal_milestones)
            .where(goal_milestones.c.goal_id == goal_id)
            .order_by(
                goal_milestones.c.target_amount.asc(),
                goal_milestones.c.id.asc(),
            )
        )
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [row_to_goal_milestone(row) for row in rows]

    def fetch_milestone(self, milestone_id: str) -> GoalMilestone | None:
        query = select(goal_milestones).where(
            goal_milestones.c.id == milestone_id
        )
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            row = conn.execute(query).first()
        return row_to_goal_milestone(row) if row else None

    def create_milestone(self, values: dict[str, object]) -> GoalMilestone:
        milestone_id = new_id()
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            conn.execute(
                insert(goal_milestones).values(
                    id=milestone_id,
                    is_completed=False,
                    created_at=self._clock(),
                    **values,
                )
            )
        return self.fetch_milestone(milestone_id)

    def update_milestone(
        self,
        milestone_id: str,
        values: dict[str, object],
    ) -> GoalMilestone | None:
        if values and not self._update(goal_milestones, milestone_id, values):
            return None
        return self.fetch_milestone(milestone_id)

    def delete_milestone(self, milestone_id: str) -> bool:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                delete(goal_milestones).where(
                    goal_milestones.c.id == milestone_id
                )
            )
        return result.rowcount > 0

    def _update(
        self,
        table: Table,
        row_id: str,
        values: dict[str, object],
    ) -> bool:
        engine = self._db_port.get_engine()
        with engine.begin() as conn:
            result = conn.execute(
                update(table).where(table.c.id == row_id).values(**values)
            )
        return result.rowcount > 0


__all__ = ["SqlAlchemyGoalsRepository"]
