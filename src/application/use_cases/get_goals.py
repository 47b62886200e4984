"""Use case to read financial goals with their progress."""

from datetime import datetime

from src.application.ports.goals_repository import GoalsRepositoryPort
from src.domain.models import GoalProgress, GoalsOverview
from src.domain.services.goals import build_goals_overview, with_progress
from src.domain.services.normalization import normalize_category
from src.infrastructure.logging.logger import get_app_logger


class GetGoalsUseCase:
    """Return goals with progress and the overview counters."""

    def __init__(self, goals_repository: GoalsRepositoryPort, logger=None):
        self._goals_repository = goals_repository
        self._logger = logger or get_app_logger()

    def execute(self, category: str | None = None) -> list[GoalProgress]:
        """Return goals of a category (or all) paired with progress."""
        goals = self._goals_repository.fetch_goals(normalize_category(category))
        self._logger.info(f"Fetched {len(goals)} goals for category={category}")
        return with_progress(goals)

    def overview(
        self,
        category: str | None = None,
        now: datetime | None = None,
    ) -> GoalsOverview:
        """Return the goals overview.

        Args:
            category: Optional category filter.
            now: Reference time for deadlines; defaults to the current time.
        """
        goals = self._goals_repository.fetch_goals(normalize_category(category))
        return build_goals_overview(goals, now=now or datetime.now())


__all__ = ["GetGoalsUseCase"]
