"""Use case to build wealth summaries for the dashboard."""

from src.application.ports.wealth_repository import WealthRepositoryPort
from src.domain.constants import WEALTH_CATEGORIES
from src.domain.models import WealthEntry, WealthSummaryCategory
from src.domain.services.normalization import normalize_category
from src.domain.services.wealth import build_summary
from src.infrastructure.logging.logger import get_app_logger


class GetWealthSummaryUseCase:
    """Compute wealth summaries from stored snapshots."""

    def __init__(
        self,
        wealth_repository: WealthRepositoryPort,
        logger=None,
        include_zero_allocations: bool = True,
    ) -> None:
        """Initialize the use case.

        Args:
            wealth_repository: Port providing wealth snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
            include_zero_allocations: Keep zero-valued allocation points.
        """
        self._wealth_repository = wealth_repository
        self._logger = logger or get_app_logger()
        self._include_zero_allocations = include_zero_allocations

    def execute(
        self,
        category: str | None = None,
    ) -> list[WealthSummaryCategory]:
        """Return one summary per requested category.

        Args:
            category: Optional category (His, Her, Both). When omitted or
                unknown, every category is summarized.

        Returns:
            list[WealthSummaryCategory]: Summaries in category order.
        """
        normalized = normalize_category(category)
        if category and normalized is None:
            self._logger.warning(
                f"Unknown wealth category '{category}', summarizing all"
            )
        categories = (normalized,) if normalized else WEALTH_CATEGORIES

        summaries = []
        for name in categories:
            entries = self._wealth_repository.fetch_entries(name)
            summary = build_summary(
                self._matching(entries, name),
                category=name,
                include_zero_allocations=self._include_zero_allocations,
            )
            self._logger.info(
                f"Wealth summary computed: category={name}, "
                f"entries={summary.total_entries}, "
                f"growth={summary.monthly_growth}"
            )
            summaries.append(summary)
        return summaries

    def execute_one(self, category: str) -> WealthSummaryCategory:
        """Return the summary of a single category."""
        return self.execute(category)[0]

    @staticmethod
    def _matching(
        entries: list[WealthEntry],
        category: str,
    ) -> list[WealthEntry]:
        return [entry for entry in entries if entry.category == category]


__all__ = ["GetWealthSummaryUseCase"]
