"""CLI adapter printing wealth summaries as JSON.

Set ``SUMMARY_CATEGORY`` (His, Her or Both) to print a single category;
every category is printed otherwise.
"""

import json
import os

from src.adapters.serializers import to_payload
from src.application.use_cases.get_wealth_summary import (
    GetWealthSummaryUseCase,
)
from src.infrastructure.container import (
    build_database_adapter,
    build_settings,
    build_wealth_repository,
)
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run the wealth summary use case and print the result."""
    logger = get_app_logger()
    settings = build_settings()
    repository = build_wealth_repository(build_database_adapter())
    use_case = GetWealthSummaryUseCase(
        repository,
        logger=logger,
        include_zero_allocations=settings.include_zero_allocations,
    )

    summaries = use_case.execute(os.getenv("SUMMARY_CATEGORY"))

    print(json.dumps({"categories": to_payload(summaries)}, indent=2))


if __name__ == "__main__":  # pragma: no cover
    main()
