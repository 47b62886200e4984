"""Domain services for goal progress and FIRE projections."""

from collections.abc import Iterable
from datetime import datetime, timedelta
from decimal import Decimal

from src.domain.constants import (
    DEFAULT_FIRE_TARGET,
    GOAL_DEADLINE_WINDOW_DAYS,
    GOAL_ON_TRACK_THRESHOLD,
    UPCOMING_DEADLINES_LIMIT,
)
from src.domain.models import (
    FinancialGoal,
    GoalMilestone,
    GoalProgress,
    GoalsOverview,
    LatestSnapshot,
)
from src.utils.date_utils import coerce_datetime
from src.utils.decimal_utils import (
    MAX_AMOUNT,
    ZERO,
    finite_or_default,
    overflow_tolerant,
    parse_decimal_or_default,
)

HUNDRED = Decimal("100")
MONTHS_PER_YEAR = Decimal("12")


def calculate_progress(current, target) -> Decimal:
    """Return goal progress as a percentage capped at 100.

    Args:
        current: Amount reached so far (decimal-like, may be None).
        target: Amount to reach (decimal-like, may be None).

    Returns:
        Decimal: ``current / target * 100`` capped at 100. A non-positive
        target reads as reached (100) when anything was saved, else 0.
    """
    current_amount = parse_decimal_or_default(current)
    target_amount = parse_decimal_or_default(target)
    if target_amount <= 0:
        return HUNDRED if current_amount > 0 else ZERO
    with overflow_tolerant():
        progress = current_amount / target_amount * HUNDRED
    return min(progress, HUNDRED)


def estimate_years_to_fire(
    current_net_worth,
    target,
    monthly_savings,
) -> Decimal | None:
    """Project the years left before reaching the FIRE target.

    Args:
        current_net_worth: Current net worth.
        target: FIRE target.
        monthly_savings: Amount saved each month.

    Returns:
        Decimal | None: Years at the current savings pace, 0 when the
        target is already reached, or None when nothing is being saved or
        the projection is too large to represent.
    """
    remaining = max(
        parse_decimal_or_default(target)
        - parse_decimal_or_default(current_net_worth),
        ZERO,
    )
    savings = parse_decimal_or_default(monthly_savings)
    if savings <= 0:
        return None
    with overflow_tolerant():
        years = remaining / savings / MONTHS_PER_YEAR
    if not years.is_finite() or years > MAX_AMOUNT:
        return None
    return years


def calculate_fire_progress(
    latest: LatestSnapshot | None,
    default_target: Decimal = DEFAULT_FIRE_TARGET,
) -> Decimal:
    """Return net worth as a percentage of the FIRE target, capped at 100.

    The snapshot's own target wins; the default applies when it is zero.
    """
    if latest is None:
        return ZERO
    target = latest.fire_target if latest.fire_target > 0 else default_target
    return calculate_progress(latest.net_worth, target)


def with_progress(goals: Iterable[FinancialGoal]) -> list[GoalProgress]:
    """Pair each goal with its capped progress."""
    return [
        GoalProgress(
            goal=goal,
            progress=calculate_progress(
                goal.current_amount,
                goal.target_amount,
            ),
        )
        for goal in goals
    ]


def build_goals_overview(
    goals: Iterable[FinancialGoal],
    *,
    now: datetime,
) -> GoalsOverview:
    """Summarize goals for the overview widget.

    Args:
        goals: Goals to summarize.
        now: Reference time for upcoming deadlines.

    Returns:
        GoalsOverview: Counters, average progress, on-track count and the
        soonest active deadlines within the next 30 days.
    """
    goals = list(goals)
    completed = [goal for goal in goals if goal.is_completed]
    active = [goal for goal in goals if not goal.is_completed]

    total_progress = ZERO
    for goal in goals:
        if parse_decimal_or_default(goal.target_amount) <= 0:
            continue
        total_progress += calculate_progress(
            goal.current_amount,
            goal.target_amount,
        )
    average_progress = total_progress / len(goals) if goals else ZERO

    on_track = sum(
        1
        for goal in active
        if parse_decimal_or_default(goal.target_amount) > 0
        and calculate_progress(goal.current_amount, goal.target_amount)
        >= GOAL_ON_TRACK_THRESHOLD
    )

    window_end = now + timedelta(days=GOAL_DEADLINE_WINDOW_DAYS)
    upcoming = sorted(
        (
            goal
            for goal in active
            if _deadline_within(goal.target_date, now, window_end)
        ),
        key=lambda goal: coerce_datetime(goal.target_date),
    )

    return GoalsOverview(
        total_goals=len(goals),
        completed_goals=len(completed),
        active_goals=len(goals) - len(completed),
        average_progress=average_progress,
        goals_on_track=on_track,
        upcoming_deadlines=upcoming[:UPCOMING_DEADLINES_LIMIT],
    )


def milestone_share(milestone: GoalMilestone, goal_target) -> Decimal:
    """Return the milestone amount as a percentage of the goal target.

    A goal without a positive target gives 0.
    """
    goal_amount = parse_decimal_or_default(goal_target)
    if goal_amount <= 0:
        return ZERO
    with overflow_tolerant():
        share = (
            parse_decimal_or_default(milestone.target_amount)
            / goal_amount
            * HUNDRED
        )
    return finite_or_default(share)


def milestone_completion(milestones: Iterable[GoalMilestone]) -> Decimal:
    """Return the percentage of completed milestones, 0 without any."""
    milestones = list(milestones)
    if not milestones:
        return ZERO
    completed = sum(1 for milestone in milestones if milestone.is_completed)
    return Decimal(completed) / len(milestones) * HUNDRED


def _deadline_within(target_date, start: datetime, end: datetime) -> bool:
    deadline = coerce_datetime(target_date)
    if deadline is None:
        return False
    return start < deadline < end


__all__ = [
    "calculate_progress",
    "estimate_years_to_fire",
    "calculate_fire_progress",
    "with_progress",
    "build_goals_overview",
    "milestone_share",
    "milestone_completion",
]
