"""Domain services turning wealth snapshots into dashboard summaries.

Every function here is pure: it reads the entries it is given, never
mutates them and never raises on malformed amounts. Unparsable values are
read as zero through ``parse_decimal_or_default``.
"""

from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta
from decimal import Decimal

from src.domain.constants import (
    ASSET_ALLOCATION_FIELDS,
    DEBT_BREAKDOWN_FIELDS,
    WEALTH_CATEGORIES,
    WEALTH_PERIOD_DAYS,
)
from src.domain.errors import ValidationError
from src.domain.models import (
    AllocationPoint,
    CashFlow,
    DateRange,
    LatestSnapshot,
    TrendPoint,
    WealthEntry,
    WealthSummaryCategory,
)
from src.utils.date_utils import coerce_datetime
from src.utils.decimal_utils import (
    ZERO,
    finite_or_default,
    is_missing_amount,
    overflow_tolerant,
    parse_decimal_or_default,
)

HUNDRED = Decimal("100")


def build_summary(
    entries: Iterable[WealthEntry],
    *,
    category: str | None = None,
    include_zero_allocations: bool = True,
) -> WealthSummaryCategory:
    """Aggregate one category's snapshots into a dashboard summary.

    Args:
        entries: Snapshots already filtered to a single category.
        category: Category label to report; defaults to the entries' own.
        include_zero_allocations: Keep zero-valued asset and debt points.

    Returns:
        WealthSummaryCategory: Summary; empty input yields the zeroed
        "no data yet" shape with every breakdown set to None.
    """
    ordered = sort_entries(entries)
    if category is None and ordered:
        category = ordered[-1].category

    if not ordered:
        return WealthSummaryCategory(
            category=category,
            total_entries=0,
            range=None,
            latest=None,
            monthly_growth=ZERO,
            average_savings_rate=ZERO,
            trend=[],
            asset_allocation=None,
            debt_breakdown=None,
            cash_flow=None,
        )

    latest_entry = ordered[-1]
    return WealthSummaryCategory(
        category=category,
        total_entries=len(ordered),
        range=DateRange(start=ordered[0].date, end=latest_entry.date),
        latest=to_latest_snapshot(latest_entry),
        monthly_growth=compute_monthly_growth(ordered),
        average_savings_rate=compute_average_savings_rate(ordered),
        trend=[to_trend_point(entry) for entry in ordered],
        asset_allocation=compute_breakdown(
            latest_entry,
            ASSET_ALLOCATION_FIELDS,
            include_zero=include_zero_allocations,
        ),
        debt_breakdown=compute_breakdown(
            latest_entry,
            DEBT_BREAKDOWN_FIELDS,
            include_zero=include_zero_allocations,
        ),
        cash_flow=compute_cash_flow(latest_entry),
    )


def summarize_by_category(
    entries: Iterable[WealthEntry],
    categories: Sequence[str] = WEALTH_CATEGORIES,
    *,
    include_zero_allocations: bool = True,
) -> list[WealthSummaryCategory]:
    """Build one summary per category from a mixed list of snapshots.

    "Both" is summarized from its own snapshots only; it is never derived
    from "His" and "Her".
    """
    grouped: dict[str, list[WealthEntry]] = {name: [] for name in categories}
    for entry in entries:
        if entry.category in grouped:
            grouped[entry.category].append(entry)
    return [
        build_summary(
            grouped[name],
            category=name,
            include_zero_allocations=include_zero_allocations,
        )
        for name in categories
    ]


def sort_entries(entries: Iterable[WealthEntry]) -> list[WealthEntry]:
    """Return snapshots in chronological order.

    Entries sharing a date are ordered by id so the result does not depend
    on the input order.
    """
    return sorted(
        entries,
        key=lambda entry: (
            coerce_datetime(entry.date) or datetime.min,
            str(entry.id),
        ),
    )


def filter_entries_by_period(
    entries: Iterable[WealthEntry],
    period: str | None,
    *,
    now: datetime,
) -> list[WealthEntry]:
    """Keep the snapshots recorded within a trailing window.

    Args:
        entries: Snapshots to filter.
        period: ``30d``, ``90d`` or ``1y``. None or ``all`` keeps every
            entry.
        now: Reference instant the window ends at.

    Returns:
        list[WealthEntry]: Entries dated no more than the window before
        ``now``, in input order. Undated entries are dropped once a window
        applies.

    Raises:
        ValidationError: If the period is unknown.
    """
    if period is None or period == "all":
        return list(entries)
    days = WEALTH_PERIOD_DAYS.get(period)
    if days is None:
        raise ValidationError(
            f"period must be one of all, {', '.join(WEALTH_PERIOD_DAYS)}",
            field="period",
        )
    window = timedelta(days=days)
    kept = []
    for entry in entries:
        moment = coerce_datetime(entry.date)
        if moment is not None and now - moment <= window:
            kept.append(entry)
    return kept


def to_trend_point(entry: WealthEntry) -> TrendPoint:
    """Map a snapshot to a trend point."""
    return TrendPoint(
        id=entry.id,
        date=entry.date,
        net_worth=parse_decimal_or_default(entry.net_worth),
        investments=parse_decimal_or_default(entry.investments),
        cash=parse_decimal_or_default(entry.cash),
        liabilities=parse_decimal_or_default(entry.liabilities),
        savings_rate=parse_decimal_or_default(entry.savings_rate),
    )


def to_latest_snapshot(entry: WealthEntry) -> LatestSnapshot:
    """Map a snapshot to the latest-snapshot shape."""
    return LatestSnapshot(
        id=entry.id,
        date=entry.date,
        category=entry.category,
        net_worth=parse_decimal_or_default(entry.net_worth),
        investments=parse_decimal_or_default(entry.investments),
        cash=parse_decimal_or_default(entry.cash),
        liabilities=parse_decimal_or_default(entry.liabilities),
        fire_target=parse_decimal_or_default(entry.fire_target),
        savings_rate=parse_decimal_or_default(entry.savings_rate),
        monthly_income=parse_decimal_or_default(entry.monthly_income),
        monthly_expenses=parse_decimal_or_default(entry.monthly_expenses),
        monthly_savings=parse_decimal_or_default(entry.monthly_savings),
    )


def compute_monthly_growth(ordered: Sequence[WealthEntry]) -> Decimal:
    """Return the net worth change of the last snapshot versus the previous.

    Args:
        ordered: Snapshots in chronological order.

    Returns:
        Decimal: Percentage change; 0 with fewer than two snapshots or a
        zero previous net worth.
    """
    if len(ordered) < 2:
        return ZERO
    latest = parse_decimal_or_default(ordered[-1].net_worth)
    previous = parse_decimal_or_default(ordered[-2].net_worth)
    if previous == 0:
        return ZERO
    with overflow_tolerant():
        growth = (latest - previous) / previous * HUNDRED
    return finite_or_default(growth)


def compute_average_savings_rate(entries: Sequence[WealthEntry]) -> Decimal:
    """Return the mean savings rate, 0 for no entries."""
    if not entries:
        return ZERO
    total = sum(
        (parse_decimal_or_default(entry.savings_rate) for entry in entries),
        ZERO,
    )
    return total / len(entries)


def compute_breakdown(
    entry: WealthEntry,
    fields: Sequence[tuple[str, str]],
    *,
    include_zero: bool = True,
) -> list[AllocationPoint] | None:
    """Split a snapshot's sub-fields into percentage shares.

    Args:
        entry: Snapshot to read the sub-fields from.
        fields: Pairs of (attribute name, display label).
        include_zero: Keep points whose value is zero.

    Returns:
        list[AllocationPoint] | None: One point per field in field order,
        or None when the fields sum to zero or less.
    """
    values = [
        (label, parse_decimal_or_default(getattr(entry, name, None)))
        for name, label in fields
    ]
    total = sum((value for _, value in values), ZERO)
    if total <= 0:
        return None
    with overflow_tolerant():
        return [
            AllocationPoint(
                label=label,
                value=value,
                percentage=_clamp_percentage(value / total * HUNDRED),
            )
            for label, value in values
            if include_zero or value != 0
        ]


def compute_cash_flow(entry: WealthEntry) -> CashFlow | None:
    """Return the snapshot's monthly cash flow.

    Returns:
        CashFlow | None: None when neither income nor expenses are
        reported, so "no data" differs from zero actuals.
    """
    if is_missing_amount(entry.monthly_income) and is_missing_amount(
        entry.monthly_expenses
    ):
        return None
    return CashFlow(
        income=parse_decimal_or_default(entry.monthly_income),
        expenses=parse_decimal_or_default(entry.monthly_expenses),
        savings=parse_decimal_or_default(entry.monthly_savings),
    )


def _clamp_percentage(value: Decimal) -> Decimal:
    if value < 0:
        return ZERO
    if value > HUNDRED:
        return HUNDRED
    return value


__all__ = [
    "build_summary",
    "summarize_by_category",
    "sort_entries",
    "filter_entries_by_period",
    "to_trend_point",
    "to_latest_snapshot",
    "compute_monthly_growth",
    "compute_average_savings_rate",
    "compute_breakdown",
    "compute_cash_flow",
]
