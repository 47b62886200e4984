"""Domain models for wealth snapshots and their derived summaries."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

RawAmount = Decimal | int | float | str | None


@dataclass(frozen=True)
class WealthEntry:
    """One recorded wealth snapshot for a category.

    Amounts are kept exactly as stored. They may be missing or malformed;
    the aggregation services coerce them when reading.

    Attributes:
        id: Unique identifier of the snapshot.
        date: Point in time the snapshot describes.
        category: Partition label (His, Her or Both).
        net_worth: Net worth at the snapshot date.
        fire_target: FIRE goal configured for the category.
        savings_rate: Savings rate as a percentage.
    """

    id: str
    date: datetime
    category: str
    net_worth: RawAmount = None
    investments: RawAmount = None
    cash: RawAmount = None
    liabilities: RawAmount = None
    fire_target: RawAmount = None
    savings_rate: RawAmount = None
    stocks: RawAmount = None
    bonds: RawAmount = None
    real_estate: RawAmount = None
    crypto: RawAmount = None
    commodities: RawAmount = None
    alternative_investments: RawAmount = None
    mortgage: RawAmount = None
    credit_cards: RawAmount = None
    student_loans: RawAmount = None
    auto_loans: RawAmount = None
    monthly_income: RawAmount = None
    monthly_expenses: RawAmount = None
    monthly_savings: RawAmount = None


@dataclass(frozen=True)
class TrendPoint:
    """Single point of the net worth trend series."""

    id: str
    date: datetime
    net_worth: Decimal
    investments: Decimal
    cash: Decimal
    liabilities: Decimal
    savings_rate: Decimal


@dataclass(frozen=True)
class LatestSnapshot:
    """Latest entry of a category with every amount coerced."""

    id: str
    date: datetime
    category: str
    net_worth: Decimal
    investments: Decimal
    cash: Decimal
    liabilities: Decimal
    fire_target: Decimal
    savings_rate: Decimal
    monthly_income: Decimal
    monthly_expenses: Decimal
    monthly_savings: Decimal


@dataclass(frozen=True)
class AllocationPoint:
    """Share of one asset or debt sub-category."""

    label: str
    value: Decimal
    percentage: Decimal


@dataclass(frozen=True)
class CashFlow:
    """Monthly cash flow of the latest snapshot."""

    income: Decimal
    expenses: Decimal
    savings: Decimal

    @property
    def net(self) -> Decimal:
        """Return income minus expenses."""
        return self.income - self.expenses


@dataclass(frozen=True)
class DateRange:
    """First and last snapshot dates of a series."""

    start: datetime
    end: datetime


@dataclass(frozen=True)
class WealthSummaryCategory:
    """Aggregated view of one category's snapshots.

    Attributes:
        category: Category the summary describes.
        total_entries: Number of snapshots aggregated.
        range: First and last snapshot dates, None without entries.
        latest: Latest snapshot, None without entries.
        monthly_growth: Net worth change versus the previous snapshot, in %.
        average_savings_rate: Mean savings rate across snapshots.
        trend: Snapshots in chronological order.
        asset_allocation: Asset shares, None when there is nothing to chart.
        debt_breakdown: Debt shares, None when debt-free.
        cash_flow: Monthly cash flow, None when not reported.
    """

    category: str | None
    total_entries: int
    range: DateRange | None
    latest: LatestSnapshot | None
    monthly_growth: Decimal
    average_savings_rate: Decimal
    trend: list[TrendPoint]
    asset_allocation: list[AllocationPoint] | None
    debt_breakdown: list[AllocationPoint] | None
    cash_flow: CashFlow | None


__all__ = [
    "RawAmount",
    "WealthEntry",
    "TrendPoint",
    "LatestSnapshot",
    "AllocationPoint",
    "CashFlow",
    "DateRange",
    "WealthSummaryCategory",
]
