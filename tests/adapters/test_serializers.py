"""Tests for the JSON payload helpers."""

import json
from datetime import datetime
from decimal import Decimal

from src.adapters.serializers import to_camel, to_payload
from src.domain.models import (
    BlogPost,
    FinancialGoal,
    GoalProgress,
    RelatedPost,
    WealthEntry,
)
from src.domain.services.wealth import build_summary


def test_to_camel() -> None:
    assert to_camel("alternative_investments") == "alternativeInvestments"
    assert to_camel("id") == "id"


def test_empty_summary_payload_keeps_nulls() -> None:
    payload = to_payload(build_summary([], category="Both"))

    assert payload == {
        "category": "Both",
        "totalEntries": 0,
        "range": None,
        "latest": None,
        "monthlyGrowth": 0.0,
        "averageSavingsRate": 0.0,
        "trend": [],
        "assetAllocation": None,
        "debtBreakdown": None,
        "cashFlow": None,
    }


def test_payload_is_strict_json() -> None:
    """No NaN or Infinity can reach the output."""
    payload = to_payload(
        {"bad": Decimal("NaN"), "inf": Decimal("Infinity"), "ok": Decimal("1.5")}
    )

    assert json.dumps(payload, allow_nan=False) == (
        '{"bad": 0.0, "inf": 0.0, "ok": 1.5}'
    )


def test_goal_progress_is_flattened() -> None:
    goal = FinancialGoal(
        id="g",
        title="Fund",
        category="Both",
        goal_type="custom",
        target_amount=Decimal("100"),
        current_amount=Decimal("40"),
        target_date=datetime(2024, 12, 31),
    )

    payload = to_payload(GoalProgress(goal=goal, progress=Decimal("40")))

    assert payload["progress"] == 40.0
    assert payload["targetAmount"] == 100.0
    assert payload["targetDate"] == "2024-12-31T00:00:00"


def test_related_post_carries_score() -> None:
    post = BlogPost(
        id="p",
        title="t",
        slug="t",
        content="c",
        excerpt="e",
        category="Investments",
        tags=("etf",),
    )

    payload = to_payload(RelatedPost(post=post, score=17))

    assert payload["score"] == 17
    assert payload["tags"] == ["etf"]
    assert payload["readTime"] == 1


def test_summary_with_huge_amounts_serializes() -> None:
    entry = WealthEntry(
        id="a",
        date=datetime(2024, 1, 1),
        category="Both",
        net_worth="1E+400",
        savings_rate="1E+300",
    )
    payload = to_payload(build_summary([entry, entry]))

    json.dumps(payload, allow_nan=False)
    assert payload["latest"]["netWorth"] == 0.0


def test_out_of_range_values_become_zero() -> None:
    payload = to_payload([Decimal("1E+400"), float("inf"), 2.5])

    assert payload == [0.0, 0.0, 2.5]
