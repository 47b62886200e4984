"""Tests for write payload validation."""

from datetime import datetime
from decimal import Decimal

import pytest

from src.domain.errors import ValidationError
from src.domain.services.validation import (
    validate_blog_post,
    validate_contact_message,
    validate_email,
    validate_goal,
    validate_wealth_entry,
)


def _wealth_payload(**overrides) -> dict:
    payload = {
        "date": "2024-01-31",
        "category": "both",
        "net_worth": "250000",
        "investments": 200000,
        "cash": 60000.5,
        "liabilities": "10000.50",
        "fire_target": "1000000",
        "savings_rate": "35",
    }
    payload.update(overrides)
    return payload


def test_wealth_entry_is_cleaned() -> None:
    cleaned = validate_wealth_entry(_wealth_payload(stocks="", bonds="1500"))

    assert cleaned["date"] == datetime(2024, 1, 31)
    assert cleaned["category"] == "Both"
    assert cleaned["investments"] == Decimal("200000")
    assert cleaned["cash"] == Decimal("60000.5")
    assert cleaned["stocks"] is None
    assert cleaned["bonds"] == Decimal("1500")
    assert "crypto" not in cleaned


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("net_worth", None),
        ("cash", "abc"),
        ("fire_target", "Infinity"),
        ("savings_rate", "120"),
        ("category", "Theirs"),
        ("date", "yesterday"),
        ("stocks", True),
    ],
)
def test_wealth_entry_rejects_bad_fields(field, value) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_wealth_entry(_wealth_payload(**{field: value}))

    assert excinfo.value.field == field


def test_partial_wealth_update_only_checks_given_fields() -> None:
    cleaned = validate_wealth_entry({"cash": "42"}, partial=True)

    assert cleaned == {"cash": Decimal("42")}


def test_goal_defaults_and_target_check() -> None:
    cleaned = validate_goal(
        {"title": " Emergency fund ", "category": "Her", "target_amount": "10000"}
    )

    assert cleaned["title"] == "Emergency fund"
    assert cleaned["goal_type"] == "custom"
    assert cleaned["priority"] == "medium"
    assert cleaned["current_amount"] == Decimal("0")

    with pytest.raises(ValidationError):
        validate_goal(
            {"title": "x", "category": "Her", "target_amount": "0"}
        )


def test_goal_rejects_unknown_priority() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_goal({"priority": "urgent"}, partial=True)

    assert excinfo.value.field == "priority"


def test_blog_post_derives_slug_and_read_time() -> None:
    now = datetime(2024, 2, 1)
    cleaned = validate_blog_post(
        {
            "title": "My First Year of FIRE!",
            "content": "<p>" + "word " * 450 + "</p>",
            "excerpt": "A look back",
            "category": "FIRE Strategy",
            "status": "published",
            "tags": "FIRE, Investing, fire",
        },
        now=now,
    )

    assert cleaned["slug"] == "my-first-year-of-fire"
    assert cleaned["read_time"] == 3
    assert cleaned["published_at"] == now
    assert cleaned["tags"] == ("fire", "investing")


def test_blog_post_drafts_have_no_publish_date() -> None:
    cleaned = validate_blog_post(
        {
            "title": "Draft",
            "content": "text",
            "excerpt": "text",
            "category": "Investments",
        }
    )

    assert cleaned["status"] == "draft"
    assert "published_at" not in cleaned


def test_blog_post_rejects_bad_read_time() -> None:
    with pytest.raises(ValidationError):
        validate_blog_post({"read_time": "0"}, partial=True)


def test_contact_message_and_email() -> None:
    cleaned = validate_contact_message(
        {
            "name": "Sam",
            "email": " Sam@Example.com ",
            "subject": "Hello",
            "message": "Great blog",
        }
    )

    assert cleaned["email"] == "sam@example.com"
    with pytest.raises(ValidationError):
        validate_email("not-an-email")
    with pytest.raises(ValidationError):
        validate_contact_message({"email": "a@b.co"})
