"""Tests for normalization helpers."""

from src.domain.services.normalization import (
    estimate_read_time,
    normalize_category,
    normalize_tags,
    slugify,
)


def test_normalize_category() -> None:
    assert normalize_category(" his ") == "His"
    assert normalize_category("BOTH") == "Both"
    assert normalize_category("theirs") is None
    assert normalize_category(None) is None


def test_slugify_strips_accents_and_symbols() -> None:
    assert slugify("Épargne & Investissement: 2024!") == (
        "epargne-investissement-2024"
    )


def test_normalize_tags() -> None:
    assert normalize_tags(["ETF", " etf ", "", "Tax"]) == ("etf", "tax")
    assert normalize_tags(None) == ()


def test_estimate_read_time_ignores_markup() -> None:
    assert estimate_read_time("") == 1
    assert estimate_read_time("<b>" * 500 + "one two") == 1
    assert estimate_read_time("word " * 201) == 2
