"""Domain normalization helpers."""

import math
import re
import unicodedata
from collections.abc import Iterable

from src.domain.constants import WEALTH_CATEGORIES, WORDS_PER_MINUTE

_SLUG_INVALID = re.compile(r"[^a-z0-9]+")
_HTML_TAG = re.compile(r"<[^>]+>")


def normalize_category(category: str | None) -> str | None:
    """Normalize a wealth category label.

    Args:
        category: Raw label such as "his" or " Both ".

    Returns:
        str | None: Canonical label, or None when unknown.
    """
    if not category:
        return None
    cleaned = category.strip().lower()
    for known in WEALTH_CATEGORIES:
        if known.lower() == cleaned:
            return known
    return None


def slugify(value: str) -> str:
    """Return a URL slug for a post title."""
    ascii_value = (
        unicodedata.normalize("NFKD", value)
        .encode("ascii", "ignore")
        .decode("ascii")
    )
    return _SLUG_INVALID.sub("-", ascii_value.lower()).strip("-")


def normalize_tags(tags: Iterable[str] | str | None) -> tuple[str, ...]:
    """Normalize tags to a tuple of unique, trimmed, lower-case labels.

    A comma separated string is accepted as well.
    """
    if not tags:
        return ()
    if isinstance(tags, str):
        tags = tags.split(",")
    seen: list[str] = []
    for tag in tags:
        cleaned = str(tag).strip().lower()
        if cleaned and cleaned not in seen:
            seen.append(cleaned)
    return tuple(seen)


def estimate_read_time(content: str) -> int:
    """Return the reading time of an HTML body in minutes (at least 1)."""
    words = _HTML_TAG.sub(" ", content or "").split()
    return max(1, math.ceil(len(words) / WORDS_PER_MINUTE))


__all__ = [
    "normalize_category",
    "slugify",
    "normalize_tags",
    "estimate_read_time",
]
