"""Domain validation for write payloads.

The read side tolerates anything stored; these checks keep bad data from
being stored in the first place. Every validator returns a cleaned copy of
the payload or raises ``ValidationError``.
"""

import re
from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal, InvalidOperation

from src.domain.constants import (
    ASSET_ALLOCATION_FIELDS,
    DEBT_BREAKDOWN_FIELDS,
    GOAL_PRIORITIES,
    GOAL_TYPES,
    POST_STATUSES,
    PUBLISHED_STATUS,
    WEALTH_CATEGORIES,
)
from src.domain.errors import ValidationError
from src.domain.services.normalization import (
    estimate_read_time,
    normalize_category,
    normalize_tags,
    slugify,
)
from src.utils.date_utils import coerce_datetime
from src.utils.decimal_utils import coerce_decimal

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

WEALTH_REQUIRED_AMOUNTS = (
    "net_worth",
    "investments",
    "cash",
    "liabilities",
    "fire_target",
    "savings_rate",
)
WEALTH_OPTIONAL_AMOUNTS = (
    tuple(name for name, _ in ASSET_ALLOCATION_FIELDS)
    + tuple(name for name, _ in DEBT_BREAKDOWN_FIELDS)
    + ("monthly_income", "monthly_expenses", "monthly_savings")
)


def validate_wealth_entry(
    payload: Mapping[str, object],
    *,
    partial: bool = False,
) -> dict[str, object]:
    """Validate a wealth snapshot payload.

    Args:
        payload: Raw field values keyed by WealthEntry attribute name.
        partial: Only validate the fields present (updates).

    Returns:
        dict[str, object]: Cleaned values with Decimal amounts.

    Raises:
        ValidationError: If a field is missing or malformed.
    """
    cleaned: dict[str, object] = {}
    if "date" in payload or not partial:
        cleaned["date"] = _require_datetime(payload.get("date"), "date")
    if "category" in payload or not partial:
        cleaned["category"] = _require_category(payload.get("category"))

    for name in WEALTH_REQUIRED_AMOUNTS:
        if name in payload or not partial:
            cleaned[name] = _require_amount(payload.get(name), name)
    for name in WEALTH_OPTIONAL_AMOUNTS:
        if name in payload:
            cleaned[name] = _optional_amount(payload.get(name), name)

    rate = cleaned.get("savings_rate")
    if rate is not None and not Decimal("-100") <= rate <= Decimal("100"):
        raise ValidationError(
            "savings_rate must be a percentage between -100 and 100",
            field="savings_rate",
        )
    return cleaned


def validate_goal(
    payload: Mapping[str, object],
    *,
    partial: bool = False,
) -> dict[str, object]:
    """Validate a financial goal payload."""
    cleaned: dict[str, object] = {}
    if "title" in payload or not partial:
        cleaned["title"] = _require_text(payload.get("title"), "title")
    if "category" in payload or not partial:
        cleaned["category"] = _require_category(payload.get("category"))
    if "goal_type" in payload or not partial:
        cleaned["goal_type"] = _require_choice(
            payload.get("goal_type", "custom"),
            GOAL_TYPES,
            "goal_type",
        )
    if "priority" in payload or not partial:
        cleaned["priority"] = _require_choice(
            payload.get("priority", "medium"),
            GOAL_PRIORITIES,
            "priority",
        )
    if "target_amount" in payload or not partial:
        target = _require_amount(payload.get("target_amount"), "target_amount")
        if target <= 0:
            raise ValidationError(
                "target_amount must be greater than zero",
                field="target_amount",
            )
        cleaned["target_amount"] = target
    if "current_amount" in payload or not partial:
        cleaned["current_amount"] = _require_amount(
            payload.get("current_amount", Decimal("0")),
            "current_amount",
        )
    if "target_date" in payload:
        raw_date = payload.get("target_date")
        cleaned["target_date"] = (
            _require_datetime(raw_date, "target_date")
            if raw_date not in (None, "")
            else None
        )
    if "description" in payload:
        cleaned["description"] = _optional_text(payload.get("description"))
    return cleaned


def validate_milestone(
    payload: Mapping[str, object],
    *,
    partial: bool = False,
) -> dict[str, object]:
    """Validate a goal milestone payload."""
    cleaned: dict[str, object] = {}
    if not partial:
        cleaned["goal_id"] = _require_text(payload.get("goal_id"), "goal_id")
    if "title" in payload or not partial:
        cleaned["title"] = _require_text(payload.get("title"), "title")
    if "target_amount" in payload or not partial:
        target = _require_amount(payload.get("target_amount"), "target_amount")
        if target <= 0:
            raise ValidationError(
                "target_amount must be greater than zero",
                field="target_amount",
            )
        cleaned["target_amount"] = target
    return cleaned


def validate_blog_post(
    payload: Mapping[str, object],
    *,
    partial: bool = False,
    now: datetime | None = None,
) -> dict[str, object]:
    """Validate a blog post payload.

    Missing slugs are derived from the title and missing reading times are
    estimated from the content. Publishing a post stamps ``published_at``.
    """
    cleaned: dict[str, object] = {}
    for name in ("title", "content", "excerpt", "category"):
        if name in payload or not partial:
            cleaned[name] = _require_text(payload.get(name), name)

    if "slug" in payload or not partial:
        raw_slug = payload.get("slug") or cleaned.get("title") or ""
        slug = slugify(str(raw_slug))
        if not slug:
            raise ValidationError("slug cannot be empty", field="slug")
        cleaned["slug"] = slug

    if "read_time" in payload and payload.get("read_time") not in (None, ""):
        try:
            read_time = int(payload["read_time"])
        except (TypeError, ValueError) as exc:
            raise ValidationError(
                "read_time must be a whole number of minutes",
                field="read_time",
            ) from exc
        if read_time < 1:
            raise ValidationError(
                "read_time must be at least 1 minute",
                field="read_time",
            )
        cleaned["read_time"] = read_time
    elif "content" in cleaned:
        cleaned["read_time"] = estimate_read_time(str(cleaned["content"]))

    if "status" in payload or not partial:
        cleaned["status"] = _require_choice(
            payload.get("status", "draft"),
            POST_STATUSES,
            "status",
        )
    if cleaned.get("status") == PUBLISHED_STATUS:
        published_at = coerce_datetime(payload.get("published_at"))
        cleaned["published_at"] = published_at or now or datetime.now()

    if "tags" in payload:
        cleaned["tags"] = normalize_tags(payload.get("tags"))
    if "featured" in payload:
        cleaned["featured"] = bool(payload.get("featured"))
    for name in ("series_id", "image_url"):
        if name in payload:
            cleaned[name] = _optional_text(payload.get(name))
    return cleaned


def validate_contact_message(payload: Mapping[str, object]) -> dict[str, str]:
    """Validate a contact form submission."""
    cleaned = {
        name: _require_text(payload.get(name), name)
        for name in ("name", "subject", "message")
    }
    cleaned["email"] = validate_email(payload.get("email"))
    return cleaned


def validate_email(value) -> str:
    """Return a normalized email address."""
    email = _require_text(value, "email").lower()
    if not _EMAIL_PATTERN.match(email):
        raise ValidationError("email is not a valid address", field="email")
    return email


def _require_text(value, field: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field} is required", field=field)
    return str(value).strip()


def _optional_text(value) -> str | None:
    if value is None or not str(value).strip():
        return None
    return str(value).strip()


def _require_choice(value, choices, field: str) -> str:
    if value not in choices:
        raise ValidationError(
            f"{field} must be one of {', '.join(choices)}",
            field=field,
        )
    return value


def _require_category(value) -> str:
    category = normalize_category(value if isinstance(value, str) else None)
    if category is None:
        raise ValidationError(
            f"category must be one of {', '.join(WEALTH_CATEGORIES)}",
            field="category",
        )
    return category


def _require_datetime(value, field: str) -> datetime:
    parsed = coerce_datetime(value)
    if parsed is None:
        raise ValidationError(f"{field} must be a valid date", field=field)
    return parsed


def _require_amount(value, field: str) -> Decimal:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field} is required", field=field)
    return _parse_amount(value, field)


def _optional_amount(value, field: str) -> Decimal | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return _parse_amount(value, field)


def _parse_amount(value, field: str) -> Decimal:
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number", field=field)
    try:
        amount = coerce_decimal(value)
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise ValidationError(f"{field} must be a number", field=field) from exc
    if not amount.is_finite():
        raise ValidationError(f"{field} must be a finite number", field=field)
    return amount


__all__ = [
    "validate_wealth_entry",
    "validate_goal",
    "validate_milestone",
    "validate_blog_post",
    "validate_contact_message",
    "validate_email",
]
