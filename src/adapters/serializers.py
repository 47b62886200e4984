"""JSON-ready payloads for domain models.

Shared by the JSON API and the CLIs: Decimals become floats, dates become
ISO strings and field names become camelCase. ``None`` stays ``None``.
"""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
import math

from src.domain.models import GoalProgress, RelatedPost


def to_camel(name: str) -> str:
    """Convert a snake_case name to camelCase."""
    head, *tail = name.split("_")
    return head + "".join(part.capitalize() for part in tail)


def to_payload(value):
    """Convert a domain value into JSON-compatible data.

    Args:
        value: Dataclass, list, tuple, dict, Decimal, date or scalar.

    Returns:
        JSON-compatible structure. Numbers a float cannot hold are emitted
        as 0.
    """
    if isinstance(value, GoalProgress):
        payload = to_payload(value.goal)
        payload["progress"] = to_payload(value.progress)
        return payload
    if isinstance(value, RelatedPost):
        payload = to_payload(value.post)
        payload["score"] = value.score
        return payload
    if is_dataclass(value) and not isinstance(value, type):
        return {
            to_camel(item.name): to_payload(getattr(value, item.name))
            for item in fields(value)
        }
    if isinstance(value, (Decimal, float)):
        number = float(value)
        return number if math.isfinite(number) else 0.0
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(key): to_payload(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_payload(item) for item in value]
    return value


__all__ = ["to_camel", "to_payload"]
