"""Helpers for Decimal normalization."""

from contextlib import contextmanager
from decimal import Decimal, InvalidOperation, Overflow, localcontext
import sys


ZERO = Decimal("0")
# Largest magnitude that still survives the trip to a JSON float.
MAX_AMOUNT = Decimal(sys.float_info.max)


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        decimal.InvalidOperation: If the value cannot be parsed.
    """
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value).strip())


def parse_decimal_or_default(value, default: Decimal = ZERO) -> Decimal:
    """Parse a stored amount, falling back to a default on bad input.

    Read paths use this helper for every numeric field so that a single
    corrupt value never breaks a dashboard render. Non-finite values
    (NaN, Infinity) and magnitudes beyond what a float can hold are
    treated as malformed.

    Args:
        value: Raw value (Decimal, int, float, str or None).
        default: Value returned when parsing fails.

    Returns:
        Decimal: Parsed finite value or the default.
    """
    if isinstance(value, bool):
        return default
    try:
        parsed = coerce_decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return default
    if not _is_representable(parsed):
        return default
    return parsed


def is_missing_amount(value) -> bool:
    """Return True when a raw amount is absent or unparsable."""
    if value is None or isinstance(value, bool):
        return True
    try:
        parsed = coerce_decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return True
    return not _is_representable(parsed)


@contextmanager
def overflow_tolerant():
    """Run Decimal arithmetic where overflow yields Infinity.

    Pair it with ``finite_or_default`` on the result.
    """
    with localcontext() as ctx:
        ctx.traps[Overflow] = False
        yield ctx


def finite_or_default(value: Decimal, default: Decimal = ZERO) -> Decimal:
    """Return the value when it fits in a float, else the default."""
    return value if _is_representable(value) else default


def _is_representable(value: Decimal) -> bool:
    return value.is_finite() and abs(value) <= MAX_AMOUNT


__all__ = [
    "ZERO",
    "MAX_AMOUNT",
    "coerce_decimal",
    "parse_decimal_or_default",
    "is_missing_amount",
    "overflow_tolerant",
    "finite_or_default",
]
