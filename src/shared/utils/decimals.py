"""
Decimal and date coercion helpers.

Monetary values, areas and weights are exact decimals throughout the engine.
These helpers turn loosely-typed inputs (JSON numbers, strings, ints) into
``Decimal``/``date`` without ever passing through binary floating point
arithmetic.
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Optional


def to_decimal(value: Any) -> Decimal:
    """
    Convert a numeric-like value to a finite Decimal.

    Floats are converted through their shortest string representation,
    so ``0.1`` becomes ``Decimal("0.1")`` and not the binary expansion.

    Args:
        value: Decimal, int, float or numeric string

    Returns:
        Finite Decimal equal to the input

    Raises:
        TypeError: If value is a bool, None or an unsupported type
        ValueError: If value cannot be parsed or is NaN/Infinity

    Examples:
        >>> to_decimal("12.50")
        Decimal('12.50')
        >>> to_decimal(0.1)
        Decimal('0.1')
    """
    if isinstance(value, bool) or value is None:
        raise TypeError(f"Expected a number, got {type(value).__name__}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as e:
            raise ValueError(f"Cannot parse decimal from {value!r}") from e
    else:
        raise TypeError(f"Expected a number, got {type(value).__name__}")

    if not result.is_finite():
        raise ValueError(f"Decimal must be finite, got {value!r}")

    return result


def to_optional_decimal(value: Any) -> Optional[Decimal]:
    """Like to_decimal(), but None passes through as None."""
    if value is None:
        return None
    return to_decimal(value)


def parse_iso_date(value: Any) -> date:
    """
    Parse a calendar date from an ISO string or a date/datetime instance.

    Accepts ``"2024-01-01"`` and full ISO datetimes such as
    ``"2024-01-01T00:00:00"`` (the date part is kept).

    Raises:
        TypeError: If value is not a str, date or datetime
        ValueError: If the string is not ISO formatted
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Expected ISO date string, got {type(value).__name__}")

    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        # Full datetime ("2024-01-01T00:00:00", "2024-01-01 10:30:00")
        return datetime.fromisoformat(text).date()
