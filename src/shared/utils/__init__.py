"""
Shared Utilities

Responsibility:
    Generic utility functions used across the application.

Contains:
    - Decimal coercion (exact arithmetic, no binary floats)
    - ISO date parsing

Does NOT contain:
    - Domain-specific utilities (use Domain layer)
    - Infrastructure utilities (use Infrastructure layer)
"""

from .decimals import parse_iso_date, to_decimal, to_optional_decimal

__all__ = [
    "to_decimal",
    "to_optional_decimal",
    "parse_iso_date",
]
