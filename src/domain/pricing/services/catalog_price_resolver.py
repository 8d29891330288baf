"""
CatalogPriceResolver - Domain Service

Resolves the unit price of a catalog item for a territory (state code) and
date from its parsed price table.

Business Rules:
    - State bucket wins over the "padrao" bucket, which wins over base price
    - A bucket that yields no price for the date falls through to the next tier
    - Malformed expressions were dropped at parse time, so lookup never raises
    - Exact decimals, no rounding (presentation concern)

Architecture Notes:
    - Pure, stateless, synchronous: the date is always passed in
    - Fallback tiers are Optional-returning steps chained with "or else"
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Literal, Optional

from src.domain.pricing.value_objects.price_table import CatalogPriceTable
from src.domain.shared.exceptions import InvalidPriceInputError
from src.shared.utils.decimals import to_decimal

logger = logging.getLogger(__name__)

PriceSource = Literal["state", "default", "base_price"]


@dataclass(frozen=True)
class PriceResolution:
    """
    Resolved price plus the tier that produced it.

    Attributes:
        price: Resolved unit price
        source: "state", "default" or "base_price"
    """

    price: Decimal
    source: PriceSource


def _validate_date(on_date: date) -> None:
    # datetime is a date subclass; a timestamp here means the caller skipped .date()
    if not isinstance(on_date, date) or isinstance(on_date, datetime):
        raise InvalidPriceInputError(
            f"on_date must be a date, got {type(on_date).__name__}", field_name="on_date"
        )


def _fallback_price(
    table: Optional[CatalogPriceTable], base_price: Optional[Decimal]
) -> Decimal:
    if base_price is not None:
        return to_decimal(base_price)
    if table is not None and table.base_price is not None:
        return table.base_price
    raise InvalidPriceInputError(
        "no price resolved and no base price supplied", field_name="base_price"
    )


def resolve_price_trace(
    table: Optional[CatalogPriceTable],
    state_code: str,
    on_date: date,
    base_price: Optional[Decimal] = None,
) -> PriceResolution:
    """
    Resolve a price and report which tier produced it.

    Args:
        table: Parsed price table, None when the item has no price structure
        state_code: Territory (UF) code, case-insensitive
        on_date: Date the price must be valid on
        base_price: Fallback price, overrides table.base_price when given

    Returns:
        PriceResolution with the price and its source tier

    Raises:
        InvalidPriceInputError: If on_date is not a date, or if no tier
            yields a price and no base price is available

    Examples:
        >>> table = CatalogPriceTable.from_json({"estados": {"SP": 100}, "padrao": 90})
        >>> resolve_price_trace(table, "RJ", date(2024, 5, 1)).source
        'default'
    """
    _validate_date(on_date)

    if table is None:
        return PriceResolution(price=_fallback_price(None, base_price), source="base_price")

    state_expression = table.expression_for_state(state_code)
    if state_expression is not None:
        price = state_expression.evaluate(on_date)
        if price is not None:
            return PriceResolution(price=price, source="state")
        logger.debug(f"State {state_code!r} has no price on {on_date}, trying padrao")

    if table.default is not None:
        price = table.default.evaluate(on_date)
        if price is not None:
            return PriceResolution(price=price, source="default")
        logger.debug(f"Default bucket has no price on {on_date}, using base price")

    return PriceResolution(price=_fallback_price(table, base_price), source="base_price")


def resolve_price(
    table: Optional[CatalogPriceTable],
    state_code: str,
    on_date: date,
    base_price: Optional[Decimal] = None,
) -> Decimal:
    """
    Resolve the unit price for a state and date.

    See resolve_price_trace() for the tier order and errors.
    """
    return resolve_price_trace(table, state_code, on_date, base_price).price


class CatalogPriceResolver:
    """
    Object form of the price resolution functions.

    Lets application services receive the resolver by injection and tests
    replace it with a mock.
    """

    def resolve(
        self,
        table: Optional[CatalogPriceTable],
        state_code: str,
        on_date: date,
        base_price: Optional[Decimal] = None,
    ) -> Decimal:
        return resolve_price(table, state_code, on_date, base_price)

    def resolve_trace(
        self,
        table: Optional[CatalogPriceTable],
        state_code: str,
        on_date: date,
        base_price: Optional[Decimal] = None,
    ) -> PriceResolution:
        return resolve_price_trace(table, state_code, on_date, base_price)
