"""
Catalog Price Table Value Objects.

A catalog item's price structure is a semi-structured JSON document:

    {
        "estados": {"SP": <expr>, "MG": <expr>},
        "padrao": <expr>
    }

where ``<expr>`` is either a constant number or an ordered list of dated
ranges ``{"dataInicio": "2024-01-01", "dataFim": "2024-06-30", "valor": 10}``.

The document is parsed ONCE into a tagged variant (ConstantPrice |
DatedPriceList). Malformed expressions are dropped during parsing, so the
resolver only ever sees clean, typed structures and never has to catch
anything at lookup time.
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

from src.domain.pricing.constants import (
    DEFAULT_KEY,
    RANGE_END_KEYS,
    RANGE_START_KEYS,
    RANGE_VALUE_KEY,
    STATES_KEY,
)
from src.shared.utils.decimals import parse_iso_date, to_decimal

logger = logging.getLogger(__name__)

_PARSE_ERRORS = (ValueError, TypeError, InvalidOperation, KeyError)


@dataclass(frozen=True)
class ConstantPrice:
    """
    Price expression that applies regardless of date.

    Examples:
        >>> ConstantPrice(Decimal("90")).evaluate(date(2024, 5, 1))
        Decimal('90')
    """

    value: Decimal

    def evaluate(self, on_date: date) -> Optional[Decimal]:
        """Return the constant value unconditionally."""
        return self.value


@dataclass(frozen=True)
class DatedPrice:
    """
    One validity range of a dated price list.

    Attributes:
        start: First day the price applies (inclusive)
        end: Last day the price applies (inclusive), None = open-ended
        value: Price applicable within the range
    """

    start: date
    end: Optional[date]
    value: Decimal

    def covers(self, on_date: date) -> bool:
        """Check whether on_date falls inside [start, end] (end open when None)."""
        if on_date < self.start:
            return False
        return self.end is None or on_date <= self.end


@dataclass(frozen=True)
class DatedPriceList:
    """
    Ordered sequence of dated prices.

    Evaluation scans entries in their original order and returns the value of
    the FIRST entry covering the date; overlapping ranges are therefore
    resolved by position, not by specificity.

    Examples:
        >>> prices = DatedPriceList((
        ...     DatedPrice(date(2024, 1, 1), date(2024, 6, 30), Decimal("10")),
        ...     DatedPrice(date(2024, 7, 1), None, Decimal("12")),
        ... ))
        >>> prices.evaluate(date(2024, 8, 1))
        Decimal('12')
        >>> prices.evaluate(date(2023, 12, 31)) is None
        True
    """

    entries: tuple[DatedPrice, ...] = ()

    def evaluate(self, on_date: date) -> Optional[Decimal]:
        """Return the first covering entry's value, or None when no range matches."""
        for entry in self.entries:
            if entry.covers(on_date):
                return entry.value
        return None


PriceExpression = Union[ConstantPrice, DatedPriceList]


# ============================================================================
# PARSING (lenient: malformed -> None)
# ============================================================================


def _first_present(raw: Mapping[str, Any], keys: tuple[str, ...]) -> tuple[bool, Any]:
    for key in keys:
        if key in raw:
            return True, raw[key]
    return False, None


def _parse_dated_price(raw: Any) -> DatedPrice:
    """Parse one range entry; raises on any structural or value error."""
    if not isinstance(raw, Mapping):
        raise TypeError(f"Range entry must be an object, got {type(raw).__name__}")

    has_start, raw_start = _first_present(raw, RANGE_START_KEYS)
    if not has_start:
        raise KeyError("dataInicio")

    _, raw_end = _first_present(raw, RANGE_END_KEYS)
    start = parse_iso_date(raw_start)
    end = parse_iso_date(raw_end) if raw_end is not None else None

    raw_value = raw[RANGE_VALUE_KEY]
    if isinstance(raw_value, str):
        raise TypeError("valor must be a number, got string")

    return DatedPrice(start=start, end=end, value=to_decimal(raw_value))


def parse_price_expression(raw: Any) -> Optional[PriceExpression]:
    """
    Parse a raw JSON price expression into a typed PriceExpression.

    Never raises: any malformed input (wrong shape, unparsable date, missing
    ``valor``, non-numeric value) makes the whole expression absent, so price
    resolution falls through to the next tier.

    Args:
        raw: Decoded JSON value (number or list of range objects)

    Returns:
        ConstantPrice, DatedPriceList, or None if the expression is malformed

    Examples:
        >>> parse_price_expression(90)
        ConstantPrice(value=Decimal('90'))
        >>> parse_price_expression([{"dataInicio": "not-a-date", "valor": 1}]) is None
        True
    """
    if isinstance(raw, bool):
        return None

    if isinstance(raw, (int, float, Decimal)):
        try:
            return ConstantPrice(to_decimal(raw))
        except _PARSE_ERRORS as e:
            logger.debug(f"Ignoring malformed constant price {raw!r}: {e}")
            return None

    if isinstance(raw, list):
        try:
            entries = tuple(_parse_dated_price(item) for item in raw)
        except _PARSE_ERRORS as e:
            logger.debug(f"Ignoring malformed dated price list: {type(e).__name__}: {e}")
            return None
        return DatedPriceList(entries)

    logger.debug(f"Ignoring price expression of unsupported type {type(raw).__name__}")
    return None


def _normalize_state(state_code: str) -> str:
    return state_code.strip().upper()


# ============================================================================
# TABLE
# ============================================================================


@dataclass(frozen=True)
class CatalogPriceTable:
    """
    Immutable, parsed price structure of a catalog item.

    Attributes:
        states: State code (UF, upper-case) -> price expression
        default: "padrao" bucket used when the state has no applicable price
        base_price: Last-resort fallback travelling with the table (optional)

    Examples:
        >>> table = CatalogPriceTable.from_json(
        ...     {"estados": {"SP": [{"dataInicio": "2024-01-01", "valor": 100}]}, "padrao": 90},
        ...     base_price=Decimal("80"),
        ... )
        >>> table.expression_for_state("sp")
        DatedPriceList(entries=(DatedPrice(start=datetime.date(2024, 1, 1), end=None, value=Decimal('100')),))
    """

    states: Mapping[str, PriceExpression] = field(default_factory=dict)
    default: Optional[PriceExpression] = None
    base_price: Optional[Decimal] = None

    def __post_init__(self) -> None:
        """Freeze the state mapping and normalise state codes."""
        normalized = {_normalize_state(code): expr for code, expr in self.states.items()}
        object.__setattr__(self, "states", MappingProxyType(normalized))
        if self.base_price is not None:
            object.__setattr__(self, "base_price", to_decimal(self.base_price))

    def expression_for_state(self, state_code: str) -> Optional[PriceExpression]:
        """Return the state's price expression, or None when the state is not listed."""
        if not isinstance(state_code, str):
            return None
        return self.states.get(_normalize_state(state_code))

    def has_prices(self) -> bool:
        """True when at least one state or the default bucket parsed successfully."""
        return bool(self.states) or self.default is not None

    @classmethod
    def from_json(
        cls, raw: Union[str, bytes, Mapping[str, Any], None], base_price: Any = None
    ) -> "CatalogPriceTable":
        """
        Parse a raw price document into a CatalogPriceTable.

        Lenient by contract: an undecodable document, a non-object root or a
        non-object ``estados`` section produce a table without those buckets
        rather than an error. JSON floats are decoded straight to Decimal.

        Args:
            raw: JSON text/bytes, an already-decoded mapping, or None
            base_price: Fallback price stored alongside the table

        Returns:
            Parsed CatalogPriceTable (possibly with no price buckets)
        """
        document: Any = raw
        if isinstance(raw, (str, bytes, bytearray)):
            try:
                document = json.loads(raw, parse_float=Decimal)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                logger.debug(f"Price table is not valid JSON, using base price only: {e}")
                document = None

        price = to_decimal(base_price) if base_price is not None else None

        if not isinstance(document, Mapping):
            return cls(states={}, default=None, base_price=price)

        states: dict[str, PriceExpression] = {}
        raw_states = document.get(STATES_KEY)
        if isinstance(raw_states, Mapping):
            for state_code, raw_expr in raw_states.items():
                if not isinstance(state_code, str):
                    continue
                expression = parse_price_expression(raw_expr)
                if expression is not None:
                    states[state_code] = expression

        default = None
        if DEFAULT_KEY in document:
            default = parse_price_expression(document[DEFAULT_KEY])

        return cls(states=states, default=default, base_price=price)


@dataclass(frozen=True)
class CatalogItemPricing:
    """
    Pricing data of one catalog item as supplied by the catalog lookup.

    The table and its base-price fallback always travel together.

    Attributes:
        catalog_item_id: Catalog item identifier
        product_id: Product the item prices
        table: Parsed price table (None when the item has no structure)
        base_price: Fallback price (None when not configured)
    """

    catalog_item_id: int
    product_id: int
    table: Optional[CatalogPriceTable] = None
    base_price: Optional[Decimal] = None

    def effective_base_price(self) -> Optional[Decimal]:
        """Item base price, or the table's own base price when the item has none."""
        if self.base_price is not None:
            return self.base_price
        if self.table is not None:
            return self.table.base_price
        return None
