"""
Pricing Domain Constants

Keys, names and unit conversions shared by the pricing resolvers.
The price-table keys are Portuguese because they mirror the JSON documents
produced by catalog management.
"""

from decimal import Decimal
from enum import Enum
from typing import Dict, Final, Tuple


# ============================================================================
# CATALOG PRICE TABLE - JSON document keys
# ============================================================================

STATES_KEY: Final[str] = "estados"
DEFAULT_KEY: Final[str] = "padrao"

# Range entries were persisted both in camelCase and snake_case
RANGE_START_KEYS: Final[Tuple[str, ...]] = ("dataInicio", "data_inicio")
RANGE_END_KEYS: Final[Tuple[str, ...]] = ("dataFim", "data_fim")
RANGE_VALUE_KEY: Final[str] = "valor"


# ============================================================================
# UNIT CONVERSIONS
# ============================================================================

CUBIC_CM_PER_CUBIC_M: Final[Decimal] = Decimal(1_000_000)

# PMS is grams per 1000 units: /1000 -> grams per unit, /1000 -> kg per unit
PMS_TO_KG_PER_UNIT_DIVISOR: Final[Decimal] = Decimal(1_000_000)

PERCENT_DIVISOR: Final[Decimal] = Decimal(100)


# ============================================================================
# SEED PRODUCTS
# ============================================================================

SEED_CATEGORY_NAME: Final[str] = "Sementes"
SEED_UNIT_KIND: Final[str] = "Sementes"


class UnitKind(str, Enum):
    """
    Canonical unit kinds a product can be sold in.

    Values are the names used by product management; only SEEDS changes
    freight weight behaviour (PMS-based weight).
    """

    SEEDS = "Sementes"
    KILOGRAM = "Quilo"
    TONNE = "Tonelada"
    LITRE = "Litro"
    HECTARE = "Hectare"
    DOSE = "Dose"
    BOTTLE = "Frasco"
    EGGS = "Ovos"
    PARASITOID = "Parasitoide"


# Unit-of-measure symbol (upper-cased) -> unit kind
UNIT_SYMBOL_TO_KIND: Final[Dict[str, UnitKind]] = {
    "SEMENTES": UnitKind.SEEDS,
    "KG": UnitKind.KILOGRAM,
    "T": UnitKind.TONNE,
    "L": UnitKind.LITRE,
    "HA": UnitKind.HECTARE,
    "DOSE": UnitKind.DOSE,
    "FRASCO": UnitKind.BOTTLE,
    "OVOS": UnitKind.EGGS,
    "PARASITOIDE": UnitKind.PARASITOID,
}


class WeightCalculationMode(str, Enum):
    """
    How a product's freight weight is derived.

    Attributes:
        NOMINAL: Package weight, or PMS-based weight for seeds
        CUBIC: Volume x density, floored at package weight
    """

    NOMINAL = "nominal"
    CUBIC = "cubic"


# ============================================================================
# DISCOUNT TRACE NOTES
# ============================================================================

NOTE_NO_SEGMENTATION: Final[str] = "no segmentation for supplier"
NOTE_NO_GROUP: Final[str] = "no group for area {area}"
NOTE_NO_CATEGORY_DISCOUNT: Final[str] = "no discount configured for category"
NOTE_APPLIED: Final[str] = "applied {percent}% for area {area}"

WARNING_MULTIPLE_DEFAULTS: Final[str] = (
    "multiple default segmentations for supplier: {names}"
)
WARNING_OVERLAPPING_GROUPS: Final[str] = "overlapping groups match area {area}: {names}"


def unit_kind_from_symbol(symbol: str | None) -> UnitKind:
    """
    Map a unit-of-measure symbol onto its canonical unit kind.

    Unknown or empty symbols map to KILOGRAM.

    Examples:
        >>> unit_kind_from_symbol("sementes")
        <UnitKind.SEEDS: 'Sementes'>
        >>> unit_kind_from_symbol("cx")
        <UnitKind.KILOGRAM: 'Quilo'>
    """
    if not symbol:
        return UnitKind.KILOGRAM
    return UNIT_SYMBOL_TO_KIND.get(symbol.strip().upper(), UnitKind.KILOGRAM)
