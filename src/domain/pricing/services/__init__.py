"""
Pricing Domain Services Module

Pure, synchronous resolvers over already-loaded data.

This module exports:
    - resolve_price / resolve_price_trace / CatalogPriceResolver
    - resolve_discount / SegmentedDiscountResolver and the group helpers
    - resolve_freight_weight / freight_weight_for_quantity / FreightWeightCalculator
    - FreightCostCalculator
"""

from .catalog_price_resolver import (
    CatalogPriceResolver,
    PriceResolution,
    resolve_price,
    resolve_price_trace,
)
from .freight_cost_calculator import FreightCostCalculator
from .freight_weight_calculator import (
    FreightWeightCalculator,
    freight_weight_for_quantity,
    resolve_freight_weight,
)
from .segmented_discount_resolver import (
    SegmentedDiscountResolver,
    apply_discount,
    area_fits_any_active_group,
    find_overlapping_groups,
    groups_applicable_for_area,
    resolve_discount,
    select_segmentation,
)

__all__ = [
    "CatalogPriceResolver",
    "PriceResolution",
    "resolve_price",
    "resolve_price_trace",
    "SegmentedDiscountResolver",
    "resolve_discount",
    "select_segmentation",
    "apply_discount",
    "area_fits_any_active_group",
    "groups_applicable_for_area",
    "find_overlapping_groups",
    "FreightWeightCalculator",
    "resolve_freight_weight",
    "freight_weight_for_quantity",
    "FreightCostCalculator",
]
