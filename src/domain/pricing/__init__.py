"""
Pricing Subdomain

Price, discount and freight weight resolution for catalog order lines.

Exports the entities, value objects, services and repository interfaces
most callers need; import from the submodules for everything else.
"""

from .constants import UnitKind, WeightCalculationMode, unit_kind_from_symbol
from .entities import CategoryDiscount, Group, Segmentation
from .pricing_config import PricingConfig
from .repositories import (
    CatalogLookupProtocol,
    ProductDimensionLookupProtocol,
    SegmentationRepositoryProtocol,
)
from .services import (
    FreightCostCalculator,
    FreightWeightCalculator,
    resolve_discount,
    resolve_freight_weight,
    resolve_price,
)
from .value_objects import (
    CatalogItemPricing,
    CatalogPriceTable,
    DiscountResult,
    ProductDimensions,
    ProductLogistics,
)

__all__ = [
    "UnitKind",
    "WeightCalculationMode",
    "unit_kind_from_symbol",
    "PricingConfig",
    "Segmentation",
    "Group",
    "CategoryDiscount",
    "CatalogPriceTable",
    "CatalogItemPricing",
    "ProductDimensions",
    "ProductLogistics",
    "DiscountResult",
    "resolve_price",
    "resolve_discount",
    "resolve_freight_weight",
    "FreightWeightCalculator",
    "FreightCostCalculator",
    "CatalogLookupProtocol",
    "SegmentationRepositoryProtocol",
    "ProductDimensionLookupProtocol",
]
