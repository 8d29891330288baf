"""
Pricing Value Objects.

This module exports all Value Objects used in the pricing domain.
Value Objects are immutable objects that represent domain concepts by their value,
not by their identity.

Available Value Objects:
    - ConstantPrice / DatedPrice / DatedPriceList: Price expressions (tagged variant)
    - CatalogPriceTable: Parsed state/default price structure of a catalog item
    - CatalogItemPricing: Price table + base price supplied by the catalog lookup
    - ProductDimensions: Physical dimensions and weights of a product
    - ProductLogistics: Dimensions + category + unit kind supplied by the product lookup
    - DiscountResult: Segmented discount outcome with resolution trace
    - FreightCostResult / ConsolidatedFreightResult: Freight costing outcomes
"""

from src.domain.pricing.value_objects.price_table import (
    CatalogItemPricing,
    CatalogPriceTable,
    ConstantPrice,
    DatedPrice,
    DatedPriceList,
    PriceExpression,
    parse_price_expression,
)
from src.domain.pricing.value_objects.product_dimensions import (
    ProductDimensions,
    ProductLogistics,
)
from src.domain.pricing.value_objects.discount_result import DiscountResult
from src.domain.pricing.value_objects.freight_cost import (
    ConsolidatedFreightResult,
    FreightCostResult,
)

__all__ = [
    "ConstantPrice",
    "DatedPrice",
    "DatedPriceList",
    "PriceExpression",
    "parse_price_expression",
    "CatalogPriceTable",
    "CatalogItemPricing",
    "ProductDimensions",
    "ProductLogistics",
    "DiscountResult",
    "FreightCostResult",
    "ConsolidatedFreightResult",
]
