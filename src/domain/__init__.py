"""
Domain Layer - Core Business Logic

Pricing rules of the agricultural catalog: state/date price tables,
area-segmented discounts and freight weight. Framework-independent and
free of I/O.

Architecture:
    - Clean Architecture: Domain Layer is the center, no external dependencies
    - Domain-Driven Design: Entities, Value Objects, Services, Repositories
    - Dependency Inversion: Domain defines interfaces, Infrastructure implements

Subdomains:
    - pricing: Price, discount and freight weight resolution
    - shared: Cross-subdomain concepts (exception hierarchy)

Usage:
    >>> from src.domain import resolve_price, Segmentation, DomainException
    >>> from src.domain.pricing.services import SegmentedDiscountResolver
"""

# Pricing Subdomain
from .pricing import (
    CatalogItemPricing,
    CatalogPriceTable,
    DiscountResult,
    FreightCostCalculator,
    FreightWeightCalculator,
    PricingConfig,
    ProductDimensions,
    ProductLogistics,
    Segmentation,
    resolve_discount,
    resolve_freight_weight,
    resolve_price,
)

# Shared Domain
from .shared import DomainException

__all__ = [
    # Pricing Subdomain
    "CatalogPriceTable",
    "CatalogItemPricing",
    "Segmentation",
    "DiscountResult",
    "ProductDimensions",
    "ProductLogistics",
    "PricingConfig",
    "resolve_price",
    "resolve_discount",
    "resolve_freight_weight",
    "FreightWeightCalculator",
    "FreightCostCalculator",
    # Shared Domain
    "DomainException",
]
