"""
Pricing Repository Interfaces Module

Collaborator contracts consumed by the pricing use cases.
Defined in Domain Layer, implemented in Infrastructure Layer.

This module exports:
    - CatalogLookupProtocol: Catalog item price table + base price
    - SegmentationRepositoryProtocol: Supplier segmentations
    - ProductDimensionLookupProtocol: Product dimensions, category and unit kind
"""

from .catalog_lookup import CatalogLookupProtocol
from .product_lookup import ProductDimensionLookupProtocol
from .segmentation_repository import SegmentationRepositoryProtocol

__all__ = [
    "CatalogLookupProtocol",
    "SegmentationRepositoryProtocol",
    "ProductDimensionLookupProtocol",
]
