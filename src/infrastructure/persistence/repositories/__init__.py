"""
Repository Implementations Module

Concrete implementations of Domain repository interfaces.

Exports:
    - InMemorySegmentationRepository: SegmentationRepositoryProtocol
    - InMemoryCatalogLookup: CatalogLookupProtocol
    - InMemoryProductLookup: ProductDimensionLookupProtocol
"""

from .catalog_repository import InMemoryCatalogLookup
from .product_repository import InMemoryProductLookup
from .segmentation_repository import InMemorySegmentationRepository

__all__ = [
    "InMemorySegmentationRepository",
    "InMemoryCatalogLookup",
    "InMemoryProductLookup",
]
