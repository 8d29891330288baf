"""
ProductDimensionLookup Interface

Contract for the collaborator that supplies a product's freight-relevant
data: dimensions, category name, unit kind and weight calculation mode.
"""

from typing import Optional, Protocol

from ..value_objects.product_dimensions import ProductLogistics


class ProductDimensionLookupProtocol(Protocol):
    """Protocol for reading product logistics snapshots."""

    async def get_product_logistics(self, product_id: int) -> Optional[ProductLogistics]:
        """
        Return the logistics snapshot of a product.

        Returns:
            ProductLogistics, or None if the product does not exist
        """
        ...
