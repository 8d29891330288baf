"""
CatalogLookup Interface

Contract for the collaborator that supplies the price table of a catalog
item together with its base-price fallback.

Architecture Notes:
    - Protocol-based interface (structural typing)
    - Async methods (the catalog lives behind a database or cache)
    - Implemented in Infrastructure Layer
"""

from typing import Optional, Protocol

from ..value_objects.price_table import CatalogItemPricing


class CatalogLookupProtocol(Protocol):
    """
    Protocol for reading catalog item pricing.

    Usage:
        >>> pricing = await catalog_lookup.get_catalog_pricing(42)
        >>> if pricing is None:
        ...     raise CatalogItemNotFoundError("...", entity_id=42)
    """

    async def get_catalog_pricing(
        self, catalog_item_id: int
    ) -> Optional[CatalogItemPricing]:
        """
        Return the parsed price table and base price of a catalog item.

        Args:
            catalog_item_id: Catalog item identifier

        Returns:
            CatalogItemPricing, or None if the item does not exist
        """
        ...
