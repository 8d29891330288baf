"""
SegmentationRepository Interface

Contract for reading supplier segmentations with their nested groups and
category discounts. Writes belong to segmentation management.
"""

from typing import Optional, Protocol

from ..entities.segmentation import Segmentation


class SegmentationRepositoryProtocol(Protocol):
    """
    Protocol for read access to segmentations.

    Implementations return fully materialised aggregates (groups and
    category discounts included) so resolvers never call back into storage.
    """

    async def get_active_by_supplier(self, supplier_id: int) -> list[Segmentation]:
        """
        Return the supplier's active segmentations, in storage order.

        Returns:
            List of Segmentation (empty if the supplier has none)
        """
        ...

    async def get_by_id(self, segmentation_id: int) -> Optional[Segmentation]:
        """Return a segmentation by id (active or not), or None if not found."""
        ...

    async def get_all(self) -> list[Segmentation]:
        """Return every stored segmentation (used by configuration audits)."""
        ...
