"""
In-Memory Segmentation Repository

Implementation of SegmentationRepositoryProtocol over a loaded snapshot.
Used by tests, scripts and local tooling; production reads come from the
management database behind the same protocol.
"""

import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from src.domain.pricing.entities.segmentation import Segmentation
from src.infrastructure.persistence.repositories.snapshot import (
    read_json_snapshot,
    snapshot_records,
)

logger = logging.getLogger(__name__)

SNAPSHOT_KEY = "segmentations"


class InMemorySegmentationRepository:
    """
    Read-only segmentation store keeping snapshot order.

    Examples:
        >>> repo = InMemorySegmentationRepository.from_json_file("segmentations.json")
        >>> segmentations = await repo.get_active_by_supplier(1)
    """

    def __init__(self, segmentations: Iterable[Segmentation] = ()) -> None:
        self._segmentations: list[Segmentation] = list(segmentations)

    @classmethod
    def from_dict(cls, data: Any) -> "InMemorySegmentationRepository":
        """
        Build from a decoded snapshot.

        Raises:
            ValueError: If the snapshot has no segmentation list
            KeyError: If a record lacks a required key
            InvalidSegmentationConfigError: If a record breaks entity invariants
        """
        records = snapshot_records(data, SNAPSHOT_KEY)
        segmentations = [Segmentation.from_dict(record) for record in records]
        logger.info(f"Loaded {len(segmentations)} segmentations")
        return cls(segmentations)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "InMemorySegmentationRepository":
        """Build from a JSON snapshot file (see from_dict() for errors)."""
        return cls.from_dict(read_json_snapshot(path))

    async def get_active_by_supplier(self, supplier_id: int) -> list[Segmentation]:
        return [
            seg
            for seg in self._segmentations
            if seg.supplier_id == supplier_id and seg.active
        ]

    async def get_by_id(self, segmentation_id: int) -> Optional[Segmentation]:
        for segmentation in self._segmentations:
            if segmentation.id == segmentation_id:
                return segmentation
        return None

    async def get_all(self) -> list[Segmentation]:
        return list(self._segmentations)
