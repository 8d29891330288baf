"""
Segmentation Validation Service

Responsibility:
    Id-based checks used by configuration-validation workflows: does an area
    fit a segmentation, which groups take it, and is a supplier's setup
    consistent (single default, no overlapping brackets).

Architecture Notes:
    - Part of Application Layer (Services)
    - Async: loads segmentations through SegmentationRepositoryProtocol
    - Delegates the bracket logic to the domain resolver helpers
"""

import logging
from collections import defaultdict
from typing import Any

from pydantic import BaseModel

from src.domain.pricing.entities.segmentation import Group, Segmentation
from src.domain.pricing.repositories import SegmentationRepositoryProtocol
from src.domain.pricing.services.segmented_discount_resolver import (
    area_fits_any_active_group,
    find_overlapping_groups,
    groups_applicable_for_area,
)
from src.domain.shared.exceptions import SegmentationNotFoundError

logger = logging.getLogger(__name__)


class GroupOverlap(BaseModel):
    """Two active groups of one segmentation whose brackets intersect."""

    segmentation_id: int
    segmentation_name: str
    first_group: str
    second_group: str

    model_config = {"frozen": True}

    def describe(self) -> str:
        return (
            f"{self.segmentation_name}: '{self.first_group}' overlaps "
            f"'{self.second_group}'"
        )


class SupplierAuditReport(BaseModel):
    """
    Configuration consistency of one supplier's segmentations.

    Attributes:
        supplier_id: Audited supplier
        default_segmentations: Names of active segmentations flagged default
        overlaps: Overlapping active group pairs
    """

    supplier_id: int
    default_segmentations: tuple[str, ...] = ()
    overlaps: tuple[GroupOverlap, ...] = ()

    model_config = {"frozen": True}

    @property
    def has_multiple_defaults(self) -> bool:
        return len(self.default_segmentations) > 1

    @property
    def is_consistent(self) -> bool:
        return not self.has_multiple_defaults and not self.overlaps

    def problems(self) -> list[str]:
        """Human-readable list of inconsistencies (empty when consistent)."""
        messages = []
        if self.has_multiple_defaults:
            names = ", ".join(self.default_segmentations)
            messages.append(f"multiple default segmentations: {names}")
        messages.extend(overlap.describe() for overlap in self.overlaps)
        return messages


def audit_segmentations(
    supplier_id: int, segmentations: list[Segmentation]
) -> SupplierAuditReport:
    """Audit already-loaded segmentations of one supplier (inactive ones ignored)."""
    active = [
        seg for seg in segmentations if seg.active and seg.supplier_id == supplier_id
    ]
    overlaps = [
        GroupOverlap(
            segmentation_id=seg.id,
            segmentation_name=seg.name,
            first_group=first.name,
            second_group=second.name,
        )
        for seg in active
        for first, second in find_overlapping_groups(seg)
    ]
    return SupplierAuditReport(
        supplier_id=supplier_id,
        default_segmentations=tuple(seg.name for seg in active if seg.is_default),
        overlaps=tuple(overlaps),
    )


class SegmentationValidationService:
    """
    Configuration checks over stored segmentations.

    Usage:
        service = SegmentationValidationService(repository)
        fits = await service.area_fits_any_active_group(3, Decimal("120"))
        report = await service.audit_supplier(1)
    """

    def __init__(self, repository: SegmentationRepositoryProtocol):
        self.repository = repository

    async def _get_segmentation(self, segmentation_id: int) -> Segmentation:
        segmentation = await self.repository.get_by_id(segmentation_id)
        if segmentation is None:
            raise SegmentationNotFoundError(
                f"Segmentation {segmentation_id} not found", entity_id=segmentation_id
            )
        return segmentation

    async def area_fits_any_active_group(
        self, segmentation_id: int, area: Any
    ) -> bool:
        """
        Check whether any active group of a segmentation takes the area.

        Raises:
            SegmentationNotFoundError: If the segmentation does not exist
            InvalidAreaError: If area is negative
        """
        segmentation = await self._get_segmentation(segmentation_id)
        return area_fits_any_active_group(segmentation, area)

    async def groups_applicable_for_area(
        self, segmentation_id: int, area: Any
    ) -> list[Group]:
        """
        All active groups of a segmentation that take the area.

        More than one result means overlapping brackets.

        Raises:
            SegmentationNotFoundError: If the segmentation does not exist
            InvalidAreaError: If area is negative
        """
        segmentation = await self._get_segmentation(segmentation_id)
        return groups_applicable_for_area(segmentation, area)

    async def audit_supplier(self, supplier_id: int) -> SupplierAuditReport:
        """Audit the active segmentations of one supplier."""
        segmentations = await self.repository.get_active_by_supplier(supplier_id)
        report = audit_segmentations(supplier_id, segmentations)
        if not report.is_consistent:
            logger.warning(
                f"Supplier {supplier_id} segmentation config is inconsistent: "
                f"{'; '.join(report.problems())}"
            )
        return report

    async def audit_all(self) -> list[SupplierAuditReport]:
        """Audit every supplier found in the repository, ordered by supplier id."""
        by_supplier: dict[int, list[Segmentation]] = defaultdict(list)
        for segmentation in await self.repository.get_all():
            by_supplier[segmentation.supplier_id].append(segmentation)

        reports = [
            audit_segmentations(supplier_id, by_supplier[supplier_id])
            for supplier_id in sorted(by_supplier)
        ]
        logger.info(
            f"Audited {len(reports)} suppliers, "
            f"{sum(1 for r in reports if not r.is_consistent)} inconsistent"
        )
        return reports


__all__ = [
    "GroupOverlap",
    "SupplierAuditReport",
    "SegmentationValidationService",
    "audit_segmentations",
]
