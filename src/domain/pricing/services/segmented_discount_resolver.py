"""
SegmentedDiscountResolver - Domain Service

Resolves the volume discount a producer gets on a product category from the
supplier's segmentation configuration and the producer's cultivated area.

Three-level lookup, each level failing independently:
    1. Segmentation: first active default of the supplier, else first active
    2. Group: first active group whose bracket [area_min, area_max) holds the
       area, in ascending (area_min, id) order
    3. Category discount: the group's active discount for the category

Every failure yields percent 0 and still names the levels that resolved.
Configuration inconsistencies (several defaults, overlapping brackets) are
resolved by the order above and reported in DiscountResult.warnings.

Architecture Notes:
    - Pure function over a pre-fetched list of segmentations (no repository)
    - Never raises for configuration problems; only a negative area
      (caller bug) raises InvalidAreaError
"""

import logging
from decimal import Decimal
from typing import Any, Optional, Sequence

from src.domain.pricing.constants import (
    NOTE_APPLIED,
    NOTE_NO_CATEGORY_DISCOUNT,
    NOTE_NO_GROUP,
    NOTE_NO_SEGMENTATION,
    PERCENT_DIVISOR,
    WARNING_MULTIPLE_DEFAULTS,
    WARNING_OVERLAPPING_GROUPS,
)
from src.domain.pricing.entities.segmentation import Group, Segmentation
from src.domain.pricing.value_objects.discount_result import DiscountResult
from src.domain.shared.exceptions import InvalidAreaError, InvalidPriceInputError
from src.shared.utils.decimals import to_decimal

logger = logging.getLogger(__name__)


def _validate_area(area: Any) -> Decimal:
    try:
        value = to_decimal(area)
    except (TypeError, ValueError) as e:
        raise InvalidAreaError(f"area must be a number, got {area!r}", field_name="area") from e
    if value < 0:
        raise InvalidAreaError(f"area cannot be negative, got {value}", field_name="area")
    return value


def _validate_base_value(base_value: Any) -> Optional[Decimal]:
    if base_value is None:
        return None
    try:
        return to_decimal(base_value)
    except (TypeError, ValueError) as e:
        raise InvalidPriceInputError(
            f"base_value must be a number, got {base_value!r}", field_name="base_value"
        ) from e


# ============================================================================
# GROUP HELPERS
# ============================================================================


def groups_applicable_for_area(segmentation: Segmentation, area: Any) -> list[Group]:
    """
    All active groups of a segmentation whose bracket holds the area.

    Not filtered by the tie-break rule: more than one result means the
    brackets overlap. Ordered by ascending area_min, then group id.

    Raises:
        InvalidAreaError: If area is negative or not a number
    """
    value = _validate_area(area)
    return [group for group in segmentation.active_groups() if group.area_fits(value)]


def area_fits_any_active_group(segmentation: Segmentation, area: Any) -> bool:
    """True when at least one active group of the segmentation holds the area."""
    return len(groups_applicable_for_area(segmentation, area)) > 0


def find_overlapping_groups(segmentation: Segmentation) -> list[tuple[Group, Group]]:
    """
    Pairs of active groups whose brackets intersect.

    Pairs are reported in tie-break order, the winning group first.
    """
    groups = segmentation.active_groups()
    overlapping = []
    for index, group in enumerate(groups):
        for other in groups[index + 1 :]:
            if group.overlaps(other):
                overlapping.append((group, other))
    return overlapping


# ============================================================================
# SEGMENTATION SELECTION
# ============================================================================


def select_segmentation(
    supplier_id: int, segmentations: Sequence[Segmentation]
) -> tuple[Optional[Segmentation], list[str]]:
    """
    Pick the segmentation that applies to a supplier.

    Only active segmentations of the given supplier are considered; the
    first flagged default wins, otherwise the first active one.

    Returns:
        Tuple (selected segmentation or None, warnings)
    """
    candidates = [
        seg for seg in segmentations if seg.active and seg.supplier_id == supplier_id
    ]
    if not candidates:
        return None, []

    defaults = [seg for seg in candidates if seg.is_default]
    warnings: list[str] = []
    if len(defaults) > 1:
        names = ", ".join(seg.name for seg in defaults)
        warnings.append(WARNING_MULTIPLE_DEFAULTS.format(names=names))
        logger.debug(f"Supplier {supplier_id} has {len(defaults)} default segmentations")

    return (defaults[0] if defaults else candidates[0]), warnings


# ============================================================================
# RESOLUTION
# ============================================================================


def resolve_discount(
    supplier_id: int,
    producer_id: int,
    category_id: int,
    area: Any,
    segmentations: Sequence[Segmentation],
    base_value: Any = None,
) -> DiscountResult:
    """
    Resolve the discount a producer gets on a product category.

    Args:
        supplier_id: Supplier whose segmentation policy applies
        producer_id: Producer being quoted (no producer-specific rules yet)
        category_id: Product category of the line
        area: Producer's cultivated area in hectares (>= 0)
        segmentations: Pre-fetched segmentations of the supplier
        base_value: Optional value to apply the discount to

    Returns:
        DiscountResult; percent 0 with a note on every failure path

    Raises:
        InvalidAreaError: If area is negative or not a number
        InvalidPriceInputError: If base_value is given but not a number

    Examples:
        >>> resolve_discount(1, 10, 7, Decimal("120"), []).note
        'no segmentation for supplier'
    """
    area_value = _validate_area(area)
    base = _validate_base_value(base_value)

    segmentation, warnings = select_segmentation(supplier_id, segmentations)
    if segmentation is None:
        logger.debug(f"No active segmentation for supplier {supplier_id}")
        return DiscountResult.zero(NOTE_NO_SEGMENTATION, base_value=base)

    matches = groups_applicable_for_area(segmentation, area_value)
    if not matches:
        return DiscountResult.zero(
            NOTE_NO_GROUP.format(area=area_value),
            segmentation_name=segmentation.name,
            base_value=base,
            warnings=tuple(warnings),
        )
    if len(matches) > 1:
        names = ", ".join(group.name for group in matches)
        warnings.append(WARNING_OVERLAPPING_GROUPS.format(area=area_value, names=names))
        logger.debug(
            f"Segmentation {segmentation.id} has {len(matches)} groups for area "
            f"{area_value}, using {matches[0].name!r}"
        )
    group = matches[0]

    discount = group.discount_for_category(category_id)
    if discount is None or not discount.active:
        return DiscountResult.zero(
            NOTE_NO_CATEGORY_DISCOUNT,
            segmentation_name=segmentation.name,
            group_name=group.name,
            base_value=base,
            warnings=tuple(warnings),
        )

    logger.debug(
        f"Producer {producer_id} gets {discount.percent}% on category {category_id} "
        f"from group {group.name!r}"
    )
    discount_amount = None
    final_value = None
    if base is not None:
        discount_amount = discount.discount_amount(base)
        final_value = discount.apply_to(base)

    return DiscountResult(
        percent=discount.percent,
        segmentation_name=segmentation.name,
        group_name=group.name,
        note=NOTE_APPLIED.format(percent=discount.percent, area=area_value),
        discount_amount=discount_amount,
        final_value=final_value,
        warnings=tuple(warnings),
    )


def apply_discount(value: Decimal, percent: Decimal) -> Decimal:
    """value x (1 - percent/100), exact."""
    return value * (Decimal(1) - percent / PERCENT_DIVISOR)


class SegmentedDiscountResolver:
    """
    Object form of the discount resolution functions, for injection.
    """

    def resolve(
        self,
        supplier_id: int,
        producer_id: int,
        category_id: int,
        area: Any,
        segmentations: Sequence[Segmentation],
        base_value: Any = None,
    ) -> DiscountResult:
        return resolve_discount(
            supplier_id, producer_id, category_id, area, segmentations, base_value
        )

    def area_fits_any_active_group(self, segmentation: Segmentation, area: Any) -> bool:
        return area_fits_any_active_group(segmentation, area)

    def groups_applicable_for_area(
        self, segmentation: Segmentation, area: Any
    ) -> list[Group]:
        return groups_applicable_for_area(segmentation, area)

    def find_overlapping_groups(
        self, segmentation: Segmentation
    ) -> list[tuple[Group, Group]]:
        return find_overlapping_groups(segmentation)
