"""
DiscountResult Value Object

Outcome of a segmented discount resolution: the percentage to apply plus a
trace of which lookup levels resolved.

Responsibility:
    - Carry the discount percent (0-100)
    - Report which segmentation and group were selected, even on failure paths
    - Carry a human-readable note and configuration warnings for monitoring
    - Immutable value object

Architecture Notes:
    - Value Object (immutable, defined by values)
    - Uses Pydantic for validation
    - Part of Pricing subdomain
"""

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field


class DiscountResult(BaseModel):
    """
    Immutable value object describing a resolved (or unresolved) discount.

    Every failure path of the three-level lookup (segmentation -> group ->
    category discount) still yields a DiscountResult with percent 0, carrying
    the names of the levels that DID resolve. The net effect of a failure is
    always "no discount".

    Attributes:
        percent: Discount percentage (0-100), 0 when nothing applies
        segmentation_name: Selected segmentation, None if none was found
        group_name: Selected area group, None if none matched
        note: Human-readable explanation of the outcome
        discount_amount: Currency discount on base_value (only when a base was given)
        final_value: base_value after discount (only when a base was given)
        warnings: Configuration inconsistencies noticed while resolving
            (multiple default segmentations, overlapping groups)

    Examples:
        >>> result = DiscountResult.zero("no segmentation for supplier")
        >>> result.percent
        Decimal('0')
        >>> result.is_applied()
        False
    """

    percent: Decimal = Field(
        default=Decimal("0"), description="Discount percentage (0-100)", ge=0, le=100
    )
    segmentation_name: Optional[str] = Field(
        default=None, description="Name of the segmentation that was selected"
    )
    group_name: Optional[str] = Field(
        default=None, description="Name of the area group that was selected"
    )
    note: str = Field(..., description="Explanation of the resolution outcome")
    discount_amount: Optional[Decimal] = Field(
        default=None, description="Discount in currency on the supplied base value"
    )
    final_value: Optional[Decimal] = Field(
        default=None, description="Base value after applying the discount"
    )
    warnings: tuple[str, ...] = Field(
        default=(), description="Configuration inconsistencies detected"
    )

    model_config = {
        "frozen": True,  # Immutable value object
        "json_schema_extra": {
            "examples": [
                {
                    "percent": "5",
                    "segmentation_name": "Soja 2024",
                    "group_name": "Médio produtor",
                    "note": "applied 5% for area 120",
                    "discount_amount": None,
                    "final_value": None,
                    "warnings": [],
                }
            ]
        },
    }

    @classmethod
    def zero(
        cls,
        note: str,
        segmentation_name: Optional[str] = None,
        group_name: Optional[str] = None,
        base_value: Optional[Decimal] = None,
        warnings: tuple[str, ...] = (),
    ) -> "DiscountResult":
        """
        Factory for a "no discount" outcome.

        When base_value is given, discount_amount is 0 and final_value equals
        the base value unchanged.
        """
        return cls(
            percent=Decimal("0"),
            segmentation_name=segmentation_name,
            group_name=group_name,
            note=note,
            discount_amount=Decimal("0") if base_value is not None else None,
            final_value=base_value,
            warnings=warnings,
        )

    def is_applied(self) -> bool:
        """True when a positive discount percentage was resolved."""
        return self.percent > 0

    def has_warnings(self) -> bool:
        """True when configuration inconsistencies were detected."""
        return len(self.warnings) > 0

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary representation (decimals as strings).

        Useful for logging, diagnostics and persistence by callers.
        """
        return {
            "percent": str(self.percent),
            "segmentation_name": self.segmentation_name,
            "group_name": self.group_name,
            "note": self.note,
            "discount_amount": (
                str(self.discount_amount) if self.discount_amount is not None else None
            ),
            "final_value": str(self.final_value) if self.final_value is not None else None,
            "warnings": list(self.warnings),
        }
