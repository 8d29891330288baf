"""
Segmentation Entities.

A supplier's volume-discount policy is a three-level hierarchy:

    Segmentation (per supplier, optionally the default)
      └── Group (area bracket [area_min, area_max) in hectares)
            └── CategoryDiscount (percent per product category)

These entities are created and edited by segmentation management outside
this engine. Here they are read-only snapshots: every entity is frozen and
child collections are tuples, so a loaded configuration can be shared
between threads without copying.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from src.domain.pricing.constants import PERCENT_DIVISOR
from src.domain.shared.exceptions import (
    InvalidDiscountPercentError,
    InvalidSegmentationConfigError,
)
from src.shared.utils.decimals import to_decimal, to_optional_decimal

_HUNDRED = Decimal(100)


def _require_positive_id(value: Any, field_name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidSegmentationConfigError(
            f"{field_name} must be a positive integer, got {value!r}",
            field_name=field_name,
        )


def _require_name(value: Any, field_name: str = "name") -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidSegmentationConfigError(
            f"{field_name} is required", field_name=field_name
        )
    return value.strip()


def _coerce_decimal(value: Any, field_name: str) -> Optional[Decimal]:
    try:
        return to_optional_decimal(value)
    except (TypeError, ValueError) as e:
        raise InvalidSegmentationConfigError(
            f"{field_name} must be a number, got {value!r}", field_name=field_name
        ) from e


@dataclass(frozen=True)
class CategoryDiscount:
    """
    Discount percentage for one product category within one area group.

    At most one CategoryDiscount is expected per (group_id, category_id);
    uniqueness is upheld by segmentation management.

    Attributes:
        id: Identifier
        group_id: Owning group
        category_id: Product category the discount applies to
        percent: Discount percentage in [0, 100]
        active: Inactive discounts are treated as "not configured"
        notes: Free-text remarks (optional)

    Examples:
        >>> discount = CategoryDiscount(id=1, group_id=1, category_id=7, percent=Decimal("5"))
        >>> discount.discount_amount(Decimal("200"))
        Decimal('10')
        >>> discount.apply_to(Decimal("200"))
        Decimal('190')
    """

    id: int
    group_id: int
    category_id: int
    percent: Decimal
    active: bool = True
    notes: Optional[str] = None

    def __post_init__(self) -> None:
        """
        Validate identifiers and percent range.

        Raises:
            InvalidSegmentationConfigError: If an id is not a positive integer
            InvalidDiscountPercentError: If percent is not a number in [0, 100]
        """
        _require_positive_id(self.id, "id")
        _require_positive_id(self.group_id, "group_id")
        _require_positive_id(self.category_id, "category_id")

        try:
            percent = to_decimal(self.percent)
        except (TypeError, ValueError) as e:
            raise InvalidDiscountPercentError(
                f"percent must be a number, got {self.percent!r}", field_name="percent"
            ) from e
        if percent < 0 or percent > _HUNDRED:
            raise InvalidDiscountPercentError(
                f"percent must be between 0 and 100, got {percent}",
                field_name="percent",
            )
        object.__setattr__(self, "percent", percent)

        if self.notes is not None:
            object.__setattr__(self, "notes", self.notes.strip())

    def discount_amount(self, base_value: Decimal) -> Decimal:
        """
        Currency discount on base_value.

        Returns 0 when the discount is inactive or base_value is not positive.
        """
        if not self.active or base_value <= 0:
            return Decimal("0")
        return base_value * (self.percent / PERCENT_DIVISOR)

    def apply_to(self, base_value: Decimal) -> Decimal:
        """base_value minus the discount (unchanged when inactive or not positive)."""
        if not self.active or base_value <= 0:
            return base_value
        return base_value - self.discount_amount(base_value)

    def to_dict(self) -> dict[str, Any]:
        """Serialize entity to a JSON-compatible dictionary."""
        return {
            "id": self.id,
            "group_id": self.group_id,
            "category_id": self.category_id,
            "percent": str(self.percent),
            "active": self.active,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CategoryDiscount":
        """Deserialize entity from dictionary (to_dict() output or a JSON snapshot)."""
        return cls(
            id=data["id"],
            group_id=data["group_id"],
            category_id=data["category_id"],
            percent=data["percent"],
            active=data.get("active", True),
            notes=data.get("notes"),
        )


@dataclass(frozen=True)
class Group:
    """
    Area bracket within a segmentation.

    The bracket is half-open: an area fits when
    ``area_min <= area`` and (``area_max`` is None or ``area < area_max``).
    So a group [0, 50) takes 49.999 but not 50, and [50, None) takes 50
    and anything above.

    Attributes:
        id: Identifier (second key of the overlap tie-break order)
        segmentation_id: Owning segmentation
        name: Group name ("Pequeno produtor", ...)
        area_min: Lower bound in hectares (inclusive, >= 0)
        area_max: Upper bound in hectares (exclusive), None = open-ended
        active: Inactive groups never match
        category_discounts: Discounts per product category
        description: Free text (optional)
    """

    id: int
    segmentation_id: int
    name: str
    area_min: Decimal
    area_max: Optional[Decimal] = None
    active: bool = True
    category_discounts: tuple[CategoryDiscount, ...] = ()
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """
        Validate identifiers, name and bracket bounds.

        Raises:
            InvalidSegmentationConfigError: If name is blank, area_min is
                negative, or area_max is lower than area_min
        """
        _require_positive_id(self.id, "id")
        _require_positive_id(self.segmentation_id, "segmentation_id")
        object.__setattr__(self, "name", _require_name(self.name))

        area_min = _coerce_decimal(self.area_min, "area_min")
        if area_min is None or area_min < 0:
            raise InvalidSegmentationConfigError(
                f"area_min cannot be negative, got {self.area_min!r}",
                field_name="area_min",
            )
        area_max = _coerce_decimal(self.area_max, "area_max")
        if area_max is not None and area_max < area_min:
            raise InvalidSegmentationConfigError(
                f"area_max ({area_max}) must be greater than area_min ({area_min})",
                field_name="area_max",
            )
        object.__setattr__(self, "area_min", area_min)
        object.__setattr__(self, "area_max", area_max)
        object.__setattr__(self, "category_discounts", tuple(self.category_discounts))

    def area_fits(self, area: Decimal) -> bool:
        """
        Check whether an area falls inside this group's bracket.

        Inactive groups never fit.

        Examples:
            >>> group = Group(id=1, segmentation_id=1, name="Pequeno", area_min=0, area_max=50)
            >>> group.area_fits(Decimal("49.999"))
            True
            >>> group.area_fits(Decimal("50"))
            False
        """
        if not self.active:
            return False
        if area < self.area_min:
            return False
        return self.area_max is None or area < self.area_max

    def overlaps(self, other: "Group") -> bool:
        """True when both brackets share at least one area value."""
        self_below_other = self.area_max is not None and self.area_max <= other.area_min
        other_below_self = other.area_max is not None and other.area_max <= self.area_min
        return not (self_below_other or other_below_self)

    def discount_for_category(self, category_id: int) -> Optional[CategoryDiscount]:
        """
        Return the first CategoryDiscount configured for category_id.

        Active flag is NOT checked here; callers decide how inactive
        discounts are reported.
        """
        for discount in self.category_discounts:
            if discount.category_id == category_id:
                return discount
        return None

    def sort_key(self) -> tuple[Decimal, int]:
        """Deterministic order for overlap tie-breaks: ascending area_min, then id."""
        return (self.area_min, self.id)

    def to_dict(self) -> dict[str, Any]:
        """Serialize entity (with nested discounts) to a JSON-compatible dictionary."""
        return {
            "id": self.id,
            "segmentation_id": self.segmentation_id,
            "name": self.name,
            "area_min": str(self.area_min),
            "area_max": str(self.area_max) if self.area_max is not None else None,
            "active": self.active,
            "description": self.description,
            "category_discounts": [d.to_dict() for d in self.category_discounts],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Group":
        """Deserialize entity (with nested discounts) from dictionary."""
        return cls(
            id=data["id"],
            segmentation_id=data["segmentation_id"],
            name=data["name"],
            area_min=data["area_min"],
            area_max=data.get("area_max"),
            active=data.get("active", True),
            description=data.get("description"),
            category_discounts=tuple(
                CategoryDiscount.from_dict(item)
                for item in data.get("category_discounts", [])
            ),
        )


@dataclass(frozen=True)
class Segmentation:
    """
    Supplier-owned discount policy container.

    At most one active segmentation per supplier is expected to be the
    default. Resolution tolerates zero or several defaults (first wins).

    Attributes:
        id: Identifier
        supplier_id: Owning supplier
        name: Segmentation name
        active: Inactive segmentations are ignored by resolution
        is_default: Preferred segmentation for the supplier
        groups: Area groups of this segmentation
        description: Free text (optional)
    """

    id: int
    supplier_id: int
    name: str
    active: bool = True
    is_default: bool = False
    groups: tuple[Group, ...] = ()
    description: Optional[str] = None

    def __post_init__(self) -> None:
        """
        Validate identifiers and name.

        Raises:
            InvalidSegmentationConfigError: If an id is not positive or name is blank
        """
        _require_positive_id(self.id, "id")
        _require_positive_id(self.supplier_id, "supplier_id")
        object.__setattr__(self, "name", _require_name(self.name))
        object.__setattr__(self, "groups", tuple(self.groups))

    def active_groups(self) -> list[Group]:
        """Active groups in deterministic tie-break order (area_min, then id)."""
        return sorted(
            (group for group in self.groups if group.active), key=Group.sort_key
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize entity (with nested groups) to a JSON-compatible dictionary."""
        return {
            "id": self.id,
            "supplier_id": self.supplier_id,
            "name": self.name,
            "active": self.active,
            "is_default": self.is_default,
            "description": self.description,
            "groups": [group.to_dict() for group in self.groups],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Segmentation":
        """
        Deserialize entity (with nested groups and discounts) from dictionary.

        Raises:
            KeyError: If a required key is missing
            InvalidSegmentationConfigError: If a value breaks entity invariants
        """
        return cls(
            id=data["id"],
            supplier_id=data["supplier_id"],
            name=data["name"],
            active=data.get("active", True),
            is_default=data.get("is_default", False),
            description=data.get("description"),
            groups=tuple(Group.from_dict(item) for item in data.get("groups", [])),
        )
