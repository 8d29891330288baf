"""
ProductDimensions Value Object.

Physical dimensions and weights of a product as used for freight costing.
Lengths are in centimetres, weights in kilograms, density in kg/m³ and
PMS (thousand-unit weight) in grams per 1000 units.

This is an immutable Value Object following DDD principles.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from src.domain.pricing.constants import CUBIC_CM_PER_CUBIC_M, WeightCalculationMode
from src.domain.shared.exceptions import InvalidProductDimensionsError
from src.shared.utils.decimals import to_decimal

_REQUIRED_POSITIVE_FIELDS = (
    "height",
    "width",
    "length",
    "nominal_weight",
    "package_weight",
    "minimum_quantity",
)

_OPTIONAL_POSITIVE_FIELDS = (
    "thousand_unit_weight",
    "density_range_start",
    "density_range_end",
)


@dataclass(frozen=True)
class ProductDimensions:
    """
    Immutable Value Object describing a product's physical dimensions.

    All required numeric fields must be strictly positive. Numeric inputs are
    coerced to Decimal on construction (ints, numeric strings and floats via
    their shortest repr), so arithmetic on an instance is always exact.

    Attributes:
        height: Height in cm
        width: Width in cm
        length: Length in cm
        nominal_weight: Nominal product weight in kg
        package_weight: Physical package weight in kg
        minimum_quantity: Minimum quantity per package (units/seeds)
        package_kind: Package description ("Saco", "Tambor", ...)
        thousand_unit_weight: PMS, grams per 1000 units (seed products only)
        density_range_start: Lower density bound in kg/m³ (cubic weight factor)
        density_range_end: Upper density bound in kg/m³

    Examples:
        >>> dims = ProductDimensions(
        ...     height=50, width=50, length=50,
        ...     nominal_weight=1, package_weight=1,
        ...     minimum_quantity=1, package_kind="Saco",
        ...     density_range_start=200,
        ... )
        >>> dims.volume_m3()
        Decimal('0.125')
        >>> dims.cubic_weight()
        Decimal('25.000')
    """

    height: Decimal
    width: Decimal
    length: Decimal
    nominal_weight: Decimal
    package_weight: Decimal
    minimum_quantity: Decimal
    package_kind: str
    thousand_unit_weight: Optional[Decimal] = None
    density_range_start: Optional[Decimal] = None
    density_range_end: Optional[Decimal] = None

    def __post_init__(self) -> None:
        """
        Coerce numerics to Decimal and validate invariants.

        Raises:
            InvalidProductDimensionsError: If a required field is missing or
                not strictly positive, an optional field is present but not
                positive, the density range is inverted, or package_kind is blank
        """
        for name in _REQUIRED_POSITIVE_FIELDS:
            value = self._coerce(name, getattr(self, name))
            if value is None:
                raise InvalidProductDimensionsError(
                    f"{name} is required", field_name=name
                )
            if value <= 0:
                raise InvalidProductDimensionsError(
                    f"{name} must be greater than zero, got {value}", field_name=name
                )
            object.__setattr__(self, name, value)

        for name in _OPTIONAL_POSITIVE_FIELDS:
            value = self._coerce(name, getattr(self, name))
            if value is not None and value <= 0:
                raise InvalidProductDimensionsError(
                    f"{name} must be greater than zero when present, got {value}",
                    field_name=name,
                )
            object.__setattr__(self, name, value)

        if (
            self.density_range_start is not None
            and self.density_range_end is not None
            and self.density_range_end < self.density_range_start
        ):
            raise InvalidProductDimensionsError(
                f"density_range_end ({self.density_range_end}) cannot be lower than "
                f"density_range_start ({self.density_range_start})",
                field_name="density_range_end",
            )

        if not isinstance(self.package_kind, str) or not self.package_kind.strip():
            raise InvalidProductDimensionsError(
                "package_kind is required", field_name="package_kind"
            )
        object.__setattr__(self, "package_kind", self.package_kind.strip())

    @staticmethod
    def _coerce(name: str, value: Any) -> Optional[Decimal]:
        if value is None:
            return None
        try:
            return to_decimal(value)
        except (TypeError, ValueError) as e:
            raise InvalidProductDimensionsError(
                f"{name} must be a number, got {value!r}", field_name=name
            ) from e

    def volume_m3(self) -> Decimal:
        """Volume in cubic metres (height x width x length converted from cm³)."""
        return (self.height * self.width * self.length) / CUBIC_CM_PER_CUBIC_M

    def cubic_weight(self) -> Optional[Decimal]:
        """
        Cubic weight (volume x density_range_start) in kg.

        Returns:
            Cubic weight, or None when no density is configured
        """
        if self.density_range_start is None:
            return None
        return self.volume_m3() * self.density_range_start

    def has_density(self) -> bool:
        """True when a density factor is available for cubic weight."""
        return self.density_range_start is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary (decimals as strings) for serialization/logging."""
        return {
            "height": str(self.height),
            "width": str(self.width),
            "length": str(self.length),
            "nominal_weight": str(self.nominal_weight),
            "package_weight": str(self.package_weight),
            "minimum_quantity": str(self.minimum_quantity),
            "package_kind": self.package_kind,
            "thousand_unit_weight": (
                str(self.thousand_unit_weight)
                if self.thousand_unit_weight is not None
                else None
            ),
            "density_range_start": (
                str(self.density_range_start)
                if self.density_range_start is not None
                else None
            ),
            "density_range_end": (
                str(self.density_range_end)
                if self.density_range_end is not None
                else None
            ),
        }


@dataclass(frozen=True)
class ProductLogistics:
    """
    Freight-relevant snapshot of a product, as supplied by the product lookup.

    Attributes:
        product_id: Product identifier
        dimensions: Physical dimensions value object
        category_name: Name of the product category ("Sementes", "Fertilizantes", ...)
        unit_kind: Unit kind the product is counted in ("Sementes", "Quilo", ...)
        calculation_mode: How freight weight is derived for this product
    """

    product_id: int
    dimensions: ProductDimensions
    category_name: str
    unit_kind: str
    calculation_mode: WeightCalculationMode = WeightCalculationMode.NOMINAL
