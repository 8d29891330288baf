"""
FreightWeightCalculator - Domain Service

Resolves the weight (kg) freight is billed on for one unit of a product.

Business Rules:
    - CUBIC: volume x density_range_start, never below package_weight;
      package_weight when the product has no density
    - NOMINAL: seed products counted in seeds with a PMS get
      (PMS / 1_000_000) x minimum_quantity; everything else package_weight
    - Unknown modes fall back to package_weight
    - Exact decimals, no rounding
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from src.domain.pricing.constants import PMS_TO_KG_PER_UNIT_DIVISOR, WeightCalculationMode
from src.domain.pricing.pricing_config import PricingConfig
from src.domain.pricing.value_objects.product_dimensions import ProductDimensions
from src.domain.shared.exceptions import InvalidFreightInputError
from src.shared.utils.decimals import to_decimal

logger = logging.getLogger(__name__)


def coerce_calculation_mode(calculation_mode: Any) -> WeightCalculationMode | None:
    """Enum member for a mode or its string value, None when unsupported."""
    if isinstance(calculation_mode, WeightCalculationMode):
        return calculation_mode
    if isinstance(calculation_mode, str):
        try:
            return WeightCalculationMode(calculation_mode.strip().lower())
        except ValueError:
            return None
    return None


def validate_quantity(quantity: Any) -> Decimal:
    """
    Coerce a line quantity to Decimal and require it to be positive.

    Raises:
        InvalidFreightInputError: If quantity is not a number or not > 0
    """
    try:
        value = to_decimal(quantity)
    except (TypeError, ValueError) as e:
        raise InvalidFreightInputError(
            f"quantity must be a number, got {quantity!r}", field_name="quantity"
        ) from e
    if value <= 0:
        raise InvalidFreightInputError(
            f"quantity must be greater than zero, got {value}", field_name="quantity"
        )
    return value


@dataclass(frozen=True)
class FreightWeightCalculator:
    """
    Freight weight rules, parameterised by the seed category/unit names.

    Attributes:
        config: Pricing configuration (seed category name and unit kind)

    Examples:
        >>> calculator = FreightWeightCalculator()
        >>> dims = ProductDimensions(
        ...     height=30, width=40, length=60,
        ...     nominal_weight=20, package_weight=20,
        ...     minimum_quantity=60000, package_kind="Saco",
        ...     thousand_unit_weight=300,
        ... )
        >>> calculator.resolve_freight_weight(dims, "nominal", "Sementes", "Sementes")
        Decimal('18.0000')
    """

    config: PricingConfig = field(default_factory=PricingConfig.default)

    def is_seed_product(self, category_name: str, unit_kind: str) -> bool:
        """Seed rule needs both the seed category and the seed unit kind."""
        return (
            category_name == self.config.seed_category_name
            and unit_kind == self.config.seed_unit_kind
        )

    def nominal_weight(
        self, dims: ProductDimensions, category_name: str, unit_kind: str
    ) -> Decimal:
        """Per-unit weight under NOMINAL mode (PMS-based for seeds)."""
        if (
            self.is_seed_product(category_name, unit_kind)
            and dims.thousand_unit_weight is not None
        ):
            return (
                dims.thousand_unit_weight / PMS_TO_KG_PER_UNIT_DIVISOR
            ) * dims.minimum_quantity
        return dims.package_weight

    def cubic_weight(self, dims: ProductDimensions) -> Decimal:
        """Per-unit weight under CUBIC mode, floored at package weight."""
        candidate = dims.cubic_weight()
        if candidate is None:
            return dims.package_weight
        return max(candidate, dims.package_weight)

    def resolve_freight_weight(
        self,
        dims: ProductDimensions,
        calculation_mode: WeightCalculationMode | str,
        category_name: str,
        unit_kind: str,
    ) -> Decimal:
        """
        Resolve the per-unit freight weight in kilograms.

        Args:
            dims: Product dimensions snapshot
            calculation_mode: WeightCalculationMode or its string value
            category_name: Product category name
            unit_kind: Unit kind the product is counted in

        Returns:
            Weight in kg, exact decimal
        """
        mode = coerce_calculation_mode(calculation_mode)
        if mode is WeightCalculationMode.CUBIC:
            return self.cubic_weight(dims)
        if mode is WeightCalculationMode.NOMINAL:
            return self.nominal_weight(dims, category_name, unit_kind)

        logger.debug(f"Unsupported weight calculation mode {calculation_mode!r}")
        return dims.package_weight

    def freight_weight_for_quantity(
        self,
        dims: ProductDimensions,
        calculation_mode: WeightCalculationMode | str,
        category_name: str,
        unit_kind: str,
        quantity: Any,
    ) -> Decimal:
        """
        Freight weight of a line: per-unit weight x quantity.

        Raises:
            InvalidFreightInputError: If quantity is not positive
        """
        amount = validate_quantity(quantity)
        unit_weight = self.resolve_freight_weight(
            dims, calculation_mode, category_name, unit_kind
        )
        return unit_weight * amount


def resolve_freight_weight(
    dims: ProductDimensions,
    calculation_mode: WeightCalculationMode | str,
    category_name: str,
    unit_kind: str,
    config: PricingConfig | None = None,
) -> Decimal:
    """Module-level shortcut using the default (or given) configuration."""
    calculator = FreightWeightCalculator(config or PricingConfig.default())
    return calculator.resolve_freight_weight(dims, calculation_mode, category_name, unit_kind)


def freight_weight_for_quantity(
    dims: ProductDimensions,
    calculation_mode: WeightCalculationMode | str,
    category_name: str,
    unit_kind: str,
    quantity: Any,
    config: PricingConfig | None = None,
) -> Decimal:
    """Module-level shortcut for FreightWeightCalculator.freight_weight_for_quantity."""
    calculator = FreightWeightCalculator(config or PricingConfig.default())
    return calculator.freight_weight_for_quantity(
        dims, calculation_mode, category_name, unit_kind, quantity
    )
