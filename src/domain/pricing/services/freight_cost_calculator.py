"""
FreightCostCalculator - Domain Service

Prices the freight of an order line, or of several lines shipped together,
from the chargeable weight resolved by FreightWeightCalculator.

Business Rules:
    - freight_value = chargeable_weight x distance_km x rate_per_kg_km
    - A single line pays at least minimum_charge
    - Consolidated shipments compute each line WITHOUT the minimum, sum the
      values, and apply the minimum once to the total
    - quantity, distance and item list must be present and positive
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional, Sequence

from src.domain.pricing.constants import WeightCalculationMode
from src.domain.pricing.pricing_config import PricingConfig
from src.domain.pricing.services.freight_weight_calculator import (
    FreightWeightCalculator,
    coerce_calculation_mode,
    validate_quantity,
)
from src.domain.pricing.value_objects.freight_cost import (
    ConsolidatedFreightResult,
    FreightCostResult,
)
from src.domain.pricing.value_objects.product_dimensions import (
    ProductDimensions,
    ProductLogistics,
)
from src.domain.shared.exceptions import InvalidFreightInputError
from src.shared.utils.decimals import to_decimal

logger = logging.getLogger(__name__)


def _positive_decimal(value: Any, field_name: str) -> Decimal:
    try:
        number = to_decimal(value)
    except (TypeError, ValueError) as e:
        raise InvalidFreightInputError(
            f"{field_name} must be a number, got {value!r}", field_name=field_name
        ) from e
    if number <= 0:
        raise InvalidFreightInputError(
            f"{field_name} must be greater than zero, got {number}", field_name=field_name
        )
    return number


def _non_negative_decimal(value: Any, field_name: str) -> Decimal:
    try:
        number = to_decimal(value)
    except (TypeError, ValueError) as e:
        raise InvalidFreightInputError(
            f"{field_name} must be a number, got {value!r}", field_name=field_name
        ) from e
    if number < 0:
        raise InvalidFreightInputError(
            f"{field_name} cannot be negative, got {number}", field_name=field_name
        )
    return number


@dataclass(frozen=True)
class FreightCostCalculator:
    """
    Freight costing for single lines and consolidated shipments.

    Rate and minimum charge default to the PricingConfig values and can be
    overridden per call.

    Attributes:
        config: Pricing configuration (rate, minimum charge, seed names)

    Examples:
        >>> calculator = FreightCostCalculator()
        >>> dims = ProductDimensions(
        ...     height=10, width=10, length=10,
        ...     nominal_weight=1, package_weight=1,
        ...     minimum_quantity=1, package_kind="Saco",
        ...     density_range_start=500,
        ... )
        >>> result = calculator.calculate(dims, "nominal", "Fertilizantes", "Quilo", 10, 100)
        >>> result.freight_value
        Decimal('50.00')
    """

    config: PricingConfig = field(default_factory=PricingConfig.default)

    @property
    def weight_calculator(self) -> FreightWeightCalculator:
        return FreightWeightCalculator(self.config)

    def calculate(
        self,
        dims: ProductDimensions,
        calculation_mode: WeightCalculationMode | str,
        category_name: str,
        unit_kind: str,
        quantity: Any,
        distance_km: Any,
        rate_per_kg_km: Optional[Decimal] = None,
        minimum_charge: Optional[Decimal] = None,
    ) -> FreightCostResult:
        """
        Price the freight of one product line.

        Args:
            dims: Product dimensions snapshot
            calculation_mode: Weight calculation mode of the product
            category_name: Product category name
            unit_kind: Unit kind the product is counted in
            quantity: Number of units (> 0)
            distance_km: Transport distance (> 0)
            rate_per_kg_km: Override of config.freight_rate_per_kg_km
            minimum_charge: Override of config.minimum_freight_charge

        Returns:
            FreightCostResult with weights, volume and freight value

        Raises:
            InvalidFreightInputError: If quantity or distance is not positive,
                or an override is negative
        """
        amount = validate_quantity(quantity)
        distance = _positive_decimal(distance_km, "distance_km")
        rate = (
            self.config.freight_rate_per_kg_km
            if rate_per_kg_km is None
            else _non_negative_decimal(rate_per_kg_km, "rate_per_kg_km")
        )
        minimum = (
            self.config.minimum_freight_charge
            if minimum_charge is None
            else _non_negative_decimal(minimum_charge, "minimum_charge")
        )

        weights = self.weight_calculator
        total_weight = weights.nominal_weight(dims, category_name, unit_kind) * amount
        total_volume = dims.volume_m3() * amount
        total_cubic_weight = None
        if dims.density_range_start is not None:
            total_cubic_weight = total_volume * dims.density_range_start

        chargeable_weight = (
            weights.resolve_freight_weight(dims, calculation_mode, category_name, unit_kind)
            * amount
        )
        computed_value = chargeable_weight * distance * rate
        freight_value = max(computed_value, minimum)

        logger.debug(
            f"Freight for {amount} x {category_name!r}: {chargeable_weight} kg over "
            f"{distance} km = {computed_value} (charged {freight_value})"
        )

        return FreightCostResult(
            total_weight=total_weight,
            total_volume=total_volume,
            total_cubic_weight=total_cubic_weight,
            chargeable_weight=chargeable_weight,
            freight_value=freight_value,
            distance_km=distance,
            calculation_mode=coerce_calculation_mode(calculation_mode),
        )

    def calculate_for_product(
        self,
        logistics: ProductLogistics,
        quantity: Any,
        distance_km: Any,
        rate_per_kg_km: Optional[Decimal] = None,
        minimum_charge: Optional[Decimal] = None,
    ) -> FreightCostResult:
        """calculate() driven by a ProductLogistics snapshot."""
        return self.calculate(
            logistics.dimensions,
            logistics.calculation_mode,
            logistics.category_name,
            logistics.unit_kind,
            quantity,
            distance_km,
            rate_per_kg_km,
            minimum_charge,
        )

    def calculate_consolidated(
        self,
        items: Sequence[tuple[ProductLogistics, Any]],
        distance_km: Any,
        rate_per_kg_km: Optional[Decimal] = None,
        minimum_charge: Optional[Decimal] = None,
    ) -> ConsolidatedFreightResult:
        """
        Price several lines shipped together.

        Args:
            items: (product logistics, quantity) pairs
            distance_km: Transport distance (> 0)
            rate_per_kg_km: Override of config.freight_rate_per_kg_km
            minimum_charge: Override of config.minimum_freight_charge

        Returns:
            ConsolidatedFreightResult; cubic total is None when no line has density

        Raises:
            InvalidFreightInputError: If items is empty, or any line input is invalid
        """
        if not items:
            raise InvalidFreightInputError("items cannot be empty", field_name="items")

        minimum = (
            self.config.minimum_freight_charge
            if minimum_charge is None
            else _non_negative_decimal(minimum_charge, "minimum_charge")
        )

        lines = [
            self.calculate_for_product(
                logistics, quantity, distance_km, rate_per_kg_km, Decimal("0")
            )
            for logistics, quantity in items
        ]

        cubic_lines = [
            line.total_cubic_weight for line in lines if line.total_cubic_weight is not None
        ]
        total_value = sum((line.freight_value for line in lines), Decimal("0"))

        return ConsolidatedFreightResult(
            lines=tuple(lines),
            total_weight=sum((line.total_weight for line in lines), Decimal("0")),
            total_volume=sum((line.total_volume for line in lines), Decimal("0")),
            total_cubic_weight=sum(cubic_lines, Decimal("0")) if cubic_lines else None,
            freight_value=max(total_value, minimum),
            distance_km=lines[0].distance_km,
        )
