"""
Freight Cost Value Objects

Results of freight costing for a single order line and for a consolidated
shipment of several lines.

Architecture Notes:
    - Value Objects (immutable, Pydantic-validated)
    - Produced by FreightCostCalculator
    - Consumed by the transport/freight workflow outside this engine
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from src.domain.pricing.constants import WeightCalculationMode


class FreightCostResult(BaseModel):
    """
    Freight costing of one product line.

    Attributes:
        total_weight: Physical weight of the line (unit weight x quantity)
        total_volume: Volume of the line in m³
        total_cubic_weight: Volume x density, None when the product has no density
        chargeable_weight: Weight freight is billed on (resolved per calculation mode)
        freight_value: max(chargeable_weight x distance x rate, minimum_charge)
        distance_km: Distance used in the calculation
        calculation_mode: Weight calculation mode used, None when unsupported
    """

    total_weight: Decimal = Field(..., ge=0)
    total_volume: Decimal = Field(..., ge=0)
    total_cubic_weight: Optional[Decimal] = Field(default=None, ge=0)
    chargeable_weight: Decimal = Field(..., ge=0)
    freight_value: Decimal = Field(..., ge=0)
    distance_km: Decimal = Field(..., gt=0)
    calculation_mode: Optional[WeightCalculationMode] = None

    model_config = {"frozen": True}


class ConsolidatedFreightResult(BaseModel):
    """
    Freight costing of several lines shipped together.

    Line values are computed without the per-shipment minimum; the minimum is
    applied once to their sum.

    Attributes:
        lines: Individual line results (computed without minimum charge)
        total_weight: Sum of line weights
        total_volume: Sum of line volumes
        total_cubic_weight: Sum of line cubic weights, None when no line has density
        freight_value: max(sum of line values, minimum_charge)
        distance_km: Distance used in the calculation
    """

    lines: tuple[FreightCostResult, ...]
    total_weight: Decimal = Field(..., ge=0)
    total_volume: Decimal = Field(..., ge=0)
    total_cubic_weight: Optional[Decimal] = Field(default=None, ge=0)
    freight_value: Decimal = Field(..., ge=0)
    distance_km: Decimal = Field(..., gt=0)

    model_config = {"frozen": True}
