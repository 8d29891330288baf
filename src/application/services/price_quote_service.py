"""
Price Quote Service

Responsibility:
    Combines the three pricing resolvers into the quote of one order line:
    unit price after the segmented discount plus the per-unit freight weight.

Architecture Notes:
    - Part of Application Layer (Services)
    - Synchronous composition over already-loaded data
    - Resolvers injected through the constructor (defaults provided)
    - Input and output are frozen Pydantic DTOs

Contains:
    - PriceQuoteRequest: Everything needed to quote a line
    - PriceQuote: Quote result with the discount trace
    - PriceQuoteService: Composition of the resolvers

Does NOT contain:
    - Data loading (see PriceQuoteUseCase)
    - Rounding/currency formatting (presentation concern)
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, InstanceOf

from src.domain.pricing.constants import WeightCalculationMode
from src.domain.pricing.entities.segmentation import Segmentation
from src.domain.pricing.services.catalog_price_resolver import (
    CatalogPriceResolver,
    PriceSource,
)
from src.domain.pricing.services.freight_weight_calculator import (
    FreightWeightCalculator,
)
from src.domain.pricing.services.segmented_discount_resolver import (
    SegmentedDiscountResolver,
    apply_discount,
)
from src.domain.pricing.value_objects.discount_result import DiscountResult
from src.domain.pricing.value_objects.price_table import CatalogPriceTable
from src.domain.pricing.value_objects.product_dimensions import ProductDimensions

logger = logging.getLogger(__name__)


# ============================================================================
# DATA TRANSFER OBJECTS (DTOs)
# ============================================================================


class PriceQuoteRequest(BaseModel):
    """
    Input of PriceQuoteService.quote().

    Attributes:
        table: Parsed price table of the catalog item (None = base price only)
        base_price: Fallback price of the catalog item
        state_code: Delivery state (UF)
        on_date: Date the price must be valid on
        supplier_id: Supplier whose segmentation applies
        producer_id: Producer being quoted
        category_id: Product category id (discount lookup)
        area: Producer's cultivated area in hectares
        segmentations: Pre-fetched active segmentations of the supplier
        dimensions: Product dimensions snapshot
        calculation_mode: Weight calculation mode of the product
        category_name: Product category name (seed rule)
        unit_kind: Unit kind the product is counted in (seed rule)
    """

    table: Optional[InstanceOf[CatalogPriceTable]] = None
    base_price: Optional[Decimal] = None
    state_code: str = Field(..., min_length=1)
    on_date: date
    supplier_id: int
    producer_id: int
    category_id: int
    area: Decimal
    segmentations: tuple[InstanceOf[Segmentation], ...] = ()
    dimensions: InstanceOf[ProductDimensions]
    calculation_mode: WeightCalculationMode = WeightCalculationMode.NOMINAL
    category_name: str
    unit_kind: str

    model_config = {"frozen": True}


class PriceQuote(BaseModel):
    """
    Quote of one order line.

    Attributes:
        unit_price: base_price x (1 - discount_percent / 100)
        base_price: Price resolved from the catalog table before discount
        price_source: Tier that produced base_price ("state", "default", "base_price")
        discount_percent: Applied discount percentage
        freight_weight: Per-unit freight weight in kg
        discount_trace: Full discount resolution outcome
    """

    unit_price: Decimal
    base_price: Decimal
    price_source: PriceSource
    discount_percent: Decimal = Field(..., ge=0, le=100)
    freight_weight: Decimal = Field(..., ge=0)
    discount_trace: DiscountResult

    model_config = {"frozen": True}


# ============================================================================
# SERVICE
# ============================================================================


class PriceQuoteService:
    """
    Composition root of the pricing resolvers.

    Usage:
        service = PriceQuoteService()
        quote = service.quote(request)
        print(quote.unit_price, quote.discount_trace.note)
    """

    def __init__(
        self,
        price_resolver: Optional[CatalogPriceResolver] = None,
        discount_resolver: Optional[SegmentedDiscountResolver] = None,
        weight_calculator: Optional[FreightWeightCalculator] = None,
    ):
        self.price_resolver = price_resolver or CatalogPriceResolver()
        self.discount_resolver = discount_resolver or SegmentedDiscountResolver()
        self.weight_calculator = weight_calculator or FreightWeightCalculator()

    def quote(self, request: PriceQuoteRequest) -> PriceQuote:
        """
        Quote one order line.

        Args:
            request: PriceQuoteRequest with catalog, segmentation and product data

        Returns:
            PriceQuote

        Raises:
            InvalidPriceInputError: If no price tier applies and no base price exists
            InvalidAreaError: If area is negative
        """
        resolution = self.price_resolver.resolve_trace(
            request.table, request.state_code, request.on_date, request.base_price
        )
        trace = self.discount_resolver.resolve(
            request.supplier_id,
            request.producer_id,
            request.category_id,
            request.area,
            request.segmentations,
            base_value=resolution.price,
        )
        freight_weight = self.weight_calculator.resolve_freight_weight(
            request.dimensions,
            request.calculation_mode,
            request.category_name,
            request.unit_kind,
        )
        unit_price = apply_discount(resolution.price, trace.percent)

        logger.debug(
            f"Quoted {resolution.price} ({resolution.source}) - {trace.percent}% "
            f"= {unit_price}, freight weight {freight_weight} kg"
        )

        return PriceQuote(
            unit_price=unit_price,
            base_price=resolution.price,
            price_source=resolution.source,
            discount_percent=trace.percent,
            freight_weight=freight_weight,
            discount_trace=trace,
        )
