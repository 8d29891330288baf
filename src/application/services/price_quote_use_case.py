"""
Price Quote Use Case

Responsibility:
    Loads the catalog pricing, supplier segmentations and product logistics
    of an order line through the collaborator protocols, then delegates the
    computation to PriceQuoteService.

Architecture Notes:
    - Part of Application Layer (Services)
    - Async: awaits the collaborator protocols, the resolvers stay synchronous
    - Dependencies injected through the constructor (Protocol interfaces)
    - Missing catalog item or product is an error, missing segmentation is not
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from src.application.services.price_quote_service import (
    PriceQuote,
    PriceQuoteRequest,
    PriceQuoteService,
)
from src.domain.pricing.repositories import (
    CatalogLookupProtocol,
    ProductDimensionLookupProtocol,
    SegmentationRepositoryProtocol,
)
from src.domain.shared.exceptions import CatalogItemNotFoundError, ProductNotFoundError

logger = logging.getLogger(__name__)


class PriceQuoteQuery(BaseModel):
    """
    Identifiers of the order line to quote.

    Attributes:
        catalog_item_id: Catalog item holding the price table
        product_id: Product being sold
        supplier_id: Supplier owning the catalog
        producer_id: Producer placing the order
        category_id: Product category (discount lookup)
        area: Producer's cultivated area in hectares
        state_code: Delivery state (UF)
        on_date: Date the price must be valid on
        base_price: Optional override of the catalog item's base price
    """

    catalog_item_id: int
    product_id: int
    supplier_id: int
    producer_id: int
    category_id: int
    area: Decimal
    state_code: str = Field(..., min_length=1)
    on_date: date
    base_price: Optional[Decimal] = None

    model_config = {"frozen": True}


class PriceQuoteUseCase:
    """
    Use case quoting an order line from identifiers.

    Usage:
        use_case = PriceQuoteUseCase(catalog_lookup, segmentation_repository, product_lookup)
        quote = await use_case.execute(query)
    """

    def __init__(
        self,
        catalog_lookup: CatalogLookupProtocol,
        segmentation_repository: SegmentationRepositoryProtocol,
        product_lookup: ProductDimensionLookupProtocol,
        quote_service: Optional[PriceQuoteService] = None,
    ):
        self.catalog_lookup = catalog_lookup
        self.segmentation_repository = segmentation_repository
        self.product_lookup = product_lookup
        self.quote_service = quote_service or PriceQuoteService()

    async def execute(self, query: PriceQuoteQuery) -> PriceQuote:
        """
        Quote the order line described by query.

        Process Flow:
            1. Load catalog pricing (CatalogItemNotFoundError if missing)
            2. Load product logistics (ProductNotFoundError if missing)
            3. Load the supplier's active segmentations (may be empty)
            4. Delegate to PriceQuoteService.quote()

        Raises:
            CatalogItemNotFoundError: If the catalog item does not exist
            ProductNotFoundError: If the product does not exist
            InvalidPriceInputError: If no price tier applies and no base price exists
            InvalidAreaError: If area is negative
        """
        pricing = await self.catalog_lookup.get_catalog_pricing(query.catalog_item_id)
        if pricing is None:
            raise CatalogItemNotFoundError(
                f"Catalog item {query.catalog_item_id} not found",
                entity_id=query.catalog_item_id,
            )

        logistics = await self.product_lookup.get_product_logistics(query.product_id)
        if logistics is None:
            raise ProductNotFoundError(
                f"Product {query.product_id} not found", entity_id=query.product_id
            )

        segmentations = await self.segmentation_repository.get_active_by_supplier(
            query.supplier_id
        )

        base_price = (
            query.base_price
            if query.base_price is not None
            else pricing.effective_base_price()
        )
        request = PriceQuoteRequest(
            table=pricing.table,
            base_price=base_price,
            state_code=query.state_code,
            on_date=query.on_date,
            supplier_id=query.supplier_id,
            producer_id=query.producer_id,
            category_id=query.category_id,
            area=query.area,
            segmentations=tuple(segmentations),
            dimensions=logistics.dimensions,
            calculation_mode=logistics.calculation_mode,
            category_name=logistics.category_name,
            unit_kind=logistics.unit_kind,
        )
        quote = self.quote_service.quote(request)

        logger.info(
            f"Quote for catalog item {query.catalog_item_id} ({query.state_code}, "
            f"{query.on_date}): {quote.unit_price} after {quote.discount_percent}% "
            f"[{quote.discount_trace.note}]"
        )
        for warning in quote.discount_trace.warnings:
            logger.warning(f"Segmentation config for supplier {query.supplier_id}: {warning}")

        return quote
