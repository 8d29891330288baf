"""
Application Services

Responsibility:
    Orchestration services that coordinate the pricing domain services
    and the data collaborators.

Contains:
    - PriceQuoteService: Price + discount + freight weight of one line
    - PriceQuoteUseCase: Loads line data by id, then quotes it
    - SegmentationValidationService: Id-based bracket checks and audits

Does NOT contain:
    - Domain business logic (use Domain services)
    - Direct infrastructure calls (use dependency injection)
"""

from .price_quote_service import PriceQuote, PriceQuoteRequest, PriceQuoteService
from .price_quote_use_case import PriceQuoteQuery, PriceQuoteUseCase
from .segmentation_validation_service import (
    GroupOverlap,
    SegmentationValidationService,
    SupplierAuditReport,
    audit_segmentations,
)

__all__ = [
    "PriceQuoteRequest",
    "PriceQuote",
    "PriceQuoteService",
    "PriceQuoteQuery",
    "PriceQuoteUseCase",
    "GroupOverlap",
    "SupplierAuditReport",
    "SegmentationValidationService",
    "audit_segmentations",
]
