"""
Shared Domain Module

Shared domain concepts used across all subdomains.
Contains the domain exception hierarchy.

This module exports:
    - DomainException: Base exception for all domain errors
    - InvalidArgumentError: Base exception for violated input contracts
    - EntityNotFoundError: Base exception for failed collaborator lookups
"""

from .exceptions import (
    CatalogItemNotFoundError,
    ConfigurationError,
    DomainException,
    EntityNotFoundError,
    InvalidArgumentError,
    InvalidAreaError,
    InvalidDiscountPercentError,
    InvalidFreightInputError,
    InvalidPriceInputError,
    InvalidProductDimensionsError,
    InvalidSegmentationConfigError,
    ProductNotFoundError,
    SegmentationNotFoundError,
)

__all__ = [
    "DomainException",
    "InvalidArgumentError",
    "InvalidAreaError",
    "InvalidProductDimensionsError",
    "InvalidDiscountPercentError",
    "InvalidSegmentationConfigError",
    "InvalidPriceInputError",
    "InvalidFreightInputError",
    "EntityNotFoundError",
    "CatalogItemNotFoundError",
    "ProductNotFoundError",
    "SegmentationNotFoundError",
    "ConfigurationError",
]
