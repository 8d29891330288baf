"""
Domain Layer Exceptions

This module defines the exception hierarchy for the Domain Layer.
All domain-specific exceptions inherit from DomainException.

Responsibility:
    - Base exception class for domain errors
    - Fail-fast errors for invalid input contracts (caller bugs)
    - Lookup errors raised by Application Layer use cases
    - Clear separation from framework exceptions

Architecture Notes:
    - Part of Shared Domain (used across all subdomains)
    - Malformed optional pricing data is NOT an error: resolvers degrade
      to the next fallback tier instead of raising
    - Invalid arguments (negative area, non-positive dimensions) ARE errors
"""


class DomainException(Exception):
    """
    Base exception for all domain layer errors.

    This exception serves as the root of the domain exception hierarchy.
    All domain-specific exceptions should inherit from this class to enable
    type-safe error handling in Application Layer and calling workflows.

    Usage:
        - Catch this in Application Layer to handle all domain errors
        - Calling workflows convert it to their own error reporting
        - Infrastructure Layer should not raise DomainException (use own exceptions)

    Examples:
        >>> raise DomainException("Business rule violation")

        >>> try:
        ...     # domain operation
        ... except DomainException as e:
        ...     logger.error(f"Domain error: {e}")
    """

    def __init__(self, message: str) -> None:
        """
        Initialize domain exception with error message.

        Args:
            message: Human-readable error description
        """
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.__class__.__name__}: {self.message}"

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"{self.__class__.__name__}(message={self.message!r})"


# ============================================================================
# INVALID ARGUMENTS - caller bugs, fail fast
# ============================================================================


class InvalidArgumentError(DomainException):
    """
    Raised when a caller violates an input contract.

    These errors indicate a bug in the calling workflow (data that should
    have been validated upstream), not sparse or optional business data.

    Attributes:
        field_name: Name of the offending argument or field (optional)

    Examples:
        >>> raise InvalidArgumentError("Area cannot be negative, got -1", field_name="area")
    """

    def __init__(self, message: str, field_name: str | None = None) -> None:
        """
        Initialize invalid argument error.

        Args:
            message: Error description
            field_name: Name of field that caused error (optional)
        """
        self.field_name = field_name
        super().__init__(message)


class InvalidAreaError(InvalidArgumentError):
    """
    Raised when a producer area is negative or not a number.

    Examples:
        >>> raise InvalidAreaError("Area cannot be negative, got -10", field_name="area")
    """


class InvalidProductDimensionsError(InvalidArgumentError):
    """
    Raised when ProductDimensions validation fails.

    This exception is raised when:
    - height, width, length, nominal_weight, package_weight or
      minimum_quantity is missing or not strictly positive
    - an optional numeric field (PMS, density range) is present but not positive
    - density_range_end is lower than density_range_start
    - package_kind is blank

    Examples:
        >>> raise InvalidProductDimensionsError("height must be greater than zero", field_name="height")
    """


class InvalidDiscountPercentError(InvalidArgumentError):
    """
    Raised when a category discount percent is outside [0, 100].

    Examples:
        >>> raise InvalidDiscountPercentError("percent must be between 0 and 100, got 120")
    """


class InvalidSegmentationConfigError(InvalidArgumentError):
    """
    Raised when a Segmentation, Group or CategoryDiscount is constructed
    with values that break its own invariants.

    This exception is raised when:
    - name is blank
    - area_min is negative
    - area_max is lower than area_min
    - ids are not positive

    Overlapping brackets between groups are NOT reported through this
    exception: they are a configuration inconsistency resolved by the
    discount resolver's tie-break rule.
    """


class InvalidPriceInputError(InvalidArgumentError):
    """
    Raised when price resolution receives neither a price table nor a base price,
    or a date that is not a ``datetime.date``.

    Examples:
        >>> raise InvalidPriceInputError("base_price is required when table is absent")
    """


class InvalidFreightInputError(InvalidArgumentError):
    """
    Raised when freight computation receives invalid quantities or distances.

    This exception is raised when:
    - quantity <= 0
    - distance_km <= 0
    - rate or minimum charge is negative
    - consolidated freight is requested for an empty item list
    """


# ============================================================================
# LOOKUP ERRORS - raised by use cases when collaborators return nothing
# ============================================================================


class EntityNotFoundError(DomainException):
    """
    Raised when a collaborator lookup returns no entity for an identifier.

    Attributes:
        entity_id: Identifier that was looked up (optional)
    """

    def __init__(self, message: str, entity_id: int | None = None) -> None:
        """
        Initialize entity not found error.

        Args:
            message: Error description
            entity_id: Identifier that was not found (optional)
        """
        self.entity_id = entity_id
        super().__init__(message)


class CatalogItemNotFoundError(EntityNotFoundError):
    """Raised when no catalog pricing exists for a catalog item id."""


class ProductNotFoundError(EntityNotFoundError):
    """Raised when no logistics data exists for a product id."""


class SegmentationNotFoundError(EntityNotFoundError):
    """Raised when a segmentation id does not exist."""


# ============================================================================
# CONFIGURATION
# ============================================================================


class ConfigurationError(DomainException):
    """
    Raised when pricing configuration (environment variables) cannot be parsed.

    Attributes:
        variable: Environment variable name that failed (optional)

    Examples:
        >>> raise ConfigurationError("Invalid decimal 'abc'", variable="PRICING_MINIMUM_FREIGHT_CHARGE")
    """

    def __init__(self, message: str, variable: str | None = None) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error description
            variable: Environment variable that caused the error (optional)
        """
        self.variable = variable
        if variable:
            super().__init__(f"{message} | Variable: {variable}")
        else:
            super().__init__(message)
