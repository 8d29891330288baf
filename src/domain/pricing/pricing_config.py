"""
Pricing Configuration

Configuration constants for the freight and seed-weight rules.
Defines the business defaults used when callers do not supply their own.

Business Context:
    - Seed products are recognised by category name AND unit kind
      ("Sementes" for both by default)
    - Freight is billed per kilogram per kilometre, with a minimum charge
      per shipment

Design Principles:
    - Configuration as code (environment overrides live in Application Layer)
    - Type-safe constants
    - Immutable configuration object injected into domain services
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Final

from src.domain.pricing.constants import SEED_CATEGORY_NAME, SEED_UNIT_KIND


# ============================================================================
# FREIGHT DEFAULTS
# ============================================================================

DEFAULT_FREIGHT_RATE_PER_KG_KM: Final[Decimal] = Decimal("0.05")
DEFAULT_MINIMUM_FREIGHT_CHARGE: Final[Decimal] = Decimal("50.00")


@dataclass(frozen=True)
class PricingConfig:
    """
    Complete configuration for the pricing domain services.

    Encapsulates all configuration values in a single immutable object.
    Passed to FreightWeightCalculator / FreightCostCalculator constructors.

    Attributes:
        seed_category_name: Category name that marks seed products ("Sementes")
        seed_unit_kind: Unit kind that marks seed-counted units ("Sementes")
        freight_rate_per_kg_km: Freight value per kg per km (0.05)
        minimum_freight_charge: Minimum freight value per shipment (50.00)

    Usage:
        config = PricingConfig.default()
        calculator = FreightWeightCalculator(config)
    """

    seed_category_name: str = SEED_CATEGORY_NAME
    seed_unit_kind: str = SEED_UNIT_KIND
    freight_rate_per_kg_km: Decimal = DEFAULT_FREIGHT_RATE_PER_KG_KM
    minimum_freight_charge: Decimal = DEFAULT_MINIMUM_FREIGHT_CHARGE

    def __post_init__(self) -> None:
        """Validate names are non-blank and freight values are non-negative decimals"""
        if not self.seed_category_name or not self.seed_category_name.strip():
            raise ValueError("seed_category_name cannot be blank")
        if not self.seed_unit_kind or not self.seed_unit_kind.strip():
            raise ValueError("seed_unit_kind cannot be blank")

        for name in ("freight_rate_per_kg_km", "minimum_freight_charge"):
            value = getattr(self, name)
            if not isinstance(value, Decimal):
                raise ValueError(
                    f"{name} must be a Decimal, got {type(value).__name__}"
                )
            if value < 0:
                raise ValueError(f"{name} cannot be negative, got {value}")

    @classmethod
    def default(cls) -> "PricingConfig":
        """
        Get default configuration from module constants.

        Examples:
            >>> config = PricingConfig.default()
            >>> config.freight_rate_per_kg_km
            Decimal('0.05')
            >>> config.seed_category_name
            'Sementes'
        """
        return cls()

    @classmethod
    def for_testing(cls, **overrides: Any) -> "PricingConfig":
        """
        Create configuration with custom overrides for testing.

        Args:
            **overrides: Keyword arguments to override default values
                Valid keys: seed_category_name, seed_unit_kind,
                           freight_rate_per_kg_km, minimum_freight_charge

        Raises:
            ValueError: If an overridden value breaks validation

        Examples:
            >>> config = PricingConfig.for_testing(minimum_freight_charge=Decimal("0"))
            >>> config.minimum_freight_charge
            Decimal('0')
        """
        defaults = {
            "seed_category_name": SEED_CATEGORY_NAME,
            "seed_unit_kind": SEED_UNIT_KIND,
            "freight_rate_per_kg_km": DEFAULT_FREIGHT_RATE_PER_KG_KM,
            "minimum_freight_charge": DEFAULT_MINIMUM_FREIGHT_CHARGE,
        }
        defaults.update(overrides)
        return cls(**defaults)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization/logging"""
        return {
            "seed_category_name": self.seed_category_name,
            "seed_unit_kind": self.seed_unit_kind,
            "freight_rate_per_kg_km": str(self.freight_rate_per_kg_km),
            "minimum_freight_charge": str(self.minimum_freight_charge),
        }
