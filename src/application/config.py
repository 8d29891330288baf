"""
Application configuration - environment loading and logging setup.

Reads pricing overrides from the environment (a local .env file is loaded
first) and builds the PricingConfig injected into the domain services.

Environment variables:
    PRICING_FREIGHT_RATE_PER_KG_KM  Freight value per kg per km (default 0.05)
    PRICING_MINIMUM_FREIGHT_CHARGE  Minimum freight per shipment (default 50.00)
    PRICING_SEED_CATEGORY_NAME      Category name of seed products (default "Sementes")
    PRICING_SEED_UNIT_KIND          Unit kind of seed-counted products (default "Sementes")
    LOG_LEVEL                       Root log level for configure_logging() (default INFO)

Architecture Note:
    - Part of Application Layer (wiring, not business rules)
    - Domain services never read the environment themselves
"""

import logging
import os
from decimal import Decimal, InvalidOperation
from typing import Mapping, Optional

from dotenv import load_dotenv

from src.domain.pricing.pricing_config import PricingConfig
from src.domain.shared.exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

ENV_FREIGHT_RATE = "PRICING_FREIGHT_RATE_PER_KG_KM"
ENV_MINIMUM_CHARGE = "PRICING_MINIMUM_FREIGHT_CHARGE"
ENV_SEED_CATEGORY = "PRICING_SEED_CATEGORY_NAME"
ENV_SEED_UNIT_KIND = "PRICING_SEED_UNIT_KIND"
ENV_LOG_LEVEL = "LOG_LEVEL"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging with the project format.

    Args:
        level: Level name ("DEBUG", "INFO", ...). Defaults to LOG_LEVEL or INFO.

    Raises:
        ConfigurationError: If the level name is unknown
    """
    level_name = (level or os.environ.get(ENV_LOG_LEVEL, "INFO")).strip().upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        raise ConfigurationError(
            f"Unknown log level {level_name!r}", variable=ENV_LOG_LEVEL
        )
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)


def _read_decimal(env: Mapping[str, str], variable: str, default: Decimal) -> Decimal:
    raw = env.get(variable)
    if raw is None or not raw.strip():
        return default
    try:
        value = Decimal(raw.strip())
    except InvalidOperation as e:
        raise ConfigurationError(
            f"Expected a decimal number, got {raw!r}", variable=variable
        ) from e
    if not value.is_finite() or value < 0:
        raise ConfigurationError(
            f"Expected a non-negative number, got {raw!r}", variable=variable
        )
    return value


def _read_name(env: Mapping[str, str], variable: str, default: str) -> str:
    raw = env.get(variable)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def load_pricing_config(
    env: Optional[Mapping[str, str]] = None, use_dotenv: bool = True
) -> PricingConfig:
    """
    Build PricingConfig from environment variables.

    Unset or blank variables keep the PricingConfig defaults.

    Args:
        env: Mapping to read from (defaults to os.environ)
        use_dotenv: Load a .env file into os.environ first

    Returns:
        PricingConfig with overrides applied

    Raises:
        ConfigurationError: If a numeric variable cannot be parsed or is negative

    Examples:
        >>> config = load_pricing_config({"PRICING_MINIMUM_FREIGHT_CHARGE": "80"}, use_dotenv=False)
        >>> config.minimum_freight_charge
        Decimal('80')
    """
    if use_dotenv:
        load_dotenv()
    source = os.environ if env is None else env

    defaults = PricingConfig.default()
    return PricingConfig(
        seed_category_name=_read_name(
            source, ENV_SEED_CATEGORY, defaults.seed_category_name
        ),
        seed_unit_kind=_read_name(source, ENV_SEED_UNIT_KIND, defaults.seed_unit_kind),
        freight_rate_per_kg_km=_read_decimal(
            source, ENV_FREIGHT_RATE, defaults.freight_rate_per_kg_km
        ),
        minimum_freight_charge=_read_decimal(
            source, ENV_MINIMUM_CHARGE, defaults.minimum_freight_charge
        ),
    )
