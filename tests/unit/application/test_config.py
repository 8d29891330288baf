"""
Tests for application configuration loading.
Covers: environment overrides, defaults for unset/blank variables,
invalid values, log level handling.
"""

from decimal import Decimal

import pytest

from src.application.config import (
    ENV_FREIGHT_RATE,
    ENV_LOG_LEVEL,
    ENV_MINIMUM_CHARGE,
    ENV_SEED_CATEGORY,
    ENV_SEED_UNIT_KIND,
    configure_logging,
    load_pricing_config,
)
from src.domain.pricing.pricing_config import PricingConfig
from src.domain.shared.exceptions import ConfigurationError


# ============================================================================
# TESTS - load_pricing_config()
# ============================================================================


def test_empty_environment_keeps_defaults():
    """Test no variables means PricingConfig.default()."""
    assert load_pricing_config({}, use_dotenv=False) == PricingConfig.default()


def test_overrides_are_applied():
    """Test every variable overrides its field."""
    config = load_pricing_config(
        {
            ENV_FREIGHT_RATE: "0.08",
            ENV_MINIMUM_CHARGE: " 75.50 ",
            ENV_SEED_CATEGORY: "Seeds",
            ENV_SEED_UNIT_KIND: " Seeds ",
        },
        use_dotenv=False,
    )

    assert config.freight_rate_per_kg_km == Decimal("0.08")
    assert config.minimum_freight_charge == Decimal("75.50")
    assert config.seed_category_name == "Seeds"
    assert config.seed_unit_kind == "Seeds"


def test_blank_values_keep_defaults():
    """Test blank variables are treated as unset."""
    config = load_pricing_config({ENV_MINIMUM_CHARGE: "", ENV_SEED_CATEGORY: "  "}, use_dotenv=False)

    assert config.minimum_freight_charge == Decimal("50.00")
    assert config.seed_category_name == "Sementes"


@pytest.mark.parametrize("raw", ["abc", "-1", "Infinity", "NaN"])
def test_invalid_decimal_raises(raw):
    """Test unparsable, negative and non-finite numbers are rejected."""
    with pytest.raises(ConfigurationError) as exc_info:
        load_pricing_config({ENV_FREIGHT_RATE: raw}, use_dotenv=False)

    assert exc_info.value.variable == ENV_FREIGHT_RATE


def test_reads_process_environment(monkeypatch):
    """Test os.environ is used when no mapping is given."""
    monkeypatch.setenv(ENV_MINIMUM_CHARGE, "80")

    assert load_pricing_config(use_dotenv=False).minimum_freight_charge == Decimal("80")


# ============================================================================
# TESTS - configure_logging()
# ============================================================================


def test_configure_logging_accepts_known_level():
    """Test a valid level name does not raise."""
    configure_logging("debug")


def test_configure_logging_rejects_unknown_level():
    """Test unknown level names raise ConfigurationError."""
    with pytest.raises(ConfigurationError) as exc_info:
        configure_logging("LOUD")

    assert exc_info.value.variable == ENV_LOG_LEVEL


def test_configure_logging_reads_env(monkeypatch):
    """Test LOG_LEVEL is used when no level is passed."""
    monkeypatch.setenv(ENV_LOG_LEVEL, "verbose")

    with pytest.raises(ConfigurationError):
        configure_logging()
