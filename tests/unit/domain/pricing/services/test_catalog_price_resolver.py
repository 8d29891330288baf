"""
Tests for CatalogPriceResolver.
Covers: fallback totality, state priority, date-range selection,
fall-through of empty tiers, malformed data silence, input validation.
"""

from datetime import date, datetime
from decimal import Decimal

import pytest

from src.domain.pricing.services.catalog_price_resolver import (
    CatalogPriceResolver,
    PriceResolution,
    resolve_price,
    resolve_price_trace,
)
from src.domain.pricing.value_objects.price_table import CatalogPriceTable
from src.domain.shared.exceptions import InvalidPriceInputError

MAY_2024 = date(2024, 5, 1)


@pytest.fixture
def semester_table():
    """SP priced per semester, no default bucket."""
    return CatalogPriceTable.from_json(
        {
            "estados": {
                "SP": [
                    {"dataInicio": "2024-01-01", "dataFim": "2024-06-30", "valor": 10},
                    {"dataInicio": "2024-07-01", "dataFim": None, "valor": 12},
                ]
            }
        },
        base_price=Decimal("8"),
    )


# ============================================================================
# END-TO-END SCENARIO
# ============================================================================


def test_state_price_wins(catalog_table):
    """Test SP on 2024-05-01 resolves to its state price 100."""
    assert resolve_price(catalog_table, "SP", MAY_2024) == Decimal("100")


def test_unlisted_state_falls_back_to_default(catalog_table):
    """Test RJ has no state bucket and falls to padrao 90."""
    assert resolve_price(catalog_table, "RJ", MAY_2024) == Decimal("90")


def test_empty_table_falls_back_to_base_price():
    """Test a table without buckets resolves to the base price 80."""
    table = CatalogPriceTable.from_json({}, base_price=Decimal("80"))
    assert resolve_price(table, "SP", MAY_2024) == Decimal("80")


def test_absent_table_returns_caller_base_price():
    """Test a missing table always yields the supplied base price."""
    assert resolve_price(None, "SP", MAY_2024, base_price=Decimal("80")) == Decimal("80")


# ============================================================================
# DATE RANGE TESTS
# ============================================================================


@pytest.mark.parametrize(
    "on_date,expected",
    [
        (date(2024, 8, 1), Decimal("12")),
        (date(2024, 3, 1), Decimal("10")),
        (date(2025, 1, 1), Decimal("12")),
    ],
)
def test_date_range_selection(semester_table, on_date, expected):
    """Test the covering range is selected, last range open-ended."""
    assert resolve_price(semester_table, "SP", on_date) == expected


def test_state_without_covering_range_falls_through_to_base(semester_table):
    """Test a date before every range skips the state bucket."""
    resolution = resolve_price_trace(semester_table, "SP", date(2023, 1, 1))
    assert resolution == PriceResolution(price=Decimal("8"), source="base_price")


def test_state_without_covering_range_falls_through_to_default():
    """Test an uncovered state falls to padrao before the base price."""
    table = CatalogPriceTable.from_json(
        {"estados": {"SP": [{"dataInicio": "2025-01-01", "valor": 100}]}, "padrao": 90},
        base_price=Decimal("80"),
    )

    resolution = resolve_price_trace(table, "SP", MAY_2024)
    assert resolution.price == Decimal("90")
    assert resolution.source == "default"


def test_default_without_covering_range_falls_to_base():
    """Test a dated padrao that does not cover the date is skipped."""
    table = CatalogPriceTable.from_json(
        {"padrao": [{"dataInicio": "2030-01-01", "valor": 1}]}, base_price=Decimal("80")
    )
    assert resolve_price(table, "SP", MAY_2024) == Decimal("80")


# ============================================================================
# TRACE / PRIORITY TESTS
# ============================================================================


@pytest.mark.parametrize(
    "state_code,expected_source",
    [("SP", "state"), ("sp", "state"), ("RJ", "default")],
)
def test_trace_reports_source(catalog_table, state_code, expected_source):
    """Test resolve_price_trace() names the tier that produced the price."""
    assert resolve_price_trace(catalog_table, state_code, MAY_2024).source == expected_source


def test_base_price_argument_overrides_table_base_price():
    """Test an explicit base price wins over the table's own."""
    table = CatalogPriceTable.from_json({}, base_price=Decimal("80"))
    assert resolve_price(table, "SP", MAY_2024, base_price=Decimal("75")) == Decimal("75")


def test_resolver_object_delegates(catalog_table):
    """Test the injectable resolver returns the same results."""
    resolver = CatalogPriceResolver()

    assert resolver.resolve(catalog_table, "SP", MAY_2024) == Decimal("100")
    assert resolver.resolve_trace(catalog_table, "RJ", MAY_2024).source == "default"


def test_resolution_is_idempotent(catalog_table):
    """Test repeated calls yield identical results."""
    first = resolve_price_trace(catalog_table, "SP", MAY_2024)
    second = resolve_price_trace(catalog_table, "SP", MAY_2024)

    assert first == second
    assert str(first.price) == str(second.price)


# ============================================================================
# MALFORMED DATA TESTS - silence
# ============================================================================


def test_malformed_state_bucket_degrades_silently():
    """Test an unparsable state range falls through without raising."""
    table = CatalogPriceTable.from_json(
        '{"estados": {"SP": [{"dataInicio": "31/12/2024", "valor": 100}]}, "padrao": 90}',
        base_price=Decimal("80"),
    )
    assert resolve_price(table, "SP", MAY_2024) == Decimal("90")


def test_undecodable_document_degrades_to_base_price():
    """Test broken JSON text resolves to the base price."""
    table = CatalogPriceTable.from_json("{broken", base_price=Decimal("80"))
    assert resolve_price(table, "SP", MAY_2024) == Decimal("80")


# ============================================================================
# ERROR HANDLING TESTS - caller bugs
# ============================================================================


def test_missing_table_and_base_price_raises():
    """Test no table and no base price is a caller bug."""
    with pytest.raises(InvalidPriceInputError):
        resolve_price(None, "SP", MAY_2024)


def test_unresolved_table_without_base_price_raises():
    """Test a table with no applicable tier and no base price raises."""
    table = CatalogPriceTable.from_json({"estados": {"MG": 10}})
    with pytest.raises(InvalidPriceInputError) as exc_info:
        resolve_price(table, "SP", MAY_2024)

    assert exc_info.value.field_name == "base_price"


@pytest.mark.parametrize("bad_date", ["2024-05-01", datetime(2024, 5, 1, 10, 0), None])
def test_non_date_raises(catalog_table, bad_date):
    """Test on_date must be a plain date."""
    with pytest.raises(InvalidPriceInputError):
        resolve_price(catalog_table, "SP", bad_date)
