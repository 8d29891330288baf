"""
Pytest Configuration and Shared Fixtures

This module contains pytest configuration and shared fixtures used across
all test suites.

Fixtures:
    - make_segmentation: Factory building Segmentation aggregates from tuples
    - soy_segmentation: Supplier 1 default segmentation with three brackets
    - seed_dimensions: Seed bag dimensions with PMS 300 g and 60000 seeds
    - box_dimensions: 10 cm cube, 1 kg package, density 500 kg/m³
    - catalog_table: {"estados": {"SP": [...]}, "padrao": 90} with base price 80

Usage:
    Tests automatically have access to these fixtures by name:

    def test_something(soy_segmentation):
        assert soy_segmentation.is_default
"""

import logging
from decimal import Decimal

import pytest

from src.domain.pricing.entities.segmentation import (
    CategoryDiscount,
    Group,
    Segmentation,
)
from src.domain.pricing.value_objects.price_table import CatalogPriceTable
from src.domain.pricing.value_objects.product_dimensions import ProductDimensions

# Configure logger for tests
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

SEED_CATEGORY_ID = 7
FERTILIZER_CATEGORY_ID = 8


# ============================================================================
# SEGMENTATION FIXTURES
# ============================================================================


@pytest.fixture
def make_segmentation():
    """
    Factory for Segmentation aggregates.

    groups: list of (group_id, name, area_min, area_max, {category_id: percent})
    """

    def _make(
        segmentation_id=1,
        supplier_id=1,
        name="Soja 2024",
        groups=(),
        active=True,
        is_default=False,
        group_active=True,
    ):
        built_groups = []
        discount_id = segmentation_id * 100
        for group_id, group_name, area_min, area_max, discounts in groups:
            category_discounts = []
            for category_id, percent in discounts.items():
                discount_id += 1
                category_discounts.append(
                    CategoryDiscount(
                        id=discount_id,
                        group_id=group_id,
                        category_id=category_id,
                        percent=Decimal(str(percent)),
                    )
                )
            built_groups.append(
                Group(
                    id=group_id,
                    segmentation_id=segmentation_id,
                    name=group_name,
                    area_min=Decimal(str(area_min)),
                    area_max=Decimal(str(area_max)) if area_max is not None else None,
                    active=group_active,
                    category_discounts=tuple(category_discounts),
                )
            )
        return Segmentation(
            id=segmentation_id,
            supplier_id=supplier_id,
            name=name,
            active=active,
            is_default=is_default,
            groups=tuple(built_groups),
        )

    return _make


@pytest.fixture
def soy_segmentation(make_segmentation):
    """Default segmentation of supplier 1: [0,50), [50,500), [500,None)."""
    return make_segmentation(
        segmentation_id=1,
        supplier_id=1,
        name="Soja 2024",
        is_default=True,
        groups=[
            (1, "Pequeno produtor", 0, 50, {SEED_CATEGORY_ID: 2}),
            (2, "Medio produtor", 50, 500, {SEED_CATEGORY_ID: 5, FERTILIZER_CATEGORY_ID: 3}),
            (3, "Grande produtor", 500, None, {SEED_CATEGORY_ID: 10}),
        ],
    )


# ============================================================================
# PRODUCT FIXTURES
# ============================================================================


@pytest.fixture
def seed_dimensions():
    """Seed bag: PMS 300 g, 60000 seeds per package, 20 kg package."""
    return ProductDimensions(
        height=Decimal("30"),
        width=Decimal("40"),
        length=Decimal("60"),
        nominal_weight=Decimal("20"),
        package_weight=Decimal("20"),
        minimum_quantity=Decimal("60000"),
        package_kind="Saco",
        thousand_unit_weight=Decimal("300"),
    )


@pytest.fixture
def box_dimensions():
    """10 cm cube, 1 kg package, density 500 kg/m³ (cubic weight 0.5 kg)."""
    return ProductDimensions(
        height=Decimal("10"),
        width=Decimal("10"),
        length=Decimal("10"),
        nominal_weight=Decimal("1.0"),
        package_weight=Decimal("1.0"),
        minimum_quantity=Decimal("1"),
        package_kind="Saco",
        density_range_start=Decimal("500"),
    )


# ============================================================================
# CATALOG FIXTURES
# ============================================================================


@pytest.fixture
def catalog_table():
    """SP open-ended from 2024-01-01 at 100, padrao 90, base price 80."""
    return CatalogPriceTable.from_json(
        {
            "estados": {"SP": [{"dataInicio": "2024-01-01", "dataFim": None, "valor": 100}]},
            "padrao": 90,
        },
        base_price=Decimal("80"),
    )
