"""
Tests for the in-memory repositories and JSON snapshot loading.
Covers: snapshot formats, record mapping, protocol queries, load errors.
"""

import json
from datetime import date
from decimal import Decimal

import pytest

from src.domain.pricing.constants import WeightCalculationMode
from src.domain.pricing.services.catalog_price_resolver import resolve_price
from src.domain.shared.exceptions import InvalidProductDimensionsError
from src.infrastructure.persistence.repositories import (
    InMemoryCatalogLookup,
    InMemoryProductLookup,
    InMemorySegmentationRepository,
)
from src.infrastructure.persistence.repositories.catalog_repository import (
    catalog_item_from_record,
)
from src.infrastructure.persistence.repositories.product_repository import (
    product_from_record,
)
from src.infrastructure.persistence.repositories.snapshot import (
    read_json_snapshot,
    snapshot_records,
)

SEED_DIMENSIONS = {
    "height": 30,
    "width": 40,
    "length": 60,
    "nominal_weight": 20,
    "package_weight": 20,
    "minimum_quantity": 60000,
    "package_kind": "Saco",
    "thousand_unit_weight": 300,
}


# ============================================================================
# SNAPSHOT TESTS
# ============================================================================


def test_read_json_snapshot_decodes_floats_as_decimal(tmp_path):
    """Test floats in the file become exact Decimals."""
    path = tmp_path / "snapshot.json"
    path.write_text('{"value": 0.1}', encoding="utf-8")

    assert read_json_snapshot(path) == {"value": Decimal("0.1")}


def test_read_json_snapshot_missing_file(tmp_path):
    """Test a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        read_json_snapshot(tmp_path / "missing.json")


def test_snapshot_records_accepts_keyed_object_and_bare_list():
    """Test both snapshot layouts."""
    assert snapshot_records({"products": [{"id": 1}]}, "products") == [{"id": 1}]
    assert snapshot_records([{"id": 1}], "products") == [{"id": 1}]


@pytest.mark.parametrize("data", [{"other": []}, {"products": {}}, "text"])
def test_snapshot_records_rejects_other_shapes(data):
    """Test snapshots without a record list raise ValueError."""
    with pytest.raises(ValueError):
        snapshot_records(data, "products")


# ============================================================================
# SEGMENTATION REPOSITORY TESTS
# ============================================================================


@pytest.mark.asyncio
async def test_segmentation_repository_from_file(tmp_path, soy_segmentation, make_segmentation):
    """Test a snapshot written from entities loads back and filters by supplier."""
    inactive = make_segmentation(segmentation_id=2, name="Antiga", active=False)
    foreign = make_segmentation(segmentation_id=3, supplier_id=9, name="Cafe")
    path = tmp_path / "segmentations.json"
    path.write_text(
        json.dumps({"segmentations": [s.to_dict() for s in (soy_segmentation, inactive, foreign)]}),
        encoding="utf-8",
    )

    repository = InMemorySegmentationRepository.from_json_file(path)

    assert await repository.get_active_by_supplier(1) == [soy_segmentation]
    assert (await repository.get_by_id(2)).name == "Antiga"
    assert await repository.get_by_id(99) is None
    assert len(await repository.get_all()) == 3


def test_segmentation_repository_missing_key_raises():
    """Test incomplete records surface KeyError."""
    with pytest.raises(KeyError):
        InMemorySegmentationRepository.from_dict([{"id": 1, "name": "x"}])


# ============================================================================
# CATALOG LOOKUP TESTS
# ============================================================================


def test_catalog_record_with_json_text_table():
    """Test price tables stored as JSON text are parsed."""
    item = catalog_item_from_record(
        {"id": 1, "product_id": 2, "base_price": "80", "price_table": '{"padrao": 90}'}
    )

    assert item.base_price == Decimal("80")
    assert resolve_price(item.table, "SP", date(2024, 5, 1)) == Decimal("90")


def test_catalog_record_without_table():
    """Test items without table keep only the base price."""
    item = catalog_item_from_record({"id": 1, "product_id": 2, "base_price": 80})

    assert item.table is None
    assert item.effective_base_price() == Decimal("80")


@pytest.mark.asyncio
async def test_catalog_lookup_from_file(tmp_path):
    """Test items are found by catalog item id."""
    path = tmp_path / "catalog.json"
    path.write_text(
        json.dumps(
            {
                "catalog_items": [
                    {
                        "id": 1,
                        "product_id": 2,
                        "base_price": 80.5,
                        "price_table": {"estados": {"SP": [{"dataInicio": "2024-01-01", "valor": 100.25}]}},
                    }
                ]
            }
        ),
        encoding="utf-8",
    )

    lookup = InMemoryCatalogLookup.from_json_file(path)
    item = await lookup.get_catalog_pricing(1)

    assert item.base_price == Decimal("80.5")
    assert resolve_price(item.table, "SP", date(2024, 5, 1)) == Decimal("100.25")
    assert await lookup.get_catalog_pricing(2) is None


# ============================================================================
# PRODUCT LOOKUP TESTS
# ============================================================================


def test_product_record_maps_unit_symbol():
    """Test unit symbols are mapped to canonical unit kinds."""
    product = product_from_record(
        {"id": 7, "category_name": "Sementes", "unit_symbol": "sementes", "dimensions": SEED_DIMENSIONS}
    )

    assert product.unit_kind == "Sementes"
    assert product.calculation_mode is WeightCalculationMode.NOMINAL
    assert product.dimensions.thousand_unit_weight == Decimal("300")


def test_product_record_prefers_unit_kind():
    """Test an explicit unit kind wins over the symbol."""
    product = product_from_record(
        {
            "id": 7,
            "category_name": "Fertilizantes",
            "unit_kind": "Quilo",
            "unit_symbol": "sementes",
            "calculation_mode": "cubic",
            "dimensions": SEED_DIMENSIONS,
        }
    )

    assert product.unit_kind == "Quilo"
    assert product.calculation_mode is WeightCalculationMode.CUBIC


def test_product_record_with_invalid_dimensions_raises():
    """Test dimension invariants are enforced on load."""
    with pytest.raises(InvalidProductDimensionsError):
        product_from_record(
            {"id": 7, "category_name": "Sementes", "dimensions": {**SEED_DIMENSIONS, "height": 0}}
        )


@pytest.mark.asyncio
async def test_product_lookup_from_dict():
    """Test products are found by product id."""
    lookup = InMemoryProductLookup.from_dict(
        {"products": [{"id": 7, "category_name": "Sementes", "dimensions": SEED_DIMENSIONS}]}
    )

    assert (await lookup.get_product_logistics(7)).unit_kind == "Quilo"
    assert await lookup.get_product_logistics(8) is None
