"""
In-Memory Product Dimension Lookup

Implementation of ProductDimensionLookupProtocol over a loaded snapshot.

Snapshot record format:
    {
        "id": 7,
        "category_name": "Sementes",
        "unit_symbol": "sementes",
        "calculation_mode": "nominal",
        "dimensions": {"height": 30, "width": 40, ..., "package_kind": "Saco"}
    }

Either ``unit_kind`` (canonical name) or ``unit_symbol`` (unit-of-measure
symbol, mapped through unit_kind_from_symbol) identifies the unit.
"""

import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from src.domain.pricing.constants import WeightCalculationMode, unit_kind_from_symbol
from src.domain.pricing.value_objects.product_dimensions import (
    ProductDimensions,
    ProductLogistics,
)
from src.infrastructure.persistence.repositories.snapshot import (
    read_json_snapshot,
    snapshot_records,
)

logger = logging.getLogger(__name__)

SNAPSHOT_KEY = "products"

_DIMENSION_FIELDS = (
    "height",
    "width",
    "length",
    "nominal_weight",
    "package_weight",
    "minimum_quantity",
    "package_kind",
    "thousand_unit_weight",
    "density_range_start",
    "density_range_end",
)


def product_from_record(record: dict[str, Any]) -> ProductLogistics:
    """
    Build ProductLogistics from a snapshot record.

    Raises:
        KeyError: If id, category_name or dimensions is missing
        ValueError: If calculation_mode is unknown
        InvalidProductDimensionsError: If dimensions break their invariants
    """
    raw_dimensions = record["dimensions"]
    dimensions = ProductDimensions(
        **{name: raw_dimensions.get(name) for name in _DIMENSION_FIELDS}
    )
    unit_kind = record.get("unit_kind")
    if unit_kind is None:
        unit_kind = unit_kind_from_symbol(record.get("unit_symbol")).value
    return ProductLogistics(
        product_id=record["id"],
        dimensions=dimensions,
        category_name=record["category_name"],
        unit_kind=unit_kind,
        calculation_mode=WeightCalculationMode(
            record.get("calculation_mode", WeightCalculationMode.NOMINAL.value)
        ),
    )


class InMemoryProductLookup:
    """Read-only product logistics store keyed by product id."""

    def __init__(self, products: Iterable[ProductLogistics] = ()) -> None:
        self._products: dict[int, ProductLogistics] = {
            product.product_id: product for product in products
        }

    @classmethod
    def from_dict(cls, data: Any) -> "InMemoryProductLookup":
        records = snapshot_records(data, SNAPSHOT_KEY)
        products = [product_from_record(record) for record in records]
        logger.info(f"Loaded {len(products)} products")
        return cls(products)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "InMemoryProductLookup":
        return cls.from_dict(read_json_snapshot(path))

    async def get_product_logistics(self, product_id: int) -> Optional[ProductLogistics]:
        return self._products.get(product_id)
