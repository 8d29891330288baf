"""
In-Memory Catalog Lookup

Implementation of CatalogLookupProtocol over a loaded snapshot.

Snapshot record format:
    {
        "id": 42,
        "product_id": 7,
        "base_price": 80.00,
        "price_table": {"estados": {"SP": [...]}, "padrao": 90}
    }

``price_table`` may also be the raw JSON text stored by catalog
management; it is parsed leniently by CatalogPriceTable.from_json().
"""

import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Union

from src.domain.pricing.value_objects.price_table import (
    CatalogItemPricing,
    CatalogPriceTable,
)
from src.infrastructure.persistence.repositories.snapshot import (
    read_json_snapshot,
    snapshot_records,
)
from src.shared.utils.decimals import to_optional_decimal

logger = logging.getLogger(__name__)

SNAPSHOT_KEY = "catalog_items"


def catalog_item_from_record(record: dict[str, Any]) -> CatalogItemPricing:
    """
    Build CatalogItemPricing from a snapshot record.

    Raises:
        KeyError: If id or product_id is missing
        ValueError: If base_price is not a number
    """
    base_price = to_optional_decimal(record.get("base_price"))
    raw_table = record.get("price_table")
    table = None
    if raw_table is not None:
        table = CatalogPriceTable.from_json(raw_table, base_price=base_price)
    return CatalogItemPricing(
        catalog_item_id=record["id"],
        product_id=record["product_id"],
        table=table,
        base_price=base_price,
    )


class InMemoryCatalogLookup:
    """Read-only catalog item store keyed by catalog item id."""

    def __init__(self, items: Iterable[CatalogItemPricing] = ()) -> None:
        self._items: dict[int, CatalogItemPricing] = {
            item.catalog_item_id: item for item in items
        }

    @classmethod
    def from_dict(cls, data: Any) -> "InMemoryCatalogLookup":
        records = snapshot_records(data, SNAPSHOT_KEY)
        items = [catalog_item_from_record(record) for record in records]
        logger.info(f"Loaded {len(items)} catalog items")
        return cls(items)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "InMemoryCatalogLookup":
        return cls.from_dict(read_json_snapshot(path))

    async def get_catalog_pricing(
        self, catalog_item_id: int
    ) -> Optional[CatalogItemPricing]:
        return self._items.get(catalog_item_id)
