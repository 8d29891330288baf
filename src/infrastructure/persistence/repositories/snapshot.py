"""
JSON snapshot loading shared by the in-memory repositories.

Snapshots are plain JSON documents exported by the management workflows.
Floats are decoded straight to Decimal so prices and areas stay exact.
"""

import json
import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Union

logger = logging.getLogger(__name__)


def read_json_snapshot(path: Union[str, Path]) -> Any:
    """
    Read and decode a JSON snapshot file.

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
    """
    snapshot_path = Path(path)
    with snapshot_path.open("r", encoding="utf-8") as handle:
        data = json.load(handle, parse_float=Decimal)
    logger.debug(f"Loaded snapshot {snapshot_path}")
    return data


def snapshot_records(data: Any, key: str) -> list[dict[str, Any]]:
    """
    Extract the record list of a snapshot.

    Accepts either ``{"<key>": [...]}`` or a bare list of records.

    Raises:
        ValueError: If no record list can be found
    """
    records = data.get(key) if isinstance(data, dict) else data
    if not isinstance(records, list):
        raise ValueError(f"Snapshot must be a list or an object with a '{key}' list")
    return records
