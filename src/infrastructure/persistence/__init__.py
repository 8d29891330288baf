"""
Persistence Infrastructure Module

Repository implementations over JSON snapshots.

Exports:
    From repositories:
        - InMemorySegmentationRepository
        - InMemoryCatalogLookup
        - InMemoryProductLookup
"""

from .repositories import (
    InMemoryCatalogLookup,
    InMemoryProductLookup,
    InMemorySegmentationRepository,
)

__all__ = [
    "InMemorySegmentationRepository",
    "InMemoryCatalogLookup",
    "InMemoryProductLookup",
]
