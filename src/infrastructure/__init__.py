"""
Infrastructure Layer - External Dependencies

Implements the data collaborators the Domain Layer declares as protocols.

Architecture:
    - Implements Domain repository interfaces (Dependency Inversion)
    - No Domain business logic (only loading and mapping)

Modules:
    - persistence: In-memory repositories built from JSON snapshots

Usage:
    >>> from src.infrastructure import InMemorySegmentationRepository
    >>> repo = InMemorySegmentationRepository.from_json_file("segmentations.json")
"""

from .persistence import (
    InMemoryCatalogLookup,
    InMemoryProductLookup,
    InMemorySegmentationRepository,
)

__all__ = [
    "InMemorySegmentationRepository",
    "InMemoryCatalogLookup",
    "InMemoryProductLookup",
]
