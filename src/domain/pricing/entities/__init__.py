"""
Pricing Entities Module

Entities with identity supplied by upstream management workflows.
Read-only snapshots inside this engine.

This module exports:
    - Segmentation: Supplier discount policy container
    - Group: Area bracket within a segmentation
    - CategoryDiscount: Percent discount per product category within a group
"""

from .segmentation import CategoryDiscount, Group, Segmentation

__all__ = [
    "Segmentation",
    "Group",
    "CategoryDiscount",
]
