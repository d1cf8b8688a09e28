"""bastion - Voxel structure model and piece cost tables."""
from __future__ import annotations

from bastion.pieces import (
    COVERAGE_RADIUS,
    blocks_visibility,
    category_class,
    destroy_cost,
    health_for,
    is_structural,
    make_piece,
    upkeep,
    upkeep_amount,
)
from bastion.structure import Structure, distance
from bastion.types import (
    Category,
    LootRoom,
    Piece,
    Position,
    SnapshotError,
    StructureMetadata,
    Tier,
)

__all__ = [
    "COVERAGE_RADIUS",
    "Category",
    "LootRoom",
    "Piece",
    "Position",
    "SnapshotError",
    "Structure",
    "StructureMetadata",
    "Tier",
    "blocks_visibility",
    "category_class",
    "destroy_cost",
    "distance",
    "health_for",
    "is_structural",
    "make_piece",
    "upkeep",
    "upkeep_amount",
]
