"""Shared types for bastion structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

Position = tuple[int, int, int]


class Category(str, Enum):
    FOUNDATION = "foundation"
    WALL = "wall"
    FLOOR = "floor"
    CEILING = "ceiling"
    DOORWAY = "doorway"
    WINDOW = "window"
    STAIRS = "stairs"
    ROOF = "roof"
    DOOR = "door"
    GATE = "gate"
    CUPBOARD = "cupboard"
    BED = "bed"
    CHEST = "chest"
    TURRET = "turret"
    TRAP = "trap"


class Tier(IntEnum):
    """Material tier, lowest to highest."""

    TWIG = 0
    WOOD = 1
    STONE = 2
    METAL = 3
    ARMORED = 4


@dataclass(frozen=True)
class Piece:
    """One construction piece occupying a single grid cell.

    Attributes:
        category: What kind of piece this is.
        tier: Material tier governing health and destroy cost.
        health: Hit points (see ``bastion.pieces.health_for``).
        external: Visible/reachable from outside the structure.
        soft_side: The weak face of the piece points outward.
        rotation: Quarter turns, 0-3.
    """

    category: Category
    tier: Tier
    health: int
    external: bool = False
    soft_side: bool = False
    rotation: int = 0

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "category", Category(self.category))
        except ValueError:
            raise ValueError(f"unknown category {self.category!r}") from None
        try:
            object.__setattr__(self, "tier", Tier(self.tier))
        except ValueError:
            raise ValueError(f"tier must be in 0..4, got {self.tier!r}") from None
        if not 0 <= self.rotation <= 3:
            raise ValueError(f"rotation must be in 0..3, got {self.rotation}")
        if self.health < 0:
            raise ValueError(f"health must be >= 0, got {self.health}")


@dataclass(frozen=True)
class LootRoom:
    """A high-value interior position targeted by raids.

    Attributes:
        position: Grid cell holding the loot.
        value: Estimated loot value.
        priority: 1-10, higher is more important.
        containers: Number of storage containers in the room.
    """

    position: Position
    value: float
    priority: int = 5
    containers: int = 1

    def __post_init__(self) -> None:
        if not 1 <= self.priority <= 10:
            raise ValueError(f"priority must be in 1..10, got {self.priority}")
        if self.containers < 0:
            raise ValueError(f"containers must be >= 0, got {self.containers}")


@dataclass
class StructureMetadata:
    upkeep: dict[str, int] = field(default_factory=dict)
    piece_count: int = 0


class SnapshotError(Exception):
    """Raised when structure snapshot data cannot be restored."""
