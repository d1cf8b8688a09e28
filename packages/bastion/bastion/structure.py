"""Structure - 3D voxel grid of construction pieces."""
from __future__ import annotations

import math
from typing import Any, Iterator

from bastion.pieces import COVERAGE_RADIUS, upkeep
from bastion.types import (
    Category,
    LootRoom,
    Piece,
    Position,
    SnapshotError,
    StructureMetadata,
    Tier,
)

# 6 orthogonal directions
_DIRS_3D = [
    (-1, 0, 0),
    (1, 0, 0),
    (0, -1, 0),
    (0, 1, 0),
    (0, 0, -1),
    (0, 0, 1),
]


def distance(a: Position, b: Position) -> float:
    """Euclidean distance between two positions."""
    return math.sqrt(
        (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2 + (a[2] - b[2]) ** 2
    )


class Structure:
    """A fortified structure: fixed-size grid plus anchors and loot rooms.

    Sparse storage: only occupied cells are stored. Grid mutation goes through
    ``set``, which keeps ``metadata.piece_count`` and ``metadata.upkeep`` in
    step with the grid contents.
    """

    def __init__(
        self, id: str, name: str, dimensions: tuple[int, int, int]
    ) -> None:
        if len(dimensions) != 3:
            raise ValueError(f"dimensions must have 3 components, got {dimensions}")
        width, height, depth = (int(d) for d in dimensions)
        if width <= 0 or height <= 0 or depth <= 0:
            raise ValueError(
                f"dimensions must be positive, got {width}x{height}x{depth}"
            )
        self.id = id
        self.name = name
        self._width = width
        self._height = height
        self._depth = depth
        self._cells: dict[Position, Piece] = {}
        self.utility_anchors: list[Position] = []
        self.spawn_anchors: list[Position] = []
        self.loot_rooms: list[LootRoom] = []
        self.metadata = StructureMetadata()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def dimensions(self) -> tuple[int, int, int]:
        return (self._width, self._height, self._depth)

    @property
    def piece_count(self) -> int:
        return self.metadata.piece_count

    # --- Grid access ---

    def is_valid(self, pos: Position) -> bool:
        x, y, z = pos
        return 0 <= x < self._width and 0 <= y < self._height and 0 <= z < self._depth

    def get(self, pos: Position) -> Piece | None:
        """Piece at ``pos``, or None for empty and out-of-bounds cells."""
        if not self.is_valid(pos):
            return None
        return self._cells.get(tuple(pos))

    def set(self, pos: Position, piece: Piece | None) -> bool:
        """Place (or clear, with None) a piece. Returns False if out of bounds."""
        if not self.is_valid(pos):
            return False
        key: Position = tuple(pos)
        old = self._cells.pop(key, None)
        if old is not None:
            self.metadata.piece_count -= 1
            self._apply_upkeep(old, -1)
        if piece is not None:
            self._cells[key] = piece
            self.metadata.piece_count += 1
            self._apply_upkeep(piece, 1)
        return True

    def clear(self, pos: Position) -> bool:
        return self.set(pos, None)

    def _apply_upkeep(self, piece: Piece, sign: int) -> None:
        totals = self.metadata.upkeep
        for resource, amount in upkeep(piece).items():
            remaining = totals.get(resource, 0) + sign * amount
            if remaining:
                totals[resource] = remaining
            else:
                totals.pop(resource, None)

    # --- Spatial queries ---

    def neighbors(self, pos: Position) -> list[Position]:
        x, y, z = pos
        result: list[Position] = []
        for dx, dy, dz in _DIRS_3D:
            nx, ny, nz = x + dx, y + dy, z + dz
            if 0 <= nx < self._width and 0 <= ny < self._height and 0 <= nz < self._depth:
                result.append((nx, ny, nz))
        return result

    def is_boundary(self, pos: Position) -> bool:
        """True for cells on a side face or the ground layer."""
        x, y, z = pos
        return (
            x == 0 or x == self._width - 1
            or y == 0 or y == self._height - 1
            or z == 0
        )

    def has_coverage(
        self,
        pos: Position,
        anchors: list[Position] | None = None,
        radius: float = COVERAGE_RADIUS,
    ) -> bool:
        """True if any anchor (default: utility anchors) is within ``radius``."""
        if anchors is None:
            anchors = self.utility_anchors
        return any(distance(pos, anchor) <= radius for anchor in anchors)

    def iter_pieces(self) -> Iterator[tuple[Position, Piece]]:
        """Occupied cells in scan order: x outer, y middle, z inner."""
        for pos in sorted(self._cells):
            piece = self._cells.get(pos)
            if piece is not None:
                yield pos, piece

    def __iter__(self) -> Iterator[tuple[Position, Piece]]:
        return self.iter_pieces()

    def __len__(self) -> int:
        return self.metadata.piece_count

    # --- Upkeep ---

    def upkeep_totals(self) -> dict[str, int]:
        return dict(self.metadata.upkeep)

    def total_upkeep(self) -> int:
        return sum(self.metadata.upkeep.values())

    # --- Snapshot / Restore ---

    def snapshot(self) -> dict[str, Any]:
        """Serialize the structure to plain data.

        Cells are keyed by "x,y,z" strings; enums are stored by value.
        """
        cells: dict[str, dict[str, Any]] = {}
        for pos, piece in self.iter_pieces():
            key = ",".join(str(c) for c in pos)
            cells[key] = {
                "category": piece.category.value,
                "tier": int(piece.tier),
                "health": piece.health,
                "external": piece.external,
                "soft_side": piece.soft_side,
                "rotation": piece.rotation,
            }
        return {
            "id": self.id,
            "name": self.name,
            "dimensions": list(self.dimensions),
            "cells": cells,
            "utility_anchors": [list(p) for p in self.utility_anchors],
            "spawn_anchors": [list(p) for p in self.spawn_anchors],
            "loot_rooms": [
                {
                    "position": list(room.position),
                    "value": room.value,
                    "priority": room.priority,
                    "containers": room.containers,
                }
                for room in self.loot_rooms
            ],
        }

    @classmethod
    def from_snapshot(cls, data: dict[str, Any]) -> Structure:
        """Rebuild a structure from ``snapshot`` output.

        Raises SnapshotError for missing keys, unknown enum values or cells
        outside the declared dimensions.
        """
        try:
            structure = cls(data["id"], data["name"], tuple(data["dimensions"]))
            for coord_str, cell in data.get("cells", {}).items():
                pos: Position = tuple(int(c) for c in coord_str.split(","))
                piece = Piece(
                    category=Category(cell["category"]),
                    tier=Tier(cell["tier"]),
                    health=cell["health"],
                    external=cell.get("external", False),
                    soft_side=cell.get("soft_side", False),
                    rotation=cell.get("rotation", 0),
                )
                if not structure.set(pos, piece):
                    raise SnapshotError(f"cell {coord_str} is out of bounds")
            structure.utility_anchors = [
                tuple(p) for p in data.get("utility_anchors", [])
            ]
            structure.spawn_anchors = [
                tuple(p) for p in data.get("spawn_anchors", [])
            ]
            structure.loot_rooms = [
                LootRoom(
                    position=tuple(room["position"]),
                    value=room["value"],
                    priority=room.get("priority", 5),
                    containers=room.get("containers", 1),
                )
                for room in data.get("loot_rooms", [])
            ]
        except (KeyError, TypeError, ValueError) as exc:
            raise SnapshotError(f"invalid structure snapshot: {exc}") from exc
        return structure
