"""
Test suite for the Structure grid.

Tests cover:
- Constructor validation and properties
- get/set with bounds checking
- Piece count and upkeep bookkeeping
- Neighbor queries (6-directional)
- Distance and coverage
- Scan-order iteration
- Snapshot and restore
"""

import math

import pytest
from bastion import (
    Category,
    LootRoom,
    Piece,
    SnapshotError,
    Structure,
    Tier,
    distance,
    make_piece,
)

WALL = make_piece(Category.WALL, Tier.STONE)
FOUNDATION = make_piece(Category.FOUNDATION, Tier.WOOD)


class TestStructureConstruction:
    """Test Structure initialization and properties."""

    def test_constructor_sets_dimensions(self):
        s = Structure("b1", "base", (4, 5, 6))
        assert s.width == 4
        assert s.height == 5
        assert s.depth == 6
        assert s.dimensions == (4, 5, 6)
        assert s.piece_count == 0
        assert s.loot_rooms == []

    @pytest.mark.parametrize("dims", [(0, 5, 5), (5, -1, 5), (5, 5, 0)])
    def test_non_positive_dimensions_raise(self, dims):
        with pytest.raises(ValueError):
            Structure("b1", "base", dims)

    def test_wrong_arity_raises(self):
        with pytest.raises(ValueError):
            Structure("b1", "base", (5, 5))


class TestStructureGetSet:
    """Test grid access."""

    def test_set_and_get(self):
        s = Structure("b1", "base", (3, 3, 3))
        assert s.set((1, 1, 1), WALL) is True
        assert s.get((1, 1, 1)) == WALL

    def test_empty_cell_returns_none(self):
        s = Structure("b1", "base", (3, 3, 3))
        assert s.get((0, 0, 0)) is None

    @pytest.mark.parametrize(
        "pos", [(-1, 0, 0), (0, -1, 0), (0, 0, -1), (3, 0, 0), (0, 3, 0), (0, 0, 3)]
    )
    def test_out_of_bounds(self, pos):
        s = Structure("b1", "base", (3, 3, 3))
        s.set((0, 0, 0), WALL)
        assert s.get(pos) is None
        assert s.set(pos, WALL) is False
        assert s.piece_count == 1
        assert len(list(s.iter_pieces())) == 1

    def test_piece_count_tracks_occupancy(self):
        s = Structure("b1", "base", (3, 3, 3))
        s.set((0, 0, 0), WALL)
        s.set((1, 0, 0), WALL)
        assert s.piece_count == 2
        s.set((0, 0, 0), FOUNDATION)  # replace keeps count
        assert s.piece_count == 2
        s.set((0, 0, 0), None)
        assert s.piece_count == 1
        s.clear((0, 0, 0))  # clearing empty cell
        assert s.piece_count == 1
        assert len(s) == 1

    def test_invalid_piece_never_reaches_grid(self):
        s = Structure("b1", "base", (3, 3, 3))
        with pytest.raises(ValueError):
            s.set((1, 1, 1), Piece(Category.WALL, 7, health=10))
        assert s.get((1, 1, 1)) is None
        assert s.piece_count == 0
        assert s.upkeep_totals() == {}

    def test_upkeep_totals_follow_mutation(self):
        s = Structure("b1", "base", (3, 3, 3))
        s.set((0, 0, 0), FOUNDATION)
        s.set((1, 0, 0), WALL)
        assert s.upkeep_totals() == {"wood": 20, "stone": 10}
        assert s.total_upkeep() == 30
        s.set((0, 0, 0), WALL)
        assert s.upkeep_totals() == {"stone": 20}
        s.clear((0, 0, 0))
        s.clear((1, 0, 0))
        assert s.upkeep_totals() == {}
        assert s.total_upkeep() == 0


class TestStructureNeighbors:
    """Test neighbor queries."""

    def test_interior_has_six_neighbors(self):
        s = Structure("b1", "base", (3, 3, 3))
        assert sorted(s.neighbors((1, 1, 1))) == sorted([
            (0, 1, 1), (2, 1, 1),
            (1, 0, 1), (1, 2, 1),
            (1, 1, 0), (1, 1, 2),
        ])

    def test_corner_has_three_neighbors(self):
        s = Structure("b1", "base", (3, 3, 3))
        assert sorted(s.neighbors((0, 0, 0))) == [(0, 0, 1), (0, 1, 0), (1, 0, 0)]

    def test_single_cell_has_no_neighbors(self):
        s = Structure("b1", "base", (1, 1, 1))
        assert s.neighbors((0, 0, 0)) == []

    def test_boundary(self):
        s = Structure("b1", "base", (3, 3, 3))
        assert s.is_boundary((0, 1, 1))
        assert s.is_boundary((1, 2, 1))
        assert s.is_boundary((1, 1, 0))
        assert not s.is_boundary((1, 1, 1))
        assert not s.is_boundary((1, 1, 2))


class TestStructureDistanceAndCoverage:
    """Test distance and anchor coverage."""

    def test_distance_is_euclidean(self):
        assert distance((0, 0, 0), (3, 4, 0)) == 5.0
        assert distance((1, 1, 1), (2, 2, 2)) == pytest.approx(math.sqrt(3))

    def test_coverage_uses_utility_anchors_by_default(self):
        s = Structure("b1", "base", (60, 60, 5))
        s.utility_anchors.append((0, 0, 0))
        assert s.has_coverage((25, 0, 0))
        assert not s.has_coverage((26, 0, 0))

    def test_coverage_with_explicit_anchors_and_radius(self):
        s = Structure("b1", "base", (10, 10, 10))
        assert s.has_coverage((5, 5, 5), anchors=[(5, 5, 7)], radius=2)
        assert not s.has_coverage((5, 5, 5), anchors=[(5, 5, 8)], radius=2)

    def test_no_anchors_no_coverage(self):
        s = Structure("b1", "base", (10, 10, 10))
        assert not s.has_coverage((0, 0, 0))


class TestStructureIteration:
    """Test scan-order iteration."""

    def test_scan_order_x_outer_z_inner(self):
        s = Structure("b1", "base", (2, 2, 2))
        for pos in [(1, 0, 0), (0, 1, 0), (0, 0, 1), (0, 0, 0), (1, 1, 1)]:
            s.set(pos, WALL)
        positions = [pos for pos, _ in s.iter_pieces()]
        assert positions == [(0, 0, 0), (0, 0, 1), (0, 1, 0), (1, 0, 0), (1, 1, 1)]

    def test_iteration_is_restartable(self):
        s = Structure("b1", "base", (2, 2, 2))
        s.set((1, 1, 1), WALL)
        assert list(s) == list(s) == [((1, 1, 1), WALL)]

    def test_iteration_is_lazy(self):
        s = Structure("b1", "base", (2, 2, 2))
        s.set((0, 0, 0), WALL)
        it = s.iter_pieces()
        assert next(it) == ((0, 0, 0), WALL)
        with pytest.raises(StopIteration):
            next(it)


class TestStructureSnapshot:
    """Test snapshot/restore."""

    def _build(self) -> Structure:
        s = Structure("b1", "base", (3, 3, 3))
        s.set((0, 0, 0), make_piece(Category.WALL, Tier.METAL, external=True, rotation=2))
        s.set((1, 1, 1), make_piece(Category.DOOR, Tier.STONE, soft_side=True))
        s.utility_anchors.append((1, 1, 2))
        s.spawn_anchors.append((2, 2, 2))
        s.loot_rooms.append(LootRoom(position=(1, 2, 1), value=500, priority=8, containers=3))
        return s

    def test_roundtrip_preserves_state(self):
        s = self._build()
        restored = Structure.from_snapshot(s.snapshot())
        assert restored.id == "b1"
        assert restored.dimensions == (3, 3, 3)
        assert list(restored) == list(s)
        assert restored.piece_count == 2
        assert restored.upkeep_totals() == s.upkeep_totals()
        assert restored.utility_anchors == [(1, 1, 2)]
        assert restored.spawn_anchors == [(2, 2, 2)]
        assert restored.loot_rooms == s.loot_rooms

    def test_restored_copy_is_independent(self):
        s = self._build()
        restored = Structure.from_snapshot(s.snapshot())
        restored.clear((0, 0, 0))
        assert s.get((0, 0, 0)) is not None

    def test_missing_key_raises_snapshot_error(self):
        with pytest.raises(SnapshotError):
            Structure.from_snapshot({"id": "x", "name": "y"})

    def test_unknown_category_raises_snapshot_error(self):
        data = self._build().snapshot()
        data["cells"]["0,0,0"]["category"] = "moat"
        with pytest.raises(SnapshotError):
            Structure.from_snapshot(data)

    def test_out_of_bounds_cell_raises_snapshot_error(self):
        data = self._build().snapshot()
        data["cells"]["9,9,9"] = data["cells"]["0,0,0"]
        with pytest.raises(SnapshotError):
            Structure.from_snapshot(data)
