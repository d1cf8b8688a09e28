"""Sub-score functions.

All functions are pure and return a float in [0.0, 100.0].
"""
from __future__ import annotations

from bastion import Structure, blocks_visibility
from bastion_raid import RaidSimulation

COST_PER_POINT = 100.0
UPKEEP_RATIO_SCALE = 10.0


def _clamp(x: float) -> float:
    return max(0.0, min(100.0, x))


def protection_score(simulation: RaidSimulation) -> float:
    """Mean raid cost at 100 cost units per point."""
    if not simulation.results:
        return 0.0
    return _clamp(simulation.mean_cost / COST_PER_POINT)


def visibility_score(structure: Structure) -> float:
    """Share of boundary pieces that block line of sight."""
    boundary = 0
    blocking = 0
    for pos, piece in structure.iter_pieces():
        if structure.is_boundary(pos):
            boundary += 1
            if blocks_visibility(piece):
                blocking += 1
    if boundary == 0:
        return 0.0
    return _clamp(blocking / boundary * 100.0)


def upkeep_efficiency_score(simulation: RaidSimulation, total_upkeep: int) -> float:
    """Raid cost bought per unit of upkeep; a 10:1 ratio scores 100."""
    ratio = simulation.mean_cost / max(total_upkeep, 1)
    return _clamp(ratio * UPKEEP_RATIO_SCALE)


def _redundancy(count: int, single: float) -> float:
    if count <= 0:
        return 0.0
    if count == 1:
        return single
    return _clamp(70.0 + (count - 2) * 10.0)


def utility_redundancy_score(count: int) -> float:
    return _redundancy(count, 30.0)


def spawn_redundancy_score(count: int) -> float:
    return _redundancy(count, 40.0)
