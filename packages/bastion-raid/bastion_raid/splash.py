"""Splash damage grouping for raid paths.

Area-damage weapons hit adjacent pieces together, so connected pieces on a
path are priced as one blast group with a discount.
"""
from __future__ import annotations

import math
from collections import deque
from typing import Iterable

from bastion import Piece, Position, Structure, destroy_cost

from bastion_raid.types import SplashGroup, SplashResult

SPLASH_EFFICIENCY = 0.75
CHARGE_COST = 350

_OFFSETS = [
    (1, 0, 0), (-1, 0, 0),
    (0, 1, 0), (0, -1, 0),
    (0, 0, 1), (0, 0, -1),
]


def _adjacent(pos: Position) -> list[Position]:
    x, y, z = pos
    return [(x + dx, y + dy, z + dz) for dx, dy, dz in _OFFSETS]


def discounted(raw_cost: int) -> int:
    """Splash-discounted cost, rounded up to a whole unit."""
    return math.ceil(raw_cost * SPLASH_EFFICIENCY)


def optimize_splash(
    structure: Structure, path: Iterable[Position]
) -> SplashResult:
    """Price a path with adjacent destroyed pieces grouped into blasts.

    Only occupied path cells join groups, and only through other occupied
    path cells. Each empty path cell costs 1.
    """
    members: dict[Position, Piece] = {}
    empty = 0
    for pos in path:
        pos = tuple(pos)
        piece = structure.get(pos)
        if piece is None:
            empty += 1
        else:
            members.setdefault(pos, piece)

    visited: set[Position] = set()
    groups: list[SplashGroup] = []
    for seed in members:
        if seed in visited:
            continue
        visited.add(seed)
        queue = deque([seed])
        positions: list[Position] = []
        while queue:
            current = queue.popleft()
            positions.append(current)
            for neighbor in _adjacent(current):
                if neighbor in members and neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

        raw = sum(destroy_cost(members[p]) for p in positions)
        cost = discounted(raw) if len(positions) >= 2 else raw
        groups.append(SplashGroup(
            positions=tuple(positions),
            raw_cost=raw,
            cost=cost,
            charges=math.ceil(cost / CHARGE_COST),
        ))

    raw_total = sum(g.raw_cost for g in groups)
    group_total = sum(g.cost for g in groups)
    return SplashResult(
        cost=group_total + empty,
        raw_cost=raw_total + empty,
        savings=raw_total - group_total,
        groups=tuple(groups),
    )


def estimate_step_cost(
    structure: Structure, pos: Position, previous: Iterable[Position]
) -> int:
    """Incremental splash estimate for stepping into ``pos``.

    Discounted when any neighbour of ``pos`` is already on the path.
    """
    piece = structure.get(pos)
    if piece is None:
        return 1
    cost = destroy_cost(piece)
    seen = {tuple(p) for p in previous}
    if any(n in seen for n in _adjacent(tuple(pos))):
        return discounted(cost)
    return cost
