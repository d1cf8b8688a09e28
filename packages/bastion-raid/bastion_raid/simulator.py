"""Raid simulator: cheapest breach of every loot room, ranked by efficiency."""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from bastion import LootRoom, Position, Structure

from bastion_raid.pathfind import find_path
from bastion_raid.splash import optimize_splash
from bastion_raid.types import PathResult, RaidConfig, RaidResult, RaidSimulation

logger = logging.getLogger(__name__)

GROUND_LAYERS = 3


def _on_side(structure: Structure, x: int, y: int) -> bool:
    return x == 0 or x == structure.width - 1 or y == 0 or y == structure.height - 1


def find_entry_points(structure: Structure) -> list[Position]:
    """Positions a raid may start from, in discovery order, without repeats.

    External pieces plus every ground-level side cell (z < 3), occupied or
    not. Falls back to all side cells at z in {0, 1, 2} if nothing matched.
    """
    entries: dict[Position, None] = {}
    for pos, piece in structure.iter_pieces():
        if piece.external:
            entries[pos] = None

    layers = min(GROUND_LAYERS, structure.depth)
    for x in range(structure.width):
        for y in range(structure.height):
            if not _on_side(structure, x, y):
                continue
            for z in range(layers):
                entries[(x, y, z)] = None

    if not entries:
        logger.debug("no entry points found, using ground perimeter fallback")
        for x in range(structure.width):
            for y in range(structure.height):
                for z in range(GROUND_LAYERS):
                    if _on_side(structure, x, y) and structure.is_valid((x, y, z)):
                        entries[(x, y, z)] = None

    return list(entries)


def _cheapest(results: list[PathResult | None]) -> PathResult | None:
    best: PathResult | None = None
    for result in results:
        if result is not None and (best is None or result.cost < best.cost):
            best = result
    return best


def _raid_room(
    structure: Structure,
    room: LootRoom,
    entries: list[Position],
    config: RaidConfig,
    executor: ThreadPoolExecutor | None,
) -> RaidResult | None:
    if executor is not None:
        paths = list(executor.map(
            lambda entry: find_path(structure, entry, room.position), entries,
        ))
    else:
        paths = [find_path(structure, entry, room.position) for entry in entries]

    best = _cheapest(paths)
    if best is None:
        logger.debug("no path to loot room at %s", room.position)
        return None

    splash = optimize_splash(structure, best.path)
    efficiency = room.value / max(splash.cost, 1)
    logger.debug(
        "loot room at %s: raw cost %d, splash cost %d (%d groups, saved %d)",
        room.position, best.cost, splash.cost, len(splash.groups), splash.savings,
    )
    return RaidResult(
        target=tuple(room.position),
        path=best.path,
        cost=splash.cost,
        raw_cost=best.cost,
        efficiency=efficiency,
        method=config.method,
        splash=splash,
    )


def simulate_raid(
    structure: Structure, config: RaidConfig | None = None
) -> RaidSimulation:
    """Raid every loot room from every entry point.

    Unreachable loot rooms are left out of the results. The structure must
    not be mutated while a simulation is running.
    """
    if config is None:
        config = RaidConfig()
    entries = find_entry_points(structure)
    logger.debug(
        "simulating raid on %s: %d entry points, %d loot rooms",
        structure.id, len(entries), len(structure.loot_rooms),
    )

    results: list[RaidResult] = []
    executor = (
        ThreadPoolExecutor(max_workers=config.workers) if config.workers > 1 else None
    )
    try:
        for room in structure.loot_rooms:
            result = _raid_room(structure, room, entries, config, executor)
            if result is not None:
                results.append(result)
    finally:
        if executor is not None:
            executor.shutdown(wait=True)

    results.sort(key=lambda r: r.efficiency, reverse=True)

    if not results:
        return RaidSimulation(
            results=(),
            min_cost=0,
            max_cost=0,
            mean_cost=0.0,
            best_target=None,
            best_efficiency=0.0,
            entry_points=len(entries),
        )

    costs = [r.cost for r in results]
    return RaidSimulation(
        results=tuple(results),
        min_cost=min(costs),
        max_cost=max(costs),
        mean_cost=sum(costs) / len(costs),
        best_target=results[0].target,
        best_efficiency=results[0].efficiency,
        entry_points=len(entries),
    )
