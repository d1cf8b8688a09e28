"""A* search for the cheapest breach route through a structure."""
from __future__ import annotations

import heapq

from bastion import Position, Structure, destroy_cost

from bastion_raid.types import PathBreakdown, PathPiece, PathResult


def step_cost(structure: Structure, pos: Position) -> int:
    """Cost of entering ``pos``: destroy cost if occupied, else 1."""
    piece = structure.get(pos)
    return destroy_cost(piece) if piece is not None else 1


def heuristic(a: Position, b: Position) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) + abs(a[2] - b[2])


def find_path(
    structure: Structure, start: Position, target: Position
) -> PathResult | None:
    """Cheapest 6-connected route from ``start`` to ``target``, inclusive.

    Entering an occupied start cell already means breaching it, so the start
    piece's destroy cost seeds the route cost. Returns None when the target
    cannot be reached or either endpoint is outside the grid.

    Equal-f entries are popped in position order, so results are reproducible.
    """
    if not structure.is_valid(start) or not structure.is_valid(target):
        return None
    start = tuple(start)
    target = tuple(target)

    start_piece = structure.get(start)
    start_cost = destroy_cost(start_piece) if start_piece is not None else 0

    open_set: list[tuple[int, Position]] = [
        (start_cost + heuristic(start, target), start)
    ]
    came_from: dict[Position, Position] = {}
    g_score: dict[Position, int] = {start: start_cost}
    closed: set[Position] = set()

    while open_set:
        _, current = heapq.heappop(open_set)
        if current in closed:
            continue
        closed.add(current)
        if current == target:
            path: list[Position] = [current]
            while current in came_from:
                current = came_from[current]
                path.append(current)
            path.reverse()
            return PathResult(path=tuple(path), cost=g_score[target])

        for neighbor in structure.neighbors(current):
            if neighbor in closed:
                continue
            tentative = g_score[current] + step_cost(structure, neighbor)
            if tentative < g_score.get(neighbor, float("inf")):
                came_from[neighbor] = current
                g_score[neighbor] = tentative
                heapq.heappush(
                    open_set, (tentative + heuristic(neighbor, target), neighbor)
                )

    return None


def describe_path(structure: Structure, path: tuple[Position, ...] | list[Position]) -> PathBreakdown:
    """Break a path down into empty cells and the pieces it destroys."""
    empty = 0
    pieces: list[PathPiece] = []
    for pos in path:
        piece = structure.get(pos)
        if piece is None:
            empty += 1
            continue
        pieces.append(PathPiece(
            position=tuple(pos),
            category=piece.category,
            tier=piece.tier,
            cost=destroy_cost(piece),
        ))
    return PathBreakdown(empty_cells=empty, pieces=tuple(pieces))
