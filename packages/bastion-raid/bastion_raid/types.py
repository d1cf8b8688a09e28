"""Result records and configuration for raid simulation."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from bastion import Category, Position, Tier


class RaidMethod(str, Enum):
    ROCKETS = "rockets"
    C4 = "c4"
    EXPLOSIVE_AMMO = "explosiveammo"
    SATCHELS = "satchels"


@dataclass(frozen=True)
class RaidConfig:
    """Immutable raid simulation settings.

    Attributes:
        method: Breaching method recorded on every result.
        workers: Thread pool size for per-entry pathfinding (1 runs inline).
    """

    method: RaidMethod = RaidMethod.ROCKETS
    workers: int = 1

    def __post_init__(self) -> None:
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")


@dataclass(frozen=True)
class PathResult:
    path: tuple[Position, ...]
    cost: int


@dataclass(frozen=True)
class PathPiece:
    position: Position
    category: Category
    tier: Tier
    cost: int


@dataclass(frozen=True)
class PathBreakdown:
    """What a path walks through: empty cells and pieces to destroy."""

    empty_cells: int
    pieces: tuple[PathPiece, ...]

    @property
    def piece_cost(self) -> int:
        return sum(p.cost for p in self.pieces)


@dataclass(frozen=True)
class SplashGroup:
    """Connected pieces on a path destroyed together.

    Attributes:
        positions: Member cells in discovery order.
        raw_cost: Sum of member destroy costs.
        cost: Cost after the splash discount (raw for single pieces).
        charges: Estimated charges needed; informational only.
    """

    positions: tuple[Position, ...]
    raw_cost: int
    cost: int
    charges: int


@dataclass(frozen=True)
class SplashResult:
    cost: int
    raw_cost: int
    savings: int
    groups: tuple[SplashGroup, ...]


@dataclass(frozen=True)
class RaidResult:
    """Cheapest breach of one loot room.

    Attributes:
        target: Loot room position.
        path: Cells from the chosen entry point to the target, inclusive.
        cost: Splash-optimized cost.
        raw_cost: Pathfinder cost before splash grouping.
        efficiency: Loot value per unit of optimized cost.
        method: Breaching method.
        splash: Grouping detail behind ``cost``.
    """

    target: Position
    path: tuple[Position, ...]
    cost: int
    raw_cost: int
    efficiency: float
    method: RaidMethod
    splash: SplashResult


@dataclass(frozen=True)
class RaidSimulation:
    """Ranked raid results plus aggregate cost statistics.

    ``results`` is ordered by descending efficiency. Cost statistics are 0
    and ``best_target`` is None when no loot room is reachable.
    """

    results: tuple[RaidResult, ...]
    min_cost: int
    max_cost: int
    mean_cost: float
    best_target: Position | None
    best_efficiency: float
    entry_points: int = 0
