"""bastion-raid - Breach pathfinding and raid simulation for bastion structures."""
from __future__ import annotations

from bastion_raid.pathfind import describe_path, find_path, heuristic, step_cost
from bastion_raid.simulator import find_entry_points, simulate_raid
from bastion_raid.splash import (
    CHARGE_COST,
    SPLASH_EFFICIENCY,
    estimate_step_cost,
    optimize_splash,
)
from bastion_raid.types import (
    PathBreakdown,
    PathPiece,
    PathResult,
    RaidConfig,
    RaidMethod,
    RaidResult,
    RaidSimulation,
    SplashGroup,
    SplashResult,
)

__all__ = [
    "CHARGE_COST",
    "SPLASH_EFFICIENCY",
    "PathBreakdown",
    "PathPiece",
    "PathResult",
    "RaidConfig",
    "RaidMethod",
    "RaidResult",
    "RaidSimulation",
    "SplashGroup",
    "SplashResult",
    "describe_path",
    "estimate_step_cost",
    "find_entry_points",
    "find_path",
    "heuristic",
    "optimize_splash",
    "simulate_raid",
    "step_cost",
]
