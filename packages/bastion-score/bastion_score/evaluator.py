"""Composite defensive-quality evaluation of a structure."""
from __future__ import annotations

import logging

from bastion import Structure
from bastion_raid import RaidConfig, simulate_raid

from bastion_score.metrics import (
    protection_score,
    spawn_redundancy_score,
    upkeep_efficiency_score,
    utility_redundancy_score,
    visibility_score,
)
from bastion_score.types import ScoreDetails, ScoreResult, ScoreWeights

logger = logging.getLogger(__name__)


def evaluate(
    structure: Structure,
    weights: ScoreWeights | None = None,
    config: RaidConfig | None = None,
) -> ScoreResult:
    """Score a structure on protection, visibility, upkeep and redundancy.

    Runs one raid simulation and derives every raid-based sub-score from it.
    The result depends only on the structure state (and the weights).
    """
    if weights is None:
        weights = ScoreWeights()

    simulation = simulate_raid(structure, config)
    total_upkeep = structure.total_upkeep()
    utility_count = len(structure.utility_anchors)
    spawn_count = len(structure.spawn_anchors)

    protection = protection_score(simulation)
    visibility = visibility_score(structure)
    upkeep_efficiency = upkeep_efficiency_score(simulation, total_upkeep)
    utility_redundancy = utility_redundancy_score(utility_count)
    spawn_redundancy = spawn_redundancy_score(spawn_count)

    overall = (
        protection * weights.protection
        + visibility * weights.visibility
        + upkeep_efficiency * weights.upkeep_efficiency
        + utility_redundancy * weights.utility_redundancy
        + spawn_redundancy * weights.spawn_redundancy
    )
    logger.debug(
        "evaluated %s: overall %.2f (protection %.1f, visibility %.1f, "
        "upkeep %.1f, utility %.1f, spawn %.1f)",
        structure.id, overall, protection, visibility,
        upkeep_efficiency, utility_redundancy, spawn_redundancy,
    )

    return ScoreResult(
        overall=overall,
        protection=protection,
        visibility=visibility,
        upkeep_efficiency=upkeep_efficiency,
        utility_redundancy=utility_redundancy,
        spawn_redundancy=spawn_redundancy,
        details=ScoreDetails(
            mean_raid_cost=simulation.mean_cost,
            min_raid_cost=simulation.min_cost,
            max_raid_cost=simulation.max_cost,
            upkeep_totals=structure.upkeep_totals(),
            total_upkeep=total_upkeep,
            utility_anchor_count=utility_count,
            spawn_anchor_count=spawn_count,
            loot_room_count=len(structure.loot_rooms),
            simulation=simulation,
        ),
    )
