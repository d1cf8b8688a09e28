"""bastion-score - Composite defensive scoring for bastion structures."""
from __future__ import annotations

from bastion_score.evaluator import evaluate
from bastion_score.metrics import (
    protection_score,
    spawn_redundancy_score,
    upkeep_efficiency_score,
    utility_redundancy_score,
    visibility_score,
)
from bastion_score.types import ScoreDetails, ScoreResult, ScoreWeights

__all__ = [
    "ScoreDetails",
    "ScoreResult",
    "ScoreWeights",
    "evaluate",
    "protection_score",
    "spawn_redundancy_score",
    "upkeep_efficiency_score",
    "utility_redundancy_score",
    "visibility_score",
]
