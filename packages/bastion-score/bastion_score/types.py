"""Score weights and result records."""
from __future__ import annotations

from dataclasses import dataclass, field, fields

from bastion_raid import RaidSimulation


@dataclass(frozen=True)
class ScoreWeights:
    """Immutable weights for combining sub-scores.

    Weights are expected to sum to 1 so the overall score stays in [0, 100];
    this is not enforced.

    Attributes:
        protection: Weight of the raid-cost protection score.
        visibility: Weight of the boundary visibility score.
        upkeep_efficiency: Weight of raid cost per unit of upkeep.
        utility_redundancy: Weight of the cupboard-count score.
        spawn_redundancy: Weight of the bed-count score.
    """

    protection: float = 0.35
    visibility: float = 0.20
    upkeep_efficiency: float = 0.20
    utility_redundancy: float = 0.15
    spawn_redundancy: float = 0.10

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value < 0:
                raise ValueError(f"{f.name} weight must be >= 0, got {value}")

    @property
    def total(self) -> float:
        return sum(getattr(self, f.name) for f in fields(self))


@dataclass(frozen=True)
class ScoreDetails:
    mean_raid_cost: float
    min_raid_cost: int
    max_raid_cost: int
    upkeep_totals: dict[str, int] = field(default_factory=dict)
    total_upkeep: int = 0
    utility_anchor_count: int = 0
    spawn_anchor_count: int = 0
    loot_room_count: int = 0
    simulation: RaidSimulation | None = None


@dataclass(frozen=True)
class ScoreResult:
    """Composite score and its five sub-scores, all in [0, 100].

    ``overall`` is the weighted sum of the sub-scores.
    """

    overall: float
    protection: float
    visibility: float
    upkeep_efficiency: float
    utility_redundancy: float
    spawn_redundancy: float
    details: ScoreDetails
