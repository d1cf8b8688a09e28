"""Raid report -- build a small base, raid it, and score it.

Demonstrates:
- Building a Structure piece by piece
- Running the raid simulator and reading the ranked results
- Splash grouping on the cheapest path
- Composite scoring with default and custom weights

Run: python examples/raid_report.py
"""

from bastion import Category, LootRoom, Structure, Tier, make_piece
from bastion_raid import RaidConfig, describe_path, simulate_raid
from bastion_score import ScoreWeights, evaluate


def build_base() -> Structure:
    base = Structure("demo-1", "2x2 stone starter", (6, 6, 4))
    foundation = make_piece(Category.FOUNDATION, Tier.STONE)
    wall = make_piece(Category.WALL, Tier.STONE)
    door = make_piece(Category.DOOR, Tier.METAL, external=True)

    for x in range(1, 5):
        for y in range(1, 5):
            base.set((x, y, 0), foundation)
            base.set((x, y, 3), make_piece(Category.CEILING, Tier.STONE))
            for z in (1, 2):
                if x in (1, 4) or y in (1, 4):
                    base.set((x, y, z), wall)
    base.set((1, 2, 1), door)

    base.utility_anchors.append((2, 2, 1))
    base.spawn_anchors.extend([(3, 3, 1), (3, 2, 1)])
    base.loot_rooms.append(LootRoom(position=(3, 3, 2), value=25000, priority=9, containers=3))
    base.loot_rooms.append(LootRoom(position=(2, 3, 1), value=4000, priority=3))
    return base


def main() -> None:
    print("=== Raid Report ===\n")

    base = build_base()
    print(f"{base.name}: {base.piece_count} pieces, upkeep {base.upkeep_totals()}")

    sim = simulate_raid(base, RaidConfig(workers=2))
    print(f"\n{sim.entry_points} entry points, {len(sim.results)} reachable loot rooms")
    for result in sim.results:
        breakdown = describe_path(base, result.path)
        print(
            f"  target {result.target}: cost {result.cost} "
            f"(raw {result.raw_cost}, saved {result.splash.savings}), "
            f"efficiency {result.efficiency:.2f}"
        )
        for piece in breakdown.pieces:
            print(f"    breach {piece.category.value} ({piece.tier.name}) at {piece.position}: {piece.cost}")

    score = evaluate(base)
    print(f"\nOverall score: {score.overall:.1f}")
    print(f"  protection         {score.protection:.1f}")
    print(f"  visibility         {score.visibility:.1f}")
    print(f"  upkeep efficiency  {score.upkeep_efficiency:.1f}")
    print(f"  utility redundancy {score.utility_redundancy:.1f}")
    print(f"  spawn redundancy   {score.spawn_redundancy:.1f}")

    raid_only = ScoreWeights(
        protection=1.0,
        visibility=0.0,
        upkeep_efficiency=0.0,
        utility_redundancy=0.0,
        spawn_redundancy=0.0,
    )
    print(f"\nProtection-only score: {evaluate(base, raid_only).overall:.1f}")


if __name__ == "__main__":
    main()
