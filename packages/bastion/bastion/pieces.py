"""Piece cost model: destroy cost, upkeep and classification.

All tables are tuples indexed by ``Tier`` so every tier has exactly one entry.
"""
from __future__ import annotations

from bastion.types import Category, Piece, Tier

# Destroy cost per tier for each category-class.
BARRIER_COST: tuple[int, ...] = (1, 175, 1400, 2100, 4200)
APERTURE_COST: tuple[int, ...] = (1, 70, 700, 1050, 2100)

HEALTH: tuple[int, ...] = (10, 250, 500, 1000, 2000)

# (resource, amount) per tier
UPKEEP: tuple[tuple[str, int], ...] = (
    ("none", 0),
    ("wood", 10),
    ("stone", 10),
    ("metal_fragments", 20),
    ("high_quality_metal", 10),
)

COVERAGE_RADIUS = 25

_APERTURES = frozenset({Category.DOOR, Category.GATE})
_SOFT_SIDE_TIERS = frozenset({Tier.STONE, Tier.METAL})
_VISION_BLOCKERS = frozenset({Category.WALL, Category.DOOR, Category.GATE})
_STRUCTURAL = frozenset({
    Category.FOUNDATION,
    Category.WALL,
    Category.FLOOR,
    Category.CEILING,
    Category.DOORWAY,
})
_UPKEEP_MULTIPLIER: dict[Category, int] = {
    Category.FOUNDATION: 2,
    Category.WALL: 1,
    Category.FLOOR: 1,
    Category.CEILING: 1,
    Category.DOORWAY: 1,
    Category.WINDOW: 1,
    Category.STAIRS: 1,
    Category.ROOF: 1,
}


def make_piece(
    category: Category,
    tier: Tier,
    *,
    external: bool = False,
    soft_side: bool = False,
    rotation: int = 0,
) -> Piece:
    """Build a piece with full health for its tier."""
    return Piece(
        category=category,
        tier=tier,
        health=health_for(tier),
        external=external,
        soft_side=soft_side,
        rotation=rotation,
    )


def health_for(tier: Tier) -> int:
    return HEALTH[tier]


def category_class(category: Category) -> str:
    """Return "aperture" for doors and gates, "barrier" otherwise."""
    return "aperture" if category in _APERTURES else "barrier"


def destroy_cost(piece: Piece) -> int:
    """Resource cost to breach a piece.

    Soft-sided stone and metal pieces cost half (rounded down).
    """
    table = APERTURE_COST if piece.category in _APERTURES else BARRIER_COST
    cost = table[piece.tier]
    if piece.soft_side and piece.tier in _SOFT_SIDE_TIERS:
        cost //= 2
    return cost


def upkeep_amount(piece: Piece) -> int:
    _resource, amount = UPKEEP[piece.tier]
    return amount * _UPKEEP_MULTIPLIER.get(piece.category, 0)


def upkeep(piece: Piece) -> dict[str, int]:
    """Per-piece upkeep as {resource: amount}. Empty when nothing is consumed."""
    resource, _amount = UPKEEP[piece.tier]
    amount = upkeep_amount(piece)
    if amount <= 0:
        return {}
    return {resource: amount}


def blocks_visibility(piece: Piece) -> bool:
    return piece.category in _VISION_BLOCKERS


def is_structural(category: Category) -> bool:
    return category in _STRUCTURAL
