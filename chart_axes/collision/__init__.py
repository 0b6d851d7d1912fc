"""Collision resolution for measured tick labels."""

from chart_axes.collision.resolver import (
    drop_overset_ticks,
    drop_redundant_ticks,
    drop_ticks,
    find_major_ticks,
    resolve_collisions,
    resolve_hierarchical,
)

__all__ = [
    "drop_overset_ticks",
    "drop_ticks",
    "drop_redundant_ticks",
    "find_major_ticks",
    "resolve_collisions",
    "resolve_hierarchical",
]
