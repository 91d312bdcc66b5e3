"""
How many garden plots can a walker stand on after a number of steps?

Part 1 walks a single copy of the map; part 2 walks the map repeated
forever in every direction, for step counts far too large to simulate.
"""

from __future__ import annotations

import logging

from garden_parser import load_tile, parse_tile
from garden_types import (
    Coord,
    Direction,
    FillAmount,
    FillFrom,
    ParseError,
    Tile,
    UnsupportedGeometry,
)
from tile_distances import reachable_by_tile_distances
from tile_fill import FillPart, check_geometry, fill_breakdown, total_reachable
from walk import iter_frontiers, plot_distances, reachable_after, simulate

__all__ = [
    "Coord",
    "Direction",
    "FillAmount",
    "FillFrom",
    "FillPart",
    "ParseError",
    "Tile",
    "UnsupportedGeometry",
    "DEFAULT_STEPS",
    "DEFAULT_INFINITE_STEPS",
    "check_geometry",
    "fill_breakdown",
    "iter_frontiers",
    "load_tile",
    "parse_tile",
    "plot_distances",
    "reachable_after",
    "reachable_after_infinite",
    "reachable_by_tile_distances",
    "simulate",
    "solve",
    "total_reachable",
]

logger = logging.getLogger(__name__)

DEFAULT_STEPS = 64
DEFAULT_INFINITE_STEPS = 26501365


def reachable_after_infinite(tile: Tile, steps: int) -> int:
    """
    Number of plots reachable in exactly `steps` steps on the infinite tiling.

    Uses the closed-form fill count when the tile has the shape it needs,
    and measured tile distances otherwise.

    Raises:
        UnsupportedGeometry: If neither method applies to the tile
    """
    try:
        check_geometry(tile)
    except UnsupportedGeometry as exc:
        logger.info("reachable_after_infinite: using tile distances. %s", exc)
        return reachable_by_tile_distances(tile, steps)
    return total_reachable(steps, tile)


def solve(
    tile: Tile, steps: int = DEFAULT_STEPS, infinite_steps: int = DEFAULT_INFINITE_STEPS
) -> tuple[int, int]:
    """Both answers: (single tile after `steps`, infinite tiling after `infinite_steps`)."""
    return (reachable_after(tile, steps), reachable_after_infinite(tile, infinite_steps))
