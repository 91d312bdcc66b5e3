"""
Shared type definitions for the garden walk.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Coord = tuple[int, int]


class Direction(Enum):
    """Cardinal direction for a single step."""

    N = "N"  # Up (decreasing y)
    S = "S"  # Down (increasing y)
    E = "E"  # Right (increasing x)
    W = "W"  # Left (decreasing x)

    @property
    def delta(self) -> Coord:
        return _DELTAS[self]


_DELTAS: dict[Direction, Coord] = {
    Direction.N: (0, -1),
    Direction.S: (0, 1),
    Direction.E: (1, 0),
    Direction.W: (-1, 0),
}


class FillFrom(Enum):
    """Side of the origin tile on which a tile copy lies."""

    CENTER = "center"
    N = "N"
    E = "E"
    S = "S"
    W = "W"
    NE = "NE"
    NW = "NW"
    SE = "SE"
    SW = "SW"


class FillAmount(Enum):
    """How far the walk has filled a tile copy."""

    LEAST = "least"  # Leading edge
    NEXT_LEAST = "next_least"  # One copy behind the leading edge
    FULL_ODD = "full_odd"  # Saturated, odd number of steps left
    FULL_EVEN = "full_even"  # Saturated, even number of steps left


# =============================================================================
# Errors
# =============================================================================


class ParseError(ValueError):
    """Garden text that cannot be turned into a Tile."""


class UnsupportedGeometry(ValueError):
    """A tile that breaks an assumption of the infinite-tiling count."""


# =============================================================================
# Tile
# =============================================================================


@dataclass(frozen=True)
class Tile:
    """One copy of the garden map."""

    width: int
    height: int
    garden: frozenset[Coord]  # Walkable plots, start included
    start: Coord

    @property
    def center(self) -> Coord:
        return (self.width // 2, self.height // 2)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_walkable(self, x: int, y: int, wrap: bool = False) -> bool:
        """
        Whether (x, y) is a garden plot.

        With wrap, the map repeats forever in every direction, so the
        coordinates are reduced onto the base tile first.
        """
        if wrap:
            x %= self.width
            y %= self.height
        return (x, y) in self.garden
