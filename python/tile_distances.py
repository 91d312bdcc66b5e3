"""
Reachable plots on the infinite tiling, for tiles the closed form rejects.

Distances are measured exactly over a block of tile copies around the
origin. Far enough out, stepping one more copy away from the origin adds
exactly one tile width to every distance. That period is confirmed on the
block's outer ring before it is used, so every copy beyond the block can be
counted without visiting it:

- a ring copy on an edge stands for the line of copies behind it, where a
  plot at distance d recurs at d + k * width for k = 0, 1, 2, ...
- a ring copy on a corner stands for its whole quadrant, where k + 1
  copies share distance d + k * width
"""

from __future__ import annotations

import logging

from garden_types import Coord, Tile, UnsupportedGeometry
from walk import plot_distances

logger = logging.getLogger(__name__)

DEFAULT_SPAN = 3
MAX_SPAN = 8


def reachable_by_tile_distances(
    tile: Tile, steps: int, span: int = DEFAULT_SPAN, max_span: int = MAX_SPAN
) -> int:
    """
    Plots reachable in exactly `steps` steps on the infinite tiling.

    Args:
        tile: A square garden map
        steps: Number of steps (>= 0)
        span: Copies measured on each side of the origin tile to begin with
        max_span: Widest block tried before giving up

    Raises:
        UnsupportedGeometry: If the tile is not square, or distances never
            become periodic within max_span copies
    """
    if steps < 0:
        raise ValueError(f"steps must be non-negative, got {steps}")
    if span < 1:
        raise ValueError(f"span must be at least 1, got {span}")
    if tile.width != tile.height:
        raise UnsupportedGeometry(
            f"Tile distances need a square tile, got {tile.width}x{tile.height}"
        )

    while span <= max_span:
        distances = plot_distances(tile, tile.start, infinite=True, span=span)
        if _is_periodic(distances, tile.width, span):
            break
        logger.info("reachable_by_tile_distances: no period at span %d, widening", span)
        span += 1
    else:
        raise UnsupportedGeometry(
            f"Distances did not settle into a period of {tile.width} within {max_span} copies"
        )

    logger.info(
        "reachable_by_tile_distances: period found at span %d (%d plots measured)",
        span,
        len(distances),
    )
    return _count(distances, tile.width, span, steps)


def _is_periodic(distances: dict[Coord, int], width: int, span: int) -> bool:
    """Whether each ring copy is exactly one width further than the copy inside it."""
    for tx in range(-span, span + 1):
        for ty in range(-span, span + 1):
            inward: list[tuple[int, int]] = []
            if abs(tx) == span:
                inward.append((tx - (1 if tx > 0 else -1), ty))
            if abs(ty) == span:
                inward.append((tx, ty - (1 if ty > 0 else -1)))
            for ix, iy in inward:
                for x in range(width):
                    for y in range(width):
                        outer = distances.get((tx * width + x, ty * width + y))
                        inner = distances.get((ix * width + x, iy * width + y))
                        if outer is None and inner is None:
                            continue
                        if outer is None or inner is None or outer != inner + width:
                            return False
    return True


def _count(distances: dict[Coord, int], width: int, span: int, steps: int) -> int:
    total = 0
    for (x, y), distance in distances.items():
        if distance > steps:
            continue
        on_ring = (abs(x // width) == span) + (abs(y // width) == span)
        remaining = steps - distance
        match on_ring:
            case 0:
                total += 1 if remaining % 2 == 0 else 0
            case 1:
                total += _copies_along_line(remaining, width)
            case 2:
                total += _copies_in_quadrant(remaining, width)
    return total


def _copies_along_line(remaining: int, width: int) -> int:
    """Copies k = 0, 1, ... in a line, at distance + k * width, that land on parity."""
    last = remaining // width
    if width % 2 == 0:
        return last + 1 if remaining % 2 == 0 else 0
    first = remaining % 2
    return (last - first) // 2 + 1 if last >= first else 0


def _copies_in_quadrant(remaining: int, width: int) -> int:
    last = remaining // width
    if width % 2 == 0:
        return (last + 1) * (last + 2) // 2 if remaining % 2 == 0 else 0
    first = remaining % 2
    if last < first:
        return 0
    repeats = (last - first) // 2 + 1
    # Sum of k + 1 over k = first, first + 2, ...
    return repeats * (first + 1) + repeats * (repeats - 1)
