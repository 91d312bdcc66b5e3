"""
Step-by-step garden walk on one tile or on the infinite tiling.

The frontier after k steps is exactly the set of plots the walker can be
standing on after k steps, not every plot visited so far.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterator

from garden_types import Coord, Direction, Tile

logger = logging.getLogger(__name__)

_OFFSETS = tuple(direction.delta for direction in Direction)


def _advance(tile: Tile, frontier: set[Coord], infinite: bool, into: set[Coord]) -> None:
    """Fill `into` with every plot one step from `frontier`."""
    into.clear()
    for x, y in frontier:
        for dx, dy in _OFFSETS:
            # Without wrap, is_walkable already rejects cells off the tile
            if tile.is_walkable(x + dx, y + dy, wrap=infinite):
                into.add((x + dx, y + dy))


def simulate(tile: Tile, start: Coord, steps: int, infinite: bool = False) -> set[Coord]:
    """
    Frontier after exactly `steps` steps from `start`.

    Args:
        tile: The garden map
        start: Starting plot, not necessarily tile.start
        steps: Number of steps to take (>= 0)
        infinite: Walk the infinite tiling instead of staying on the tile

    Returns:
        Plots reachable in exactly `steps` steps. The set is the caller's.

    Every plot in a frontier is also in the frontier two steps later (step
    away and back), so once a frontier is no larger than the one two steps
    before it, the walk just alternates between the two buffers.
    """
    if steps < 0:
        raise ValueError(f"steps must be non-negative, got {steps}")

    current: set[Coord] = {start}
    following: set[Coord] = set()
    sizes = [1]

    for step in range(steps):
        _advance(tile, current, infinite, following)
        current, following = following, current
        sizes.append(len(current))

        if step >= 1 and sizes[-1] == sizes[-3]:
            remaining = steps - step - 1
            logger.debug(
                "simulate: saturated at step %d with %d plots, %d steps skipped",
                step + 1,
                len(current),
                remaining,
            )
            return current if remaining % 2 == 0 else following

    return current


def iter_frontiers(tile: Tile, start: Coord, infinite: bool = False) -> Iterator[frozenset[Coord]]:
    """Yield the frontier after 0, 1, 2, ... steps, forever."""
    current: set[Coord] = {start}
    while True:
        yield frozenset(current)
        following: set[Coord] = set()
        _advance(tile, current, infinite, following)
        current = following


def plot_distances(
    tile: Tile, start: Coord, infinite: bool = False, span: int = 0
) -> dict[Coord, int]:
    """
    Shortest number of steps from `start` to every reachable plot.

    With infinite, the search covers the copies of the tile at most `span`
    copies away from the origin tile (a (2*span + 1)^2 block). Without it,
    the search stays on the tile and span is ignored.
    """
    if infinite:
        low_x, high_x = -span * tile.width, (span + 1) * tile.width
        low_y, high_y = -span * tile.height, (span + 1) * tile.height
    else:
        low_x, high_x = 0, tile.width
        low_y, high_y = 0, tile.height

    distances: dict[Coord, int] = {start: 0}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        distance = distances[(x, y)] + 1
        for dx, dy in _OFFSETS:
            nx, ny = x + dx, y + dy
            if not (low_x <= nx < high_x and low_y <= ny < high_y):
                continue
            if (nx, ny) in distances or not tile.is_walkable(nx, ny, wrap=infinite):
                continue
            distances[(nx, ny)] = distance
            queue.append((nx, ny))
    return distances


def reachable_after(tile: Tile, steps: int) -> int:
    """Number of plots reachable in exactly `steps` steps without leaving the tile."""
    return len(simulate(tile, tile.start, steps))
