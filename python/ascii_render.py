"""
ASCII rendering of a garden walk.

Draws the map with the current frontier marked 'O', optionally over a
window of neighbouring tile copies to show the walk on the infinite tiling.
"""

from __future__ import annotations

import logging
from typing import Callable, Collection

import simple_chalk as chalk  # type: ignore[import-untyped]

from garden_types import Coord, Tile

logger = logging.getLogger(__name__)

OCCUPIED = "O"
ROCK = "#"
PLOT = "."
START = "S"


def _plain(s: str) -> str:
    return s


def render_frontier(
    tile: Tile,
    frontier: Collection[Coord],
    copies: int = 0,
    color: bool = True,
) -> str:
    """
    Render `frontier` on the map.

    Args:
        tile: The garden map
        frontier: Occupied plots, in tiling coordinates
        copies: Tile copies to draw on each side of the origin tile
        color: Colourise with simple_chalk

    Returns:
        One line per row, the origin tile's top-left plot at row/column
        copies * height / copies * width
    """
    occupied = frontier if isinstance(frontier, (set, frozenset)) else set(frontier)
    styles: dict[str, Callable[[str], str]] = {
        OCCUPIED: chalk.greenBright if color else _plain,
        ROCK: chalk.white if color else _plain,
        PLOT: chalk.green if color else _plain,
        START: chalk.yellow if color else _plain,
    }

    wrap = copies > 0
    start_x, start_y = tile.start
    lines: list[str] = []
    for y in range(-copies * tile.height, (copies + 1) * tile.height):
        chars: list[str] = []
        for x in range(-copies * tile.width, (copies + 1) * tile.width):
            if (x, y) in occupied:
                char = OCCUPIED
            elif not tile.is_walkable(x, y, wrap=wrap):
                char = ROCK
            elif x % tile.width == start_x and y % tile.height == start_y:
                char = START
            else:
                char = PLOT
            chars.append(styles[char](char))
        lines.append("".join(chars))

    outside = sum(
        1
        for x, y in occupied
        if not (-copies * tile.width <= x < (copies + 1) * tile.width
                and -copies * tile.height <= y < (copies + 1) * tile.height)
    )
    if outside:
        logger.info("render_frontier: %d occupied plots fall outside the window", outside)

    return "\n".join(lines)
