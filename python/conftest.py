"""Shared pytest fixtures for garden walk tests."""

import pytest

from garden_parser import parse_tile
from garden_types import Tile

# The puzzle's worked example. Its middle row is blocked, so only the
# tile-distance count applies on the infinite tiling.
EXAMPLE = """
...........
.....###.#.
.###.##..#.
..#.#...#..
....#.#....
.##..S####.
.##..#...#.
.......##..
.##.#.####.
.##..##.##.
...........
"""

# Rocks only off the middle row, middle column and border.
ROCKY = """
...........
.#.#.....#.
...#...##..
.##.....#..
....#.#....
.....S.....
..#......#.
.#..#..##..
...#.......
.#....#..#.
...........
"""


def open_map(width: int) -> str:
    """An odd square map with no rocks and the start in the middle."""
    mid = width // 2
    rows = ["." * width for _ in range(width)]
    rows[mid] = "." * mid + "S" + "." * mid
    return "\n".join(rows)


@pytest.fixture
def example_tile() -> Tile:
    return parse_tile(EXAMPLE)


@pytest.fixture
def rocky_tile() -> Tile:
    return parse_tile(ROCKY)


@pytest.fixture
def open_tile() -> Tile:
    """5x5 with no rocks."""
    return parse_tile(open_map(5))
