"""Tests for the tile-distance count on the infinite tiling."""

import pytest

from conftest import open_map
from garden_parser import parse_tile
from garden_types import Tile, UnsupportedGeometry
from tile_distances import (
    _copies_along_line,
    _copies_in_quadrant,
    reachable_by_tile_distances,
)
from tile_fill import total_reachable
from walk import simulate


class TestCopyCounting:
    """Tests for counting repeats beyond the measured block."""

    def test_copies_along_line_odd_width(self) -> None:
        # k = 0, 2, 4 leave 20, 10, 0 steps
        assert _copies_along_line(20, 5) == 3
        # k = 1, 3 leave 16, 6 steps
        assert _copies_along_line(21, 5) == 2
        assert _copies_along_line(0, 5) == 1
        assert _copies_along_line(1, 5) == 0
        assert _copies_along_line(5, 5) == 1

    def test_copies_along_line_even_width(self) -> None:
        assert _copies_along_line(8, 4) == 3
        assert _copies_along_line(9, 4) == 0

    def test_copies_in_quadrant_odd_width(self) -> None:
        # k = 0, 2, 4 contribute 1 + 3 + 5 copies
        assert _copies_in_quadrant(20, 5) == 9
        # k = 1, 3 contribute 2 + 4 copies
        assert _copies_in_quadrant(21, 5) == 6
        assert _copies_in_quadrant(1, 5) == 0

    def test_copies_in_quadrant_even_width(self) -> None:
        # k = 0, 1, 2 contribute 1 + 2 + 3 copies
        assert _copies_in_quadrant(8, 4) == 6
        assert _copies_in_quadrant(7, 4) == 0


class TestReachableByTileDistances:
    """Tests for the measured-distance count."""

    def test_open_tile(self, open_tile: Tile) -> None:
        """With no rocks, S steps reach (S + 1)^2 plots."""
        for steps in (0, 1, 2, 7, 12, 100, 1001, 26501365):
            assert reachable_by_tile_distances(open_tile, steps) == (steps + 1) ** 2, steps

    def test_example_small_budgets(self, example_tile: Tile) -> None:
        assert reachable_by_tile_distances(example_tile, 6) == 16
        assert reachable_by_tile_distances(example_tile, 10) == 50
        assert reachable_by_tile_distances(example_tile, 50) == 1594

    def test_example_matches_brute_force(self, example_tile: Tile) -> None:
        for steps in (0, 3, 11, 17, 24, 33, 40):
            brute = len(simulate(example_tile, example_tile.start, steps, infinite=True))
            assert reachable_by_tile_distances(example_tile, steps) == brute, steps

    def test_agrees_with_closed_form(self, rocky_tile: Tile) -> None:
        for steps in (100, 500, 1000, 26501365):
            assert reachable_by_tile_distances(rocky_tile, steps) == total_reachable(steps, rocky_tile)

    def test_widens_block_until_periodic(self, open_tile: Tile, caplog) -> None:
        """A one-copy block is too narrow for the open tile, so it is widened."""
        with caplog.at_level("INFO", logger="tile_distances"):
            assert reachable_by_tile_distances(open_tile, 30, span=1) == 31 ** 2
        assert "no period at span 1" in caplog.text

    def test_gives_up_past_max_span(self, open_tile: Tile) -> None:
        with pytest.raises(UnsupportedGeometry, match="did not settle"):
            reachable_by_tile_distances(open_tile, 30, span=1, max_span=1)

    def test_rejects_non_square(self) -> None:
        tile = parse_tile(".....\n..S..\n.....")
        with pytest.raises(UnsupportedGeometry, match="square"):
            reachable_by_tile_distances(tile, 10)

    def test_rejects_bad_arguments(self, open_tile: Tile) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            reachable_by_tile_distances(open_tile, -1)
        with pytest.raises(ValueError, match="span"):
            reachable_by_tile_distances(open_tile, 10, span=0)

    def test_even_width_open_tile(self) -> None:
        """The count does not need an odd width or a centred start."""
        tile = parse_tile("....\n....\n..S.\n....")
        for steps in (0, 1, 5, 40):
            assert reachable_by_tile_distances(tile, steps) == (steps + 1) ** 2, steps

    def test_seven_wide_open_tile(self) -> None:
        tile = parse_tile(open_map(7))
        assert reachable_by_tile_distances(tile, 1000) == 1001 ** 2
