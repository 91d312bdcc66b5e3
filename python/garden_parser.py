"""
Garden map parsing.

Format:
- One row per line, all rows the same length
- '.' is a garden plot, '#' is a rock
- 'S' is the garden plot the walk starts from (exactly one)
"""

from __future__ import annotations

from pathlib import Path

from garden_types import Coord, ParseError, Tile

__all__ = ["parse_tile", "load_tile"]

PLOT = "."
ROCK = "#"
START = "S"


def parse_tile(text: str) -> Tile:
    """
    Parse a garden map into a Tile.

    Blank lines before and after the map, and whitespace around each row,
    are ignored.

    Example:
        \"\"\"
        ...
        .S#
        ...
        \"\"\"
        Creates a 3x3 Tile with start (1, 1) and every cell but (2, 1) walkable.

    Raises:
        ParseError: On an unknown character, a missing or repeated start,
            empty input, or rows of different lengths
    """
    rows = [line.strip() for line in text.strip().splitlines()]
    if not rows or not rows[0]:
        raise ParseError("Empty garden map")

    garden: set[Coord] = set()
    start: Coord | None = None

    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char == PLOT:
                garden.add((x, y))
            elif char == START:
                if start is not None:
                    raise ParseError(
                        f"More than one start in garden map\n"
                        f"  First at column {start[0]}, row {start[1]}\n"
                        f"  Again at column {x}, row {y}: \"{row}\""
                    )
                start = (x, y)
                garden.add((x, y))
            elif char != ROCK:
                raise ParseError(
                    f"Invalid character '{char}' in garden map\n"
                    f"  Row {y}, column {x}: \"{row}\"\n"
                    f"  Valid characters: '{PLOT}' (plot), '{ROCK}' (rock), '{START}' (start)"
                )

    width = len(rows[0])
    mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != width]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths in garden map\n"
            f"  Expected: {width} columns (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual in mismatched:
            error_msg += f"    Row {row_idx}: {actual} columns - \"{rows[row_idx]}\"\n"
        raise ParseError(error_msg.rstrip("\n"))

    if start is None:
        raise ParseError(f"No start '{START}' in garden map")

    return Tile(width, len(rows), frozenset(garden), start)


def load_tile(path: str | Path) -> Tile:
    """Read and parse a garden map file."""
    return parse_tile(Path(path).read_text(encoding="utf-8"))
