#!/usr/bin/env python3
"""
Report both garden walk answers for a puzzle input.

Usage:
    day21.py INPUT [--steps N] [--infinite-steps N] [--breakdown] [--show] [-v]
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ascii_render import render_frontier
from garden_parser import load_tile
from garden_types import Tile, UnsupportedGeometry
from gardenwalk import (
    DEFAULT_INFINITE_STEPS,
    DEFAULT_STEPS,
    reachable_after,
    reachable_after_infinite,
    simulate,
)
from tile_fill import check_geometry, fill_breakdown

DAY = 21


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Count garden plots reachable after a number of steps.")
    parser.add_argument("input", help="garden map file")
    parser.add_argument("--steps", type=int, default=DEFAULT_STEPS, help="steps on a single tile (part 1)")
    parser.add_argument(
        "--infinite-steps",
        type=int,
        default=DEFAULT_INFINITE_STEPS,
        help="steps on the infinite tiling (part 2)",
    )
    parser.add_argument("--breakdown", action="store_true", help="show the per-copy fill counts")
    parser.add_argument("--show", action="store_true", help="draw the part 1 frontier")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="log progress (twice for debug)")
    return parser.parse_args(argv)


def breakdown_table(tile: Tile, steps: int) -> Table:
    """Table of the closed-form terms for `steps` steps."""
    table = Table(title=f"Tile copies after {steps} steps")
    table.add_column("From")
    table.add_column("Amount")
    table.add_column("Local steps", justify="right")
    table.add_column("Tiles", justify="right")
    table.add_column("Plots", justify="right")
    table.add_column("Total", justify="right")
    for part in fill_breakdown(steps, tile):
        table.add_row(
            part.fill_from.value,
            part.amount.value,
            str(part.local_steps),
            str(part.tiles),
            str(part.plots),
            str(part.total),
        )
    return table


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    args = parse_args(argv)
    console = console or Console()

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    try:
        tile = load_tile(args.input)
        part1 = reachable_after(tile, args.steps)
        part2 = reachable_after_infinite(tile, args.infinite_steps)
    # ParseError and UnsupportedGeometry are ValueErrors
    except (OSError, ValueError) as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", highlight=False)
        return 1

    console.print(f"Day {DAY:2}: {part1:>16} {part2:>16}", highlight=False)

    if args.show:
        frontier = simulate(tile, tile.start, args.steps)
        console.print(render_frontier(tile, frontier, color=False), highlight=False)

    if args.breakdown:
        try:
            check_geometry(tile)
        except UnsupportedGeometry as exc:
            console.print(f"No fill breakdown: {escape(str(exc))}", highlight=False)
        else:
            console.print(breakdown_table(tile, args.infinite_steps))

    return 0


if __name__ == "__main__":
    sys.exit(main())
