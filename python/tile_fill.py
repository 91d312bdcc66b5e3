"""
Closed-form count of reachable plots on the infinite tiling.

For a step budget far larger than the tile, the walk covers a diamond of
tile copies. Copies are grouped by the side of the origin they lie on
(FillFrom), which fixes where the walk first enters them:

- CENTER: the origin tile, entered at the start
- N/E/S/W: copies on the axes, entered at the midpoint of the edge facing
  the origin
- NE/NW/SE/SW: copies in the quadrants, entered at the corner nearest the
  origin; the copies of a quadrant form diagonal bands 1, 2, 3, ... where
  band n holds n copies

A copy's remaining budget (steps minus the steps taken to reach its entry)
then picks its FillAmount:

- LEAST: the leading copy or band, 0 <= remaining < width
- NEXT_LEAST: the one behind it, width <= remaining < 2 * width
- FULL_EVEN / FULL_ODD: everything further in, remaining >= 2 * width,
  saturated so only the parity of the remaining budget matters

The plots of one representative copy per (FillFrom, FillAmount) come from
simulating a single tile from the entry point, so the whole count costs a
few dozen walks of at most 2 * width + 1 steps.

The geometry only holds for odd square tiles whose start is the centre and
whose middle row, middle column and border are free of rocks; with those,
every plot of a copy is reached first through that copy's entry point.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from garden_types import Coord, FillAmount, FillFrom, Tile, UnsupportedGeometry
from walk import plot_distances, simulate

logger = logging.getLogger(__name__)

AXES = (FillFrom.N, FillFrom.E, FillFrom.S, FillFrom.W)


@dataclass(frozen=True)
class FillPart:
    """One term of the closed-form sum."""

    fill_from: FillFrom
    amount: FillAmount
    local_steps: int  # Budget left inside one representative copy
    tiles: int  # Number of copies in this group
    plots: int  # Reachable plots in one representative copy

    @property
    def total(self) -> int:
        return self.tiles * self.plots


# =============================================================================
# Geometry
# =============================================================================


def entry_point(fill_from: FillFrom, tile_width: int) -> Coord:
    """Plot at which the walk first enters a copy in the given group."""
    last = tile_width - 1
    mid = tile_width // 2
    match fill_from:
        case FillFrom.CENTER:
            return (mid, mid)
        case FillFrom.N:
            return (mid, last)
        case FillFrom.S:
            return (mid, 0)
        case FillFrom.E:
            return (0, mid)
        case FillFrom.W:
            return (last, mid)
        case FillFrom.NE:
            return (0, last)
        case FillFrom.NW:
            return (last, last)
        case FillFrom.SE:
            return (0, 0)
        case FillFrom.SW:
            return (last, 0)
    raise ValueError(f"Unknown fill class: {fill_from}")


def _leading_copy(fill_from: FillFrom, steps: int, tile_width: int) -> int:
    """
    Index of the outermost copy (axis) or band (diagonal) the walk reaches.

    Axis copy k is entered after k * width - mid steps, diagonal band n after
    n * width + 1 steps. 0 means the group is not reached at all.
    """
    if fill_from in AXES:
        return (steps + tile_width // 2) // tile_width
    return max(0, (steps - 1) // tile_width)


def _leading_remainder(fill_from: FillFrom, steps: int, tile_width: int) -> int:
    if fill_from in AXES:
        return (steps + tile_width // 2) % tile_width
    return (steps - 1) % tile_width


def _center_amount(steps: int, tile_width: int) -> FillAmount:
    if steps < tile_width:
        return FillAmount.LEAST
    if steps < 2 * tile_width:
        return FillAmount.NEXT_LEAST
    return FillAmount.FULL_EVEN if steps % 2 == 0 else FillAmount.FULL_ODD


def _count_of_parity(last: int, parity: int) -> int:
    """How many of 1..last are odd (parity 1) or even (parity 0)."""
    if last < 1:
        return 0
    return (last + 1) // 2 if parity else last // 2


def _sum_of_parity(last: int, parity: int) -> int:
    """Sum of the odd (parity 1) or even (parity 0) numbers in 1..last."""
    if last < 1:
        return 0
    if parity:
        odd = (last + 1) // 2
        return odd * odd
    even = last // 2
    return even * (even + 1)


# =============================================================================
# Counting
# =============================================================================


def tile_count(fill_from: FillFrom, amount: FillAmount, steps: int, tile_width: int) -> int:
    """
    Number of tile copies in (fill_from, amount) after `steps` steps.

    tile_width must be odd: the full copies alternate between even and odd
    remaining budgets only because each copy further out costs an odd
    number of extra steps.
    """
    if steps < 0:
        raise ValueError(f"steps must be non-negative, got {steps}")

    if fill_from is FillFrom.CENTER:
        return 1 if amount is _center_amount(steps, tile_width) else 0

    lead = _leading_copy(fill_from, steps, tile_width)
    if fill_from in AXES:
        match amount:
            case FillAmount.LEAST:
                return 1 if lead >= 1 else 0
            case FillAmount.NEXT_LEAST:
                return 1 if lead >= 2 else 0
        # Copy k has steps + mid - k * width left, even when k matches that parity
        parity = (steps + tile_width // 2) % 2
        if amount is FillAmount.FULL_ODD:
            parity ^= 1
        return _count_of_parity(lead - 2, parity)

    match amount:
        case FillAmount.LEAST:
            return lead
        case FillAmount.NEXT_LEAST:
            return max(0, lead - 1)
    # Band n has steps - 1 - n * width left
    parity = (steps - 1) % 2
    if amount is FillAmount.FULL_ODD:
        parity ^= 1
    return _sum_of_parity(lead - 2, parity)


def local_steps(fill_from: FillFrom, amount: FillAmount, steps: int, tile_width: int) -> int:
    """Step budget left inside a representative copy of (fill_from, amount)."""
    match amount:
        case FillAmount.FULL_EVEN:
            return 2 * tile_width
        case FillAmount.FULL_ODD:
            return 2 * tile_width + 1
    if fill_from is FillFrom.CENTER:
        return steps
    remainder = _leading_remainder(fill_from, steps, tile_width)
    return remainder if amount is FillAmount.LEAST else remainder + tile_width


def cells_per_tile(fill_from: FillFrom, amount: FillAmount, steps: int, tile: Tile) -> int:
    """Reachable plots in one copy of (fill_from, amount) after `steps` steps."""
    start = entry_point(fill_from, tile.width)
    budget = local_steps(fill_from, amount, steps, tile.width)
    return len(simulate(tile, start, budget))


# =============================================================================
# Validation
# =============================================================================


def check_geometry(tile: Tile) -> None:
    """
    Make sure the closed-form count applies to `tile`.

    Raises:
        UnsupportedGeometry: Listing every broken assumption
    """
    width = tile.width
    problems: list[str] = []

    if tile.width != tile.height:
        problems.append(f"Tile must be square, got {tile.width}x{tile.height}")
    if width % 2 == 0:
        problems.append(f"Tile width must be odd, got {width}")
    if tile.start != tile.center:
        problems.append(f"Start must be at the centre {tile.center}, got {tile.start}")

    if problems:
        raise UnsupportedGeometry(_describe(problems))

    mid = width // 2
    last = width - 1
    lanes = {
        "middle row": [(x, mid) for x in range(width)],
        "middle column": [(mid, y) for y in range(width)],
        "top row": [(x, 0) for x in range(width)],
        "bottom row": [(x, last) for x in range(width)],
        "left column": [(0, y) for y in range(width)],
        "right column": [(last, y) for y in range(width)],
    }
    for name, cells in lanes.items():
        rocks = [cell for cell in cells if cell not in tile.garden]
        if rocks:
            shown = ", ".join(str(cell) for cell in rocks[:5])
            more = f" and {len(rocks) - 5} more" if len(rocks) > 5 else ""
            problems.append(f"The {name} must be free of rocks, found {shown}{more}")

    if problems:
        raise UnsupportedGeometry(_describe(problems))

    for fill_from in FillFrom:
        entry = entry_point(fill_from, width)
        farthest = max(plot_distances(tile, entry).values())
        if farthest > 2 * width:
            problems.append(
                f"Plots reached from the {fill_from.value} entry {entry} need {farthest} steps, "
                f"more than {2 * width} (two tile widths)"
            )

    if problems:
        raise UnsupportedGeometry(_describe(problems))


def _describe(problems: list[str]) -> str:
    return "Closed-form count does not apply:\n" + "\n".join(f"  - {p}" for p in problems)


# =============================================================================
# Total
# =============================================================================


def fill_breakdown(steps: int, tile: Tile) -> list[FillPart]:
    """Every non-empty (fill_from, amount) term for `steps` steps."""
    parts: list[FillPart] = []
    for fill_from in FillFrom:
        for amount in FillAmount:
            tiles = tile_count(fill_from, amount, steps, tile.width)
            if tiles == 0:
                continue
            part = FillPart(
                fill_from,
                amount,
                local_steps(fill_from, amount, steps, tile.width),
                tiles,
                cells_per_tile(fill_from, amount, steps, tile),
            )
            logger.debug(
                "fill_breakdown: %s/%s %d tiles x %d plots (%d local steps)",
                fill_from.value,
                amount.value,
                part.tiles,
                part.plots,
                part.local_steps,
            )
            parts.append(part)
    return parts


def total_reachable(steps: int, tile: Tile) -> int:
    """
    Plots reachable in exactly `steps` steps on the infinite tiling.

    Raises:
        UnsupportedGeometry: If the tile does not have the shape the count relies on
    """
    check_geometry(tile)
    return sum(part.total for part in fill_breakdown(steps, tile))
