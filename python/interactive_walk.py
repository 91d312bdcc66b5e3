"""
Interactive garden walk viewer.
Step the frontier forward with the keyboard and watch it spread.
"""

import logging
import sys

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import render_frontier
from garden_parser import load_tile, parse_tile
from garden_types import Coord, Tile
from walk import iter_frontiers

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


class InteractiveWalk:
    """Keyboard-driven stepper over one garden map."""

    def __init__(self, tile: Tile, copies: int = 1) -> None:
        self.tile = tile
        self.copies = copies
        self.infinite = False
        self.console = Console()
        self.status_message = "Ready"
        self.reset()

    def reset(self) -> None:
        """Start again from step 0."""
        self.step_count = 0
        self._frontiers = iter_frontiers(self.tile, self.tile.start, self.infinite)
        self.frontier: frozenset[Coord] = next(self._frontiers)

    def step(self) -> None:
        """Advance the walk by one step."""
        self.frontier = next(self._frontiers)
        self.step_count += 1
        self.status_message = f"Step {self.step_count}: {len(self.frontier)} plots"

    def toggle_infinite(self) -> None:
        """Switch between the single tile and the infinite tiling, restarting the walk."""
        self.infinite = not self.infinite
        self.reset()
        self.status_message = "Infinite tiling" if self.infinite else "Single tile"

    def generate_display(self) -> Panel:
        """Generate the current display with map and status."""
        copies = self.copies if self.infinite else 0
        grid_text = render_frontier(self.tile, self.frontier, copies=copies)

        status = Text()
        status.append("Steps: ", style="bold")
        status.append(f"{self.step_count}\n")
        status.append("Plots: ", style="bold")
        status.append(f"{len(self.frontier)}\n")
        status.append("Mode: ", style="bold")
        status.append("infinite tiling\n\n" if self.infinite else "single tile\n\n")

        status.append(Text.from_ansi(grid_text))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  Space/N - Step\n")
        status.append("  I - Toggle infinite tiling\n")
        status.append("  R - Reset to step 0\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="Garden Walk", border_style="green")

    def handle_key(self, key: str) -> bool:
        """Apply one key press. Returns False when the viewer should quit."""
        match key.lower():
            case "q":
                self.status_message = "Quitting..."
                return False
            case " " | "n":
                self.step()
            case "i":
                self.toggle_infinite()
            case "r":
                self.reset()
                self.status_message = "Walk reset to step 0"
            case _:
                self.status_message = f"Unknown key: {repr(key)}"
        return True

    def run(self) -> None:
        """Run the viewer until the user quits."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())
                    if not self.handle_key(readchar.readkey()):
                        live.update(self.generate_display())
                        break
            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    tile = load_tile(sys.argv[1]) if len(sys.argv) > 1 else parse_tile(EXAMPLE)
    InteractiveWalk(tile).run()
