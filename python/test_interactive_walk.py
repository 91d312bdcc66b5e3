"""Tests for the interactive walk viewer, without a terminal."""

from rich.panel import Panel

from garden_parser import parse_tile
from interactive_walk import EXAMPLE, InteractiveWalk


class TestInteractiveWalk:
    """Tests for key handling and display generation."""

    def test_starts_at_step_zero(self) -> None:
        viewer = InteractiveWalk(parse_tile(EXAMPLE))

        assert viewer.step_count == 0
        assert viewer.frontier == frozenset({(5, 5)})

    def test_step_keys(self) -> None:
        viewer = InteractiveWalk(parse_tile(EXAMPLE))

        assert viewer.handle_key(" ")
        assert viewer.handle_key("n")
        assert viewer.step_count == 2
        assert len(viewer.frontier) == 4
        assert viewer.status_message == "Step 2: 4 plots"

    def test_reset(self) -> None:
        viewer = InteractiveWalk(parse_tile(EXAMPLE))
        viewer.step()
        viewer.handle_key("R")

        assert viewer.step_count == 0
        assert viewer.frontier == frozenset({(5, 5)})

    def test_toggle_infinite(self) -> None:
        viewer = InteractiveWalk(parse_tile(EXAMPLE))
        viewer.step()
        viewer.handle_key("i")

        assert viewer.infinite
        assert viewer.step_count == 0
        for _ in range(20):
            viewer.step()
        assert any(not viewer.tile.contains(x, y) for x, y in viewer.frontier)

    def test_quit_and_unknown_keys(self) -> None:
        viewer = InteractiveWalk(parse_tile(EXAMPLE))

        assert viewer.handle_key("x")
        assert "Unknown key" in viewer.status_message
        assert not viewer.handle_key("q")

    def test_generate_display(self) -> None:
        viewer = InteractiveWalk(parse_tile(EXAMPLE))
        viewer.step()

        panel = viewer.generate_display()

        assert isinstance(panel, Panel)
        assert "Plots: 2" in panel.renderable.plain
