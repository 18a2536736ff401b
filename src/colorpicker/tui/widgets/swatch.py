"""Swatch widgets: the current color preview and preset tiles."""

from textual.containers import Horizontal
from textual.widgets import Static

from colorpicker.bindings import SwatchBinding


class ColorSwatch(Static):
    """
    Solid block painted from a SwatchBinding.

    Preset swatches (selectable bindings) commit their color on click.
    """

    DEFAULT_CSS = """
    ColorSwatch {
        width: 100%;
        height: 3;
        border: round $primary;
    }

    ColorSwatch.preset {
        width: 6;
        height: 3;
        border: tall $surface;
    }

    ColorSwatch.preset:hover {
        border: tall $warning;
    }
    """

    def __init__(self, binding: SwatchBinding, id: str | None = None) -> None:
        """
        Initialize swatch widget.

        Args:
            binding: Swatch binding supplying the color
            id: Widget id (optional)
        """
        super().__init__(id=id, classes="preset" if binding.is_selectable else "")
        self.binding = binding
        self.sync()

    def sync(self) -> None:
        """Repaint from the binding."""
        self.styles.background = self.binding.background
        if self.binding.is_selectable:
            self.tooltip = self.binding.background

    def on_click(self) -> None:
        """Commit a preset color."""
        self.binding.select()


class PresetRow(Horizontal):
    """Row of selectable preset swatches."""

    DEFAULT_CSS = """
    PresetRow {
        height: 3;
        width: 100%;
    }
    """

    def __init__(self, bindings: list[SwatchBinding]) -> None:
        super().__init__(
            *(ColorSwatch(binding, id=f"preset-{index}") for index, binding in enumerate(bindings))
        )
