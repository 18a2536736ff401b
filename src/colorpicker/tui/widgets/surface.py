"""Character-cell saturation/value surface."""

from rich.style import Style
from rich.text import Text
from textual import events
from textual.widget import Widget

from colorpicker.bindings import PickerSurfaceBinding
from colorpicker.core.geometry import clamp

INDICATOR = "◯"


class ColorSurface(Widget):
    """
    Saturation along x, value along y, one cell per sample.

    Mouse handling follows the drag state machine: pressing commits the
    cell under the pointer and starts a drag, moving commits only while the
    button is held, releasing ends the drag. The mouse is captured while
    dragging so moves outside the widget still arrive and get clamped to
    the surface edge.
    """

    DEFAULT_CSS = """
    ColorSurface {
        border: round $primary;
        box-sizing: content-box;
    }
    """

    def __init__(self, binding: PickerSurfaceBinding, id: str | None = None) -> None:
        """
        Initialize surface widget.

        Args:
            binding: Surface binding (its size sets the initial widget size)
            id: Widget id (optional)
        """
        super().__init__(id=id)
        self.binding = binding
        width, height = binding.size
        self.styles.width = int(width)
        self.styles.height = int(height)

    def sync(self) -> None:
        """Repaint after a color change."""
        self.refresh()

    def render(self) -> Text:
        """Paint every cell with the color a click there would commit."""
        width, height = (int(n) for n in self.binding.size)
        marker_x, marker_y = self._indicator_cell(width, height)

        text = Text()
        for y in range(height):
            for x in range(width):
                color = self.binding.color_at(x + 0.5, y + 0.5)
                if (x, y) == (marker_x, marker_y):
                    # Contrast against the cell underneath
                    foreground = "#000000" if color.to_hsl()[2] > 0.5 else "#ffffff"
                    text.append(INDICATOR, Style(color=foreground, bgcolor=color.to_hex_string()))
                else:
                    text.append(" ", Style(bgcolor=color.to_hex_string()))
            if y < height - 1:
                text.append("\n")
        return text

    def _indicator_cell(self, width: int, height: int) -> tuple[int, int]:
        left, top = self.binding.indicator_position()
        indicator_width, indicator_height = self.binding.indicator_size
        center_x = left + indicator_width / 2
        center_y = top + indicator_height / 2
        return (
            int(clamp(center_x, 0, width - 1)),
            int(clamp(center_y, 0, height - 1)),
        )

    def _pointer(self, event: events.MouseEvent) -> tuple[float, float]:
        # Cell center relative to the content area, the same point render() samples.
        # Negative or past the edge while captured.
        offset = event.get_content_offset_capture(self)
        return (offset.x + 0.5, offset.y + 0.5)

    def on_resize(self, event: events.Resize) -> None:
        self.binding.resize(event.size.width, event.size.height)

    def on_mouse_down(self, event: events.MouseDown) -> None:
        self.capture_mouse()
        self.binding.pointer_down()
        self.binding.click(*self._pointer(event))

    def on_mouse_move(self, event: events.MouseMove) -> None:
        self.binding.pointer_move(*self._pointer(event))

    def on_mouse_up(self, event: events.MouseUp) -> None:
        self.release_mouse()
        self.binding.pointer_up()
