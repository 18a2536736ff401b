"""One-line channel slider."""

from rich.style import Style
from rich.text import Text
from textual import events
from textual.binding import Binding
from textual.widget import Widget

from colorpicker.bindings import SliderBinding

THUMB = "┃"


class ChannelSlider(Widget, can_focus=True):
    """
    Horizontal slider painted with the colors each position would commit.

    Click or drag on the track to set a value; with focus, left/right
    nudge by one and shift+left/right by ten.
    """

    DEFAULT_CSS = """
    ChannelSlider {
        height: 1;
        width: 1fr;
    }

    ChannelSlider:focus {
        text-style: bold;
    }
    """

    BINDINGS = [
        Binding("left", "nudge(-1)", "Decrease", show=False),
        Binding("right", "nudge(1)", "Increase", show=False),
        Binding("shift+left", "nudge(-10)", "Decrease x10", show=False),
        Binding("shift+right", "nudge(10)", "Increase x10", show=False),
    ]

    def __init__(self, binding: SliderBinding, id: str | None = None) -> None:
        """
        Initialize slider widget.

        Args:
            binding: Slider binding for one channel
            id: Widget id (optional)
        """
        super().__init__(id=id)
        self.binding = binding

    def sync(self) -> None:
        """Repaint after a color change."""
        self.tooltip = f"{self.binding.channel.value}: {self.binding.display}/{self.binding.domain_max}"
        self.refresh()

    def render(self) -> Text:
        width = max(self.size.width, 1)
        thumb = self._position_to_cell(self.binding.display, width)

        text = Text()
        for x in range(width):
            color = self.binding.preview(self._cell_to_position(x, width))
            if x == thumb:
                text.append(THUMB, Style(color="#ffffff", bgcolor="#000000"))
            else:
                text.append(" ", Style(bgcolor=color.to_hex_string()))
        return text

    def _cell_to_position(self, x: float, width: int) -> float:
        if width <= 1:
            return 0.0
        return x / (width - 1) * self.binding.domain_max

    def _position_to_cell(self, position: float, width: int) -> int:
        if self.binding.domain_max <= 0:
            return 0
        return int(round(position / self.binding.domain_max * (width - 1)))

    def action_nudge(self, delta: int) -> None:
        """Move the slider by delta steps."""
        self.binding.commit(self.binding.display + delta)

    def on_mouse_down(self, event: events.MouseDown) -> None:
        self.capture_mouse()
        self.binding.commit(self._cell_to_position(event.x, self.size.width))

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if event.button:
            self.binding.commit(self._cell_to_position(event.x, self.size.width))

    def on_mouse_up(self, event: events.MouseUp) -> None:
        self.release_mouse()
