"""Terminal color picker built on the headless bindings."""

import json
import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Grid, Horizontal, Vertical
from textual.widgets import Footer, Header, Label

from colorpicker.conversion import Projection
from colorpicker.models import Channel, FormatTag, StoreState
from colorpicker.picker import ColorPicker
from colorpicker.protocols import ColorEvent

from .decorators import handle_action_errors
from .widgets import (
    ChannelField,
    ChannelSlider,
    ColorSurface,
    ColorSwatch,
    HexField,
    PresetRow,
)

logger = logging.getLogger(__name__)

DEFAULT_PRESETS = [
    "red",
    "orange",
    "yellow",
    "lime",
    "cyan",
    "blue",
    "magenta",
    "white",
    "gray",
    "black",
]

SLIDER_CHANNELS = [Channel.HUE, Channel.SATURATION, Channel.LIGHTNESS, Channel.ALPHA]
INPUT_CHANNELS = [
    Channel.RED,
    Channel.GREEN,
    Channel.BLUE,
    Channel.ALPHA,
    Channel.HUE,
    Channel.SATURATION,
    Channel.LIGHTNESS,
    Channel.VALUE,
]


def format_projection(value: Projection) -> str:
    """Render a projection for display: hex as-is, dicts as compact JSON."""
    if isinstance(value, str):
        return value
    return json.dumps({key: round(number, 3) for key, number in value.items()})


class ColorPickerApp(App[Projection | None]):
    """
    Interactive picker for one ColorPicker.

    Every widget reads from and writes to the picker through its bindings;
    the app itself only observes the store and tells widgets to repaint.
    Exits with the picker's value in its output format on accept, or None
    on cancel.
    """

    TITLE = "Color Picker"

    CSS = """
    #main {
        height: auto;
    }

    #left {
        width: auto;
        height: auto;
    }

    #right {
        width: 1fr;
        height: auto;
        padding: 0 1;
    }

    .slider-row {
        height: 1;
        margin: 0 1;
    }

    .slider-row > Label {
        width: 3;
    }

    #channels {
        grid-size: 2;
        grid-columns: 1fr 1fr;
        height: auto;
    }

    #status {
        height: 1;
        padding: 0 1;
        background: $panel;
    }
    """

    BINDINGS = [
        Binding("ctrl+s", "accept", "Accept"),
        Binding("escape", "cancel", "Cancel"),
        Binding("f2", "cycle_format", "Format"),
        Binding("ctrl+r", "reset", "Reset"),
    ]

    def __init__(self, picker: ColorPicker, presets: list[str] | None = None) -> None:
        """
        Initialize the app.

        Args:
            picker: The picker to edit
            presets: Raw colors for the preset row (defaults to a basic palette)
        """
        super().__init__()
        self.picker = picker
        self._initial = picker.current
        self._presets = DEFAULT_PRESETS if presets is None else presets

    def compose(self) -> ComposeResult:
        """Create the main layout."""
        picker = self.picker
        yield Header()

        with Horizontal(id="main"):
            with Vertical(id="left"):
                yield ColorSurface(picker.surface(), id="surface")
                for channel in SLIDER_CHANNELS:
                    with Horizontal(classes="slider-row"):
                        yield Label(channel.value.upper())
                        yield ChannelSlider(picker.slider(channel), id=f"slider-{channel.value}")

            with Vertical(id="right"):
                yield ColorSwatch(picker.swatch(), id="current-swatch")
                yield HexField(picker.hex_input(), id="hex")
                with Grid(id="channels"):
                    for channel in INPUT_CHANNELS:
                        yield ChannelField(picker.channel_input(channel))

        yield PresetRow([picker.swatch(color, selectable=True) for color in self._presets])
        yield Label("", id="status")
        yield Footer()

    def on_mount(self) -> None:
        """Start observing the picker's store."""
        self.picker.store.register_observer(self)
        self._sync_all()
        logger.info("Color picker TUI mounted")

    def on_unmount(self) -> None:
        self.picker.store.unregister_observer(self)

    # =================================================================
    # ColorObserver Protocol
    # =================================================================

    def on_color_event(self, event: ColorEvent, state: StoreState) -> None:
        """Repaint after a store change."""
        if event is ColorEvent.RAW_EDITED:
            # Only the hex text moved
            self.query_one(HexField).sync()
            return
        self._sync_all()

    def _sync_all(self) -> None:
        for widget in self.query("ColorSurface, ChannelSlider, ColorSwatch, HexField, ChannelField"):
            widget.sync()
        self._update_status()

    def _update_status(self) -> None:
        fmt = self.picker.store.output_format
        self.query_one("#status", Label).update(
            f"{fmt.value.upper()}  {format_projection(self.picker.value)}"
        )

    # =================================================================
    # Actions
    # =================================================================

    def action_accept(self) -> None:
        """Exit returning the current value."""
        self.exit(self.picker.value)

    def action_cancel(self) -> None:
        """Exit without a value."""
        self.exit(None)

    @handle_action_errors("cycle output format")
    def action_cycle_format(self) -> None:
        """Switch to the next output format."""
        formats = list(FormatTag)
        current = formats.index(self.picker.store.output_format)
        self.picker.set_output_format(formats[(current + 1) % len(formats)])
        self.notify(f"Output format: {self.picker.store.output_format.value}", timeout=2)

    @handle_action_errors("reset color")
    def action_reset(self) -> None:
        """Return to the color the picker started with."""
        self.picker.store.set_from_value(self._initial)
