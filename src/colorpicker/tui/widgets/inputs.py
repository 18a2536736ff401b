"""Hex and numeric channel input fields."""

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Input, Label

from colorpicker.bindings import ChannelInputBinding, HexInputBinding

CHANNEL_LABELS = {
    "r": "R",
    "g": "G",
    "b": "B",
    "h": "H°",
    "s": "S%",
    "l": "L%",
    "v": "V%",
    "a": "A%",
}


class HexField(Horizontal):
    """
    Free-typing hex field.

    Every keystroke goes to the store; the field shows the raw text back,
    flagged invalid until it parses.
    """

    DEFAULT_CSS = """
    HexField {
        height: 3;
    }

    HexField > Label {
        width: 4;
        padding: 1 0;
    }

    HexField > Input {
        width: 1fr;
    }

    HexField > Input.-invalid {
        border: tall $error;
    }
    """

    def __init__(self, binding: HexInputBinding, id: str | None = None) -> None:
        super().__init__(id=id)
        self.binding = binding

    def compose(self) -> ComposeResult:
        yield Label("Hex")
        yield Input(value=self.binding.text, placeholder="rrggbb", max_length=32)

    def sync(self) -> None:
        """Show the store's raw text unless the user is typing here."""
        field = self.query_one(Input)
        if not field.has_focus and field.value != self.binding.text:
            with field.prevent(Input.Changed):
                field.value = self.binding.text
        field.set_class(not self.binding.is_valid, "-invalid")

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        if event.value != self.binding.text:
            self.binding.type(event.value)


class ChannelField(Horizontal):
    """Labelled integer input for one channel."""

    DEFAULT_CSS = """
    ChannelField {
        height: 3;
        width: 1fr;
    }

    ChannelField > Label {
        width: 3;
        padding: 1 0;
    }

    ChannelField > Input {
        width: 1fr;
    }
    """

    def __init__(self, binding: ChannelInputBinding) -> None:
        super().__init__(id=f"channel-{binding.channel.value}")
        self.binding = binding

    def compose(self) -> ComposeResult:
        yield Label(CHANNEL_LABELS[self.binding.channel.value])
        yield Input(
            value=str(self.binding.display),
            placeholder=f"0-{self.binding.max}",
            type="integer",
        )

    def sync(self) -> None:
        """Show the current value unless the user is typing here."""
        field = self.query_one(Input)
        text = str(self.binding.display)
        if not field.has_focus and field.value != text:
            with field.prevent(Input.Changed):
                field.value = text

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        # Re-entering the shown number must not replace the unrounded color
        if event.value != str(self.binding.display):
            self.binding.commit(event.value)

    def on_descendant_blur(self, event: events.DescendantBlur) -> None:
        # Snap clamped or half-typed values back once the field is left
        self.sync()
