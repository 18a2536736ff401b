"""Text and numeric input bindings."""

from typing import Any

from colorpicker.conversion import ConversionFacade
from colorpicker.core.geometry import try_parse_number
from colorpicker.core.store import ColorStateStore
from colorpicker.models import Channel, StoreState

from .base import StoreBinding


class HexInputBinding(StoreBinding):
    """
    Free-typing hex field.

    Shows ``last_raw_edit`` rather than the projected color, so half-typed
    text is not snapped back while the user is still typing.
    """

    @property
    def text(self) -> str:
        """Text the field should display."""
        return self._store.last_raw_edit

    @property
    def is_valid(self) -> bool:
        """Whether the displayed text currently parses."""
        return ConversionFacade.is_valid(self._store.last_raw_edit)

    def type(self, text: str) -> StoreState:
        """Handle a keystroke: hand the whole field text to the store."""
        return self._store.set_from_raw(text)


class ChannelInputBinding(StoreBinding):
    """
    Numeric input for one channel (r, g, b, h, s, l, v or a).

    Displays whole numbers in the channel's editing units: 0-255 for RGB,
    degrees for hue, percent for everything else.
    """

    def __init__(self, store: ColorStateStore | None, channel: Channel | str) -> None:
        """
        Initialize channel input binding.

        Args:
            store: Owning store
            channel: Channel this input edits
        """
        super().__init__(store)
        self._channel = Channel(channel)

    @property
    def channel(self) -> Channel:
        """The edited channel."""
        return self._channel

    @property
    def max(self) -> int:
        """Largest accepted value."""
        return self._channel.domain_max

    @property
    def display(self) -> int:
        """Rounded value to show."""
        return ConversionFacade.display_value(self._store.current, self._channel)

    def commit(self, raw: Any) -> StoreState | None:
        """
        Apply typed input.

        Args:
            raw: Field value; clamped to [0, max]

        Returns:
            The new state, or None if the text is not a number yet (an
            emptied field, a lone minus sign) and nothing was changed
        """
        amount = try_parse_number(raw)
        if amount is None:
            return None
        color = ConversionFacade.with_channel(self._store.current, self._channel, amount)
        return self._store.set_from_raw(color)
