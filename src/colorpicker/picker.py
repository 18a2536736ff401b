"""Compound color picker: one store, its sync policy and binding factories."""

import logging
from typing import Any

from colorpicker.bindings import (
    ChannelInputBinding,
    HexInputBinding,
    PickerSurfaceBinding,
    SliderBinding,
    SwatchBinding,
)
from colorpicker.conversion import Projection
from colorpicker.core import ColorStateStore, OnChange, SyncPolicy
from colorpicker.models import Channel, ColorValue, FormatTag, PickerConfig

logger = logging.getLogger(__name__)


class ColorPicker:
    """
    One picker instance.

    Owns a ColorStateStore and the SyncPolicy that ties it to a controlled
    value. Sub-parts are created through the factory methods so they can
    only ever be bound to this picker's store.

    Construction never calls ``on_change``; the owner already knows the
    value it passed in.

    Usage Example:
        ```python
        picker = ColorPicker("ff0000", on_change=print)
        hex_field = picker.hex_input()
        hex_field.type("00ff00")      # prints "00ff00"

        picker.update_value("0000ff")  # adopted, nothing printed
        ```
    """

    def __init__(
        self,
        value: Any = None,
        on_change: OnChange | None = None,
        output_format: FormatTag | str | None = None,
        config: PickerConfig | None = None,
    ):
        """
        Initialize the picker.

        Args:
            value: Initial controlled value (falls back to config.initial_value)
            on_change: Callback receiving projected values on canonical changes
            output_format: Shape passed to on_change (falls back to config)
            config: Picker settings (defaults if omitted)
        """
        self.config = config or PickerConfig()
        initial = value if value is not None else self.config.initial_value
        fmt = output_format if output_format is not None else self.config.output_format

        self._store = ColorStateStore(initial, output_format=fmt)
        self._sync = SyncPolicy(self._store, on_change)
        logger.info(f"ColorPicker created ({self._store.output_format.value} output)")

    # =================================================================
    # Controlled Value
    # =================================================================

    @property
    def store(self) -> ColorStateStore:
        """The picker's store."""
        return self._store

    @property
    def current(self) -> ColorValue:
        """The current canonical color."""
        return self._store.current

    @property
    def value(self) -> Projection:
        """The current color in the configured output shape."""
        return self._store.project()

    def update_value(self, value: Any) -> bool:
        """
        Feed a new controlled value from the owner.

        Returns:
            True if the picker adopted it
        """
        return self._sync.receive(value)

    def set_output_format(self, output_format: FormatTag | str) -> None:
        """Change the shape passed to on_change from now on."""
        self._store.set_output_format(output_format)

    def close(self) -> None:
        """Detach the owner callback from the store."""
        self._sync.detach()

    # =================================================================
    # Sub-part Factories
    # =================================================================

    def swatch(self, color: Any = None, selectable: bool = False) -> SwatchBinding:
        """Create a swatch; see SwatchBinding."""
        return SwatchBinding(self._store, color=color, selectable=selectable)

    def hex_input(self) -> HexInputBinding:
        """Create the hex text field binding."""
        return HexInputBinding(self._store)

    def channel_input(self, channel: Channel | str) -> ChannelInputBinding:
        """Create a numeric input for one channel."""
        return ChannelInputBinding(self._store, channel)

    def slider(self, channel: Channel | str) -> SliderBinding:
        """Create a slider for one channel."""
        return SliderBinding(self._store, channel)

    def surface(
        self,
        width: float | None = None,
        height: float | None = None,
    ) -> PickerSurfaceBinding:
        """
        Create the saturation/value surface.

        Args:
            width: Surface width (defaults to config.surface_width)
            height: Surface height (defaults to config.surface_height)
        """
        return PickerSurfaceBinding(
            self._store,
            width if width is not None else self.config.surface_width,
            height if height is not None else self.config.surface_height,
            indicator_width=self.config.indicator_width,
            indicator_height=self.config.indicator_height,
        )
