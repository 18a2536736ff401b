"""Slider bindings."""

from typing import Any

from colorpicker.conversion import ConversionFacade
from colorpicker.core.geometry import HUE_DOMAIN, slider_to_scalar
from colorpicker.core.store import ColorStateStore
from colorpicker.models import Channel, ColorValue, StoreState

from .base import StoreBinding


class SliderBinding(StoreBinding):
    """
    Range slider for one channel.

    Lightness, saturation and alpha sliders run 0-100, hue runs 0-360.
    Slider positions are whole numbers; the color is rebuilt from the
    unrounded current color each time, so reading a slider never feeds
    rounding back into the store.
    """

    def __init__(self, store: ColorStateStore | None, channel: Channel | str) -> None:
        """
        Initialize slider binding.

        Args:
            store: Owning store
            channel: Channel this slider edits
        """
        super().__init__(store)
        self._channel = Channel(channel)

    @property
    def channel(self) -> Channel:
        """The edited channel."""
        return self._channel

    @property
    def domain_max(self) -> int:
        """Slider maximum."""
        return self._channel.domain_max

    @property
    def display(self) -> int:
        """Slider position for the current color."""
        return ConversionFacade.display_value(self._store.current, self._channel)

    def preview(self, raw: Any) -> ColorValue:
        """
        Color the slider would commit at a position, without committing it.

        Args:
            raw: Slider value; clamped to [0, domain_max]
        """
        scalar = slider_to_scalar(raw, self.domain_max)
        amount = scalar if self.domain_max == HUE_DOMAIN else scalar * self.domain_max
        return ConversionFacade.with_channel(self._store.current, self._channel, amount)

    def commit(self, raw: Any) -> StoreState:
        """
        Apply a slider position.

        Args:
            raw: Slider value; clamped to [0, domain_max]

        Returns:
            The new state
        """
        return self._store.set_from_value(self.preview(raw))

    def track_stops(self) -> tuple[str, str]:
        """
        Gradient end points for painting the slider track.

        Returns:
            (start, end) CSS hex strings at 0 and domain_max
        """
        if self._channel is Channel.SATURATION:
            # Fixed mid lightness so the track shows the hue even for black/white
            current = self._store.current
            start = ConversionFacade.with_hsl(current, s=0.0, l=0.5)
            end = ConversionFacade.with_hsl(current, s=1.0, l=0.5)
        else:
            start = self.preview(0)
            end = self.preview(self.domain_max)
        return (start.to_hex_string(), end.to_hex_string())
