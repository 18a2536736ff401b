"""TUI widgets for the color picker."""

from .inputs import ChannelField, HexField
from .slider import ChannelSlider
from .surface import ColorSurface
from .swatch import ColorSwatch, PresetRow

__all__ = [
    "ChannelField",
    "ChannelSlider",
    "ColorSurface",
    "ColorSwatch",
    "HexField",
    "PresetRow",
]
