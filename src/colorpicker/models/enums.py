"""Enumerations for the color picker."""

from enum import Enum


class FormatTag(str, Enum):
    """Output shape forwarded to the owner of a controlled value."""

    HEX = "hex"  # "rrggbb" or "rrggbbaa"
    RGB = "rgb"  # {"r", "g", "b", "a"}
    HSL = "hsl"  # {"h", "s", "l", "a"}
    HSV = "hsv"  # {"h", "s", "v", "a"}


class DragState(str, Enum):
    """Pointer tracking states of the saturation/value surface."""

    IDLE = "idle"
    DRAGGING = "dragging"


class Channel(str, Enum):
    """Scalar components editable through numeric inputs and sliders."""

    RED = "r"
    GREEN = "g"
    BLUE = "b"
    HUE = "h"
    SATURATION = "s"
    LIGHTNESS = "l"
    VALUE = "v"
    ALPHA = "a"

    @property
    def domain_max(self) -> int:
        """Upper bound of the whole-number range the channel is edited in."""
        if self in (Channel.RED, Channel.GREEN, Channel.BLUE):
            return 255
        if self is Channel.HUE:
            return 360
        return 100
