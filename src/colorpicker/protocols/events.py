"""Events emitted by the color state store."""

from enum import Enum


class ColorEvent(Enum):
    """Events from store mutations."""

    COLOR_CHANGED = "color_changed"  # Canonical color changed
    VIEW_CHANGED = "view_changed"    # Same canonical color, different hue hint or output format
    RAW_EDITED = "raw_edited"        # Only the typed hex text changed
