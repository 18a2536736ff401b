"""Data models for the color picker."""

from .color import ColorValue
from .config import PickerConfig
from .enums import Channel, DragState, FormatTag
from .state import StoreState

__all__ = [
    # Enums
    "Channel",
    # Models
    "ColorValue",
    "DragState",
    "FormatTag",
    "PickerConfig",
    "StoreState",
]
