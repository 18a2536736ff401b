"""Headless color picker state core with a terminal front end."""

__version__ = "0.1.0"

from colorpicker.conversion import ConversionFacade
from colorpicker.core import ColorStateStore, SyncPolicy
from colorpicker.models import Channel, ColorValue, FormatTag, PickerConfig
from colorpicker.picker import ColorPicker

__all__ = [
    "Channel",
    "ColorPicker",
    "ColorStateStore",
    "ColorValue",
    "ConversionFacade",
    "FormatTag",
    "PickerConfig",
    "SyncPolicy",
    "__version__",
]
