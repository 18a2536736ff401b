"""Headless bindings between UI sub-parts and a ColorStateStore.

Each binding is constructed with the store it belongs to and exposes what
its widget should display plus the event handlers that mutate the store.
They hold no color state of their own.
"""

from .base import StoreBinding
from .inputs import ChannelInputBinding, HexInputBinding
from .sliders import SliderBinding
from .surface import PickerSurfaceBinding
from .swatch import SwatchBinding

__all__ = [
    "ChannelInputBinding",
    "HexInputBinding",
    "PickerSurfaceBinding",
    "SliderBinding",
    "StoreBinding",
    "SwatchBinding",
]
