"""Color state core: store, synchronization, geometry and drag tracking."""

from .drag import DragTracker
from .geometry import (
    CHANNEL_DOMAIN,
    HUE_DOMAIN,
    PERCENT_DOMAIN,
    parse_number,
    position_to_saturation_value,
    saturation_value_to_indicator_position,
    scalar_to_slider,
    slider_to_scalar,
    try_parse_number,
)
from .observer import ObserverManager
from .store import ColorStateStore
from .sync import OnChange, SyncPolicy

__all__ = [
    "CHANNEL_DOMAIN",
    "HUE_DOMAIN",
    "PERCENT_DOMAIN",
    "ColorStateStore",
    "DragTracker",
    "ObserverManager",
    "OnChange",
    "SyncPolicy",
    "parse_number",
    "position_to_saturation_value",
    "saturation_value_to_indicator_position",
    "scalar_to_slider",
    "slider_to_scalar",
    "try_parse_number",
]
