"""Event and observer protocols."""

from .events import ColorEvent
from .observers import ColorObserver

__all__ = [
    "ColorEvent",
    "ColorObserver",
]
