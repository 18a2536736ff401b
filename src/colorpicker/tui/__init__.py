"""Terminal user interface for the color picker."""

from .app import ColorPickerApp, format_projection

__all__ = ["ColorPickerApp", "format_projection"]
