"""Saturation/value picker surface binding."""

from colorpicker.conversion import ConversionFacade
from colorpicker.core.drag import DragTracker
from colorpicker.core.geometry import (
    position_to_saturation_value,
    saturation_value_to_indicator_position,
)
from colorpicker.core.store import ColorStateStore
from colorpicker.models import ColorValue, DragState

from .base import StoreBinding


class PickerSurfaceBinding(StoreBinding):
    """
    Two-dimensional surface: saturation along x, value along y.

    Owns the drag tracker for the surface. Pointer coordinates are in the
    same units as the surface size and relative to ``(left, top)``, which
    default to the surface's own origin.

    The surface size is only used for painting and for placing the
    indicator; it can be changed with resize() whenever the host widget is
    laid out again.
    """

    def __init__(
        self,
        store: ColorStateStore | None,
        width: float,
        height: float,
        indicator_width: float = 1,
        indicator_height: float = 1,
    ) -> None:
        """
        Initialize surface binding.

        Args:
            store: Owning store
            width: Surface width
            height: Surface height
            indicator_width: Width of the selection indicator
            indicator_height: Height of the selection indicator
        """
        super().__init__(store)
        self._width = width
        self._height = height
        self._indicator_width = indicator_width
        self._indicator_height = indicator_height
        self._tracker = DragTracker(self._store)

    # =================================================================
    # Geometry
    # =================================================================

    @property
    def size(self) -> tuple[float, float]:
        """(width, height) of the surface."""
        return (self._width, self._height)

    @property
    def indicator_size(self) -> tuple[float, float]:
        """(width, height) of the selection indicator."""
        return (self._indicator_width, self._indicator_height)

    def resize(self, width: float, height: float) -> None:
        """Record a new surface size."""
        self._width = width
        self._height = height

    @property
    def background(self) -> str:
        """Fully saturated hue behind the white/black gradients, as CSS hex."""
        pure = ConversionFacade.with_hsl(self._store.current, s=1.0, l=0.5, a=1.0)
        return pure.to_hex_string()

    def indicator_position(self) -> tuple[float, float]:
        """(left, top) of the indicator for the current color."""
        _, saturation, value = self._store.current.to_hsv()
        return saturation_value_to_indicator_position(
            saturation,
            value,
            self._width,
            self._height,
            self._indicator_width,
            self._indicator_height,
        )

    def color_at(self, x: float, y: float) -> ColorValue:
        """
        Color a click at (x, y) would commit, without committing it.

        Used for painting the surface cell by cell.
        """
        saturation, value = position_to_saturation_value(
            x, y, 0, 0, self._width, self._height
        )
        return ConversionFacade.with_hsv(self._store.current, s=saturation, v=value, a=1.0)

    # =================================================================
    # Pointer Events
    # =================================================================

    @property
    def drag_state(self) -> DragState:
        """Current drag state."""
        return self._tracker.state

    def pointer_down(self) -> None:
        """Begin a drag."""
        self._tracker.pointer_down()

    def pointer_up(self) -> None:
        """End a drag."""
        self._tracker.pointer_up()

    def pointer_move(self, x: float, y: float, left: float = 0, top: float = 0) -> ColorValue | None:
        """Commit the color under the pointer if a drag is in progress."""
        return self._tracker.pointer_move(x, y, left, top, self._width, self._height)

    def click(self, x: float, y: float, left: float = 0, top: float = 0) -> ColorValue:
        """Commit the color under the pointer."""
        return self._tracker.click(x, y, left, top, self._width, self._height)
