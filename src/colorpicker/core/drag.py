"""Pointer tracking for the saturation/value surface."""

import logging

from colorpicker.conversion import ConversionFacade
from colorpicker.models import ColorValue, DragState

from .geometry import position_to_saturation_value
from .store import ColorStateStore

logger = logging.getLogger(__name__)


class DragTracker:
    """
    Idle/Dragging state machine for one picker surface.

    Transitions:
        IDLE     --pointer_down--> DRAGGING
        DRAGGING --pointer_up----> IDLE
        DRAGGING --pointer_move--> DRAGGING  (commits a color)
        IDLE     --pointer_move--> IDLE      (ignored: hovering never edits)
        any      --click---------> unchanged (commits a color)

    Every commit keeps the current hue and alpha and only replaces HSV
    saturation and value.
    """

    def __init__(self, store: ColorStateStore) -> None:
        """
        Initialize the tracker.

        Args:
            store: Store that receives committed colors
        """
        self._store = store
        self._state = DragState.IDLE

    @property
    def state(self) -> DragState:
        """Current tracking state."""
        return self._state

    @property
    def is_dragging(self) -> bool:
        """True between pointer_down and pointer_up."""
        return self._state is DragState.DRAGGING

    def pointer_down(self) -> None:
        """Start tracking. Does not commit by itself."""
        if self._state is not DragState.DRAGGING:
            logger.debug("Drag started")
        self._state = DragState.DRAGGING

    def pointer_up(self) -> None:
        """Stop tracking."""
        if self._state is DragState.DRAGGING:
            logger.debug("Drag ended")
        self._state = DragState.IDLE

    def pointer_move(
        self,
        pointer_x: float,
        pointer_y: float,
        rect_left: float,
        rect_top: float,
        rect_width: float,
        rect_height: float,
    ) -> ColorValue | None:
        """
        Commit the color under the pointer while dragging.

        Returns:
            The committed color, or None when idle
        """
        if self._state is DragState.IDLE:
            return None
        return self._commit(pointer_x, pointer_y, rect_left, rect_top, rect_width, rect_height)

    def click(
        self,
        pointer_x: float,
        pointer_y: float,
        rect_left: float,
        rect_top: float,
        rect_width: float,
        rect_height: float,
    ) -> ColorValue:
        """
        Commit the color under the pointer without changing state.

        Returns:
            The committed color
        """
        return self._commit(pointer_x, pointer_y, rect_left, rect_top, rect_width, rect_height)

    def _commit(
        self,
        pointer_x: float,
        pointer_y: float,
        rect_left: float,
        rect_top: float,
        rect_width: float,
        rect_height: float,
    ) -> ColorValue:
        saturation, value = position_to_saturation_value(
            pointer_x, pointer_y, rect_left, rect_top, rect_width, rect_height
        )
        color = ConversionFacade.with_hsv(self._store.current, s=saturation, v=value)
        self._store.set_from_value(color)
        return color
