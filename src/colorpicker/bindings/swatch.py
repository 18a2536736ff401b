"""Color swatch binding."""

from typing import Any

from colorpicker.conversion import ConversionFacade
from colorpicker.core.store import ColorStateStore
from colorpicker.models import ColorValue

from .base import StoreBinding


class SwatchBinding(StoreBinding):
    """
    A solid color tile.

    Without a fixed color it previews the current color. With one it shows
    that color and, when selectable, adopts it into the store on select().
    """

    def __init__(
        self,
        store: ColorStateStore | None,
        color: Any = None,
        selectable: bool = False,
    ) -> None:
        """
        Initialize swatch binding.

        Args:
            store: Owning store
            color: Fixed raw color for a preset swatch (optional)
            selectable: Whether selecting the swatch commits its color
        """
        super().__init__(store)
        self._color = ConversionFacade.parse(color) if color is not None else None
        self._selectable = selectable

    @property
    def color(self) -> ColorValue:
        """The color this swatch paints."""
        return self._color if self._color is not None else self._store.current

    @property
    def background(self) -> str:
        """CSS hex string to paint."""
        return ConversionFacade.to_hex_string(self.color)

    @property
    def is_selectable(self) -> bool:
        """True for preset swatches that commit on select()."""
        return self._color is not None and self._selectable

    def select(self) -> bool:
        """
        Commit this swatch's color.

        Returns:
            True if the store was updated
        """
        if not self.is_selectable:
            return False
        self._store.set_from_value(self._color)
        return True
