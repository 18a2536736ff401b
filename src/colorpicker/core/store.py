"""Single source of truth for one picker's color."""

import logging
from typing import Any

from colorpicker.conversion import ConversionFacade, Projection
from colorpicker.models import ColorValue, FormatTag, StoreState
from colorpicker.protocols import ColorEvent, ColorObserver

from .observer import ObserverManager

logger = logging.getLogger(__name__)


class ColorStateStore:
    """
    Holds the current color and serializes every change through two mutators.

    - ``set_from_raw``: text fields and anything else that hands over
      unvalidated input. Unparseable input keeps the current color and only
      records the typed text.
    - ``set_from_value``: pointer and slider parts that already computed a
      valid ColorValue.

    Both replace the state wholesale and notify observers synchronously
    before returning, so callers can read post-mutation state right away.

    Change Detection:
        Two colors are the same when their canonical hex strings match.
        Only a canonical change emits COLOR_CHANGED; replacing a color with
        an equal one emits VIEW_CHANGED, and a text-only edit emits
        RAW_EDITED. Outward forwarding keys off COLOR_CHANGED alone, which
        is what keeps an echoed value from bouncing back and forth.

    Threading:
        Not thread-shared. Each widget instance owns one store and all
        calls come from the UI event thread.

    Usage Example:
        ```python
        store = ColorStateStore("ff0000")
        store.register_observer(my_observer)

        store.set_from_raw({"h": 120, "s": 1, "l": 0.5})
        store.project(FormatTag.HEX)  # "00ff00"

        store.set_from_raw("zz")      # current unchanged
        store.last_raw_edit           # "zz"
        ```
    """

    def __init__(self, initial: Any = None, output_format: FormatTag | str = FormatTag.HEX):
        """
        Initialize the store.

        Args:
            initial: Any raw color input; unparseable or None means black
            output_format: Shape used by project() when no format is given
        """
        current = ConversionFacade.parse(initial)
        self._state = StoreState(
            current=current,
            last_raw_edit=current.canonical_hex,
            output_format=FormatTag(output_format),
        )
        self._observers = ObserverManager[ColorObserver](observer_type_name="color")

        logger.info(f"ColorStateStore initialized with {current.canonical_hex}")

    # =================================================================
    # Event System
    # =================================================================

    def register_observer(self, observer: ColorObserver) -> None:
        """
        Register an observer to receive color events.

        Args:
            observer: Object implementing ColorObserver protocol
        """
        self._observers.register(observer)

    def unregister_observer(self, observer: ColorObserver) -> None:
        """
        Unregister an observer.

        Args:
            observer: Previously registered observer
        """
        self._observers.unregister(observer)

    # =================================================================
    # State Access
    # =================================================================

    @property
    def state(self) -> StoreState:
        """The current immutable state snapshot."""
        return self._state

    @property
    def current(self) -> ColorValue:
        """The canonical current color."""
        return self._state.current

    @property
    def last_raw_edit(self) -> str:
        """Text last typed into the hex field (may not parse)."""
        return self._state.last_raw_edit

    @property
    def output_format(self) -> FormatTag:
        """Shape forwarded to the owner of a controlled value."""
        return self._state.output_format

    def project(self, fmt: FormatTag | str | None = None) -> Projection:
        """
        Project the current color.

        Args:
            fmt: Output shape (defaults to the store's output format)

        Returns:
            Hex string or component dict, derived fresh on every call
        """
        return ConversionFacade.project(self._state.current, fmt or self._state.output_format)

    # =================================================================
    # Mutation
    # =================================================================

    def set_from_raw(self, raw: Any) -> StoreState:
        """
        Replace the color from unvalidated input.

        Args:
            raw: Hex/name/functional string, component mapping or ColorValue

        Returns:
            The new state

        Events:
            COLOR_CHANGED if the canonical color changed, VIEW_CHANGED if an
            equal color replaced it, RAW_EDITED if the input did not parse

        Example:
            ```python
            store.set_from_raw("#0f0")  # last_raw_edit == "#0f0"
            store.set_from_raw("0f")    # color kept, last_raw_edit == "0f"
            ```
        """
        parsed = ConversionFacade.try_parse(raw)

        if parsed is None:
            # Keep the color, echo what was typed
            raw_edit = raw if isinstance(raw, str) else self._state.last_raw_edit
            new_state = StoreState(
                current=self._state.current,
                last_raw_edit=raw_edit,
                output_format=self._state.output_format,
            )
        else:
            raw_edit = raw if isinstance(raw, str) else parsed.canonical_hex
            new_state = StoreState(
                current=parsed.remembering_hue(self._state.current.hue),
                last_raw_edit=raw_edit,
                output_format=self._state.output_format,
            )

        return self._commit(new_state)

    def set_from_value(self, value: ColorValue) -> StoreState:
        """
        Replace the color with an already computed ColorValue.

        The hex field text follows the new color.

        Args:
            value: The new color

        Returns:
            The new state

        Raises:
            TypeError: If value is not a ColorValue
        """
        if not isinstance(value, ColorValue):
            raise TypeError(f"set_from_value expects a ColorValue, got {type(value).__name__}")

        new_state = StoreState(
            current=value,
            last_raw_edit=value.canonical_hex,
            output_format=self._state.output_format,
        )
        return self._commit(new_state)

    def set_output_format(self, output_format: FormatTag | str) -> StoreState:
        """
        Change the shape forwarded outward.

        Args:
            output_format: New output shape

        Returns:
            The new state

        Events:
            VIEW_CHANGED when the format differs; the color itself is untouched
        """
        new_state = StoreState(
            current=self._state.current,
            last_raw_edit=self._state.last_raw_edit,
            output_format=FormatTag(output_format),
        )
        return self._commit(new_state)

    def _commit(self, new_state: StoreState) -> StoreState:
        """Swap in new state, classify the change and notify observers."""
        previous = self._state
        self._state = new_state

        if not previous.current.same_color(new_state.current):
            event = ColorEvent.COLOR_CHANGED
        elif (
            previous.current != new_state.current
            or previous.output_format != new_state.output_format
        ):
            event = ColorEvent.VIEW_CHANGED
        else:
            event = ColorEvent.RAW_EDITED

        logger.debug(
            f"{event.value}: {previous.current.canonical_hex} -> "
            f"{new_state.current.canonical_hex} (raw={new_state.last_raw_edit!r})"
        )

        self._observers.notify("on_color_event", event, new_state)
        return new_state
