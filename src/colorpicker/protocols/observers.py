"""Observer protocol for color state changes."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .events import ColorEvent

if TYPE_CHECKING:
    from colorpicker.models import StoreState


@runtime_checkable
class ColorObserver(Protocol):
    """
    Observer that receives color state events.

    Sub-part bindings, the sync policy and rendering code implement this
    to react to store mutations without the store knowing about them.
    """

    def on_color_event(self, event: ColorEvent, state: "StoreState") -> None:
        """
        Handle a store mutation.

        Args:
            event: What kind of change happened
            state: The store state right after the mutation

        Threading:
            Called synchronously from inside the mutating call, on the UI
            thread, before the mutator returns.

        Error Handling:
            Exceptions raised by observers are caught and logged by the
            store. They do not propagate to the caller, so one failing
            observer doesn't break others.
        """
        ...
