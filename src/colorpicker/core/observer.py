"""Generic observer list manager.

The color core is single-threaded: every mutation runs on the UI event
thread, so registration and notification need no locking. What this class
does provide is isolation: one observer raising never stops the others
from being notified.
"""

import logging
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=object)


class ObserverManager(Generic[T]):
    """
    Ordered observer list with error-isolated notification.

    Type Parameters:
        T: The observer protocol type (e.g., ColorObserver)

    Example:
        ```python
        class MyStore:
            def __init__(self):
                self._observers = ObserverManager[ColorObserver](observer_type_name="color")

            def register_observer(self, observer: ColorObserver) -> None:
                self._observers.register(observer)

            def _notify(self, event, state):
                self._observers.notify("on_color_event", event, state)
        ```
    """

    def __init__(self, observer_type_name: str = "observer"):
        """
        Initialize the observer manager.

        Args:
            observer_type_name: Name of the observer type for logging (e.g., "color")
        """
        self._observers: list[T] = []
        self._observer_type_name = observer_type_name

    def register(self, observer: T) -> None:
        """
        Register an observer (idempotent - won't add duplicates).

        Args:
            observer: The observer to register
        """
        if observer not in self._observers:
            self._observers.append(observer)
            logger.debug(f"Registered {self._observer_type_name} observer: {observer}")
        else:
            logger.debug(f"{self._observer_type_name} observer already registered: {observer}")

    def unregister(self, observer: T) -> None:
        """
        Unregister an observer.

        Args:
            observer: The observer to unregister
        """
        if observer in self._observers:
            self._observers.remove(observer)
            logger.debug(f"Unregistered {self._observer_type_name} observer: {observer}")
        else:
            logger.warning(
                f"Attempted to unregister unknown {self._observer_type_name} observer: {observer}"
            )

    def notify(self, callback_name: str, *args: Any, **kwargs: Any) -> None:
        """
        Notify all observers by calling their callback method, in registration order.

        The list is copied first, so observers may register or unregister
        while being notified; the change applies from the next notification.

        Args:
            callback_name: Name of the callback method to call (e.g., 'on_color_event')
            *args: Positional arguments to pass to the callback
            **kwargs: Keyword arguments to pass to the callback

        Error Handling:
            Exceptions in observer callbacks are logged but don't affect other observers.
        """
        for observer in list(self._observers):
            try:
                callback = getattr(observer, callback_name)
            except AttributeError:
                logger.error(
                    f"{self._observer_type_name} observer {observer} has no method '{callback_name}'"
                )
                continue

            try:
                callback(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Error notifying {self._observer_type_name} observer {observer} via {callback_name}: {e}",
                    exc_info=True,
                )

    def clear(self) -> None:
        """Remove all registered observers."""
        count = len(self._observers)
        self._observers.clear()
        if count > 0:
            logger.debug(f"Cleared {count} {self._observer_type_name} observer(s)")

    def __contains__(self, observer: T) -> bool:
        """Check if an observer is registered (supports 'in' operator)."""
        return observer in self._observers

    def __len__(self) -> int:
        """Get the number of registered observers (supports len() function)."""
        return len(self._observers)

    def __bool__(self) -> bool:
        """Check if any observers are registered."""
        return len(self._observers) > 0
