"""Reconciliation between a controlled external value and the store."""

import logging
from collections.abc import Callable
from typing import Any

from colorpicker.conversion import ConversionFacade, Projection
from colorpicker.models import StoreState
from colorpicker.protocols import ColorEvent

from .store import ColorStateStore

logger = logging.getLogger(__name__)

OnChange = Callable[[Projection], None]


class SyncPolicy:
    """
    Keeps an externally owned value and the store convergent.

    Inbound:
        ``receive()`` compares the external value with the store by canonical
        hex (six digits when the external value carries no alpha). Equal
        values are dropped; that comparison is what stops an owner echoing
        our own output back from causing another round trip.

    Outbound:
        Every COLOR_CHANGED notification produces exactly one call to the
        owner's callback with ``project(current, output_format)``. Changes
        that were caused by adopting an external value are not forwarded.

    Ordering:
        Everything is synchronous, so an adopted external value is fully
        applied before any later internal change is forwarded. Values are
        never queued; the most recent ``receive()`` wins.
    """

    def __init__(self, store: ColorStateStore, on_change: OnChange | None = None):
        """
        Attach to a store.

        Args:
            store: The store to keep in sync
            on_change: Owner callback receiving projected values (optional)
        """
        self._store = store
        self._on_change = on_change
        self._adopting = False
        store.register_observer(self)

    @property
    def store(self) -> ColorStateStore:
        """The store this policy is attached to."""
        return self._store

    def receive(self, external: Any) -> bool:
        """
        Offer a new controlled value from the owner.

        Args:
            external: Any raw color input

        Returns:
            True if the store adopted the value, False if it already matched
        """
        incoming = ConversionFacade.parse(external)
        current = self._store.current

        if ConversionFacade.carries_alpha(external):
            unchanged = incoming.canonical_hex == current.canonical_hex
        else:
            unchanged = incoming.hex6 == current.hex6

        if unchanged:
            logger.debug(f"External value {external!r} matches store, ignoring")
            return False

        logger.debug(f"Adopting external value {external!r} ({incoming.canonical_hex})")
        self._adopting = True
        try:
            if isinstance(external, str) and ConversionFacade.is_valid(external):
                self._store.set_from_raw(external)
            else:
                self._store.set_from_value(incoming.remembering_hue(current.hue))
        finally:
            self._adopting = False
        return True

    def on_color_event(self, event: ColorEvent, state: StoreState) -> None:
        """Forward canonical changes to the owner (ColorObserver protocol)."""
        if event is not ColorEvent.COLOR_CHANGED:
            return
        if self._adopting:
            logger.debug(f"Not echoing adopted value {state.current.canonical_hex}")
            return
        if self._on_change is None:
            return

        value = ConversionFacade.project(state.current, state.output_format)
        logger.debug(f"Forwarding {value!r} to owner")
        self._on_change(value)

    def detach(self) -> None:
        """Stop listening to the store."""
        self._store.unregister_observer(self)
