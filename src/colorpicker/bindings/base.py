"""Shared plumbing for sub-part bindings."""

from colorpicker.core.store import ColorStateStore
from colorpicker.exceptions import StoreNotBoundError


class StoreBinding:
    """
    Base for every sub-part binding.

    A binding always receives its store explicitly. Constructing one
    without a store is a wiring bug and fails immediately rather than on
    first use.
    """

    def __init__(self, store: ColorStateStore | None) -> None:
        if store is None:
            raise StoreNotBoundError(type(self).__name__)
        self._store = store

    @property
    def store(self) -> ColorStateStore:
        """The store this binding reads from and writes to."""
        return self._store
