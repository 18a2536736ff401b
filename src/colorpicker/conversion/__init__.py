"""Color parsing and projection."""

from .facade import ConversionFacade, Projection, RawInput, round_half_up

__all__ = [
    "ConversionFacade",
    "Projection",
    "RawInput",
    "round_half_up",
]
