"""Mapping between UI geometry and color-space scalars.

Stateless: every function takes all of its inputs explicitly. Surface sizes
are read by the caller at interaction time and never stored here.

Coordinates only need to be in one consistent unit (pixels, character
cells, ...); nothing here assumes a particular one.
"""

import math
from typing import Any

from colorpicker.conversion import round_half_up

HUE_DOMAIN = 360
PERCENT_DOMAIN = 100
CHANNEL_DOMAIN = 255


def clamp(x: float, lo: float, hi: float) -> float:
    """Bound x to [lo, hi]."""
    return max(lo, min(hi, x))


def try_parse_number(raw: Any) -> float | None:
    """
    Read a number from an input widget's value.

    Args:
        raw: int, float or numeric text (surrounding whitespace allowed)

    Returns:
        The number, or None for empty, non-numeric, NaN or too-large input
    """
    if isinstance(raw, bool):
        return None
    if not isinstance(raw, (int, float, str)):
        return None
    try:
        number = float(raw.strip() if isinstance(raw, str) else raw)
    except (ValueError, OverflowError):
        return None
    if math.isnan(number):
        return None
    return number


def parse_number(raw: Any) -> float:
    """Like try_parse_number, but anything unreadable counts as 0."""
    number = try_parse_number(raw)
    return 0.0 if number is None else number


def position_to_saturation_value(
    pointer_x: float,
    pointer_y: float,
    rect_left: float,
    rect_top: float,
    rect_width: float,
    rect_height: float,
) -> tuple[float, float]:
    """
    Map a pointer position on the picker surface to (saturation, value).

    Saturation grows to the right, value grows upwards. Both are clamped
    to [0, 1] because pointer events keep arriving from outside the
    surface during fast drags. An axis with no extent contributes 0.

    Example:
        >>> position_to_saturation_value(150, -20, 0, 0, 100, 100)
        (1.0, 1.0)
    """
    x_fraction = (pointer_x - rect_left) / rect_width if rect_width > 0 else 0.0
    y_fraction = (pointer_y - rect_top) / rect_height if rect_height > 0 else 0.0
    saturation = clamp(x_fraction, 0.0, 1.0)
    value = clamp(1.0 - y_fraction, 0.0, 1.0)
    return (float(saturation), float(value))


def saturation_value_to_indicator_position(
    saturation: float,
    value: float,
    rect_width: float,
    rect_height: float,
    indicator_width: float,
    indicator_height: float,
    clamp_to_surface: bool = True,
) -> tuple[float, float]:
    """
    Place the selection indicator so it is centered on (saturation, value).

    Offsets are relative to the surface's own top-left corner.

    Args:
        saturation: HSV saturation, [0, 1]
        value: HSV value, [0, 1]
        rect_width: Surface width
        rect_height: Surface height
        indicator_width: Indicator width
        indicator_height: Indicator height
        clamp_to_surface: Bound ``left`` to ``[-iw/2, w - iw/2]`` and
            ``top`` to ``[-ih/2, h - ih/2]`` so the indicator center never
            leaves the surface, even for out-of-range input. With False the
            legacy formulas are used as-is: only ``left`` has an upper bound.

    Returns:
        (left, top) of the indicator's box
    """
    left = min(saturation * rect_width - indicator_width / 2, rect_width)
    top = -(value * rect_height) - indicator_height / 2 + rect_height

    if clamp_to_surface:
        left = clamp(left, -indicator_width / 2, rect_width - indicator_width / 2)
        top = clamp(top, -indicator_height / 2, rect_height - indicator_height / 2)
    return (float(left), float(top))


def slider_to_scalar(raw_input_value: Any, domain_max: float) -> float:
    """
    Convert a slider's raw value to the scalar the color model uses.

    Args:
        raw_input_value: The slider/input value (number or numeric text)
        domain_max: Slider maximum; 100 for percentage sliders, 360 for hue

    Returns:
        ``clamp(value, 0, domain_max) / domain_max``; for the hue domain
        the clamped degrees themselves

    Raises:
        ValueError: If domain_max is not positive

    Example:
        >>> slider_to_scalar("150", 100)
        1.0
        >>> slider_to_scalar("90", 360)
        90.0
    """
    if domain_max <= 0:
        raise ValueError(f"domain_max must be positive, got {domain_max}")

    bounded = clamp(parse_number(raw_input_value), 0.0, float(domain_max))
    if domain_max == HUE_DOMAIN:
        return bounded
    return bounded / domain_max


def scalar_to_slider(scalar: float, domain_max: float) -> int:
    """
    Inverse of slider_to_scalar, rounded to the whole number a slider shows.

    Args:
        scalar: Unit scalar, or degrees for the hue domain
        domain_max: Slider maximum

    Returns:
        Slider position in [0, domain_max]
    """
    amount = scalar if domain_max == HUE_DOMAIN else scalar * domain_max
    return round_half_up(clamp(amount, 0.0, float(domain_max)))
