"""Conversion between raw color input, ColorValue and output projections.

The RGB/HSL/HSV arithmetic comes from :mod:`colorsys` and CSS color names
from :mod:`webcolors`; this module only decides what counts as a color,
how out-of-range components are bounded, and what shape each projection
has.

Accepted raw input:
    - hex strings with 3, 4, 6 or 8 digits, with or without ``#``
    - CSS3 color names (``"teal"``) and ``"transparent"``
    - functional strings: ``rgb()``, ``rgba()``, ``hsl()``, ``hsla()``,
      ``hsv()``, ``hsva()``
    - mappings with ``r/g/b``, ``h/s/v`` or ``h/s/l`` keys and optional ``a``
    - an existing ColorValue

Component rules:
    - r/g/b are clamped to 0-255; ``"50%"`` means half of 255
    - s/l/v at or below 1 are fractions, above 1 are percentages
    - h is in degrees, bounded to [0, 360] with 360 folding onto 0
    - a missing, unparseable or out-of-range alpha becomes 1
"""

import colorsys
import logging
import math
import re
from collections.abc import Mapping
from typing import Any

import webcolors

from colorpicker.models import Channel, ColorValue, FormatTag

logger = logging.getLogger(__name__)

RawInput = str | Mapping[str, Any] | ColorValue
Projection = str | dict[str, float]

_HEX_PATTERN = re.compile(r"^#?([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$", re.IGNORECASE)
_FUNCTION_PATTERN = re.compile(r"^(rgb|hsl|hsv)a?\s*\((.*)\)$", re.IGNORECASE)
_ARG_SEPARATOR = re.compile(r"[\s,/]+")


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(x + 0.5))


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def _component(value: Any) -> tuple[float, bool]:
    """Return (number, is_percent) or raise ValueError."""
    if isinstance(value, bool):
        raise ValueError(f"Not a color component: {value!r}")
    if isinstance(value, (int, float)):
        try:
            number, percent = float(value), False
        except OverflowError:
            raise ValueError(f"Not a finite color component: {value!r}") from None
    elif isinstance(value, str):
        text = value.strip()
        percent = text.endswith("%")
        number = float(text[:-1]) if percent else float(text)
    else:
        raise ValueError(f"Not a color component: {value!r}")

    if math.isnan(number) or math.isinf(number):
        raise ValueError(f"Not a finite color component: {value!r}")
    return number, percent


def _channel(value: Any) -> float:
    number, percent = _component(value)
    if percent:
        number = number * 255.0 / 100.0
    return _clamp(number, 0.0, 255.0)


def _unit(value: Any) -> float:
    number, percent = _component(value)
    if percent or number > 1:
        number /= 100.0
    return _clamp(number, 0.0, 1.0)


def _degrees(value: Any) -> float:
    number, percent = _component(value)
    if percent:
        number = number * 360.0 / 100.0
    return _clamp(number, 0.0, 360.0) % 360.0


def _alpha(value: Any) -> float:
    if value is None:
        return 1.0
    try:
        number, percent = _component(value)
    except ValueError:
        return 1.0
    if percent:
        number /= 100.0
    if number < 0 or number > 1:
        return 1.0
    return number


class ConversionFacade:
    """
    Stateless translation between raw input, ColorValue and projections.

    All methods are static. ``parse`` never raises: anything it cannot read
    becomes opaque black. Use ``try_parse`` to tell the two apart.

    Example Usage:
        ```python
        color = ConversionFacade.parse({"h": 120, "s": 1, "l": 0.5})
        ConversionFacade.project(color, FormatTag.HEX)   # "00ff00"
        ConversionFacade.project(color, FormatTag.RGB)   # {"r": 0, "g": 255, ...}
        ```
    """

    # =================================================================
    # Parsing
    # =================================================================

    @staticmethod
    def try_parse(raw: Any) -> ColorValue | None:
        """
        Parse raw input into a ColorValue.

        Args:
            raw: Hex/name/functional string, component mapping or ColorValue

        Returns:
            The parsed color, or None if the input is not a color
        """
        if isinstance(raw, ColorValue):
            return raw
        if isinstance(raw, str):
            color = ConversionFacade._from_string(raw)
        elif isinstance(raw, Mapping):
            color = ConversionFacade._from_mapping(raw)
        else:
            color = None

        if color is None:
            logger.debug(f"Unparseable color input: {raw!r}")
        return color

    @staticmethod
    def parse(raw: Any) -> ColorValue:
        """
        Parse raw input, falling back to opaque black.

        Args:
            raw: Anything; see module docstring for what is recognized

        Returns:
            The parsed color, or ColorValue.black() if unrecognized
        """
        color = ConversionFacade.try_parse(raw)
        return color if color is not None else ColorValue.black()

    @staticmethod
    def is_valid(raw: Any) -> bool:
        """Check whether raw input parses as a color."""
        return ConversionFacade.try_parse(raw) is not None

    @staticmethod
    def carries_alpha(raw: Any) -> bool:
        """
        Check whether raw input specifies alpha at all.

        Six-digit hex strings and mappings without an ``a`` key carry no
        alpha; comparisons against them should ignore the alpha channel.
        """
        if isinstance(raw, ColorValue):
            return True
        if isinstance(raw, Mapping):
            return "a" in raw
        if isinstance(raw, str):
            text = raw.strip()
            match = _HEX_PATTERN.match(text)
            if match:
                return len(match.group(1)) in (4, 8)
            function = _FUNCTION_PATTERN.match(text)
            if function:
                args = [p for p in _ARG_SEPARATOR.split(function.group(2).strip()) if p]
                return len(args) == 4
            return text.lower() == "transparent"
        return False

    # =================================================================
    # Projections
    # =================================================================

    @staticmethod
    def project(value: ColorValue, fmt: FormatTag | str) -> Projection:
        """
        Render a color in the requested output shape.

        Args:
            value: The color to project
            fmt: Output shape

        Returns:
            Canonical hex string for HEX, otherwise a dict of floats with
            an ``a`` key. HSL/HSV values are unrounded.

        Example:
            ```python
            ConversionFacade.project(color, "hsl")
            # {"h": 120.0, "s": 1.0, "l": 0.5, "a": 1.0}
            ```
        """
        fmt = FormatTag(fmt)
        if fmt is FormatTag.HEX:
            return value.canonical_hex
        if fmt is FormatTag.RGB:
            return {"r": value.r, "g": value.g, "b": value.b, "a": value.a}
        if fmt is FormatTag.HSL:
            h, s, l = value.to_hsl()
            return {"h": h, "s": s, "l": l, "a": value.a}
        h, s, v = value.to_hsv()
        return {"h": h, "s": s, "v": v, "a": value.a}

    @staticmethod
    def to_hex_string(value: ColorValue) -> str:
        """Return ``#rrggbb`` for painting."""
        return value.to_hex_string()

    # =================================================================
    # Derivation
    # =================================================================

    @staticmethod
    def with_rgb(
        value: ColorValue,
        r: float | None = None,
        g: float | None = None,
        b: float | None = None,
        a: float | None = None,
    ) -> ColorValue:
        """Replace RGB channels (0-255) and/or alpha (0-1), keeping the hue hint."""
        return ConversionFacade._build_rgb(
            _clamp(value.r if r is None else r, 0.0, 255.0),
            _clamp(value.g if g is None else g, 0.0, 255.0),
            _clamp(value.b if b is None else b, 0.0, 255.0),
            value.a if a is None else _clamp(a, 0.0, 1.0),
            hue_hint=value.hue,
        )

    @staticmethod
    def with_hsl(
        value: ColorValue,
        h: float | None = None,
        s: float | None = None,
        l: float | None = None,
        a: float | None = None,
    ) -> ColorValue:
        """Replace HSL components (degrees, fractions) and/or alpha."""
        hue, saturation, lightness = value.to_hsl()
        return ConversionFacade._build_hsl(
            hue if h is None else _clamp(h, 0.0, 360.0) % 360.0,
            saturation if s is None else _clamp(s, 0.0, 1.0),
            lightness if l is None else _clamp(l, 0.0, 1.0),
            value.a if a is None else _clamp(a, 0.0, 1.0),
        )

    @staticmethod
    def with_hsv(
        value: ColorValue,
        h: float | None = None,
        s: float | None = None,
        v: float | None = None,
        a: float | None = None,
    ) -> ColorValue:
        """Replace HSV components (degrees, fractions) and/or alpha."""
        hue, saturation, brightness = value.to_hsv()
        return ConversionFacade._build_hsv(
            hue if h is None else _clamp(h, 0.0, 360.0) % 360.0,
            saturation if s is None else _clamp(s, 0.0, 1.0),
            brightness if v is None else _clamp(v, 0.0, 1.0),
            value.a if a is None else _clamp(a, 0.0, 1.0),
        )

    @staticmethod
    def channel_value(value: ColorValue, channel: Channel) -> float:
        """
        Read one channel in its editing units, unrounded.

        RGB in 0-255, hue in degrees, HSL saturation/lightness, HSV value
        and alpha in percent.
        """
        channel = Channel(channel)
        if channel is Channel.RED:
            return float(value.r)
        if channel is Channel.GREEN:
            return float(value.g)
        if channel is Channel.BLUE:
            return float(value.b)
        if channel is Channel.HUE:
            return value.hue
        if channel is Channel.SATURATION:
            return value.to_hsl()[1] * 100.0
        if channel is Channel.LIGHTNESS:
            return value.to_hsl()[2] * 100.0
        if channel is Channel.VALUE:
            return value.to_hsv()[2] * 100.0
        return value.a * 100.0

    @staticmethod
    def display_value(value: ColorValue, channel: Channel) -> int:
        """Read one channel rounded to the whole number shown in inputs."""
        return round_half_up(ConversionFacade.channel_value(value, channel))

    @staticmethod
    def with_channel(value: ColorValue, channel: Channel, amount: float) -> ColorValue:
        """
        Replace one channel given in its editing units.

        Args:
            value: Color to derive from
            channel: Channel to replace
            amount: New value in the channel's units, clamped to its domain

        Returns:
            New ColorValue; alpha and the last known hue are carried over
        """
        channel = Channel(channel)
        amount = _clamp(amount, 0.0, float(channel.domain_max))
        if channel is Channel.RED:
            return ConversionFacade.with_rgb(value, r=amount)
        if channel is Channel.GREEN:
            return ConversionFacade.with_rgb(value, g=amount)
        if channel is Channel.BLUE:
            return ConversionFacade.with_rgb(value, b=amount)
        if channel is Channel.HUE:
            return ConversionFacade.with_hsl(value, h=amount)
        if channel is Channel.SATURATION:
            return ConversionFacade.with_hsl(value, s=amount / 100.0)
        if channel is Channel.LIGHTNESS:
            return ConversionFacade.with_hsl(value, l=amount / 100.0)
        if channel is Channel.VALUE:
            return ConversionFacade.with_hsv(value, v=amount / 100.0)
        return ConversionFacade.with_rgb(value, a=amount / 100.0)

    # =================================================================
    # Internals
    # =================================================================

    @staticmethod
    def _build_rgb(
        r: float, g: float, b: float, a: float, hue_hint: float | None = None
    ) -> ColorValue:
        red, green, blue = round_half_up(r), round_half_up(g), round_half_up(b)
        hint = None
        if hue_hint is not None and red == green == blue:
            hint = hue_hint % 360.0
        return ColorValue(r=red, g=green, b=blue, a=a, hue_hint=hint)

    @staticmethod
    def _build_hsl(h: float, s: float, l: float, a: float) -> ColorValue:
        r, g, b = colorsys.hls_to_rgb(h / 360.0, l, s)
        return ConversionFacade._build_rgb(r * 255.0, g * 255.0, b * 255.0, a, hue_hint=h)

    @staticmethod
    def _build_hsv(h: float, s: float, v: float, a: float) -> ColorValue:
        r, g, b = colorsys.hsv_to_rgb(h / 360.0, s, v)
        return ConversionFacade._build_rgb(r * 255.0, g * 255.0, b * 255.0, a, hue_hint=h)

    @staticmethod
    def _from_hex(digits: str) -> ColorValue:
        if len(digits) in (3, 4):
            digits = "".join(ch * 2 for ch in digits)
        alpha = int(digits[6:8], 16) / 255.0 if len(digits) == 8 else 1.0
        return ColorValue(
            r=int(digits[0:2], 16),
            g=int(digits[2:4], 16),
            b=int(digits[4:6], 16),
            a=alpha,
        )

    @staticmethod
    def _from_string(raw: str) -> ColorValue | None:
        text = raw.strip()
        if not text:
            return None

        lowered = text.lower()
        if lowered == "transparent":
            return ColorValue(r=0, g=0, b=0, a=0.0)

        try:
            named = webcolors.name_to_rgb(lowered)
        except ValueError:
            named = None
        if named is not None:
            return ColorValue(r=named.red, g=named.green, b=named.blue)

        match = _HEX_PATTERN.match(text)
        if match:
            return ConversionFacade._from_hex(match.group(1))

        function = _FUNCTION_PATTERN.match(lowered)
        if function:
            space = function.group(1)
            args = [p for p in _ARG_SEPARATOR.split(function.group(2).strip()) if p]
            if len(args) not in (3, 4):
                return None
            # "rgb" -> {"r", "g", "b"}, "hsl" -> {"h", "s", "l"}, ...
            components: dict[str, Any] = dict(zip(space, args))
            if len(args) == 4:
                components["a"] = args[3]
            return ConversionFacade._from_mapping(components)

        return None

    @staticmethod
    def _from_mapping(raw: Mapping[str, Any]) -> ColorValue | None:
        keys = set(raw)
        alpha = _alpha(raw.get("a"))
        try:
            if {"r", "g", "b"} <= keys:
                return ConversionFacade._build_rgb(
                    _channel(raw["r"]), _channel(raw["g"]), _channel(raw["b"]), alpha
                )
            if {"h", "s", "v"} <= keys:
                return ConversionFacade._build_hsv(
                    _degrees(raw["h"]), _unit(raw["s"]), _unit(raw["v"]), alpha
                )
            if {"h", "s", "l"} <= keys:
                return ConversionFacade._build_hsl(
                    _degrees(raw["h"]), _unit(raw["s"]), _unit(raw["l"]), alpha
                )
        except ValueError:
            return None
        return None
