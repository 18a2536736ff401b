"""Canonical color model."""

import colorsys

from pydantic import BaseModel, ConfigDict, Field


class ColorValue(BaseModel):
    """Immutable snapshot of the current color.

    RGB plus alpha is the only stored representation. HSL and HSV are
    recomputed from it on every read so they can never drift apart after
    repeated edits.

    ``hue_hint`` remembers the hue a color was built from. It is only
    consulted when the RGB triple is achromatic (gray, black or white), where
    the hue cannot be derived, so that dragging saturation to zero and back
    does not snap the hue to red.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")
    a: float = Field(default=1.0, ge=0.0, le=1.0, description="Alpha (0-1)")
    hue_hint: float | None = Field(
        default=None, ge=0.0, lt=360.0, description="Last known hue in degrees"
    )

    @classmethod
    def black(cls) -> "ColorValue":
        """Create the fallback color: black, fully opaque."""
        return cls(r=0, g=0, b=0)

    # =================================================================
    # Derived views
    # =================================================================

    @property
    def is_achromatic(self) -> bool:
        """True when the hue is undefined (all channels equal)."""
        return self.r == self.g == self.b

    @property
    def alpha_byte(self) -> int:
        """Alpha scaled to 0-255, rounded half up."""
        return int(self.a * 255 + 0.5)

    @property
    def is_opaque(self) -> bool:
        """True when alpha rounds to a full 0xff byte."""
        return self.alpha_byte == 255

    @property
    def hue(self) -> float:
        """Hue in degrees, [0, 360)."""
        if self.is_achromatic:
            return self.hue_hint if self.hue_hint is not None else 0.0
        h, _, _ = colorsys.rgb_to_hsv(*self._unit_rgb())
        return (h * 360.0) % 360.0

    def to_hsl(self) -> tuple[float, float, float]:
        """Return (hue, saturation, lightness) with s and l in [0, 1]."""
        _, lightness, saturation = colorsys.rgb_to_hls(*self._unit_rgb())
        return (self.hue, saturation, lightness)

    def to_hsv(self) -> tuple[float, float, float]:
        """Return (hue, saturation, value) with s and v in [0, 1]."""
        _, saturation, value = colorsys.rgb_to_hsv(*self._unit_rgb())
        return (self.hue, saturation, value)

    def to_rgba_tuple(self) -> tuple[int, int, int, float]:
        """Convert to (r, g, b, a)."""
        return (self.r, self.g, self.b, self.a)

    # =================================================================
    # Hex forms
    # =================================================================

    @property
    def hex6(self) -> str:
        """Six lowercase hex digits, alpha ignored."""
        return f"{self.r:02x}{self.g:02x}{self.b:02x}"

    @property
    def canonical_hex(self) -> str:
        """Canonical string used for change detection.

        Six digits for opaque colors, eight (alpha byte last) otherwise.

        Example:
            >>> ColorValue(r=255, g=0, b=0).canonical_hex
            'ff0000'
            >>> ColorValue(r=255, g=0, b=0, a=0.5).canonical_hex
            'ff000080'
        """
        if self.is_opaque:
            return self.hex6
        return f"{self.hex6}{self.alpha_byte:02x}"

    def to_hex_string(self) -> str:
        """Convert to CSS hex color string (e.g., '#ff0000')."""
        return f"#{self.hex6}"

    def same_color(self, other: "ColorValue") -> bool:
        """Compare canonical RGBA, ignoring the remembered hue."""
        return self.canonical_hex == other.canonical_hex

    def remembering_hue(self, hue: float) -> "ColorValue":
        """
        Give an achromatic color with no hue of its own the given hue.

        Text such as ``"808080"`` says nothing about hue, so an edit that
        lands on a gray keeps the hue the picker showed before it.

        Args:
            hue: Hue in degrees to fall back to

        Returns:
            This color if it has a hue already, otherwise a copy with
            ``hue_hint`` set
        """
        if not self.is_achromatic or self.hue_hint is not None:
            return self
        return self.model_copy(update={"hue_hint": hue % 360.0})

    def _unit_rgb(self) -> tuple[float, float, float]:
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0)
