"""Tests for the ColorValue model."""

import pytest
from pydantic import ValidationError

from colorpicker.models import ColorValue


@pytest.mark.unit
class TestColorValue:
    """Test ColorValue fields and derived views."""

    def test_black_is_opaque(self):
        """Test the fallback color."""
        black = ColorValue.black()
        assert black.to_rgba_tuple() == (0, 0, 0, 1.0)
        assert black.canonical_hex == "000000"

    def test_rejects_out_of_range_channels(self):
        """Test channel validation."""
        with pytest.raises(ValidationError):
            ColorValue(r=256, g=0, b=0)
        with pytest.raises(ValidationError):
            ColorValue(r=0, g=-1, b=0)
        with pytest.raises(ValidationError):
            ColorValue(r=0, g=0, b=0, a=1.5)

    def test_is_frozen(self, red):
        """Test that values cannot be mutated in place."""
        with pytest.raises(ValidationError):
            red.r = 0

    def test_canonical_hex_opaque(self, red):
        """Test six-digit canonical form for opaque colors."""
        assert red.canonical_hex == "ff0000"
        assert red.to_hex_string() == "#ff0000"

    def test_canonical_hex_translucent(self, translucent_red):
        """Test eight-digit canonical form when alpha is below 1."""
        assert translucent_red.canonical_hex == "ff000080"
        assert translucent_red.hex6 == "ff0000"
        assert translucent_red.to_hex_string() == "#ff0000"

    def test_nearly_opaque_rounds_to_opaque(self):
        """Test that alpha within half a byte of 1 counts as opaque."""
        color = ColorValue(r=1, g=2, b=3, a=0.999)
        assert color.is_opaque
        assert color.canonical_hex == "010203"

    def test_hsl_and_hsv_views(self, red):
        """Test derived HSL/HSV tuples."""
        assert red.to_hsl() == pytest.approx((0.0, 1.0, 0.5))
        assert red.to_hsv() == pytest.approx((0.0, 1.0, 1.0))

    def test_hue_of_chromatic_color(self):
        """Test hue derivation from RGB."""
        assert ColorValue(r=0, g=255, b=0).hue == pytest.approx(120.0)
        assert ColorValue(r=0, g=0, b=255).hue == pytest.approx(240.0)

    def test_hue_hint_used_only_when_achromatic(self):
        """Test that the remembered hue applies to grays only."""
        gray = ColorValue(r=128, g=128, b=128, hue_hint=200.0)
        assert gray.is_achromatic
        assert gray.hue == 200.0

        green = ColorValue(r=0, g=255, b=0, hue_hint=200.0)
        assert green.hue == pytest.approx(120.0)

    def test_same_color_ignores_hue_hint(self):
        """Test that equality of color ignores the remembered hue."""
        plain = ColorValue(r=0, g=0, b=0)
        hinted = ColorValue(r=0, g=0, b=0, hue_hint=90.0)
        assert plain.same_color(hinted)
        assert plain != hinted

    def test_same_color_considers_alpha(self, red, translucent_red):
        """Test that alpha is part of the canonical color."""
        assert not red.same_color(translucent_red)

    def test_remembering_hue(self, red):
        """Test that only grays without their own hue take the fallback."""
        gray = ColorValue(r=128, g=128, b=128)
        assert gray.remembering_hue(200.0).hue == 200.0
        assert gray.remembering_hue(360.0).hue == 0.0

        hinted = ColorValue(r=128, g=128, b=128, hue_hint=40.0)
        assert hinted.remembering_hue(200.0) is hinted
        assert red.remembering_hue(200.0) is red
