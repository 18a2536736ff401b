"""Smoke tests for TUI using Textual's test framework.

These tests verify that the TUI can launch, render, and respond to basic
interactions without crashing. They don't test detailed behavior, just that
the widgets are wired to the picker.
"""

import pytest
from textual.widgets import Input

from colorpicker import ColorPicker, FormatTag
from colorpicker.tui import ColorPickerApp, format_projection
from colorpicker.tui.widgets import ChannelField, ColorSurface, HexField

SIZE = (100, 40)


@pytest.fixture
def picker():
    """Picker starting at red with a small surface."""
    return ColorPicker("ff0000")


@pytest.mark.integration
@pytest.mark.asyncio
class TestTUILaunch:
    """Test that TUI can launch without crashing."""

    async def test_tui_mounts_widgets(self, picker):
        """Test that TUI mounts all required widgets."""
        app = ColorPickerApp(picker)

        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()

            assert app.query_one("#surface", ColorSurface) is not None
            assert app.query_one("#current-swatch") is not None
            assert app.query_one("#hex", HexField) is not None
            assert len(app.query(ChannelField)) == 8
            assert len(app.query("ChannelSlider")) == 4
            assert app.query_one("Header") is not None
            assert app.query_one("Footer") is not None

    async def test_accept_returns_value(self, picker):
        """Test that accepting exits with the current projection."""
        app = ColorPickerApp(picker)

        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()
            await app.run_action("accept")

        assert app.return_value == "ff0000"

    async def test_cancel_returns_none(self, picker):
        """Test that cancelling exits without a value."""
        app = ColorPickerApp(picker)

        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()
            await app.run_action("cancel")

        assert app.return_value is None


@pytest.mark.integration
@pytest.mark.asyncio
class TestTUIInteraction:
    """Test that widgets drive the picker."""

    async def test_hex_input_updates_picker(self, picker):
        """Test typing into the hex field."""
        app = ColorPickerApp(picker)

        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()
            app.query_one(HexField).query_one(Input).value = "00ff00"
            await pilot.pause()

            assert picker.value == "00ff00"
            red_field = app.query_one("#channel-r", ChannelField).query_one(Input)
            green_field = app.query_one("#channel-g", ChannelField).query_one(Input)
            assert red_field.value == "0"
            assert green_field.value == "255"

    async def test_preset_click(self, picker):
        """Test that clicking a preset commits it."""
        app = ColorPickerApp(picker, presets=["red", "orange"])

        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()
            await pilot.click("#preset-1")
            await pilot.pause()

            assert picker.value == "ffa500"

    async def test_surface_click(self, picker):
        """Test that clicking a surface cell commits the color painted there."""
        app = ColorPickerApp(picker)

        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()
            surface = app.query_one("#surface", ColorSurface)
            width, height = (int(n) for n in surface.binding.size)

            # (1, 1) is the first content cell inside the border
            top_left = surface.binding.color_at(0.5, 0.5)
            await pilot.click("#surface", offset=(1, 1))
            await pilot.pause()
            assert picker.current.canonical_hex == top_left.canonical_hex

            bottom_right = surface.binding.color_at(width - 0.5, height - 0.5)
            await pilot.click("#surface", offset=(width, height))
            await pilot.pause()
            assert picker.current.canonical_hex == bottom_right.canonical_hex

    async def test_cycle_format(self, picker):
        """Test switching the output format."""
        app = ColorPickerApp(picker)

        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()
            await app.run_action("cycle_format")
            await pilot.pause()

            assert picker.store.output_format == FormatTag.RGB

    async def test_reset(self, picker):
        """Test returning to the starting color."""
        app = ColorPickerApp(picker)

        async with app.run_test(size=SIZE) as pilot:
            await pilot.pause()
            picker.update_value("0000ff")
            await app.run_action("reset")
            await pilot.pause()

            assert picker.value == "ff0000"


@pytest.mark.unit
class TestFormatProjection:
    """Test status line formatting."""

    def test_hex(self):
        """Test hex strings pass through."""
        assert format_projection("ff0000") == "ff0000"

    def test_mapping(self):
        """Test mappings are rounded compact JSON."""
        assert format_projection({"h": 120.00001, "s": 1.0}) == '{"h": 120.0, "s": 1.0}'
