"""Tests for SyncPolicy controlled-value reconciliation."""

from unittest.mock import Mock

import pytest

from colorpicker.core import ColorStateStore, SyncPolicy
from colorpicker.models import ColorValue, FormatTag


@pytest.fixture
def on_change():
    """Owner callback."""
    return Mock()


@pytest.fixture
def sync(store, on_change):
    """SyncPolicy attached to the red store."""
    return SyncPolicy(store, on_change)


@pytest.mark.unit
class TestReceive:
    """Test inbound values."""

    def test_matching_value_is_ignored(self, sync, store):
        """Test that an equal external value is not adopted."""
        assert sync.receive("ff0000") is False
        assert sync.receive("#F00") is False
        assert store.last_raw_edit == "ff0000"

    def test_new_value_is_adopted_without_echo(self, sync, store, on_change):
        """Test that adoption updates the store but does not call the owner."""
        assert sync.receive("00ff00") is True
        assert store.current.canonical_hex == "00ff00"
        assert store.last_raw_edit == "00ff00"
        on_change.assert_not_called()

    def test_alpha_ignored_when_external_has_none(self, translucent_red, on_change):
        """Test six-digit comparison for values that carry no alpha."""
        store = ColorStateStore(translucent_red)
        sync = SyncPolicy(store, on_change)

        assert sync.receive("ff0000") is False
        assert store.current.canonical_hex == "ff000080"

    def test_alpha_compared_when_external_has_it(self, translucent_red, on_change):
        """Test eight-digit comparison for values that carry alpha."""
        store = ColorStateStore(translucent_red)
        sync = SyncPolicy(store, on_change)

        assert sync.receive("ff0000ff") is True
        assert store.current.canonical_hex == "ff0000"
        on_change.assert_not_called()

    def test_structured_external_value(self, sync, store):
        """Test adopting a component mapping."""
        assert sync.receive({"r": 0, "g": 0, "b": 255}) is True
        assert store.current.canonical_hex == "0000ff"
        assert store.last_raw_edit == "0000ff"

    def test_invalid_external_value_adopts_black(self, sync, store, on_change):
        """Test that an unparseable controlled value resets to black."""
        assert sync.receive("zz") is True
        assert store.current == ColorValue.black()
        on_change.assert_not_called()

    def test_most_recent_value_wins(self, sync, store):
        """Test that successive values are applied in order."""
        sync.receive("00ff00")
        sync.receive("0000ff")
        assert store.current.canonical_hex == "0000ff"


@pytest.mark.unit
class TestForwarding:
    """Test outbound notifications."""

    def test_internal_change_is_forwarded_once(self, sync, store, on_change):
        """Test that a user edit reaches the owner exactly once."""
        store.set_from_raw("00ff00")
        on_change.assert_called_once_with("00ff00")

    def test_forwarded_in_output_format(self, on_change):
        """Test that the owner receives the configured projection."""
        store = ColorStateStore("ff0000", output_format=FormatTag.RGB)
        SyncPolicy(store, on_change)

        store.set_from_raw("0000ff")

        on_change.assert_called_once_with({"r": 0, "g": 0, "b": 255, "a": 1.0})

    def test_raw_and_view_changes_not_forwarded(self, sync, store, on_change):
        """Test that non-canonical changes stay internal."""
        store.set_from_raw("zz")
        store.set_from_raw("#f00")
        store.set_output_format("hsl")
        on_change.assert_not_called()

    def test_owner_echo_does_not_loop(self, store):
        """Test that an owner feeding our output back in is a no-op."""
        calls = []

        def owner(value):
            calls.append(value)
            sync.receive(value)

        sync = SyncPolicy(store, owner)
        store.set_from_raw("00ff00")

        assert calls == ["00ff00"]
        assert store.current.canonical_hex == "00ff00"

    def test_no_callback(self, store):
        """Test that a policy without a callback only adopts values."""
        sync = SyncPolicy(store)
        store.set_from_raw("00ff00")
        assert sync.receive("0000ff") is True

    def test_detach(self, sync, store, on_change):
        """Test that a detached policy stops forwarding."""
        sync.detach()
        store.set_from_raw("00ff00")
        on_change.assert_not_called()

    def test_later_internal_change_after_adoption_is_forwarded(self, sync, store, on_change):
        """Test that adoption does not suppress the next user edit."""
        sync.receive("00ff00")
        store.set_from_raw("0000ff")
        on_change.assert_called_once_with("0000ff")


@pytest.mark.unit
class TestReceiveHue:
    """Test that adopted grays keep the hue the picker showed."""

    def test_gray_hex_keeps_hue(self, on_change):
        """Test adopting a gray hex string."""
        store = ColorStateStore({"h": 200, "s": 1, "l": 0.5})
        sync = SyncPolicy(store, on_change)

        assert sync.receive("808080") is True
        assert store.current.hex6 == "808080"
        assert store.current.hue == pytest.approx(200.0)

    def test_gray_mapping_keeps_hue(self, on_change):
        """Test adopting a gray component mapping."""
        store = ColorStateStore({"h": 200, "s": 1, "l": 0.5})
        sync = SyncPolicy(store, on_change)

        assert sync.receive({"r": 0, "g": 0, "b": 0}) is True
        assert store.current.hue == pytest.approx(200.0)
        on_change.assert_not_called()
