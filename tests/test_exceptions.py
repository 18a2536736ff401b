"""Tests for the exception hierarchy and error handling helpers."""

from unittest.mock import Mock

import pytest

from colorpicker.exceptions import (
    ColorPickerError,
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    StoreNotBoundError,
    format_error_for_display,
    handle_errors,
    wrap_pydantic_error,
)


@pytest.mark.unit
class TestHierarchy:
    """Test exception classes."""

    def test_config_errors_are_configuration_errors(self):
        """Test inheritance."""
        assert issubclass(ConfigFileInvalidError, ConfigurationError)
        assert issubclass(ConfigValidationError, ConfigurationError)
        assert issubclass(ConfigurationError, ColorPickerError)
        assert issubclass(StoreNotBoundError, ColorPickerError)

    def test_full_message_includes_hint(self):
        """Test the combined user message."""
        error = ColorPickerError("Something failed", recovery_hint="Try again")
        assert str(error) == "Something failed"
        assert error.technical_message == "Something failed"
        assert error.get_full_message() == "Something failed\n\nSuggestion: Try again"

    def test_trailing_comma_message(self):
        """Test the trailing comma special case."""
        error = ConfigFileInvalidError("picker.json", "trailing comma at line 3 column 1")
        assert error.user_message == "Picker settings file has a trailing comma"
        assert "picker.json" in error.recovery_hint
        assert error.recoverable
        assert error.file_path == "picker.json"

    def test_other_json_error_message(self):
        """Test the generic JSON syntax message."""
        error = ConfigFileInvalidError("picker.json", "EOF while parsing an object at line 1 column 21")
        assert error.user_message == "Picker settings file is not valid JSON"
        assert "EOF while parsing" in error.technical_message

    @pytest.mark.parametrize("field,hint_part", [
        ("output_format", "hex, rgb, hsl, hsv"),
        ("surface_width", "whole number of character cells"),
        ("initial_value", "CSS color name"),
        ("other", "Fix or remove 'other'"),
    ])
    def test_validation_hints(self, field, hint_part):
        """Test that each setting gets a hint about its own values."""
        error = ConfigValidationError(field, "bad", "invalid", file_path="picker.json")
        assert error.user_message == f"Picker setting '{field}' is invalid: invalid"
        assert hint_part in error.recovery_hint
        assert error.recovery_hint.endswith("in picker.json")


@pytest.mark.unit
class TestWrapPydanticError:
    """Test conversion of pydantic errors."""

    def test_invalid_json_text(self):
        """Test JSON syntax errors recognized from the message."""
        class FakeValidationError(Exception):
            def __str__(self):
                return (
                    "1 validation error for PickerConfig\n"
                    "  Invalid JSON: trailing comma at line 4 column 1 [type=json_invalid]"
                )

        error = wrap_pydantic_error(FakeValidationError(), "picker.json")

        assert isinstance(error, ConfigFileInvalidError)
        assert error.parse_error == "trailing comma at line 4 column 1"
        assert error.user_message == "Picker settings file has a trailing comma"

    def test_unknown_error(self):
        """Test fallback for errors that are not pydantic errors."""
        error = wrap_pydantic_error(RuntimeError("odd"), "picker.json")
        assert isinstance(error, ConfigValidationError)
        assert error.field == "unknown"


@pytest.mark.unit
class TestFormatErrorForDisplay:
    """Test display formatting."""

    def test_custom_error(self):
        """Test picker errors show their user message and hint."""
        message, hint = format_error_for_display(StoreNotBoundError("SliderBinding"))
        assert message == "SliderBinding is not bound to a color state store."
        assert hint is not None

    def test_standard_error(self):
        """Test other exceptions show type and message."""
        assert format_error_for_display(ValueError("bad")) == ("ValueError: bad", None)


@pytest.mark.unit
class TestHandleErrors:
    """Test the handle_errors decorator."""

    def test_passes_result_through(self):
        """Test the happy path."""
        @handle_errors(operation_name="compute")
        def compute():
            return 42

        assert compute() == 42

    def test_notifies_and_returns_fallback(self):
        """Test swallowing a picker error."""
        notify = Mock()

        @handle_errors(
            operation_name="bind",
            user_notification=notify,
            fallback_value="fallback",
            re_raise=False,
        )
        def bind():
            raise StoreNotBoundError("HexInputBinding")

        assert bind() == "fallback"
        notify.assert_called_once()
        assert "HexInputBinding" in notify.call_args.args[0]
        assert "Suggestion:" in notify.call_args.args[0]

    def test_unexpected_error_is_reraised(self):
        """Test that re_raise propagates errors."""
        notify = Mock()

        @handle_errors(operation_name="explode", user_notification=notify)
        def explode():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            explode()
        notify.assert_called_once_with("Error: boom")
