"""Exceptions raised by the color picker.

Only two things can actually go wrong: a settings file that cannot be
used, and a sub-part binding created without a store. Color input never
raises; the conversion layer absorbs it.

Every error keeps two messages. ``user_message`` is what the CLI and the
terminal front end show, ``technical_message`` is what goes to the log.
"""

from typing import Any

FORMAT_NAMES = "hex, rgb, hsl, hsv"


class ColorPickerError(Exception):
    """
    Root of the picker's exception tree.

    Attributes:
        user_message: Short message for the person at the terminal
        technical_message: Log message (defaults to user_message)
        recoverable: True if fixing input and retrying can succeed
        recovery_hint: What to change, when there is something to say
    """

    def __init__(
        self,
        user_message: str,
        technical_message: str | None = None,
        recoverable: bool = False,
        recovery_hint: str | None = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the hint, as printed by the CLI."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"


# =================================================================
# Binding wiring
# =================================================================


class StoreNotBoundError(ColorPickerError):
    """
    A binding was given ``None`` instead of a ColorStateStore.

    This is a programming error in the host, so it is never recoverable.
    """

    def __init__(self, part: str):
        super().__init__(
            user_message=f"{part} is not bound to a color state store.",
            technical_message=f"{part} constructed with store=None",
            recovery_hint=(
                "Create the binding through ColorPicker (e.g. picker.hex_input()) "
                "or pass the ColorStateStore instance explicitly."
            ),
        )
        self.part = part


# =================================================================
# Picker settings file
# =================================================================


class ConfigurationError(ColorPickerError):
    """The picker settings file cannot be used."""

    def __init__(self, user_message: str, technical_message: str, recovery_hint: str, file_path: str | None):
        super().__init__(
            user_message=user_message,
            technical_message=technical_message,
            recoverable=True,
            recovery_hint=recovery_hint,
        )
        self.file_path = file_path


class ConfigFileInvalidError(ConfigurationError):
    """The settings file is empty or not a JSON document."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Args:
            file_path: Settings file that was read
            parse_error: Reason reported by the JSON parser
        """
        reason = parse_error.lower()
        if "empty" in reason:
            user_msg = "Picker settings file is empty"
            hint = f"Write a JSON object such as {{\"output_format\": \"hsl\"}} to {file_path}, or delete it"
        elif "trailing comma" in reason:
            user_msg = "Picker settings file has a trailing comma"
            hint = f"Remove the comma after the last setting in {file_path}"
        else:
            user_msg = "Picker settings file is not valid JSON"
            hint = f"{file_path} must hold one JSON object of settings, e.g. {{\"surface_width\": 40}}"

        super().__init__(
            user_message=user_msg,
            technical_message=f"Cannot parse {file_path}: {parse_error}",
            recovery_hint=hint,
            file_path=file_path,
        )
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """A setting in the file has a value the picker cannot use."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: str | None = None):
        """
        Args:
            field: Setting name (dotted for nested locations)
            value: Offending value, if known
            error_msg: Validation message
            file_path: Settings file the value came from (optional)
        """
        if field.endswith("format"):
            hint = f"Set '{field}' to one of: {FORMAT_NAMES}"
        elif field.startswith(("surface_", "indicator_")):
            hint = f"Set '{field}' to a whole number of character cells"
        elif field == "initial_value":
            hint = "Use a hex string or CSS color name, e.g. \"ff0000\" or \"teal\""
        else:
            hint = f"Fix or remove '{field}'"
        if file_path:
            hint += f" in {file_path}"

        super().__init__(
            user_message=f"Picker setting '{field}' is invalid: {error_msg}",
            technical_message=f"{field}={value!r} rejected: {error_msg}",
            recovery_hint=hint,
            file_path=file_path,
        )
        self.field = field
        self.value = value
