"""
Centralized error handling utilities.

Each layer translates errors to be more useful at the next level up:

```
┌──────────────────────────────────────┐
│  USER LAYER (CLI/TUI)                │
│  - Formats error.user_message        │
│  - Shows error.recovery_hint         │
└──────────────────────────────────────┘
                  ↑ ColorPickerError
┌──────────────────────────────────────┐
│  APPLICATION LAYER (config, wiring)  │
│  - Converts pydantic errors          │
│  - Adds context and recovery hints   │
└──────────────────────────────────────┘
```

The color state core itself has no error path: malformed color input is
absorbed by the conversion facade and the store. What remains are config
problems and wiring bugs.

| Pattern | Code |
|---------|------|
| Show error to user, continue | `@handle_errors(operation_name="apply", user_notification=self.notify, re_raise=False)` |
| Log and re-raise | `@handle_errors(operation_name="load config", re_raise=True)` |
| Pydantic error to config error | `raise wrap_pydantic_error(e, str(path)) from e` |
"""

import logging
from functools import wraps
from typing import Callable, Optional, TypeVar

from .errors import ColorPickerError, ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)

T = TypeVar('T')


def handle_errors(
    *,
    operation_name: str,
    user_notification: Optional[Callable[[str], None]] = None,
    fallback_value: Optional[T] = None,
    re_raise: bool = True,
    log_level: int = logging.ERROR
) -> Callable:
    """
    Decorator for consistent error handling.

    Args:
        operation_name: Name of the operation for logging (e.g., "load config")
        user_notification: Optional callback to notify user (e.g., self.notify)
        fallback_value: Value to return if error occurs and re_raise=False
        re_raise: Whether to re-raise the exception after handling
        log_level: Logging level for the error (default: ERROR)

    Returns:
        Decorated function
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)

            except ColorPickerError as e:
                logger.log(log_level, f"Failed to {operation_name}: {e.technical_message}")

                if user_notification:
                    user_notification(e.get_full_message())

                if re_raise:
                    raise
                return fallback_value

            except Exception as e:
                logger.log(
                    log_level,
                    f"Unexpected error during {operation_name}: {e}",
                    exc_info=True
                )

                if user_notification:
                    user_notification(f"Error: {e}")

                if re_raise:
                    raise
                return fallback_value

        return wrapper
    return decorator


def wrap_pydantic_error(error: Exception, file_path: str) -> ColorPickerError:
    """
    Convert Pydantic validation errors to color picker exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # Invalid JSON syntax
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return ConfigFileInvalidError(file_path, parse_error)

    # Valid JSON but invalid values
    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',)))
            return ConfigValidationError(
                field=field,
                value=first_error.get('input', None),
                error_msg=first_error.get('msg', 'validation failed'),
                file_path=file_path
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get('loc', ('unknown',)))
                error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")

            combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)
            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=combined_msg,
                file_path=file_path
            )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, ColorPickerError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
