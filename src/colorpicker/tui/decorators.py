"""Decorators for TUI components."""

from functools import wraps

from colorpicker.exceptions import handle_errors as _handle_errors


def handle_action_errors(operation_name: str):
    """
    Decorator for TUI action methods that wraps the centralized error handler.

    This is a TUI-specific wrapper around the centralized error handler that:
    - Uses self.notify for user notifications
    - Doesn't re-raise exceptions (keeps TUI responsive)
    - Returns None on error

    Example:
        @handle_action_errors("cycle output format")
        def action_cycle_format(self):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            handler = _handle_errors(
                operation_name=operation_name,
                user_notification=lambda msg: self.notify(msg, severity="error", timeout=5),
                re_raise=False,
                fallback_value=None
            )
            wrapped = handler(func)
            return wrapped(self, *args, **kwargs)
        return wrapper
    return decorator
