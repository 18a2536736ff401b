"""
Custom exception hierarchy for the color picker.

```
ColorPickerError (base)
├── StoreNotBoundError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

Malformed color input is deliberately absent from this tree: the conversion
facade turns it into the fallback color and the store keeps the typed text,
so it never surfaces as an exception.

### Example: Binding without a store

```python
from colorpicker.bindings import HexInputBinding

HexInputBinding(None)
# StoreNotBoundError: HexInputBinding is not bound to a color state store.
```
"""

from .errors import (
    ColorPickerError,
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    StoreNotBoundError,
)
from .handlers import format_error_for_display, handle_errors, wrap_pydantic_error

__all__ = [
    # Errors
    "ColorPickerError",
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    "StoreNotBoundError",
    # Handlers
    "format_error_for_display",
    "handle_errors",
    "wrap_pydantic_error",
]
