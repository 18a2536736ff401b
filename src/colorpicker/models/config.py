"""Picker configuration model."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from colorpicker.exceptions import ConfigFileInvalidError, wrap_pydantic_error

from .enums import FormatTag

logger = logging.getLogger(__name__)


class PickerConfig(BaseModel):
    """Settings for one picker instance and its terminal front end."""

    output_format: FormatTag = Field(
        default=FormatTag.HEX, description="Shape of the value passed to on_change"
    )
    initial_value: str = Field(
        default="ff0000", description="Color used when no controlled value is given"
    )

    # Saturation/value surface, in character cells for the terminal front end
    surface_width: int = Field(default=32, ge=1, description="Picker surface width")
    surface_height: int = Field(default=12, ge=1, description="Picker surface height")
    indicator_width: int = Field(default=1, ge=0, description="Indicator width")
    indicator_height: int = Field(default=1, ge=0, description="Indicator height")

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "PickerConfig":
        """
        Load config from a JSON file, or return defaults when there is none.

        The file is only read, never written.

        Args:
            path: Path to a JSON config file (optional)

        Raises:
            ConfigFileInvalidError: If the file is empty or not valid JSON
            ConfigValidationError: If a value fails validation
        """
        if path is None or not path.exists():
            if path is not None:
                logger.info(f"Config file {path} not found, using defaults")
            return cls()

        content = path.read_text()
        if not content.strip():
            raise ConfigFileInvalidError(str(path), "File is empty")

        try:
            config = cls.model_validate_json(content)
        except ValidationError as e:
            logger.error(f"Validation error loading {cls.__name__} from {path}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        logger.debug(f"Loaded {cls.__name__} from {path}")
        return config
