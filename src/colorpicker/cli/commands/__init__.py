"""CLI commands for colorpicker."""

from .config import config
from .convert import convert
from .pick import pick

__all__ = ["config", "convert", "pick"]
