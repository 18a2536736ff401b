"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from colorpicker import __version__

from .commands import config, convert, pick

logger = logging.getLogger(__name__)


def resolve_log_path(debug: bool, log_file: Optional[Path]) -> Path:
    """Return the file the logs of a session go to."""
    if debug and not log_file:
        # Debug mode: log to current directory
        return Path.cwd() / "colorpicker-debug.log"
    if log_file:
        return log_file
    return Path.home() / ".colorpicker" / "logs" / "colorpicker.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure file logging for the application.

    The terminal picker owns stdout, so everything goes to a rotating file.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    # Determine log level based on flags
    if debug:
        level = logging.DEBUG
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Override with explicit log level if provided
    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = resolve_log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Create rotating file handler (keeps last 5 files, max 10MB each)
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")


def setup_console_logging(verbose: int, debug: bool) -> None:
    """
    Configure stderr logging for one-shot commands.

    Silent unless -v or --debug is given, so command output stays clean.
    """
    if not verbose and not debug:
        return
    level = logging.DEBUG if debug or verbose >= 2 else logging.INFO
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(levelname)s %(name)s: %(message)s'))
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="colorpicker")
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level; the picker logs to ./colorpicker-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(ctx, verbose: int, debug: bool, log_file: Optional[Path], log_level: str):
    """
    Color picker - parse, convert and interactively pick colors.

    \b
    Examples:
      # Convert a color to every output format
      colorpicker convert "hsl(120, 100%, 50%)" --all

      # Print a CSS name as an RGB mapping
      colorpicker convert teal --format rgb

      # Pick interactively, starting from red, printing HSL on accept
      colorpicker pick ff0000 --format hsl

      # Show the effective configuration
      colorpicker config --config picker.json
    """
    ctx.ensure_object(dict)
    ctx.obj.update(
        verbose=verbose,
        debug=debug,
        log_file=log_file,
        log_level=log_level,
    )


# Register commands
cli.add_command(convert)
cli.add_command(pick)
cli.add_command(config)

if __name__ == "__main__":
    cli()
