"""Interactive pick command implementation."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from colorpicker.models import FormatTag

from .convert import FORMAT_CHOICES, format_output

logger = logging.getLogger(__name__)


@click.command(name="pick")
@click.argument("value", required=False)
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(FORMAT_CHOICES, case_sensitive=False),
    default=None,
    help="Output shape printed on accept (default: from config, else hex)"
)
@click.option(
    "--config", "-c", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="JSON picker config file"
)
@click.option("--width", type=click.IntRange(min=1), default=None, help="Picker surface width in cells")
@click.option("--height", type=click.IntRange(min=1), default=None, help="Picker surface height in cells")
@click.pass_context
def pick(
    ctx,
    value: Optional[str],
    output_format: Optional[str],
    config_path: Optional[Path],
    width: Optional[int],
    height: Optional[int],
):
    """
    Open the terminal picker and print the accepted color.

    Starts from VALUE (or the config's initial value). Press ctrl+s to
    accept, escape to cancel; cancelling exits with status 1.
    """
    # Lazy imports keep textual out of the other commands
    from colorpicker.cli.main import resolve_log_path, setup_logging
    from colorpicker.exceptions import format_error_for_display
    from colorpicker.models import PickerConfig
    from colorpicker.picker import ColorPicker
    from colorpicker.tui import ColorPickerApp

    obj = ctx.obj or {}
    verbose = obj.get("verbose", 0)
    debug = obj.get("debug", False)
    log_file = obj.get("log_file")
    setup_logging(verbose, debug, log_file, obj.get("log_level", "INFO"))

    logger.info("Starting color picker")

    try:
        config = PickerConfig.load_or_default(config_path)

        overrides = {}
        if width is not None:
            overrides["surface_width"] = width
        if height is not None:
            overrides["surface_height"] = height
        if overrides:
            config = config.model_copy(update=overrides)

        fmt = FormatTag(output_format.lower()) if output_format else None
        picker = ColorPicker(value, output_format=fmt, config=config)
        result = ColorPickerApp(picker).run()

    except KeyboardInterrupt:
        logger.info("Picker interrupted by user")
        click.echo("\nCancelled.", err=True)
        sys.exit(1)
    except click.Abort:
        raise
    except Exception as e:
        logger.exception("Error running color picker")

        user_message, recovery_hint = format_error_for_display(e)

        click.echo("\n" + "="*70, err=True)
        click.echo(f"ERROR: {user_message}", err=True)
        click.echo("="*70, err=True)

        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)

        click.echo(f"\nFor details, check the log file: {resolve_log_path(debug, log_file)}", err=True)
        sys.exit(1)

    if result is None:
        logger.info("Picker cancelled")
        sys.exit(1)

    logger.info(f"Picked {result!r}")
    click.echo(format_output(result))
