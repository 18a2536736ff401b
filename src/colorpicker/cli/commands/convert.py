"""Convert command implementation."""

import json
import logging

import click

from colorpicker.conversion import ConversionFacade, Projection
from colorpicker.models import FormatTag

logger = logging.getLogger(__name__)

FORMAT_CHOICES = [fmt.value for fmt in FormatTag]


def format_output(value: Projection) -> str:
    """Hex projections print as-is, component mappings as JSON."""
    if isinstance(value, str):
        return value
    return json.dumps(value)


@click.command(name="convert")
@click.argument("value")
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(FORMAT_CHOICES, case_sensitive=False),
    default=FormatTag.HEX.value,
    help="Output shape (default: hex)"
)
@click.option("--all", "show_all", is_flag=True, help="Print every output shape")
@click.pass_context
def convert(ctx, value: str, output_format: str, show_all: bool):
    """
    Parse VALUE and print it in another shape.

    VALUE may be a hex string (3, 4, 6 or 8 digits), a CSS color name,
    or rgb()/hsl()/hsv() notation.

    \b
    Examples:
      colorpicker convert "#0f0"
      colorpicker convert "hsl(120, 100%, 50%)" --format rgb
      colorpicker convert teal --all
    """
    from colorpicker.cli.main import setup_console_logging

    obj = ctx.obj or {}
    setup_console_logging(obj.get("verbose", 0), obj.get("debug", False))

    color = ConversionFacade.try_parse(value)
    if color is None:
        raise click.BadParameter(f"'{value}' is not a recognized color", param_hint="VALUE")

    logger.info(f"Parsed {value!r} as {color.canonical_hex}")

    if show_all:
        for fmt in FormatTag:
            click.echo(f"{fmt.value:<4} {format_output(ConversionFacade.project(color, fmt))}")
        return

    click.echo(format_output(ConversionFacade.project(color, output_format.lower())))
