"""Config command implementation."""

import sys
from pathlib import Path
from typing import Optional

import click

from colorpicker.exceptions import ColorPickerError, format_error_for_display
from colorpicker.models import PickerConfig


@click.command(name="config")
@click.option(
    "--config", "-c", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="JSON picker config file"
)
@click.option("--field", type=str, default=None, help="Show only this field")
def config(config_path: Optional[Path], field: Optional[str]):
    """
    Validate a config file and show the effective settings.

    Without --config the built-in defaults are shown.
    """
    try:
        settings = PickerConfig.load_or_default(config_path)
    except ColorPickerError as e:
        user_message, recovery_hint = format_error_for_display(e)
        click.echo(f"ERROR: {user_message}", err=True)
        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)
        sys.exit(1)

    values = settings.model_dump(mode="json")

    if field:
        if field not in values:
            click.echo(f"Unknown field: {field}", err=True)
            click.echo(f"Available fields: {', '.join(values)}", err=True)
            sys.exit(1)
        click.echo(f"{field}: {values[field]}")
        return

    source = config_path if config_path and config_path.exists() else "defaults"
    click.echo(f"Picker configuration ({source}):\n")
    for name, value in values.items():
        click.echo(f"  {name}: {value}")
