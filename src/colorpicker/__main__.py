"""Allow running as ``python -m colorpicker``."""

from colorpicker.cli import cli

if __name__ == "__main__":
    cli()
