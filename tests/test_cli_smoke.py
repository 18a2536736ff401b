"""Smoke tests for CLI commands.

Tests that CLI commands parse correctly and don't crash. Uses Click's
CliRunner; the interactive picker is replaced by a mock.
"""

import json
from unittest.mock import Mock, patch

import pytest
from click.testing import CliRunner

from colorpicker.cli.main import cli


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.mark.integration
class TestCLIHelp:
    """Test that all commands have working help text."""

    def test_main_help(self, runner):
        """Test main CLI help displays."""
        result = runner.invoke(cli, ['--help'])
        assert result.exit_code == 0
        assert 'Color picker' in result.output
        assert '--verbose' in result.output

    def test_version_flag(self, runner):
        """Test --version flag works."""
        result = runner.invoke(cli, ['--version'])
        assert result.exit_code == 0
        assert '0.1.0' in result.output

    @pytest.mark.parametrize("command", ["convert", "pick", "config"])
    def test_command_help(self, runner, command):
        """Test subcommand help."""
        result = runner.invoke(cli, [command, '--help'])
        assert result.exit_code == 0


@pytest.mark.integration
class TestConvertCommand:
    """Test the convert command."""

    def test_convert_to_hex(self, runner):
        """Test default hex output."""
        result = runner.invoke(cli, ['convert', '#0f0'])
        assert result.exit_code == 0
        assert result.output.strip() == '00ff00'

    def test_convert_to_rgb(self, runner):
        """Test structured output is JSON."""
        result = runner.invoke(cli, ['convert', 'hsl(120, 100%, 50%)', '--format', 'rgb'])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"r": 0, "g": 255, "b": 0, "a": 1.0}

    def test_convert_all(self, runner):
        """Test printing every output shape."""
        result = runner.invoke(cli, ['convert', 'teal', '--all'])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 4
        assert lines[0].split() == ['hex', '008080']
        assert lines[1].startswith('rgb ')

    def test_convert_invalid(self, runner):
        """Test that an unrecognized color is a usage error."""
        result = runner.invoke(cli, ['convert', 'zz'])
        assert result.exit_code == 2
        assert 'not a recognized color' in result.output

    def test_convert_invalid_format(self, runner):
        """Test that unknown formats are rejected by click."""
        result = runner.invoke(cli, ['convert', 'red', '--format', 'cmyk'])
        assert result.exit_code != 0


@pytest.mark.integration
class TestConfigCommand:
    """Test the config command."""

    def test_show_defaults(self, runner):
        """Test showing built-in defaults."""
        result = runner.invoke(cli, ['config'])
        assert result.exit_code == 0
        assert 'surface_width: 32' in result.output
        assert 'defaults' in result.output

    def test_show_field(self, runner, config_file):
        """Test showing one field from a file."""
        path = config_file('{"output_format": "hsv"}')
        result = runner.invoke(cli, ['config', '--config', str(path), '--field', 'output_format'])
        assert result.exit_code == 0
        assert result.output.strip() == 'output_format: hsv'

    def test_unknown_field(self, runner):
        """Test asking for a field that does not exist."""
        result = runner.invoke(cli, ['config', '--field', 'nope'])
        assert result.exit_code == 1
        assert 'Unknown field' in result.output

    def test_invalid_file(self, runner, config_file):
        """Test reporting a broken config file."""
        path = config_file('{"surface_width": 0}')
        result = runner.invoke(cli, ['config', '--config', str(path)])
        assert result.exit_code == 1
        assert 'ERROR:' in result.output
        assert 'surface_width' in result.output


@pytest.mark.integration
class TestPickCommand:
    """Test the pick command with the TUI mocked out."""

    @patch("colorpicker.cli.main.setup_logging")
    @patch("colorpicker.tui.ColorPickerApp")
    def test_prints_accepted_value(self, mock_app_class, mock_setup_logging, runner):
        """Test that the accepted value is printed."""
        mock_app_class.return_value.run.return_value = "00ff00"

        result = runner.invoke(cli, ['pick', 'blue'])

        assert result.exit_code == 0
        assert result.output.strip() == '00ff00'
        picker = mock_app_class.call_args.args[0]
        assert picker.current.canonical_hex == '0000ff'
        mock_setup_logging.assert_called_once()

    @patch("colorpicker.cli.main.setup_logging")
    @patch("colorpicker.tui.ColorPickerApp")
    def test_structured_value_is_json(self, mock_app_class, mock_setup_logging, runner):
        """Test JSON output for structured formats."""
        mock_app_class.return_value.run.return_value = {"r": 1, "g": 2, "b": 3, "a": 1.0}

        result = runner.invoke(cli, ['pick', '--format', 'rgb'])

        assert result.exit_code == 0
        assert json.loads(result.output) == {"r": 1, "g": 2, "b": 3, "a": 1.0}
        picker = mock_app_class.call_args.args[0]
        assert picker.store.output_format.value == 'rgb'

    @patch("colorpicker.cli.main.setup_logging")
    @patch("colorpicker.tui.ColorPickerApp")
    def test_cancel_exits_nonzero(self, mock_app_class, mock_setup_logging, runner):
        """Test that cancelling the picker exits with status 1."""
        mock_app_class.return_value.run.return_value = None

        result = runner.invoke(cli, ['pick'])

        assert result.exit_code == 1

    @patch("colorpicker.cli.main.setup_logging")
    @patch("colorpicker.tui.ColorPickerApp")
    def test_size_overrides(self, mock_app_class, mock_setup_logging, runner, config_file):
        """Test that size options override the config file."""
        mock_app_class.return_value.run.return_value = "ff0000"
        path = config_file('{"surface_width": 20, "surface_height": 8}')

        result = runner.invoke(cli, ['pick', '--config', str(path), '--width', '50'])

        assert result.exit_code == 0
        picker = mock_app_class.call_args.args[0]
        assert picker.config.surface_width == 50
        assert picker.config.surface_height == 8

    @patch("colorpicker.cli.main.setup_logging")
    @patch("colorpicker.tui.ColorPickerApp")
    def test_bad_config_shows_error(self, mock_app_class, mock_setup_logging, runner, config_file):
        """Test clean error output for a broken config file."""
        path = config_file('{"output_format": "cmyk"}')

        result = runner.invoke(cli, ['pick', '--config', str(path)])

        assert result.exit_code == 1
        assert 'ERROR:' in result.output
        assert 'output_format' in result.output
        mock_app_class.assert_not_called()
