"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import Mock

import pytest

from colorpicker.core import ColorStateStore
from colorpicker.models import ColorValue
from colorpicker.protocols import ColorObserver


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def red():
    """Opaque pure red."""
    return ColorValue(r=255, g=0, b=0)


@pytest.fixture
def translucent_red():
    """Pure red at half alpha."""
    return ColorValue(r=255, g=0, b=0, a=0.5)


@pytest.fixture
def store():
    """Store starting at pure red."""
    return ColorStateStore("ff0000")


@pytest.fixture
def observer(store):
    """Mock ColorObserver registered on the store."""
    mock = Mock(spec=ColorObserver)
    store.register_observer(mock)
    return mock


@pytest.fixture
def config_file(temp_dir):
    """Write a picker config file and return its path."""
    def _write(content: str) -> Path:
        path = temp_dir / "picker.json"
        path.write_text(content)
        return path
    return _write
