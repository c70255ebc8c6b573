"""
Pytest configuration and fixtures for the construction company tests.
"""

import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from construction.core.company import ConstructionCompany
from construction.core.settings import Settings


@pytest.fixture
def console():
    """Plain-text console that records everything printed to it."""
    return Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)


@pytest.fixture
def read_output(console):
    """Return everything printed to the recording console so far."""

    def _read() -> str:
        return console.file.getvalue()

    return _read


@pytest.fixture
def company(console):
    """ConstructionCompany printing to the recording console."""
    return ConstructionCompany(console=console)


@pytest.fixture
def settings():
    """Fast, non-clearing settings for driving the interactive shell."""
    return Settings(build_delay_seconds=0.5, clear_screen=False)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep settings overrides from the developer's shell out of the tests."""
    monkeypatch.delenv("CONSTRUCTION_BUILD_DELAY", raising=False)
    monkeypatch.delenv("CONSTRUCTION_CLEAR_SCREEN", raising=False)
