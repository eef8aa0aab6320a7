"""
Pytest configuration and fixtures.
"""

import pytest
from pathlib import Path

from sort_css_media_queries.utils.config_loader import SortConfig


PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture(scope="session")
def default_config_path():
    """Absolute path of the shipped configuration file."""
    return str(PROJECT_ROOT / "config" / "sort_config.yaml")


@pytest.fixture(scope="function")
def write_config(tmp_path):
    """Write YAML text to a temporary config file and return its path."""

    def _write(text: str, name: str = "sort_config.yaml") -> str:
        config_file = tmp_path / name
        config_file.write_text(text, encoding="utf-8")
        return str(config_file)

    return _write


@pytest.fixture(scope="function")
def desktop_config():
    """Create configuration selecting the desktop-first policy."""
    return SortConfig(
        sorting={"policy": "desktop-first"},
        logging={"level": "DEBUG"},
    )


@pytest.fixture(scope="function")
def breakpoint_queries():
    """Create an unordered mix of min, max and unmeasurable queries."""
    return [
        "screen and (max-width: 640px)",
        "screen and (min-width: 768px)",
        "print",
        "screen and (max-width: 1024px)",
        "screen and (min-width: 1280px)",
        "screen and (min-width: 320px)",
    ]
