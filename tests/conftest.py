"""Pytest configuration and fixtures."""

import logging
import sys
from pathlib import Path

import pytest

# Add package and plugin paths to sys.path
tests_dir = Path(__file__).parent
sys.path.insert(0, str(tests_dir.parent / "packages" / "odot"))
sys.path.insert(0, str(tests_dir / "plugins"))

from odot.core.registry import PluginRegistry, plugins  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_default_registry():
    """Restore the process-wide registry after each test."""
    with plugins.scoped():
        yield plugins


@pytest.fixture
def registry():
    """A fresh registry, independent of the process-wide one."""
    return PluginRegistry()


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the config search path at an empty temporary home."""
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    monkeypatch.delenv("ODOT_CONFIG", raising=False)
    yield tmp_path
    # Reset handlers installed by configure_logging
    logger = logging.getLogger("odot")
    for h in list(logger.handlers):
        if isinstance(h, logging.FileHandler):
            h.close()
        logger.removeHandler(h)
    logger.setLevel(logging.INFO)
    logger.addHandler(logging.StreamHandler())


@pytest.fixture
def write_yaml(tmp_path):
    """Write a mapping to a YAML file under tmp_path and return its path."""
    import yaml

    def _write(name, data):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f)
        return path

    return _write
