"""Pytest configuration for nsloader tests."""

import logging
from pathlib import Path

import pytest


def _write_source(path: Path, body: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(body)
    return path


@pytest.fixture
def write_source():
    """Helper that creates a source file along with its parent directories."""
    return _write_source


@pytest.fixture
def source_tree(tmp_path):
    """Package root with nested subdirectories.

    root/
        Widget.py
        a/
            Gadget.py
            b/
                Deep.py
        c/
    """
    root = tmp_path / "root"
    _write_source(root / "Widget.py")
    _write_source(root / "a" / "Gadget.py")
    _write_source(root / "a" / "b" / "Deep.py")
    (root / "c").mkdir()
    return root


@pytest.fixture
def restore_root_logger():
    """Undo handler and level changes made to the root logger."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
