from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. A factory fixture that lays out small C++ projects on disk.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
ProjectFactory = Callable[[Dict[str, str]], Path]


@pytest.fixture
def make_project(tmp_path: Path) -> ProjectFactory:
    """
    Return a factory that writes {relative path: content} into a fresh root.

    The returned root is canonical (symlinks resolved) so it compares equal
    to the paths the engine reports.
    """
    counter = {"n": 0}

    def _make(files: Dict[str, str]) -> Path:
        counter["n"] += 1
        root = tmp_path / f"project{counter['n']}"
        root.mkdir()
        for rel, content in files.items():
            target = root / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return Path(os.path.realpath(root))

    return _make


@pytest.fixture
def mock_config_dict(tmp_path: Path) -> Dict[str, object]:
    """Return a valid, complete configuration dictionary for testing."""
    return {
        "input_path": str(tmp_path),
        "include_paths": [],
        "exclude_patterns": [],
        "print_trees": True,
        "report_path": "",
    }
