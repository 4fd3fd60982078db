from __future__ import annotations

"""
Unit tests for the configuration validator.

Verifies default injection, type coercion, strict mode, and search
directory normalization.
"""

import os
from pathlib import Path

import pytest

from includetree.core.pipeline.validator import validate_config


def test_validate_config_accepts_complete_config(mock_config_dict):
    """A well-formed configuration passes without warnings."""
    clean, warnings = validate_config(mock_config_dict)

    assert warnings == []
    assert clean["input_path"] == os.path.abspath(mock_config_dict["input_path"])
    assert clean["include_paths"] == []
    assert clean["print_trees"] is True


def test_validate_config_non_dict_uses_defaults():
    """Garbage input falls back to defaults with a warning."""
    clean, warnings = validate_config(["not", "a", "dict"])

    assert clean["input_path"] == os.getcwd()
    assert any("Invalid config type" in w for w in warnings)


def test_validate_config_non_dict_strict_raises():
    """Strict mode refuses non-dict input."""
    with pytest.raises(TypeError):
        validate_config("nope", strict=True)


def test_validate_config_coerces_bool_and_csv(tmp_path: Path, mock_config_dict):
    """Human-friendly booleans and CSV lists are converted."""
    inc_a = tmp_path / "inc_a"
    inc_b = tmp_path / "inc_b"
    inc_a.mkdir()
    inc_b.mkdir()

    mock_config_dict["print_trees"] = "no"
    mock_config_dict["include_paths"] = f"{inc_a},{inc_b}"

    clean, warnings = validate_config(mock_config_dict)

    assert clean["print_trees"] is False
    assert clean["include_paths"] == [str(inc_a), str(inc_b)]
    assert len(warnings) == 2


def test_validate_config_drops_missing_include_paths(tmp_path: Path, mock_config_dict):
    """Search directories that do not exist are ignored, order is kept."""
    first = tmp_path / "first"
    last = tmp_path / "last"
    first.mkdir()
    last.mkdir()
    mock_config_dict["include_paths"] = [str(first), str(tmp_path / "ghost"), str(last), str(first)]

    clean, warnings = validate_config(mock_config_dict)

    assert clean["include_paths"] == [str(first), str(last)]
    assert any("ghost" in w for w in warnings)


def test_validate_config_strict_rejects_missing_include_path(tmp_path: Path, mock_config_dict):
    """Strict mode raises for a search directory that does not exist."""
    mock_config_dict["include_paths"] = [str(tmp_path / "ghost")]

    with pytest.raises(ValueError):
        validate_config(mock_config_dict, strict=True)


def test_validate_config_strict_rejects_wrong_types(mock_config_dict):
    """Strict mode raises on type mismatches instead of coercing."""
    mock_config_dict["print_trees"] = "yes"

    with pytest.raises(TypeError):
        validate_config(mock_config_dict, strict=True)


def test_validate_config_keeps_missing_input_path(tmp_path: Path, mock_config_dict):
    """The root is normalized but its existence is checked later."""
    mock_config_dict["input_path"] = str(tmp_path / "missing")

    clean, warnings = validate_config(mock_config_dict)

    assert clean["input_path"] == str(tmp_path / "missing")
    assert warnings == []
