"""Tests for the rendering file helpers (nsis_headerfile.rendering.io)."""

from __future__ import annotations

import pytest

from nsis_headerfile.core.errors import ConfigurationError, WriteError
from nsis_headerfile.rendering.io import ensure_parent, write_lines

pytestmark = pytest.mark.unit


def test_ensure_parent_creates_tree(tmp_path):
    target = tmp_path / "x" / "y" / "file.nsh"
    ensure_parent(target)
    assert target.parent.is_dir()
    assert not target.exists()


def test_ensure_parent_existing(tmp_path):
    ensure_parent(tmp_path / "file.nsh")
    assert tmp_path.is_dir()


def test_ensure_parent_blocked(tmp_path):
    (tmp_path / "file").write_text("", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="Unable to create parent directory"):
        ensure_parent(tmp_path / "file" / "nested" / "out.nsh")


def test_write_lines_terminates_each_line(tmp_path):
    target = tmp_path / "out.nsh"
    write_lines(target, ["one", "", "three"])
    assert target.read_text(encoding="utf-8") == "one\n\nthree\n"


def test_write_lines_missing_parent(tmp_path):
    with pytest.raises(WriteError) as excinfo:
        write_lines(tmp_path / "missing" / "out.nsh", ["line"])
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)
