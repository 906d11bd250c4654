"""Tests for environment-driven settings (nsis_headerfile.settings)."""

from __future__ import annotations

from pathlib import Path

import pytest

from nsis_headerfile.settings import Settings

pytestmark = pytest.mark.unit


def test_defaults(monkeypatch):
    for name in (
        "NSIS_HEADERFILE",
        "NSIS_ENCODING",
        "NSIS_DATE_FORMAT",
        "NSIS_TIME_FORMAT",
        "NSIS_ACTOR",
    ):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.headerfile is None
    assert settings.encoding == "utf-8"
    assert settings.date_format == "%x"
    assert settings.time_format == "%X"
    assert settings.actor is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("NSIS_HEADERFILE", "/tmp/custom.nsh")
    monkeypatch.setenv("nsis_encoding", "cp1252")
    monkeypatch.setenv("NSIS_DATE_FORMAT", "%Y-%m-%d")
    settings = Settings()
    assert settings.headerfile == Path("/tmp/custom.nsh")
    assert settings.encoding == "cp1252"
    assert settings.date_format == "%Y-%m-%d"
