"""Unit tests for path helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from phalanx_timings.utils.paths import display_path, resolve_path


def test_resolve_path_relative_and_absolute(tmp_path: Path) -> None:
    assert resolve_path("LastTest.log", tmp_path) == str((tmp_path / "LastTest.log").resolve())
    absolute = str((tmp_path / "x.log").resolve())
    assert resolve_path(absolute, Path("/elsewhere")) == absolute


def test_resolve_path_blank_means_not_given(tmp_path: Path) -> None:
    assert resolve_path(None, tmp_path) is None
    assert resolve_path("  ", tmp_path) is None


def test_resolve_path_expands_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    assert resolve_path("~/LastTest.log", Path("/elsewhere")) == str((tmp_path / "LastTest.log").resolve())


def test_display_path(tmp_path: Path) -> None:
    target = tmp_path / "sub" / "LastTest.log"
    assert display_path(target, tmp_path) == str(Path("sub") / "LastTest.log")
    assert display_path("/definitely/elsewhere.log", tmp_path) == "/definitely/elsewhere.log"
