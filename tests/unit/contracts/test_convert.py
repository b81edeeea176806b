"""Unit tests for summary request configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from phalanx_timings.contracts.convert import build_request, converter, default_config
from phalanx_timings.contracts.models import DEFAULT_INPUT, SummaryRequest
from phalanx_timings.report.errors import InvalidConfig
from phalanx_timings.report.export import SortKey


def test_defaults() -> None:
    req = build_request()
    assert req == SummaryRequest()
    assert req.input == DEFAULT_INPUT
    assert req.output is None
    assert req.sort_by is SortKey.AVG_TIME_PER_CALL
    assert not req.by_name and not req.by_eval_type and not req.status


def test_default_config_mirrors_request_fields() -> None:
    cfg = default_config()
    assert set(cfg.keys()) == set(converter.unstructure(SummaryRequest()).keys())
    assert cfg.sort_by == "avg"


def test_config_file_and_overrides(tmp_path: Path) -> None:
    cfg_path = tmp_path / "timings.yaml"
    cfg_path.write_text("input: logs/LastTest.log\nsort_by: run_time\nby_name: true\n", encoding="utf-8")
    req = build_request(cfg_path, overrides={"sort_by": "num_calls", "by_eval_type": None})
    assert req.input == str((tmp_path / "logs" / "LastTest.log").resolve())
    assert req.sort_by is SortKey.NUM_CALLS
    assert req.by_name is True
    assert req.by_eval_type is False


def test_unknown_key_is_rejected(tmp_path: Path) -> None:
    cfg_path = tmp_path / "timings.yaml"
    cfg_path.write_text("sort_order: fast\n", encoding="utf-8")
    with pytest.raises(InvalidConfig):
        build_request(cfg_path)


def test_unknown_sort_key_is_rejected() -> None:
    with pytest.raises(InvalidConfig):
        build_request(overrides={"sort_by": "median"})


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(InvalidConfig, match="not found"):
        build_request(tmp_path / "missing.yaml")


def test_non_mapping_config_file(tmp_path: Path) -> None:
    cfg_path = tmp_path / "timings.yaml"
    cfg_path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(InvalidConfig, match="mapping"):
        build_request(cfg_path)


def test_blank_config_path_falls_back_to_default(tmp_path: Path) -> None:
    cfg_path = tmp_path / "timings.yaml"
    cfg_path.write_text("input: ''\nsort_by: num_calls\n", encoding="utf-8")
    req = build_request(cfg_path)
    assert req.input == DEFAULT_INPUT
    assert req.sort_by is SortKey.NUM_CALLS
