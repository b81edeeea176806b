"""End-to-end tests for the ``phalanx-timings`` command line."""

from __future__ import annotations

from pathlib import Path

import pytest

from phalanx_timings.report.pipeline import summarize_text
from phalanx_timings.runners.summarize_main import main

FOUR_RANK_LOG = """\
p=0 | Assembling Jacobian
p=0 | ===============================================================================
p=0 |
p=0 |                     TimeMonitor results over 4 processors
p=0 |
p=0 | Timer Name                                   Rank 0        Rank 1        Rank 2        Rank 3
p=0 | -----------------------------------------------------------------------------------------------
p=0 | Phalanx: Evaluator 0: [Residual] Gather Solution: Velocity   1.0 (2)   2.0 (3)   1.5 (1)   0.5 (4)
p=0 | Phalanx: Evaluator 1: [Jacobian] Gather Solution: Velocity   4.0 (1)   4.0 (1)   4.0 (1)   4.0 (1)
p=0 | Phalanx: Evaluator 2: [Residual] Gather Solution: Pressure   0.1 (1)   0.1 (1)   0.1 (1)   0.1 (1)
p=0 | Phalanx: Evaluator 3: [Residual] Scatter Residual            2.0 (100)
p=0 | Phalanx: Evaluator 4: Broken Row                             1.0 (1)   2.0 (2)
p=0 | Thyra Solve                                                  8.0 (1)   8.0 (1)   8.0 (1)   8.0 (1)
p=0 | ===============================================================================
"""


def _names(table: str) -> list[str]:
    return [line.split(None, 3)[3] for line in table.splitlines()[3:]]


@pytest.fixture()
def log_file(tmp_path: Path) -> Path:
    path = tmp_path / "LastTest.log"
    path.write_text(FOUR_RANK_LOG, encoding="utf-8")
    return path


def test_summarize_text_totals() -> None:
    summary = summarize_text(FOUR_RANK_LOG)
    by_name = {r.name: r for r in summary.results}
    assert set(by_name) == {
        "[Residual] Gather Solution: Velocity",
        "[Jacobian] Gather Solution: Velocity",
        "[Residual] Gather Solution: Pressure",
        "[Residual] Scatter Residual",
    }
    vel = by_name["[Residual] Gather Solution: Velocity"]
    assert vel.run_time == pytest.approx(5.0)
    assert vel.num_calls == 10
    assert vel.avg_time_per_call == pytest.approx(0.5)
    assert len(summary.skipped) == 1
    assert summary.skipped[0].text.startswith("Phalanx: Evaluator 4: Broken Row")


def test_default_sort_to_stdout(log_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-i", str(log_file)]) == 0
    out = capsys.readouterr().out
    assert _names(out) == [
        "[Jacobian] Gather Solution: Velocity",
        "[Residual] Gather Solution: Velocity",
        "[Residual] Gather Solution: Pressure",
        "[Residual] Scatter Residual",
    ]


def test_run_time_sort_with_both_merges(log_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-i", str(log_file), "-r", "-n", "-e"]) == 0
    out = capsys.readouterr().out
    assert _names(out) == ["Gather Solution", "Scatter Residual"]
    first = out.splitlines()[3].split()
    assert float(first[1]) == pytest.approx(21.4)
    assert int(first[2]) == 18


def test_num_calls_sort_to_file(log_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out_path = tmp_path / "table.txt"
    assert main(["--input", str(log_file), "--num-calls", "--output", str(out_path)]) == 0
    assert capsys.readouterr().out == ""
    assert _names(out_path.read_text(encoding="utf-8"))[0] == "[Residual] Scatter Residual"


def test_default_input_is_last_test_log(log_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(log_file.parent)
    assert main([]) == 0


def test_status_messages_go_to_stderr(log_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-s", "-i", str(log_file)]) == 0
    captured = capsys.readouterr()
    assert "Summarizing" in captured.err
    assert "Summarizing" not in captured.out


def test_config_file_options(log_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cfg = tmp_path / "timings.yaml"
    cfg.write_text(f"input: {log_file.name}\nby_eval_type: true\n", encoding="utf-8")
    assert main(["--config", str(cfg)]) == 0
    assert "Gather Solution: Velocity" in _names(capsys.readouterr().out)


def test_unrecognized_option(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--bogus"]) == 1
    assert "usage:" in capsys.readouterr().err


def test_missing_input_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["-i", str(tmp_path / "nope.log")]) == 2
    assert "usage:" in capsys.readouterr().err


def test_directory_is_not_an_input_file(tmp_path: Path) -> None:
    assert main(["-i", str(tmp_path)]) == 2


def test_no_timing_section(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "LastTest.log"
    path.write_text("All tests passed\n", encoding="utf-8")
    assert main(["-i", str(path)]) == 3
    err = capsys.readouterr().err
    assert "TimeMonitor" in err
    assert "usage:" in err


def test_unreadable_input_file(log_file: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    def _deny(self: Path, *args: object, **kwargs: object) -> str:
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "read_text", _deny)
    assert main(["-i", str(log_file)]) == 2
    err = capsys.readouterr().err
    assert "LastTest.log" in err
    assert "usage:" in err
    assert "Traceback" not in err


def test_output_in_missing_directory(log_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out_path = tmp_path / "no" / "such" / "dir" / "table.txt"
    assert main(["-i", str(log_file), "-o", str(out_path)]) == 1
    err = capsys.readouterr().err
    assert "Cannot write output file" in err
    assert "Traceback" not in err
    assert not out_path.exists()
