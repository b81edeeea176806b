"""Unit tests for derived evaluator metrics."""

from __future__ import annotations

import pytest

from phalanx_timings.data.models import Totals
from phalanx_timings.report.metrics import avg_time_per_call, compute_results


def test_average_divides_run_time_by_calls() -> None:
    assert avg_time_per_call(1.5, 10) == pytest.approx(0.15)


def test_average_falls_back_to_run_time_without_calls() -> None:
    assert avg_time_per_call(2.0, 0) == 2.0


def test_compute_results() -> None:
    results = compute_results({"Foo": Totals(5.0, 10), "Idle": Totals(2.0, 0)})
    by_name = {r.name: r for r in results}
    assert by_name["Foo"].avg_time_per_call == pytest.approx(0.5)
    assert by_name["Idle"].avg_time_per_call == 2.0
    for r in results:
        if r.num_calls > 0:
            assert r.avg_time_per_call == pytest.approx(r.run_time / r.num_calls)
