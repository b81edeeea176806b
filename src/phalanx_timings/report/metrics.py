"""Derived per-evaluator metrics."""

from __future__ import annotations

from typing import Mapping

from phalanx_timings.data.models import ResultRecord, Totals


def avg_time_per_call(run_time: float, num_calls: int) -> float:
    """Return ``run_time / num_calls``, or ``run_time`` when there were no calls."""

    if num_calls > 0:
        return run_time / num_calls
    return run_time


def compute_results(table: Mapping[str, Totals]) -> list[ResultRecord]:
    """Turn an aggregation table into result records."""

    return [
        ResultRecord(
            name=name,
            run_time=totals.run_time,
            num_calls=totals.num_calls,
            avg_time_per_call=avg_time_per_call(totals.run_time, totals.num_calls),
        )
        for name, totals in table.items()
    ]
