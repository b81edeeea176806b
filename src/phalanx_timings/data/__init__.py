"""Domain models for ``phalanx_timings``.

This package hosts the attrs-based records that flow through the report
pipeline (parsed rows, aggregated totals and final result rows).
"""

from __future__ import annotations

from .models import EvaluatorRecord, ParsedPair, ResultRecord, Totals

__all__ = [
    "ParsedPair",
    "EvaluatorRecord",
    "Totals",
    "ResultRecord",
]
