"""Domain data models for evaluator timing summaries.

This module defines `attrs`-based records for the report pipeline. Records
are frozen: each pipeline stage builds new instances rather than mutating the
ones it receives.

Classes
-------
ParsedPair
    One rank's ``(time, calls)`` contribution on a timer line.
EvaluatorRecord
    A named evaluator with its run time and call count.
Totals
    Summed ``(run_time, num_calls)`` value of an aggregation table entry.
ResultRecord
    Aggregated evaluator row with the derived average time per call.
"""

from __future__ import annotations

from typing import Any

from attrs import Attribute, define, field
from attrs.validators import instance_of


def _non_negative(_: Any, attribute: Attribute, value: float) -> None:
    if value < 0:
        raise ValueError(f"{attribute.name} must be non-negative, got {value!r}")


def _non_empty(_: Any, attribute: Attribute, value: str) -> None:
    if not value:
        raise ValueError(f"{attribute.name} must be a non-empty string")


@define(frozen=True)
class ParsedPair:
    """Time and call count recorded by a single rank."""

    time: float = field(converter=float, validator=[instance_of(float), _non_negative])
    calls: int = field(validator=[instance_of(int), _non_negative])


@define(frozen=True, kw_only=True)
class EvaluatorRecord:
    """Timing record for one evaluator.

    Parameters
    ----------
    name : str
        Evaluator name. May carry a leading ``"[EvalType] "`` tag and a
        trailing ``": Qualifier"``.
    run_time : float
        Cumulative run time in seconds.
    num_calls : int
        Number of invocations.
    """

    name: str = field(validator=[instance_of(str), _non_empty])
    run_time: float = field(converter=float, validator=[instance_of(float), _non_negative])
    num_calls: int = field(validator=[instance_of(int), _non_negative])


@define(frozen=True)
class Totals:
    """Summed run time and call count for one aggregation key."""

    run_time: float = field(default=0.0, converter=float, validator=[_non_negative])
    num_calls: int = field(default=0, validator=[instance_of(int), _non_negative])

    def __add__(self, other: "Totals") -> "Totals":
        return Totals(self.run_time + other.run_time, self.num_calls + other.num_calls)


@define(frozen=True, kw_only=True)
class ResultRecord:
    """Final summary row (``EvaluatorRecord`` plus derived average)."""

    name: str = field(validator=[instance_of(str), _non_empty])
    run_time: float = field(converter=float, validator=[instance_of(float), _non_negative])
    num_calls: int = field(validator=[instance_of(int), _non_negative])
    avg_time_per_call: float = field(converter=float, validator=[instance_of(float), _non_negative])
