"""Aggregation of evaluator records into keyed totals.

Every stage is a pure function from one table to a new one; the input table
is never modified.

Functions
---------
build_table
    Exact-name merge of evaluator records (always applied).
merge
    Re-key a table with ``key_fn`` and sum entries that collide.
aggregate
    Run the exact-name merge plus the optional base-name and eval-type stages.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Callable, Dict, Iterable, Mapping

from phalanx_timings.data.models import EvaluatorRecord, Totals
from phalanx_timings.report.names import base_name, strip_eval_type

logger = logging.getLogger(__name__)

AggregationTable = Dict[str, Totals]


def build_table(records: Iterable[EvaluatorRecord]) -> AggregationTable:
    """Sum run time and calls of records sharing an identical name."""

    table: defaultdict[str, Totals] = defaultdict(Totals)
    for rec in records:
        table[rec.name] = table[rec.name] + Totals(rec.run_time, rec.num_calls)
    return dict(table)


def merge(table: Mapping[str, Totals], key_fn: Callable[[str], str]) -> AggregationTable:
    """Return a new table keyed by ``key_fn(key)`` with colliding totals summed.

    Parameters
    ----------
    table : Mapping[str, Totals]
        Source table; left untouched.
    key_fn : Callable[[str], str]
        Maps an existing key to its coarser key.
    """

    out: defaultdict[str, Totals] = defaultdict(Totals)
    for key, totals in table.items():
        new_key = key_fn(key)
        out[new_key] = out[new_key] + totals
    return dict(out)


def aggregate(
    records: Iterable[EvaluatorRecord],
    by_name: bool = False,
    by_eval_type: bool = False,
) -> AggregationTable:
    """Aggregate ``records`` with the enabled stages.

    The exact-name merge always runs. When enabled, the base-name merge runs
    next and the eval-type merge runs last, on whatever keys the previous
    stage produced.
    """

    table = build_table(records)
    logger.info("Exact-name merge: %d evaluators", len(table))
    if by_name:
        table = merge(table, base_name)
        logger.info("Base-name merge: %d evaluators", len(table))
    if by_eval_type:
        table = merge(table, strip_eval_type)
        logger.info("Eval-type merge: %d evaluators", len(table))
    return table
