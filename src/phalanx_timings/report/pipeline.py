"""End-to-end evaluator timing summary.

Runs extraction, row parsing, aggregation, metric computation and sorting
once over a report and returns the sorted rows plus bookkeeping about what
was skipped.
"""

from __future__ import annotations

import logging
from pathlib import Path

from attrs import define, field

from phalanx_timings.data.models import ResultRecord
from phalanx_timings.report.aggregate import aggregate
from phalanx_timings.report.errors import MissingInputFile
from phalanx_timings.report.export import SortKey, sort_results
from phalanx_timings.report.extract import extract_evaluator_rows
from phalanx_timings.report.metrics import compute_results
from phalanx_timings.report.rows import MalformedRow, parse_rows

logger = logging.getLogger(__name__)


@define(kw_only=True)
class SummaryResult:
    """Sorted summary rows and the malformed rows that were skipped."""

    results: list[ResultRecord] = field(factory=list)
    skipped: list[MalformedRow] = field(factory=list)


def summarize_text(
    text: str,
    sort_key: SortKey = SortKey.AVG_TIME_PER_CALL,
    by_name: bool = False,
    by_eval_type: bool = False,
    source: str = "<text>",
) -> SummaryResult:
    """Summarize the TimeMonitor block of ``text``.

    Raises
    ------
    NoTimingSection
        If ``text`` has no TimeMonitor block.
    """

    rows = extract_evaluator_rows(text, source)
    records, skipped = parse_rows(rows)
    table = aggregate(records, by_name=by_name, by_eval_type=by_eval_type)
    results = sort_results(compute_results(table), sort_key)
    logger.info("Summarized %d evaluators sorted by %s", len(results), SortKey(sort_key).value)
    return SummaryResult(results=results, skipped=skipped)


def read_report(path: str | Path) -> str:
    """Read a log file as text.

    Raises
    ------
    MissingInputFile
        If ``path`` does not name a regular, readable file.
    """

    p = Path(path)
    if not p.is_file():
        raise MissingInputFile(str(path))
    logger.info("Reading %s", p)
    try:
        return p.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise MissingInputFile(str(path)) from exc


def summarize_file(
    path: str | Path,
    sort_key: SortKey = SortKey.AVG_TIME_PER_CALL,
    by_name: bool = False,
    by_eval_type: bool = False,
) -> SummaryResult:
    """Read ``path`` and summarize it; see :func:`summarize_text`."""

    return summarize_text(
        read_report(path),
        sort_key=sort_key,
        by_name=by_name,
        by_eval_type=by_eval_type,
        source=str(path),
    )
