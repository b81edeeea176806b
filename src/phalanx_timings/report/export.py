"""Sorting and plain-text rendering of evaluator summaries.

Functions
---------
sort_results
    Order result records by a selected metric, largest first.
calls_column_width
    Width of the call-count column for a set of records.
format_table
    Render result records as a fixed-width text table.
write_table
    Emit a rendered table to stdout or a file.
"""

from __future__ import annotations

import enum
import sys
from pathlib import Path
from typing import Iterable, Optional, Sequence

from phalanx_timings.data.models import ResultRecord
from phalanx_timings.report.errors import OutputWriteError

MIN_CALLS_WIDTH = 8
TIME_WIDTH = 14
NAME_RULE_WIDTH = 40


class SortKey(str, enum.Enum):
    """Metric used to order the summary table."""

    AVG_TIME_PER_CALL = "avg"
    RUN_TIME = "run_time"
    NUM_CALLS = "num_calls"

    @property
    def attribute(self) -> str:
        return {
            SortKey.AVG_TIME_PER_CALL: "avg_time_per_call",
            SortKey.RUN_TIME: "run_time",
            SortKey.NUM_CALLS: "num_calls",
        }[self]


def sort_results(records: Iterable[ResultRecord], key: SortKey = SortKey.AVG_TIME_PER_CALL) -> list[ResultRecord]:
    """Return ``records`` sorted descending on ``key``.

    Ties keep no particular order.
    """

    attr = SortKey(key).attribute
    return sorted(records, key=lambda r: getattr(r, attr), reverse=True)


def calls_column_width(records: Iterable[ResultRecord]) -> int:
    """Return ``max(8, digits of the largest call count)``."""

    max_calls = max((r.num_calls for r in records), default=0)
    return max(MIN_CALLS_WIDTH, len(str(max_calls)))


def format_table(records: Sequence[ResultRecord]) -> str:
    """Render ``records`` (already sorted) as a text table.

    Times use scientific notation with six fractional digits; call counts are
    right-aligned; names are left-aligned and never truncated. The rule under
    the two header lines spans the numeric columns plus a fixed allowance for
    the name column.
    """

    width = calls_column_width(records)
    lines = [
        f"{'Avg Time':>{TIME_WIDTH}}  {'Total':>{TIME_WIDTH}}  {'Total':>{width}}  Evaluator",
        f"{'Per Call':>{TIME_WIDTH}}  {'Run Time':>{TIME_WIDTH}}  {'Calls':>{width}}  Name",
        "-" * (2 * TIME_WIDTH + width + 6 + NAME_RULE_WIDTH),
    ]
    for r in records:
        lines.append(
            f"{r.avg_time_per_call:>{TIME_WIDTH}.6e}  {r.run_time:>{TIME_WIDTH}.6e}  "
            f"{r.num_calls:>{width}d}  {r.name}"
        )
    return "\n".join(lines) + "\n"


def write_table(text: str, path: Optional[str | Path] = None) -> None:
    """Write ``text`` to ``path``, or to stdout when ``path`` is ``None``.

    Raises
    ------
    OutputWriteError
        If the output file cannot be created or written.
    """

    if path is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(str(path), exc) from exc
