"""Evaluator row parsing.

A TimeMonitor row is a timer name followed by ``<time> (<calls>)`` groups.
Serial runs print one group per row; four-rank runs print four, one per
rank. :func:`parse_row` classifies a row into exactly one of the variants
below.

Classes
-------
SingleProcessRow
    Row with a single ``(time, calls)`` group.
MultiProcessRow
    Row with four per-rank groups.
MalformedRow
    Row that matches neither shape; it is skipped by the pipeline.

Functions
---------
parse_row
    Classify and parse one evaluator row.
parse_rows
    Parse many rows, returning records and the malformed leftovers.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Union

from attrs import define, field

from phalanx_timings.data.models import EvaluatorRecord, ParsedPair
from phalanx_timings.report.names import strip_namespace

logger = logging.getLogger(__name__)

RANKS_PER_MULTI_ROW = 4

_FLOAT = r"(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?"
_GROUP = rf"({_FLOAT})\s*\((\d+)\)"
_SINGLE_RE = re.compile(rf"^(?P<name>.*?\S)\s+{_GROUP}$")
_MULTI_RE = re.compile(rf"^(?P<name>.*?\S)\s+" + r"\s+".join([_GROUP] * RANKS_PER_MULTI_ROW) + "$")
_WS_RE = re.compile(r"\s+")
_GROUP_TOKEN_RE = re.compile(rf"(?:^|\s){_FLOAT}\s*\(\d+\)")


@define(frozen=True)
class SingleProcessRow:
    name: str
    pair: ParsedPair

    def to_record(self) -> EvaluatorRecord:
        return EvaluatorRecord(name=self.name, run_time=self.pair.time, num_calls=self.pair.calls)


@define(frozen=True)
class MultiProcessRow:
    """Row holding one ``(time, calls)`` pair per rank.

    The ranks ran the same evaluator independently, so the row's record is
    the total work: times and calls are summed over all pairs.
    """

    name: str
    pairs: tuple[ParsedPair, ...] = field(converter=tuple)

    def to_record(self) -> EvaluatorRecord:
        return EvaluatorRecord(
            name=self.name,
            run_time=sum(p.time for p in self.pairs),
            num_calls=sum(p.calls for p in self.pairs),
        )


@define(frozen=True)
class MalformedRow:
    text: str


ParsedRow = Union[SingleProcessRow, MultiProcessRow, MalformedRow]


def _is_name(raw: str) -> bool:
    return _GROUP_TOKEN_RE.search(raw) is None


def _clean_name(raw: str) -> str:
    return strip_namespace(_WS_RE.sub(" ", raw.strip()))


def _pairs(numbers: tuple[str, ...]) -> list[ParsedPair]:
    return [ParsedPair(float(numbers[i]), int(numbers[i + 1])) for i in range(0, len(numbers), 2)]


def parse_row(line: str) -> ParsedRow:
    """Classify ``line`` as a single-process, multi-process or malformed row.

    The four-group shape is tried first, then the single-group shape.

    Examples
    --------
    >>> parse_row("PhalanxFoo    1.500000 (10)")
    SingleProcessRow(name='Foo', pair=ParsedPair(time=1.5, calls=10))
    """

    text = line.strip()
    m = _MULTI_RE.match(text)
    if m is not None and _is_name(m.group("name")):
        return MultiProcessRow(_clean_name(m.group("name")), _pairs(m.groups()[1:]))
    m = _SINGLE_RE.match(text)
    if m is not None and _is_name(m.group("name")):
        pair = _pairs(m.groups()[1:])[0]
        return SingleProcessRow(_clean_name(m.group("name")), pair)
    return MalformedRow(line)


def parse_rows(lines: Iterable[str]) -> tuple[list[EvaluatorRecord], list[MalformedRow]]:
    """Parse ``lines`` into evaluator records.

    Returns
    -------
    tuple[list[EvaluatorRecord], list[MalformedRow]]
        Records for every recognized row and the rows that were skipped.
    """

    records: list[EvaluatorRecord] = []
    skipped: list[MalformedRow] = []
    for line in lines:
        row = parse_row(line)
        if isinstance(row, MalformedRow):
            logger.debug("Skipping malformed row: %r", row.text)
            skipped.append(row)
            continue
        records.append(row.to_record())
    if skipped:
        logger.warning("Skipped %d malformed evaluator rows", len(skipped))
    return records, skipped
