"""TimeMonitor section extraction.

Locates the ``TimeMonitor results`` block of a test log and keeps only the
rows that belong to Phalanx evaluators.

Functions
---------
strip_rank_prefix
    Remove the ``p=0 | `` decoration a parallel run prepends to rank-0 lines.
extract_section
    Return the raw lines of the TimeMonitor block (marker to closing rule).
extract_evaluator_rows
    Return the evaluator rows of the block with headers and rules removed.
"""

from __future__ import annotations

import logging
import re

from phalanx_timings.report.errors import NoTimingSection

logger = logging.getLogger(__name__)

SECTION_MARKER = "TimeMonitor results"
COMPONENT_NAMESPACE = "Phalanx"
RANK_PREFIX = "p=0 | "

_CLOSING_RULE_RE = re.compile(r"^={2,}$")
_RULE_RE = re.compile(r"^(?:-+|=+)$")


def strip_rank_prefix(line: str) -> str:
    """Return ``line`` without a leading ``p=0 | `` decoration."""

    if line.startswith(RANK_PREFIX):
        return line[len(RANK_PREFIX):]
    return line


def extract_section(text: str, source: str = "<text>") -> list[str]:
    """Return the lines of the first TimeMonitor block, inclusive.

    The block starts at the first line containing ``TimeMonitor results`` and
    ends at the next line made only of two or more ``=`` characters. If no
    closing rule follows, the block runs to the end of the text.

    Parameters
    ----------
    text : str
        Full log text.
    source : str, optional
        Label used in the error message (usually the file path).

    Raises
    ------
    NoTimingSection
        If the marker text does not occur in ``text``.
    """

    if SECTION_MARKER not in text:
        raise NoTimingSection(source)

    lines = [strip_rank_prefix(line) for line in text.splitlines()]
    start = next(i for i, line in enumerate(lines) if SECTION_MARKER in line)
    section = [lines[start]]
    for line in lines[start + 1:]:
        section.append(line)
        if _CLOSING_RULE_RE.match(line.strip()):
            break
    logger.info("TimeMonitor section: %d lines starting at line %d", len(section), start + 1)
    return section


def _is_evaluator_row(line: str) -> bool:
    stripped = line.strip()
    if not stripped:
        return False
    if "TimeMonitor" in stripped or "Timer Name" in stripped:
        return False
    if _RULE_RE.match(stripped):
        return False
    return stripped.startswith(COMPONENT_NAMESPACE)


def extract_evaluator_rows(text: str, source: str = "<text>") -> list[str]:
    """Return the Phalanx evaluator rows of the TimeMonitor block.

    Headers, rule lines, blank lines and rows of non-Phalanx timers are
    dropped. Returned rows are stripped of surrounding whitespace.
    """

    rows = [line.strip() for line in extract_section(text, source) if _is_evaluator_row(line)]
    logger.info("Retained %d evaluator rows", len(rows))
    return rows
