"""TimeMonitor report mining: extraction, parsing, aggregation and export."""

from __future__ import annotations

from .errors import (
    InvalidConfig,
    MissingInputFile,
    NoTimingSection,
    OutputWriteError,
    TimingSummaryError,
    UnrecognizedOption,
)
from .export import SortKey, format_table, sort_results, write_table
from .pipeline import SummaryResult, summarize_file, summarize_text

__all__ = [
    "TimingSummaryError",
    "MissingInputFile",
    "NoTimingSection",
    "UnrecognizedOption",
    "InvalidConfig",
    "OutputWriteError",
    "SortKey",
    "format_table",
    "sort_results",
    "write_table",
    "SummaryResult",
    "summarize_file",
    "summarize_text",
]
