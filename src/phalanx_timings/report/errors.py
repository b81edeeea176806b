"""Fatal error kinds raised by the timing summary pipeline and CLI.

Each error carries the process exit code the command-line wrapper returns
for it. Malformed report rows are not errors; see
:class:`phalanx_timings.report.rows.MalformedRow`.
"""

from __future__ import annotations


class TimingSummaryError(RuntimeError):
    """Base class for fatal summary errors."""

    exit_code: int = 1


class UnrecognizedOption(TimingSummaryError):
    """Raised when the command line contains an unknown option."""

    exit_code = 1


class MissingInputFile(TimingSummaryError):
    """Raised when the input path is missing or is not a regular file."""

    exit_code = 2

    def __init__(self, path: str) -> None:
        super().__init__(f"Input file not found or not a regular file: {path}")
        self.path = path


class NoTimingSection(TimingSummaryError):
    """Raised when the input text has no ``TimeMonitor results`` section."""

    exit_code = 3

    def __init__(self, source: str = "<text>") -> None:
        super().__init__(f"No TimeMonitor results section found in {source}")
        self.source = source


class InvalidConfig(TimingSummaryError):
    """Raised when a configuration file cannot be loaded or validated."""

    exit_code = 1


class OutputWriteError(TimingSummaryError):
    """Raised when the summary table cannot be written to its output file."""

    exit_code = 1

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(f"Cannot write output file {path}: {cause.strerror or cause}")
        self.path = path
