"""Command-line entry point for Phalanx evaluator timing summaries.

Reads a test log, extracts its TimeMonitor report and prints a table of
evaluators ranked by average time per call (or total run time, or number of
calls).

Exit codes
----------
0
    Success.
1
    Unrecognized option or invalid configuration.
2
    Input file missing or not a regular file.
3
    Input file has no TimeMonitor section.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from phalanx_timings import __version__
from phalanx_timings.contracts.convert import build_request
from phalanx_timings.contracts.models import DEFAULT_INPUT, SummaryRequest
from phalanx_timings.report.errors import TimingSummaryError, UnrecognizedOption
from phalanx_timings.report.export import SortKey, format_table, write_table
from phalanx_timings.report.pipeline import summarize_file
from phalanx_timings.utils.paths import display_path, resolve_path

logger = logging.getLogger("phalanx_timings")

_EPILOG = """
Examples:
  # Summarize LastTest.log in the current directory, sorted by time per call
  %(prog)s

  # Sort by total run time, merging qualified evaluators by base name
  %(prog)s -i LastTest.log -r -n

  # Merge across evaluation types and write the table to a file
  %(prog)s -e -o timings.txt
"""


class _SummaryArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with argparse's code 2."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UnrecognizedOption(message)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = _SummaryArgumentParser(
        prog="phalanx-timings",
        description="Summarize Phalanx evaluator timings from a TimeMonitor report.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_EPILOG,
    )
    parser.add_argument(
        "-i",
        "--input",
        type=str,
        default=None,
        help=f"Test log to read (default: {DEFAULT_INPUT}).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Write the table to this file instead of stdout.",
    )
    parser.add_argument(
        "-s",
        "--status",
        action="store_true",
        default=None,
        help="Print progress messages to stderr.",
    )
    parser.add_argument(
        "-r",
        "--run-time",
        dest="sort_by",
        action="store_const",
        const=SortKey.RUN_TIME.value,
        default=None,
        help="Sort by total run time.",
    )
    parser.add_argument(
        "-c",
        "--num-calls",
        dest="sort_by",
        action="store_const",
        const=SortKey.NUM_CALLS.value,
        default=None,
        help="Sort by number of calls.",
    )
    parser.add_argument(
        "-n",
        "--names",
        dest="by_name",
        action="store_true",
        default=None,
        help="Aggregate evaluators that differ only by a ': qualifier' suffix.",
    )
    parser.add_argument(
        "-e",
        "--eval-types",
        dest="by_eval_type",
        action="store_true",
        default=None,
        help="Aggregate evaluators that differ only by a '[EvalType] ' tag.",
    )
    parser.add_argument("--config", type=str, default=None, help="YAML file with default options.")
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def _setup_logging(status: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.INFO if status else logging.WARNING)
    logger.propagate = False


def _request_from_args(args: argparse.Namespace) -> SummaryRequest:
    cwd = Path.cwd()
    overrides = {
        "input": resolve_path(args.input, cwd),
        "output": resolve_path(args.output, cwd),
        "status": args.status,
        "sort_by": args.sort_by,
        "by_name": args.by_name,
        "by_eval_type": args.by_eval_type,
    }
    return build_request(config_path=args.config, overrides=overrides)


def run(request: SummaryRequest) -> int:
    """Summarize ``request.input`` and emit the table; return the exit code."""

    _setup_logging(request.status)
    logger.info(
        "Summarizing %s | sort_by=%s by_name=%s by_eval_type=%s",
        display_path(request.input),
        request.sort_by.value,
        request.by_name,
        request.by_eval_type,
    )
    summary = summarize_file(
        request.input,
        sort_key=request.sort_by,
        by_name=request.by_name,
        by_eval_type=request.by_eval_type,
    )
    write_table(format_table(summary.results), request.output)
    if request.output is not None:
        logger.info("Wrote %d rows to %s", len(summary.results), display_path(request.output))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_arg_parser()
    try:
        args = parser.parse_args(argv)
        return run(_request_from_args(args))
    except TimingSummaryError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return exc.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
