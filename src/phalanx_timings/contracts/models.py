"""Contract models (attrs-based schemas) for summary runs.

:class:`SummaryRequest` describes one invocation of the summary tool. It is
built from defaults, an optional YAML configuration file and command-line
flags (see :mod:`phalanx_timings.contracts.convert`).
"""

from __future__ import annotations

from typing import Optional

from attrs import define, field
from attrs.validators import instance_of, optional

from phalanx_timings.report.export import SortKey

DEFAULT_INPUT = "LastTest.log"


@define(kw_only=True)
class SummaryRequest:
    """Inputs for a timing summary run.

    Examples
    --------
    >>> SummaryRequest(input="LastTest.log", sort_by=SortKey.RUN_TIME)
    SummaryRequest(...)
    """

    input: str = field(
        default=DEFAULT_INPUT,
        validator=[instance_of(str)],
        metadata={"help": "Test log containing a TimeMonitor report"},
    )
    output: Optional[str] = field(
        default=None,
        validator=[optional(instance_of(str))],
        metadata={"help": "Destination file for the table; stdout when unset"},
    )
    status: bool = field(
        default=False,
        validator=[instance_of(bool)],
        metadata={"help": "Emit progress messages on stderr"},
    )
    sort_by: SortKey = field(
        default=SortKey.AVG_TIME_PER_CALL,
        converter=SortKey,
        metadata={"help": "One of 'avg', 'run_time', 'num_calls'"},
    )
    by_name: bool = field(
        default=False,
        validator=[instance_of(bool)],
        metadata={"help": "Merge qualified evaluators under their base name"},
    )
    by_eval_type: bool = field(
        default=False,
        validator=[instance_of(bool)],
        metadata={"help": "Merge evaluators across evaluation-type tags"},
    )
