"""Evaluator name decoration transforms.

Evaluator timer names may carry three kinds of decoration, as in
``Phalanx: Evaluator 12: [Residual] Gather Solution: Velocity``: an ordinal
prefix, an evaluation-type tag and a qualifier.

Each transform here handles exactly one decoration and is total: it returns
the input unchanged when the decoration is absent.
"""

from __future__ import annotations

import re

_ORDINAL_PREFIX_RE = re.compile(r"^Phalanx: Evaluator \d+: ")
_NAMESPACE_RE = re.compile(r"^Phalanx[:\s]*")
_EVAL_TYPE_RE = re.compile(r"^\[[^\]]*\] (?P<rest>.+)$")

QUALIFIER_SEPARATOR = ": "


def strip_ordinal_prefix(name: str) -> str:
    """Remove a leading ``"Phalanx: Evaluator <N>: "`` bookkeeping prefix.

    ``N`` must be a decimal integer; anything else leaves the name as is.
    """

    return _ORDINAL_PREFIX_RE.sub("", name, count=1)


def strip_namespace(name: str) -> str:
    """Remove the ``Phalanx`` namespace from the front of ``name``.

    The ordinal prefix wins when present. Otherwise ``Phalanx`` plus any
    ``:`` and whitespace right after it is removed (``PhalanxFoo`` and
    ``Phalanx: Foo`` both give ``Foo``). A name that would become empty is
    returned unchanged.
    """

    stripped = strip_ordinal_prefix(name)
    if stripped != name:
        return stripped
    stripped = _NAMESPACE_RE.sub("", name, count=1)
    return stripped if stripped else name


def base_name(name: str) -> str:
    """Return the part of ``name`` before the first ``": "``.

    Only one level is stripped: ``"Foo: bar: baz"`` gives ``"Foo"``.
    """

    head, sep, _ = name.partition(QUALIFIER_SEPARATOR)
    if sep and head:
        return head
    return name


def strip_eval_type(name: str) -> str:
    """Return ``Rest`` for a name of the form ``"[Tag] Rest"``."""

    m = _EVAL_TYPE_RE.match(name)
    if m is None:
        return name
    return m.group("rest")
