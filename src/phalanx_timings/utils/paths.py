"""Path utilities.

Helpers to normalize filesystem paths coming from the command line or from a
configuration file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


def resolve_path(value: Optional[str], base: Path) -> Optional[str]:
    """Return ``value`` as an absolute path, anchoring relative paths at ``base``.

    Command-line paths are anchored at the working directory; paths read from
    a ``--config`` file are anchored at that file's directory. A leading
    ``~`` is expanded. ``None`` and blank strings mean "not given" and yield
    ``None`` so the option falls back to its default.
    """

    if value is None or not value.strip():
        return None
    p = Path(value.strip()).expanduser()
    if not p.is_absolute():
        p = base / p
    return str(p.resolve())


def display_path(path: str | Path, cwd: Optional[Path] = None) -> str:
    """Return ``path`` relative to ``cwd`` when it lies below it, else as given."""

    p = Path(path)
    base = cwd or Path.cwd()
    try:
        return str(p.resolve().relative_to(base.resolve()))
    except ValueError:
        return str(p)
