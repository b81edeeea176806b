"""Configuration loading and conversion using `cattrs` and OmegaConf.

Provides a shared converter plus helpers that layer a YAML configuration file
and explicit overrides on top of :class:`SummaryRequest` defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

from cattrs import Converter
from omegaconf import DictConfig, OmegaConf  # type: ignore[import-untyped]
from omegaconf.errors import OmegaConfBaseException  # type: ignore[import-untyped]

from phalanx_timings.contracts.models import SummaryRequest
from phalanx_timings.report.errors import InvalidConfig
from phalanx_timings.report.export import SortKey
from phalanx_timings.utils.paths import resolve_path

# Public converter instance; register hooks as needed.
converter = Converter()
converter.register_unstructure_hook(SortKey, lambda key: key.value)

_PATH_KEYS = ("input", "output")


def default_config() -> DictConfig:
    """Return the default request as a struct-mode OmegaConf config."""

    cfg = OmegaConf.create(converter.unstructure(SummaryRequest()))
    OmegaConf.set_struct(cfg, True)
    return cfg


def load_config_file(path: str | Path) -> DictConfig:
    """Load a YAML config file, resolving its relative paths against its directory.

    Raises
    ------
    InvalidConfig
        If the file is missing, is not valid YAML or is not a mapping.
    """

    p = Path(path)
    if not p.is_file():
        raise InvalidConfig(f"Config file not found: {path}")
    try:
        cfg = OmegaConf.load(p)
    except Exception as exc:  # noqa: BLE001
        raise InvalidConfig(f"Cannot parse config file {path}: {exc}") from exc
    if not isinstance(cfg, DictConfig):
        raise InvalidConfig(f"Config file {path} must contain a mapping")
    base = p.resolve().parent
    for key in _PATH_KEYS:
        value = cfg.get(key)
        if not isinstance(value, str):
            continue
        resolved = resolve_path(value, base)
        if resolved is None:
            del cfg[key]
        else:
            cfg[key] = resolved
    return cfg


def build_request(
    config_path: Optional[str | Path] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> SummaryRequest:
    """Merge defaults, an optional config file and overrides into a request.

    Overrides whose value is ``None`` are ignored, so callers can pass every
    command-line option and only explicitly given ones take effect.

    Raises
    ------
    InvalidConfig
        On unknown keys or values that fail validation.
    """

    cfg = default_config()
    layers: list[Any] = []
    if config_path is not None:
        layers.append(load_config_file(config_path))
    if overrides:
        layers.append({k: v for k, v in overrides.items() if v is not None})
    try:
        merged = OmegaConf.merge(cfg, *layers)
        data = OmegaConf.to_container(merged, resolve=True)
        return converter.structure(data, SummaryRequest)
    except OmegaConfBaseException as exc:
        raise InvalidConfig(f"Invalid configuration: {exc}") from exc
    except Exception as exc:  # noqa: BLE001
        # cattrs wraps attrs validator failures in its own exception groups.
        raise InvalidConfig(f"Invalid configuration: {exc!r}") from exc
