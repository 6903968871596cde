"""Sampling configuration loader."""
from __future__ import annotations

from collections.abc import Mapping
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .schema import ProfileSampling, SamplingConfig

__all__ = ["load_config", "deep_update"]


def deep_update(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict:
    """Return a copy of ``base`` with ``override`` merged in recursively."""
    out = deepcopy(dict(base))
    for k, v in override.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), Mapping):
            out[k] = deep_update(out[k], v)
        else:
            out[k] = deepcopy(v)
    return out


def _read_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        return {}
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise TypeError(f"Top-level YAML at {path} must be a mapping")
    return data


def _ensure_only_sampling(d: Mapping[str, Any]) -> None:
    extra = set(d.keys()) - {"sampling"}
    if extra:
        raise ValueError(f"unexpected top-level keys: {sorted(extra)}")


def load_config(
    path: str | Path | None = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> SamplingConfig:
    """Read ``path`` (a missing file counts as empty), apply ``overrides`` and validate.

    Both sources use the layout ``{"sampling": {...}}``.
    """
    raw = _read_yaml(path) if path is not None else {}
    _ensure_only_sampling(raw)
    cfg: Dict[str, Any] = {"sampling": raw.get("sampling", {})}
    if overrides:
        _ensure_only_sampling(overrides)
        cfg = deep_update(cfg, overrides)
    return ProfileSampling.model_validate(cfg).sampling
