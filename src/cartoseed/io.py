"""Reading domains from GeoJSON and writing sampled points."""

from __future__ import annotations

import json
import pathlib
from typing import Any, Dict

import numpy as np

from .geometry.domain import Domain

__all__ = ["load_domain", "save_points", "points_to_geojson"]


def _load_json(p: pathlib.Path) -> Dict[str, Any]:
    with p.open("r", encoding="utf-8") as f:
        return json.load(f)


def _dump_json(p: pathlib.Path, obj) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(obj, f, ensure_ascii=False, indent=2)


def load_domain(path: str | pathlib.Path) -> Domain:
    """Load a polygonal domain from a ``.json``/``.geojson`` file."""
    p = pathlib.Path(path)
    if not p.exists():
        raise ValueError(f"domain path not found: {path}")
    if p.suffix.lower() not in (".json", ".geojson"):
        raise ValueError(f"unsupported domain format: {path}")
    return Domain.from_geojson(_load_json(p))


def points_to_geojson(points: np.ndarray) -> Dict[str, Any]:
    pts = np.asarray(points, float).reshape(-1, 2)
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {"id": i},
                "geometry": {"type": "Point", "coordinates": [float(x), float(y)]},
            }
            for i, (x, y) in enumerate(pts)
        ],
    }


def save_points(path: str | pathlib.Path, points: np.ndarray, fmt: str = "json") -> None:
    """Write points as a plain ``[[x, y], ...]`` list or a GeoJSON FeatureCollection."""
    p = pathlib.Path(path)
    if fmt == "json":
        _dump_json(p, np.asarray(points, float).reshape(-1, 2).tolist())
    elif fmt == "geojson":
        _dump_json(p, points_to_geojson(points))
    else:
        raise ValueError(f"unknown output format: {fmt}")
