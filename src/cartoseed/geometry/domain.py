"""Planar sampling domain backed by a shapely polygon."""
from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np
import shapely
from shapely.geometry import MultiPolygon, Point, Polygon, box, shape
from shapely.geometry.base import BaseGeometry

from ..errors import InvalidDomain

__all__ = ["Domain", "as_domain", "validate_domain"]

XY = tuple[float, float]

# upper bound on the number of trial points drawn in one rejection batch
_MAX_BATCH = 100_000

_AREAL_TYPES = ("Polygon", "MultiPolygon", "GeometryCollection")


def _polygonal(geom: BaseGeometry) -> BaseGeometry:
    """Return only the areal part of ``geom``.

    Overlay operations on polygons can yield collections with stray lines or
    points along shared edges; those carry no area and are dropped.
    """
    if geom.is_empty:
        return Polygon()
    if isinstance(geom, (Polygon, MultiPolygon)):
        return geom
    parts: list[Polygon] = []
    for g in getattr(geom, "geoms", ()):
        if isinstance(g, Polygon) and not g.is_empty:
            parts.append(g)
        elif isinstance(g, MultiPolygon):
            parts.extend(p for p in g.geoms if not p.is_empty)
    if not parts:
        return Polygon()
    if len(parts) == 1:
        return parts[0]
    return MultiPolygon(parts)


class Domain:
    """Immutable polygonal region that points are sampled in.

    The boundary belongs to the domain: :meth:`contains` and
    :meth:`sample_uniform` treat points on an edge as inside.
    """

    __slots__ = ("_geom",)

    def __init__(self, geometry: BaseGeometry):
        if not isinstance(geometry, BaseGeometry):
            raise InvalidDomain(f"expected a shapely geometry, got {type(geometry).__name__}")
        geom = _polygonal(geometry)
        shapely.prepare(geom)
        self._geom = geom

    # --- constructors ---------------------------------------------------
    @classmethod
    def from_coords(cls, exterior: Sequence[XY], holes: Sequence[Sequence[XY]] = ()) -> "Domain":
        if len(exterior) < 3:
            raise InvalidDomain("exterior ring needs at least 3 vertices")
        return cls(Polygon(exterior, holes=list(holes) or None))

    @classmethod
    def from_bounds(cls, xmin: float, ymin: float, xmax: float, ymax: float) -> "Domain":
        return cls(box(xmin, ymin, xmax, ymax))

    @classmethod
    def from_geojson(cls, obj: Mapping[str, Any]) -> "Domain":
        """Build a domain from a GeoJSON geometry, Feature or FeatureCollection.

        Multiple polygons are unioned into one region.
        """
        kind = obj.get("type")
        if kind == "FeatureCollection":
            geoms = [shape(f["geometry"]) for f in obj.get("features", []) if f.get("geometry")]
            if not geoms:
                raise InvalidDomain("FeatureCollection has no geometries")
        elif kind == "Feature":
            if not obj.get("geometry"):
                raise InvalidDomain("Feature has no geometry")
            geoms = [shape(obj["geometry"])]
        else:
            geoms = [shape(obj)]
        for g in geoms:
            if g.geom_type not in _AREAL_TYPES:
                raise InvalidDomain(f"domain must be polygonal, got {g.geom_type}")
        return cls(geoms[0] if len(geoms) == 1 else shapely.union_all(geoms))

    # --- properties -----------------------------------------------------
    @property
    def geometry(self) -> BaseGeometry:
        return self._geom

    @property
    def area(self) -> float:
        return float(self._geom.area)

    @property
    def is_empty(self) -> bool:
        return bool(self._geom.is_empty)

    def bounding_box(self) -> tuple[float, float, float, float]:
        xmin, ymin, xmax, ymax = self._geom.bounds
        return float(xmin), float(ymin), float(xmax), float(ymax)

    # --- queries --------------------------------------------------------
    def contains(self, point: XY | Point) -> bool:
        if isinstance(point, Point):
            x, y = point.x, point.y
        else:
            x, y = point
        return bool(shapely.intersects_xy(self._geom, float(x), float(y)))

    def contains_xy(self, xy: np.ndarray) -> np.ndarray:
        """Vectorised :meth:`contains` for an ``(N, 2)`` array."""
        pts = np.asarray(xy, float).reshape(-1, 2)
        if pts.shape[0] == 0:
            return np.zeros(0, dtype=bool)
        return np.asarray(shapely.intersects_xy(self._geom, pts[:, 0], pts[:, 1]), dtype=bool)

    def intersect(self, region: "Domain | BaseGeometry") -> "Domain":
        other = region.geometry if isinstance(region, Domain) else region
        return Domain(self._geom.intersection(other))

    def difference(self, region: "Domain | BaseGeometry") -> "Domain":
        other = region.geometry if isinstance(region, Domain) else region
        return Domain(self._geom.difference(other))

    def sample_uniform(self, n: int, rng: np.random.Generator, max_batches: int = 64) -> np.ndarray:
        """Draw up to ``n`` points uniformly from the domain.

        Rejection sampling from the bounding box, in batches sized from the
        fill ratio.  Fewer than ``n`` rows come back only for an empty or
        zero-area region, or when ``max_batches`` batches were not enough.
        """
        if n <= 0 or self.is_empty or not self.area > 0:
            return np.empty((0, 2), dtype=float)
        xmin, ymin, xmax, ymax = self.bounding_box()
        ratio = self.area / max((xmax - xmin) * (ymax - ymin), self.area)

        chunks: list[np.ndarray] = []
        have = 0
        for _ in range(max_batches):
            need = n - have
            m = min(_MAX_BATCH, max(need, int(math.ceil(1.25 * need / ratio))))
            xs = rng.uniform(xmin, xmax, m)
            ys = rng.uniform(ymin, ymax, m)
            inside = shapely.intersects_xy(self._geom, xs, ys)
            got = np.column_stack([xs[inside], ys[inside]])[:need]
            if got.shape[0]:
                chunks.append(got)
                have += got.shape[0]
            if have >= n:
                break
        if not chunks:
            return np.empty((0, 2), dtype=float)
        return np.concatenate(chunks, axis=0)

    def __repr__(self) -> str:
        return f"Domain({self._geom.geom_type}, area={self.area:.6g})"


def as_domain(obj: Any) -> Domain:
    """Coerce ``obj`` into a :class:`Domain`.

    Accepts a ``Domain``, a shapely geometry, a GeoJSON-like mapping or a
    sequence of ``(x, y)`` vertices describing the exterior ring.
    """
    if isinstance(obj, Domain):
        return obj
    if isinstance(obj, BaseGeometry):
        if obj.geom_type not in _AREAL_TYPES:
            raise InvalidDomain(f"domain must be polygonal, got {obj.geom_type}")
        return Domain(obj)
    if isinstance(obj, Mapping):
        return Domain.from_geojson(obj)
    if isinstance(obj, (Sequence, np.ndarray)):
        ring = np.asarray(obj, float)
        if ring.ndim != 2 or ring.shape[1] != 2:
            raise InvalidDomain("coordinate ring must have shape (N,2)")
        return Domain.from_coords([tuple(p) for p in ring])
    raise InvalidDomain(f"cannot build a domain from {type(obj).__name__}")


def validate_domain(domain: Domain) -> Domain:
    """Raise :class:`InvalidDomain` unless ``domain`` has positive finite area."""
    if domain.is_empty:
        raise InvalidDomain("domain is empty")
    area = domain.area
    if not math.isfinite(area) or area <= 0.0:
        raise InvalidDomain(f"domain area must be positive and finite, got {area!r}")
    if not all(math.isfinite(v) for v in domain.bounding_box()):
        raise InvalidDomain("domain bounds are not finite")
    return domain
