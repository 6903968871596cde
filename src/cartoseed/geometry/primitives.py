"""Small geometric building blocks used by the sampler."""
from __future__ import annotations

from shapely.geometry import Point
from shapely.geometry.base import BaseGeometry

__all__ = ["disk", "annulus", "footprints_touch"]


def disk(center: tuple[float, float], radius: float, quad_segs: int = 16) -> BaseGeometry:
    """Polygonal approximation of a disk (``quad_segs`` segments per quarter)."""
    return Point(float(center[0]), float(center[1])).buffer(float(radius), quad_segs=int(quad_segs))


def annulus(center: tuple[float, float], inner: float, outer: float, quad_segs: int = 16) -> BaseGeometry:
    """Ring between radii ``inner`` and ``outer`` around ``center``."""
    if outer <= inner:
        raise ValueError("outer radius must exceed inner radius")
    return disk(center, outer, quad_segs).difference(disk(center, inner, quad_segs))


def footprints_touch(a: BaseGeometry, b: BaseGeometry) -> bool:
    """``True`` when two cell footprints share at least one boundary point.

    Same ``intersects`` predicate the neighbour index queries its STRtree with,
    so touching corners count as adjacent.
    """
    return bool(a.intersects(b))
