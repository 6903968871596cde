"""Candidate points in the ring around an active sample."""
from __future__ import annotations

import numpy as np

from ..geometry.domain import Domain
from ..geometry.primitives import annulus

__all__ = ["generate_candidates"]


def generate_candidates(
    active_point,
    min_dist: float,
    k: int,
    domain: Domain,
    rng: np.random.Generator,
    quad_segs: int = 16,
) -> np.ndarray:
    """Draw up to ``k`` points uniformly from the ring ``[min_dist, 2*min_dist]``
    around ``active_point``, clipped to ``domain``.

    Returns an ``(m, 2)`` array with ``m <= k``.  An empty result is normal
    when the ring barely overlaps the domain.
    """
    center = (float(active_point[0]), float(active_point[1]))
    region = domain.intersect(annulus(center, min_dist, 2.0 * min_dist, quad_segs))
    if region.is_empty or region.area <= 0.0:
        return np.empty((0, 2), dtype=float)
    return region.sample_uniform(int(k), rng)
