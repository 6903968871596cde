"""Output containers for the samplers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import numpy as np
from scipy.spatial.distance import pdist

from .grid import Grid

__all__ = ["AcceptedPoint", "SampleResult", "Termination"]

Termination = Literal["exhausted", "max_rounds", "max_points", "max_attempts"]


@dataclass(frozen=True)
class AcceptedPoint:
    id: int
    xy: tuple[float, float]
    cell_id: int


@dataclass
class SampleResult:
    """Accepted points in acceptance order plus run bookkeeping.

    ``terminated`` tells why the run stopped: ``"exhausted"`` for a natural
    end (empty active list, or no more room for inhibition sampling), or the
    name of the cap that cut it short.
    """

    points: np.ndarray
    cell_ids: np.ndarray
    grid: Grid
    rounds: int
    terminated: Termination
    method: str = "poisson"

    def __len__(self) -> int:
        return int(self.points.shape[0])

    @property
    def accepted(self) -> tuple[AcceptedPoint, ...]:
        return tuple(
            AcceptedPoint(i, (float(p[0]), float(p[1])), int(c))
            for i, (p, c) in enumerate(zip(self.points, self.cell_ids))
        )

    def min_pairwise_distance(self) -> float:
        """Smallest distance between two accepted points (``inf`` for < 2 points)."""
        if len(self) < 2:
            return float("inf")
        return float(pdist(self.points).min())
