"""Poisson-disc sampling over an arbitrary polygon (Bridson's algorithm).

The sampler seeds one random point, then repeatedly picks an active point,
draws ``k`` candidates from the ring between ``min_dist`` and ``2*min_dist``
around it and keeps every candidate that lands in an empty grid cell with no
accepted point closer than ``min_dist`` in the cell's 2-ring.  The picked
point is retired after its single round, whatever the outcome.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

import numpy as np

from ..errors import InvalidDomain
from ..geometry.domain import Domain, validate_domain
from ..utils.logging import logger
from .candidates import generate_candidates
from .grid import Grid, build_grid
from .neighbors import NeighborIndex, build_neighbor_index
from .params import check_count, check_min_dist
from .result import SampleResult, Termination

__all__ = ["SamplerState", "poisson_disk_sample"]

Phase = Literal["seeding", "iterating", "done"]


@dataclass
class SamplerState:
    """Mutable state of one sampling run, owned by the loop.

    ``points`` is an arena preallocated to one slot per cell; point ids are
    indices into it and never move.  ``active`` holds ids of points that still
    get a round.
    """

    domain: Domain
    min_dist: float
    grid: Grid
    neighbors: NeighborIndex
    points: np.ndarray = field(init=False, repr=False)
    cell_ids: np.ndarray = field(init=False, repr=False)
    count: int = 0
    active: list[int] = field(default_factory=list)
    rounds: int = 0
    phase: Phase = "seeding"

    def __post_init__(self) -> None:
        self.points = np.empty((self.grid.n_cells, 2), dtype=float)
        self.cell_ids = np.full(self.grid.n_cells, -1, dtype=np.int64)

    @property
    def accepted(self) -> np.ndarray:
        return self.points[: self.count]

    def enter(self, phase: Phase) -> None:
        logger.debug("sampler phase %s -> %s", self.phase, phase)
        self.phase = phase

    def admit(self, xy: np.ndarray) -> int | None:
        """Return the cell id for ``xy`` if it may be accepted, else ``None``."""
        cid = self.grid.cell_containing(xy)
        if self.grid.is_occupied(cid):
            return None
        near = self.grid.points_in(self.neighbors[cid])
        if near.size:
            d2 = np.sum((self.points[near] - xy) ** 2, axis=1)
            if np.any(d2 < self.min_dist * self.min_dist):
                return None
        return cid

    def accept(self, xy: np.ndarray, cell_id: int, activate: bool = True) -> int:
        pid = self.count
        self.grid.mark_occupied(cell_id, pid)
        self.points[pid] = xy
        self.cell_ids[pid] = cell_id
        self.count += 1
        if activate:
            self.active.append(pid)
        return pid

    def retire(self, index: int) -> None:
        """Drop ``active[index]``; order of the active list carries no meaning."""
        last = self.active.pop()
        if index < len(self.active):
            self.active[index] = last

    def to_result(self, terminated: Termination) -> SampleResult:
        return SampleResult(
            points=self.accepted.copy(),
            cell_ids=self.cell_ids[: self.count].copy(),
            grid=self.grid,
            rounds=self.rounds,
            terminated=terminated,
            method="poisson",
        )


def _seed(state: SamplerState, rng: np.random.Generator) -> None:
    first = state.domain.sample_uniform(1, rng)
    if first.shape[0] == 0:
        raise InvalidDomain("could not place a seed point inside the domain")
    xy = first[0]
    state.accept(xy, state.grid.cell_containing(xy))
    state.enter("iterating")


def _round(state: SamplerState, rng: np.random.Generator, k: int, quad_segs: int, max_points: int | None) -> int:
    index = int(rng.integers(len(state.active)))
    parent = state.points[state.active[index]].copy()

    cands = generate_candidates(parent, state.min_dist, k, state.domain, rng, quad_segs)
    if cands.shape[0]:
        cands = cands[state.domain.contains_xy(cands)]

    n_new = 0
    for xy in cands:
        if max_points is not None and state.count >= max_points:
            break
        cid = state.admit(xy)
        if cid is None:
            continue
        state.accept(xy, cid)
        n_new += 1

    state.retire(index)
    state.rounds += 1
    logger.debug(
        "round %d: %d/%d candidates accepted, active=%d, total=%d",
        state.rounds, n_new, cands.shape[0], len(state.active), state.count,
    )
    return n_new


def poisson_disk_sample(
    domain: Domain,
    min_dist: float,
    k: int = 30,
    *,
    rng: np.random.Generator,
    workers: int = 1,
    max_rounds: int | None = None,
    max_points: int | None = None,
    quad_segs: int = 16,
) -> SampleResult:
    """Fill ``domain`` with points at least ``min_dist`` apart.

    Parameters
    ----------
    domain:
        Planar sampling region.
    min_dist:
        Minimum separation, in the domain's coordinate units.
    k:
        Candidates drawn per active point.
    rng:
        Source of all randomness; a fixed seed gives identical output.
    workers:
        Threads used to build the neighbour index.
    max_rounds, max_points:
        Optional caps.  Hitting one stops the run early with a valid but
        partial packing.
    quad_segs:
        Segments per quarter circle used to polygonise the candidate ring.
    """
    min_dist = check_min_dist(min_dist)
    k = check_count("k", k)
    max_rounds = check_count("max_rounds", max_rounds, optional=True)
    max_points = check_count("max_points", max_points, optional=True)
    quad_segs = check_count("quad_segs", quad_segs)
    validate_domain(domain)

    grid = build_grid(domain, min_dist)
    logger.info("grid: %d x %d cells of size %.6g", grid.n_rows, grid.n_cols, grid.cell_size)
    neighbors = build_neighbor_index(grid, workers=workers)

    state = SamplerState(domain=domain, min_dist=min_dist, grid=grid, neighbors=neighbors)
    _seed(state, rng)

    terminated: Termination = "exhausted"
    while state.active:
        if max_points is not None and state.count >= max_points:
            terminated = "max_points"
            break
        if max_rounds is not None and state.rounds >= max_rounds:
            terminated = "max_rounds"
            logger.warning(
                "stopped after max_rounds=%d with %d points still active", max_rounds, len(state.active)
            )
            break
        _round(state, rng, k, quad_segs, max_points)

    state.enter("done")
    logger.info("poisson sampling done: %d points in %d rounds (%s)", state.count, state.rounds, terminated)
    return state.to_result(terminated)
