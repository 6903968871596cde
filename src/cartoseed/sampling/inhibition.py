"""Simple sequential inhibition (SSI).

Uniform points are proposed one at a time anywhere in the domain and kept
when no accepted point lies closer than ``min_dist``.  Sampling stops once
``n`` points are placed or ``max_attempts`` proposals in a row were rejected.
With ``n=None`` it keeps going until the domain is practically full.

This is cheaper to reason about than Bridson's sampler but slower to fill a
domain completely, since late proposals mostly land in covered space.
"""
from __future__ import annotations

import numpy as np

from ..geometry.domain import Domain, validate_domain
from ..utils.logging import logger
from .grid import build_grid
from .neighbors import build_neighbor_index
from .params import check_count, check_min_dist
from .poisson import SamplerState
from .result import SampleResult, Termination

__all__ = ["sequential_inhibition"]


def sequential_inhibition(
    domain: Domain,
    min_dist: float,
    n: int | None = None,
    *,
    rng: np.random.Generator,
    max_attempts: int = 1000,
    batch: int = 256,
    workers: int = 1,
) -> SampleResult:
    min_dist = check_min_dist(min_dist)
    n = check_count("n", n, optional=True)
    max_attempts = check_count("max_attempts", max_attempts)
    batch = check_count("batch", batch)
    validate_domain(domain)

    grid = build_grid(domain, min_dist)
    state = SamplerState(domain=domain, min_dist=min_dist, grid=grid,
                         neighbors=build_neighbor_index(grid, workers=workers))
    state.enter("iterating")

    misses = 0
    terminated: Termination = "exhausted"
    while True:
        if n is not None and state.count >= n:
            terminated = "max_points"
            break
        proposals = domain.sample_uniform(batch, rng)
        if proposals.shape[0] == 0:
            break
        for xy in proposals:
            state.rounds += 1
            cid = state.admit(xy)
            if cid is None:
                misses += 1
                if misses >= max_attempts:
                    break
                continue
            state.accept(xy, cid, activate=False)
            misses = 0
            if n is not None and state.count >= n:
                break
        if misses >= max_attempts:
            if n is not None:
                terminated = "max_attempts"
                logger.warning("placed %d of %d points before %d consecutive rejections",
                               state.count, n, max_attempts)
            break

    state.enter("done")
    logger.info("inhibition sampling done: %d points from %d proposals (%s)",
                state.count, state.rounds, terminated)
    result = state.to_result(terminated)
    result.method = "ssi"
    return result
