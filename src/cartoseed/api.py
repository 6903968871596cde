"""Public entry points of cartoseed."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import numpy as np

from .config import SamplingConfig, load_config
from .errors import InvalidParameter
from .geometry.domain import as_domain
from .sampling import (
    SampleResult,
    build_grid,
    build_neighbor_index,
    generate_candidates,
    poisson_disk_sample,
    sequential_inhibition,
)
from .utils.logging import configure_logging, level_from_name

__all__ = [
    "sample",
    "sample_result",
    "sample_from_config",
    "build_grid",
    "build_neighbor_index",
    "generate_candidates",
]

_METHODS = ("poisson", "ssi")


def _make_rng(seed: int | None, rng: np.random.Generator | None) -> np.random.Generator:
    if rng is not None and seed is not None:
        raise InvalidParameter("pass either seed or rng, not both")
    return rng if rng is not None else np.random.default_rng(seed)


def sample_result(
    domain: Any,
    min_dist: float,
    k: int = 30,
    *,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
    method: str = "poisson",
    n: int | None = None,
    max_rounds: int | None = None,
    max_attempts: int = 1000,
    workers: int = 1,
    quad_segs: int = 16,
) -> SampleResult:
    """Like :func:`sample` but return the full :class:`SampleResult`."""
    if method not in _METHODS:
        raise InvalidParameter(f"method must be one of {_METHODS}, got {method!r}")
    if method == "ssi" and max_rounds is not None:
        raise InvalidParameter("max_rounds only applies to method 'poisson'")
    dom = as_domain(domain)
    gen = _make_rng(seed, rng)
    if method == "ssi":
        return sequential_inhibition(
            dom, min_dist, n, rng=gen, max_attempts=max_attempts, workers=workers
        )
    return poisson_disk_sample(
        dom,
        min_dist,
        k,
        rng=gen,
        workers=workers,
        max_rounds=max_rounds,
        max_points=n,
        quad_segs=quad_segs,
    )


def sample(
    domain: Any,
    min_dist: float,
    k: int = 30,
    *,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
    method: str = "poisson",
    n: int | None = None,
    max_rounds: int | None = None,
    workers: int = 1,
) -> np.ndarray:
    """Generate quasi-random points inside ``domain``, pairwise at least ``min_dist`` apart.

    Parameters
    ----------
    domain:
        A :class:`~cartoseed.geometry.Domain`, a shapely (multi)polygon, a
        GeoJSON-like mapping or an ``(N, 2)`` exterior ring.  Coordinates
        must already be planar.
    min_dist:
        Minimum distance between points, in the domain's units.
    k:
        Candidates tried around each active point (Poisson sampler only).
    seed, rng:
        Randomness; give at most one of them.
    method:
        ``"poisson"`` (Bridson's algorithm, default) or ``"ssi"`` (simple
        sequential inhibition).
    n:
        Stop after ``n`` points (``None`` = as many as fit).
    max_rounds:
        Safety cap on Poisson sampler rounds.
    workers:
        Threads used for building the neighbour lookup.

    Returns
    -------
    np.ndarray
        ``(N, 2)`` array of points in acceptance order.
    """
    return sample_result(
        domain, min_dist, k,
        seed=seed, rng=rng, method=method, n=n, max_rounds=max_rounds, workers=workers,
    ).points


def sample_from_config(
    domain: Any,
    cfg: SamplingConfig | Mapping[str, Any] | str | Path,
    rng: np.random.Generator | None = None,
) -> SampleResult:
    """Run a sampler described by a config object, mapping or YAML file.

    A mapping may be either the bare sampling section or ``{"sampling": {...}}``.
    """
    if isinstance(cfg, (str, Path)):
        conf = load_config(cfg)
    elif isinstance(cfg, SamplingConfig):
        conf = cfg
    else:
        conf = load_config(overrides=dict(cfg) if "sampling" in cfg else {"sampling": dict(cfg)})

    if conf.log_level != "none":
        configure_logging(True, level_from_name(conf.log_level))

    return sample_result(
        domain,
        conf.min_dist,
        conf.k,
        seed=conf.seed if rng is None else None,
        rng=rng,
        method=conf.method,
        n=conf.n,
        max_rounds=conf.max_rounds,
        max_attempts=conf.max_attempts,
        workers=conf.workers,
        quad_segs=conf.quad_segs,
    )
