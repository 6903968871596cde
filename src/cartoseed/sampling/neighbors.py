"""Precomputed 2-ring neighbourhoods of grid cells.

A cell's direct neighbours are the cells whose footprints touch it.  Because
``min_dist`` spans about 1.41 cell widths, a conflicting point can sit up to
two cells away, so each cell's neighbourhood is its direct neighbours plus
their direct neighbours, without the cell itself.

Every cell is independent of the others, so both phases can be split over a
thread pool.  The merged index is read-only afterwards.
"""
from __future__ import annotations

from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor

import numpy as np
from shapely import STRtree

from ..errors import InvalidParameter
from ..utils.logging import logger
from .grid import Grid

__all__ = ["NeighborIndex", "build_neighbor_index"]


class NeighborIndex(Sequence):
    """Read-only mapping ``cell_id -> sorted array of neighbouring cell ids``."""

    __slots__ = ("_rings",)

    def __init__(self, rings: Sequence[np.ndarray]):
        frozen = []
        for ring in rings:
            arr = np.asarray(ring, dtype=np.int64)
            arr.flags.writeable = False
            frozen.append(arr)
        self._rings = tuple(frozen)

    def __getitem__(self, cell_id):
        return self._rings[cell_id]

    def __len__(self) -> int:
        return len(self._rings)

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self._rings)


def _chunks(n: int, workers: int) -> list[range]:
    step = max(1, -(-n // workers))
    return [range(i, min(i + step, n)) for i in range(0, n, step)]


def _direct_neighbors(tree: STRtree, footprints: list, ids: range) -> list[np.ndarray]:
    hits = tree.query([footprints[i] for i in ids], predicate="intersects")
    out: list[list[int]] = [[] for _ in ids]
    for src, dst in zip(hits[0], hits[1]):
        out[int(src)].append(int(dst))
    return [np.unique(np.asarray(v, dtype=np.int64)) for v in out]


def _two_ring(direct: list[np.ndarray], ids: range) -> list[np.ndarray]:
    out = []
    for cid in ids:
        ring = np.unique(np.concatenate([direct[d] for d in direct[cid]]))
        out.append(ring[ring != cid])
    return out


def _run(fn, args_for, ranges: list[range], workers: int) -> list:
    if workers == 1 or len(ranges) == 1:
        parts = [fn(*args_for(r)) for r in ranges]
    else:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            parts = list(pool.map(lambda r: fn(*args_for(r)), ranges))
    merged: list = []
    for p in parts:
        merged.extend(p)
    return merged


def build_neighbor_index(grid: Grid, workers: int = 1) -> NeighborIndex:
    """Build the 2-ring neighbourhood of every cell in ``grid``.

    ``workers > 1`` computes chunks of cells concurrently; the result is
    identical to the serial build.
    """
    if int(workers) < 1:
        raise InvalidParameter(f"workers must be >= 1, got {workers!r}")
    workers = int(workers)
    footprints = grid.footprints()
    tree = STRtree(footprints)
    ranges = _chunks(grid.n_cells, workers)

    direct = _run(_direct_neighbors, lambda r: (tree, footprints, r), ranges, workers)
    rings = _run(_two_ring, lambda r: (direct, r), ranges, workers)

    logger.debug("neighbor index: %d cells, %d workers", grid.n_cells, workers)
    return NeighborIndex(rings)
