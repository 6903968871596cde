"""Uniform occupancy grid over the domain's bounding box.

Cells are squares of side ``min_dist / sqrt(2)``, so a cell's diagonal equals
``min_dist`` and two points in the same cell are always too close.  Points in
cells that are neither adjacent nor one cell apart are more than ``min_dist``
away from each other, which is what lets the sampler check only a small
neighbourhood of cells.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np
from shapely.geometry import box
from shapely.geometry.base import BaseGeometry

from ..errors import InvalidParameter
from ..geometry.domain import Domain

__all__ = ["Grid", "build_grid"]


@dataclass
class Grid:
    """Row-major grid of square cells.

    Cell geometry is fixed at build time; only the occupancy flags and the
    cell->point lookup change while sampling.
    """

    origin: tuple[float, float]
    cell_size: float
    n_rows: int
    n_cols: int
    _occupied: np.ndarray = field(init=False, repr=False)
    _point_of: np.ndarray = field(init=False, repr=False)
    _footprints: list[BaseGeometry] | None = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        n = self.n_rows * self.n_cols
        self._occupied = np.zeros(n, dtype=bool)
        self._point_of = np.full(n, -1, dtype=np.int64)

    # --- layout ---------------------------------------------------------
    @property
    def shape(self) -> tuple[int, int]:
        return self.n_rows, self.n_cols

    @property
    def n_cells(self) -> int:
        return self.n_rows * self.n_cols

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        x0, y0 = self.origin
        return x0, y0, x0 + self.n_cols * self.cell_size, y0 + self.n_rows * self.cell_size

    def row_col(self, cell_id: int) -> tuple[int, int]:
        return divmod(int(cell_id), self.n_cols)

    def footprint(self, cell_id: int) -> BaseGeometry:
        return self.footprints()[int(cell_id)]

    def footprints(self) -> list[BaseGeometry]:
        """Square polygons for every cell, indexed by cell id."""
        if self._footprints is None:
            x0, y0 = self.origin
            s = self.cell_size
            self._footprints = [
                box(x0 + c * s, y0 + r * s, x0 + (c + 1) * s, y0 + (r + 1) * s)
                for r in range(self.n_rows)
                for c in range(self.n_cols)
            ]
        return self._footprints

    def cell_containing(self, point) -> int:
        """Return the id of the cell holding ``point``.

        Points on the far edge of the grid belong to the last row/column.
        Raises ``ValueError`` for points outside the grid.
        """
        x, y = float(point[0]), float(point[1])
        xmin, ymin, xmax, ymax = self.bounds
        if not (xmin <= x <= xmax and ymin <= y <= ymax):
            raise ValueError(f"point ({x:.6g}, {y:.6g}) lies outside the grid bounds")
        c = min(int((x - xmin) // self.cell_size), self.n_cols - 1)
        r = min(int((y - ymin) // self.cell_size), self.n_rows - 1)
        return r * self.n_cols + c

    # --- occupancy ------------------------------------------------------
    @property
    def occupied(self) -> np.ndarray:
        view = self._occupied.view()
        view.flags.writeable = False
        return view

    def is_occupied(self, cell_id: int) -> bool:
        return bool(self._occupied[cell_id])

    def mark_occupied(self, cell_id: int, point_id: int = -1) -> None:
        if self._occupied[cell_id]:
            raise ValueError(f"cell {cell_id} is already occupied")
        self._occupied[cell_id] = True
        self._point_of[cell_id] = point_id

    def point_of(self, cell_id: int) -> int:
        """Id of the accepted point in ``cell_id`` or ``-1``."""
        return int(self._point_of[cell_id])

    def points_in(self, cell_ids: np.ndarray) -> np.ndarray:
        """Ids of accepted points held by ``cell_ids`` (empty cells skipped)."""
        ids = self._point_of[cell_ids]
        return ids[ids >= 0]


def build_grid(domain: Domain, min_dist: float) -> Grid:
    """Cover ``domain``'s bounding box with cells of side ``min_dist / sqrt(2)``."""
    if not (math.isfinite(min_dist) and min_dist > 0):
        raise InvalidParameter(f"min_dist must be positive and finite, got {min_dist!r}")
    xmin, ymin, xmax, ymax = domain.bounding_box()
    cell = min_dist / math.sqrt(2.0)
    n_cols = max(1, int(math.ceil((xmax - xmin) / cell)))
    n_rows = max(1, int(math.ceil((ymax - ymin) / cell)))
    return Grid(origin=(xmin, ymin), cell_size=cell, n_rows=n_rows, n_cols=n_cols)
