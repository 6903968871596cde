"""Quick-look plot of a sampling run."""
from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Rectangle

from .geometry.domain import Domain
from .sampling.grid import Grid

__all__ = ["plot_samples"]


def _draw_outline(ax, domain: Domain) -> None:
    geom = domain.geometry
    polys = getattr(geom, "geoms", [geom])
    for poly in polys:
        x, y = poly.exterior.xy
        ax.plot(x, y, color="#333333", lw=1.0)
        for ring in poly.interiors:
            x, y = ring.xy
            ax.plot(x, y, color="#333333", lw=0.8, ls="--")


def plot_samples(domain: Domain, points: np.ndarray, ax=None, grid: Grid | None = None, radius: float | None = None):
    """Draw ``domain``'s outline and ``points``; optionally the occupancy grid
    and a circle of ``radius / 2`` around each point. Returns the axes."""
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))
    _draw_outline(ax, domain)

    if grid is not None:
        s = grid.cell_size
        x0, y0 = grid.origin
        occ = grid.occupied
        for cid in range(grid.n_cells):
            r, c = grid.row_col(cid)
            ax.add_patch(Rectangle(
                (x0 + c * s, y0 + r * s), s, s,
                fill=bool(occ[cid]), facecolor="#dde8f5", edgecolor="#cccccc", lw=0.3,
            ))

    pts = np.asarray(points, float).reshape(-1, 2)
    ax.scatter(pts[:, 0], pts[:, 1], s=6, color="#1f4e8c", zorder=3)
    if radius is not None:
        for x, y in pts:
            ax.add_patch(plt.Circle((x, y), radius / 2.0, fill=False, color="#1f4e8c", lw=0.4, alpha=0.6))

    ax.set_aspect("equal")
    ax.set_axis_off()
    return ax
