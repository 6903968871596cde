import math

import numpy as np
import pytest

from cartoseed.errors import InvalidParameter
from cartoseed.geometry import Domain
from cartoseed.sampling import build_grid


def test_cell_size_and_shape(unit_square):
    grid = build_grid(unit_square, 0.1)
    assert grid.cell_size == pytest.approx(0.1 / math.sqrt(2))
    assert grid.shape == (15, 15)
    assert grid.n_cells == 225
    xmin, ymin, xmax, ymax = grid.bounds
    assert (xmin, ymin) == (0.0, 0.0)
    assert xmax >= 1.0 and ymax >= 1.0


def test_cell_diagonal_equals_min_dist(unit_square):
    grid = build_grid(unit_square, 0.3)
    assert grid.cell_size * math.sqrt(2) == pytest.approx(0.3)


def test_thin_domain_has_one_row():
    grid = build_grid(Domain.from_bounds(0, 0, 1, 0.05), 0.2)
    assert grid.shape == (1, 8)


def test_cell_containing(unit_square):
    grid = build_grid(unit_square, 0.1)
    assert grid.cell_containing((0.0, 0.0)) == 0
    s = grid.cell_size
    assert grid.cell_containing((1.5 * s, 0.5 * s)) == 1
    assert grid.cell_containing((0.5 * s, 1.5 * s)) == grid.n_cols
    # far edge maps into the last row/column
    assert grid.cell_containing(grid.bounds[2:]) == grid.n_cells - 1
    with pytest.raises(ValueError):
        grid.cell_containing((-0.01, 0.5))
    with pytest.raises(ValueError):
        grid.cell_containing((0.5, 2.0))


def test_footprints_match_cell_lookup(unit_square):
    grid = build_grid(unit_square, 0.25)
    for cid, fp in enumerate(grid.footprints()):
        c = fp.centroid
        assert grid.cell_containing((c.x, c.y)) == cid
        assert fp.area == pytest.approx(grid.cell_size ** 2)
    assert grid.footprint(3).equals(grid.footprints()[3])


def test_occupancy_flips_once(unit_square):
    grid = build_grid(unit_square, 0.1)
    assert not grid.is_occupied(7)
    assert grid.point_of(7) == -1
    grid.mark_occupied(7, point_id=0)
    assert grid.is_occupied(7)
    assert grid.point_of(7) == 0
    assert grid.occupied.sum() == 1
    with pytest.raises(ValueError):
        grid.mark_occupied(7, point_id=1)
    with pytest.raises(ValueError):
        grid.occupied[0] = True  # read-only view
    assert grid.points_in(np.array([6, 7, 8])).tolist() == [0]


def test_bad_min_dist(unit_square):
    with pytest.raises(InvalidParameter):
        build_grid(unit_square, 0.0)
    with pytest.raises(InvalidParameter):
        build_grid(unit_square, float("inf"))
