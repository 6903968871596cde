import numpy as np
import pytest

from cartoseed.errors import InvalidDomain, InvalidParameter
from cartoseed.geometry import Domain
from cartoseed.sampling import sequential_inhibition

from conftest import pairwise_min


def test_fixed_count(unit_square):
    res = sequential_inhibition(unit_square, 0.1, 20, rng=np.random.default_rng(0))
    assert len(res) == 20
    assert res.terminated == "max_points"
    assert res.method == "ssi"
    assert pairwise_min(res.points) >= 0.1 - 1e-12


def test_fill_until_saturated(l_shape):
    res = sequential_inhibition(l_shape, 0.2, rng=np.random.default_rng(1), max_attempts=300)
    assert res.terminated == "exhausted"
    assert l_shape.contains_xy(res.points).all()
    assert pairwise_min(res.points) >= 0.2 - 1e-12
    assert len(np.unique(res.cell_ids)) == len(res)


def test_unreachable_count_reports_max_attempts(unit_square):
    res = sequential_inhibition(unit_square, 0.3, 1000, rng=np.random.default_rng(2), max_attempts=200)
    assert res.terminated == "max_attempts"
    assert 0 < len(res) < 1000


def test_reaches_both_islands():
    dom = Domain.from_geojson({
        "type": "MultiPolygon",
        "coordinates": [
            [[[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]]],
            [[[5, 0], [6, 0], [6, 1], [5, 1], [5, 0]]],
        ],
    })
    res = sequential_inhibition(dom, 0.2, rng=np.random.default_rng(0), max_attempts=300)
    assert (res.points[:, 0] <= 1).any() and (res.points[:, 0] >= 5).any()


def test_deterministic(unit_square):
    a = sequential_inhibition(unit_square, 0.1, 30, rng=np.random.default_rng(4))
    b = sequential_inhibition(unit_square, 0.1, 30, rng=np.random.default_rng(4))
    assert np.array_equal(a.points, b.points)


def test_errors(unit_square):
    with pytest.raises(InvalidParameter):
        sequential_inhibition(unit_square, 0.1, 0, rng=np.random.default_rng(0))
    with pytest.raises(InvalidParameter):
        sequential_inhibition(unit_square, -0.1, rng=np.random.default_rng(0))
    with pytest.raises(InvalidDomain):
        sequential_inhibition(Domain.from_bounds(0, 0, 0, 1), 0.1, rng=np.random.default_rng(0))
