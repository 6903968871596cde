import numpy as np
import pytest
from shapely.geometry import box

import cartoseed
from cartoseed import Domain, InvalidDomain, InvalidParameter, sample, sample_from_config, sample_result

from conftest import pairwise_min


def test_sample_unit_square_scenario():
    pts = sample(box(0, 0, 1, 1), 0.1, k=30, seed=123)
    assert isinstance(pts, np.ndarray) and pts.shape[1] == 2
    assert 60 <= len(pts) <= 90
    assert pairwise_min(pts) >= 0.1 - 1e-12


def test_sample_accepts_ring_and_geojson():
    ring = [(0, 0), (2, 0), (2, 1), (0, 1)]
    a = sample(ring, 0.3, seed=1)
    gj = {"type": "Polygon", "coordinates": [[[0, 0], [2, 0], [2, 1], [0, 1], [0, 0]]]}
    b = sample(gj, 0.3, seed=1)
    assert np.array_equal(a, b)


def test_seed_and_rng_are_equivalent():
    a = sample(box(0, 0, 1, 1), 0.2, seed=5)
    b = sample(box(0, 0, 1, 1), 0.2, rng=np.random.default_rng(5))
    assert np.array_equal(a, b)


def test_seed_and_rng_together_rejected():
    with pytest.raises(InvalidParameter):
        sample(box(0, 0, 1, 1), 0.2, seed=5, rng=np.random.default_rng(5))


def test_unknown_method():
    with pytest.raises(InvalidParameter):
        sample(box(0, 0, 1, 1), 0.2, method="grid")


def test_ssi_method_and_n():
    pts = sample(box(0, 0, 1, 1), 0.1, method="ssi", n=15, seed=0)
    assert len(pts) == 15
    pts = sample(box(0, 0, 1, 1), 0.1, n=15, seed=0)
    assert len(pts) == 15


def test_zero_area_domain():
    with pytest.raises(InvalidDomain):
        sample(box(0, 0, 1, 0), 0.1, seed=0)
    with pytest.raises(ValueError):  # InvalidDomain is a ValueError
        sample(box(0, 0, 0, 0), 0.1, seed=0)


def test_bad_k():
    with pytest.raises(InvalidParameter):
        sample(box(0, 0, 1, 1), 0.1, k=0)


def test_sample_result_fields():
    res = sample_result(Domain.from_bounds(0, 0, 1, 1), 0.25, seed=0, workers=2)
    assert res.terminated == "exhausted"
    assert res.rounds == len(res)
    assert res.points.shape == (len(res), 2)


def test_sample_from_config_dict_matches_direct_call():
    dom = Domain.from_bounds(0, 0, 1, 1)
    res = sample_from_config(dom, {"min_dist": 0.2, "seed": 3})
    assert np.array_equal(res.points, sample(dom, 0.2, seed=3))
    res2 = sample_from_config(dom, {"sampling": {"min_dist": 0.2, "seed": 3}})
    assert np.array_equal(res.points, res2.points)


def test_sample_from_config_rejects_unknown_keys():
    with pytest.raises(ValueError):
        sample_from_config(Domain.from_bounds(0, 0, 1, 1), {"min_dist": 0.2, "radius": 1})


def test_sample_from_config_yaml(tmp_path):
    p = tmp_path / "sampling.yaml"
    p.write_text("sampling:\n  min_dist: 0.25\n  method: ssi\n  n: 4\n  seed: 0\n")
    res = sample_from_config(Domain.from_bounds(0, 0, 1, 1), p)
    assert len(res) == 4
    assert res.method == "ssi"


def test_primitives_exported():
    for name in ("build_grid", "build_neighbor_index", "generate_candidates"):
        assert callable(getattr(cartoseed, name))


def test_ssi_rejects_max_rounds():
    with pytest.raises(InvalidParameter):
        sample_result(box(0, 0, 1, 1), 0.2, method="ssi", max_rounds=1, seed=0)
