import numpy as np
import pytest

from cartoseed.geometry import Domain


@pytest.fixture
def rng(): return np.random.default_rng(0)

@pytest.fixture
def unit_square(): return Domain.from_bounds(0.0, 0.0, 1.0, 1.0)

@pytest.fixture
def l_shape():
    return Domain.from_coords([(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)])

@pytest.fixture
def square_with_hole():
    return Domain.from_coords(
        [(0, 0), (3, 0), (3, 3), (0, 3)],
        holes=[[(1, 1), (2, 1), (2, 2), (1, 2)]],
    )


def pairwise_min(pts):
    pts = np.asarray(pts, float)
    if len(pts) < 2:
        return np.inf
    d = np.linalg.norm(pts[None, :, :] - pts[:, None, :], axis=-1)
    np.fill_diagonal(d, np.inf)
    return float(d.min())
