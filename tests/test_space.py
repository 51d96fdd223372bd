import types

import numpy as np
import pytest

from beesearch.base import DimensionMismatchError, InvalidBoundsError
from beesearch.space import SearchSpace, PATCH_EPS


def make_space(bounds, seed=0):
    return SearchSpace(bounds, np.random.default_rng(seed))


def test_accessors():
    space = make_space([(-10.0, 10.0), (-5.0, 5.0)])
    assert space.dimension() == 2
    assert space.low(1) == -5.0
    assert space.high(0) == 10.0
    assert space.span(1) == 10.0


def test_bounds_are_copied():
    bounds = [[-1.0, 1.0], [0.0, 2.0]]
    space = make_space(bounds)
    bounds[0][0] = 50.0
    assert space.low(0) == -1.0


@pytest.mark.parametrize("bounds", [
    [],
    [(1.0, 1.0)],
    [(0.0, 1.0), (2.0, -2.0)],
    [(0.0, np.inf)],
    [(np.nan, 1.0)],
    [(0.0, 1.0, 2.0)],
    [(0.0, 1.0), (0.0,)],
])
def test_malformed_bounds_are_rejected(bounds):
    with pytest.raises(InvalidBoundsError):
        make_space(bounds)


def test_global_samples_stay_in_bounds():
    bounds = [(-10.0, 10.0), (-5.0, 5.0), (100.0, 100.5)]
    space = make_space(bounds, seed=3)
    lo = np.array([b[0] for b in bounds])
    hi = np.array([b[1] for b in bounds])
    for _ in range(500):
        x = space.sample_global()
        assert x.shape == (3,)
        assert np.all(x >= lo) and np.all(x <= hi)


def test_global_batch_is_lazy_and_finite():
    space = make_space([(0.0, 1.0)])
    batch = space.sample_global_batch(4)
    assert isinstance(batch, types.GeneratorType)
    pts = list(batch)
    assert len(pts) == 4
    assert list(batch) == []
    assert len({float(p[0]) for p in pts}) == 4


def test_sample_within_local_bounds():
    space = make_space([(-10.0, 10.0), (-10.0, 10.0)], seed=1)
    local = np.array([[1.0, 1.5], [-2.0, -1.0]])
    for _ in range(200):
        x = space.sample_within(local)
        assert 1.0 <= x[0] <= 1.5
        assert -2.0 <= x[1] <= -1.0


def test_sample_within_rejects_wrong_dimension():
    space = make_space([(-10.0, 10.0), (-10.0, 10.0)])
    with pytest.raises(DimensionMismatchError):
        space.sample_within(np.array([[0.0, 1.0]]))


def test_same_seed_same_samples():
    a = make_space([(-3.0, 3.0)] * 4, seed=9)
    b = make_space([(-3.0, 3.0)] * 4, seed=9)
    for xa, xb in zip(a.sample_global_batch(10), b.sample_global_batch(10)):
        assert np.array_equal(xa, xb)


def test_patch_bounds_interior():
    space = make_space([(-10.0, 10.0), (0.0, 4.0)])
    pb = space.patch_bounds([0.0, 2.0], 0.5, 1.0)
    # half-width = span * 0.5 / 2
    assert np.allclose(pb, [[-5.0, 5.0], [1.0, 3.0]])


def test_patch_bounds_shrink():
    space = make_space([(-10.0, 10.0)])
    pb = space.patch_bounds([2.0], 0.5, 0.5)
    assert np.allclose(pb, [[-0.5, 4.5]])


def test_patch_bounds_clamped_at_edges():
    space = make_space([(-10.0, 10.0), (-10.0, 10.0)])
    pb = space.patch_bounds([-9.0, 10.0], 0.5, 1.0)
    assert np.allclose(pb, [[-10.0, -4.0], [5.0, 10.0]])


def test_patch_bounds_collapsed_width_is_widened():
    space = make_space([(-10.0, 10.0)])
    pb = space.patch_bounds([3.0], 0.5, 1e-300)
    lo, hi = pb[0]
    assert lo < 3.0 < hi
    assert np.isclose(hi - lo, 2 * PATCH_EPS, rtol=1e-3)


def test_patch_bounds_center_outside_domain():
    space = make_space([(-1.0, 1.0), (-1.0, 1.0)])
    pb = space.patch_bounds([5.0, -7.0], 0.1, 1.0)
    assert np.all(pb[:, 0] < pb[:, 1])
    assert np.all(pb[:, 0] >= -1.0) and np.all(pb[:, 1] <= 1.0)
    assert np.isclose(pb[0, 1], 1.0) and np.isclose(pb[1, 0], -1.0)


def test_patch_bounds_large_magnitude_never_collapses():
    # 1e-12 is below the float spacing near 1e6
    space = make_space([(1e6, 2e6)])
    for c in (1e6, 1.5e6, 2e6):
        lo, hi = space.patch_bounds([c], 0.5, 1e-300)[0]
        assert 1e6 <= lo < hi <= 2e6


def test_patch_bounds_property_over_random_centers():
    rng = np.random.default_rng(11)
    bounds = [(-1800.0, 1800.0), (0.0, 1e-3), (-5.0, 5.0)]
    space = make_space(bounds)
    lo_g = np.array([b[0] for b in bounds])
    hi_g = np.array([b[1] for b in bounds])
    for _ in range(300):
        center = rng.uniform(lo_g - 1.0, hi_g + 1.0)
        s = rng.uniform(1e-6, 1.0)
        shrink = rng.choice([1.0, 0.5, 1e-20, 1e-300])
        pb = space.patch_bounds(center, s, shrink)
        assert np.all(pb[:, 0] < pb[:, 1])
        assert np.all(pb[:, 0] >= lo_g) and np.all(pb[:, 1] <= hi_g)


def test_patch_bounds_rejects_wrong_center_dimension():
    space = make_space([(-1.0, 1.0), (-1.0, 1.0)])
    with pytest.raises(DimensionMismatchError):
        space.patch_bounds([0.0], 0.5, 1.0)
