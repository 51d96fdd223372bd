import numpy as np
from benchmarks.functions import sphere, griewank, sine_degrees, cosine_degrees, sin_cos, PROBLEMS

def test_griewank_zero():
    assert griewank(np.zeros(5)) == 0.0

def test_sphere_zero_and_positive():
    assert sphere(np.zeros(3)) == 0.0
    assert sphere(np.array([1.0, -2.0])) == 5.0

def test_trig_functions_use_degrees():
    assert np.isclose(sine_degrees(np.array([90.0])), 1.0)
    assert np.isclose(sine_degrees(np.array([-270.0])), 1.0)
    assert np.isclose(cosine_degrees(np.array([720.0])), 1.0)
    assert np.isclose(sin_cos(np.array([np.pi / 2, 0.0])), 1.0)

def test_problem_table_is_consistent():
    for name, (f, dim, (lo, hi), _) in PROBLEMS.items():
        assert lo < hi, name
        x = np.full(dim or 2, (lo + hi) / 2)
        assert np.isfinite(f(x)), name
