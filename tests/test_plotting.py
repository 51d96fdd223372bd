import os

import numpy as np
import pytest

pytest.importorskip("matplotlib")

from experiments.plotting import plot_results
from benchmarks.functions import sine_degrees, sin_cos, sphere


def test_plot_1d(tmp_path):
    out = plot_results(sine_degrees, [(-360.0, 360.0)], [np.array([90.0]), np.array([-270.0])],
                       outpath=str(tmp_path / "sine.png"))
    assert os.path.isfile(out)


def test_plot_2d(tmp_path):
    out = plot_results(sin_cos, [(-3.0, 3.0)] * 2, [np.array([1.5, 0.0])],
                       outpath=str(tmp_path / "nested" / "sincos.png"))
    assert os.path.isfile(out)


def test_plot_higher_dimension_slices(tmp_path):
    out = plot_results(sphere, [(-1.0, 1.0)] * 4, [np.zeros(4), np.full(4, 0.5)],
                       outpath=str(tmp_path / "sphere4.png"))
    assert os.path.isfile(out)
