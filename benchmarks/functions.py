import numpy as np


def sphere(x: np.ndarray) -> float:
    """Sum of squares. Minimum 0 at x = 0."""
    x = np.asarray(x, dtype=float)
    return float(np.dot(x, x))


def griewank(x: np.ndarray) -> float:
    """
    Griewank benchmark function.
    Global minimum at x = 0, f = 0. Bounds typically [-600, 600]^D.
    """
    x = np.asarray(x, dtype=float)
    i = np.arange(1, x.size + 1, dtype=float)
    return float(1.0 + np.sum(x * x) / 4000.0 - np.prod(np.cos(x / np.sqrt(i))))


def sine_degrees(x: np.ndarray) -> float:
    """sin of the first coordinate read in degrees; maxima at 90 + 360k."""
    return float(np.sin(np.radians(np.asarray(x, dtype=float)[0])))


def cosine_degrees(x: np.ndarray) -> float:
    """cos of the first coordinate read in degrees; maxima at 360k."""
    return float(np.cos(np.radians(np.asarray(x, dtype=float)[0])))


def sin_cos(x: np.ndarray) -> float:
    """sin(x) * cos(y) on the first two coordinates."""
    x = np.asarray(x, dtype=float)
    return float(np.sin(x[0]) * np.cos(x[1]))


# name -> (function, dimension or None if any, default bounds per dimension, maximise?)
PROBLEMS = {
    "sphere": (sphere, None, (-5.0, 5.0), False),
    "griewank": (griewank, None, (-600.0, 600.0), False),
    "sine": (sine_degrees, 1, (-1800.0, 1800.0), True),
    "cosine": (cosine_degrees, 1, (-1800.0, 1800.0), True),
    "sincos": (sin_cos, 2, (-10.0, 10.0), True),
}
