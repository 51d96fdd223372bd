from __future__ import annotations
from functools import cmp_to_key
from typing import Callable, List, Optional, Dict, Tuple
import math
import numpy as np

Bounds = List[Tuple[float, float]]
Comparator = Callable[[float, float], float]


class InvalidParametersError(ValueError):
    """A BeesParams invariant does not hold."""


class DimensionMismatchError(ValueError):
    """Declared dimension and bounds (or point) length disagree."""


class InvalidBoundsError(ValueError):
    """Bounds are empty, non-finite or have low >= high somewhere."""


def project(x: np.ndarray, bounds: Bounds) -> np.ndarray:
    lo = np.array([b[0] for b in bounds], dtype=float)
    hi = np.array([b[1] for b in bounds], dtype=float)
    return np.minimum(np.maximum(x, lo), hi)


def minimize(a: float, b: float) -> float:
    """Ascending order: smaller objective values rank first."""
    return (a > b) - (a < b)


def maximize(a: float, b: float) -> float:
    """Descending order: larger objective values rank first."""
    return (a < b) - (a > b)


def rank_key(comparator: Comparator):
    """
    Sort key for objective values under `comparator`.
    NaN always ranks last, whatever the comparator says.
    """
    cmp_key = cmp_to_key(comparator)

    def key(value: float):
        if math.isnan(value):
            return (1, cmp_key(0.0))
        return (0, cmp_key(value))

    return key


class Optimizer:
    """
    Solver-agnostic ask/tell interface to enable clean separation between
    candidate proposal (ask) and objective evaluation (tell).
    """
    def __init__(self, bounds: Bounds, seed: int = 0, options: Optional[Dict] = None,
                 rng: Optional[np.random.Generator] = None):
        self.bounds: Bounds = list(bounds)
        self.D: int = len(self.bounds)
        self.rng = rng if rng is not None else np.random.default_rng(int(seed))
        self.options: Dict = options or {}

    def ask(self) -> List[np.ndarray]:
        raise NotImplementedError

    def tell(self, fitness: List[float]):
        raise NotImplementedError

    def best(self):
        raise NotImplementedError

    def state(self) -> Dict:
        return {}

    def done(self) -> bool:
        return False
