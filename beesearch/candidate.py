from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import numpy as np


@dataclass(frozen=True)
class Candidate:
    """
    An evaluated point: position `x` and objective value `value`.

    The position is stored as a tuple of floats; `point()` hands out a new
    array on every call, so callers can never write into a candidate.
    """
    x: Tuple[float, ...]
    value: float

    def __post_init__(self):
        object.__setattr__(self, "x", tuple(float(v) for v in np.ravel(self.x)))
        object.__setattr__(self, "value", float(self.value))

    @property
    def dimension(self) -> int:
        return len(self.x)

    def point(self) -> np.ndarray:
        return np.array(self.x, dtype=float)

    def __str__(self) -> str:
        return f"x={list(self.x)}  f={self.value}"
