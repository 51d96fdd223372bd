from __future__ import annotations
from dataclasses import dataclass, fields
from numbers import Integral, Real
from typing import Dict, Optional
from .base import InvalidParametersError

# Demonstration settings; also the CLI defaults.
DEFAULT_OPTIONS: Dict = dict(
    steps=10,
    n=20,
    m=5,
    e=2,
    p=10,
    q=5,
    s=0.5,
    shrink_per_step=0.9,
    result_count=3,
)

_INT_FIELDS = ("steps", "n", "m", "e", "p", "q", "result_count")
_REAL_FIELDS = ("s", "shrink_per_step")


@dataclass(frozen=True)
class BeesParams:
    """
    Control parameters of the Bees Algorithm.

    - steps: number of iterations (t)
    - n: population size (scout bees)
    - m: selected sites per iteration, 0 < m < n
    - e: elite sites among the m, 0 < e < m
    - p: recruits per elite site
    - q: recruits per non-elite site, 0 < q < p
    - s: patch size as a fraction of the domain span, 0 < s <= 1
    - shrink_per_step: geometric patch decay per iteration, 0 < shrink <= 1
    - result_count: number of points returned (r)
    """
    steps: int
    n: int
    m: int
    e: int
    p: int
    q: int
    s: float
    shrink_per_step: float
    result_count: int

    def __post_init__(self):
        for name in _INT_FIELDS:
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, Integral):
                raise InvalidParametersError(f"{name} must be an integer, got {v!r}")
            object.__setattr__(self, name, int(v))
        for name in _REAL_FIELDS:
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, Real):
                raise InvalidParametersError(f"{name} must be a real number, got {v!r}")
            object.__setattr__(self, name, float(v))

        if self.steps <= 0:
            raise InvalidParametersError("steps must be > 0")
        if self.n <= 0:
            raise InvalidParametersError("n must be > 0")
        if self.m <= 0 or self.m >= self.n:
            raise InvalidParametersError(f"need 0 < m < n (m={self.m}, n={self.n})")
        if self.e <= 0 or self.e >= self.m:
            raise InvalidParametersError(f"need 0 < e < m (e={self.e}, m={self.m})")
        if self.q <= 0 or self.q >= self.p:
            raise InvalidParametersError(f"need 0 < q < p (q={self.q}, p={self.p})")
        if not 0.0 < self.s <= 1.0:
            raise InvalidParametersError(f"s must be in (0, 1], got {self.s}")
        if not 0.0 < self.shrink_per_step <= 1.0:
            raise InvalidParametersError(f"shrink_per_step must be in (0, 1], got {self.shrink_per_step}")
        if self.result_count <= 0:
            raise InvalidParametersError("result_count must be > 0")

    @classmethod
    def from_options(cls, options: Optional[Dict] = None) -> "BeesParams":
        """Build from an options dict; missing keys fall back to DEFAULT_OPTIONS."""
        opt = dict(options or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(opt) - known)
        if unknown:
            raise InvalidParametersError(f"unknown option(s): {', '.join(unknown)}")
        merged = {**DEFAULT_OPTIONS, **opt}
        return cls(**merged)

    def as_dict(self) -> Dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def evaluations(self) -> int:
        """Objective calls made by one full run with these parameters."""
        per_step = self.e * self.p + (self.m - self.e) * self.q + (self.n - self.m)
        return self.n + self.steps * per_step
