from __future__ import annotations
from typing import Iterator, Sequence
import numpy as np
from .base import Bounds, project, DimensionMismatchError, InvalidBoundsError

PATCH_EPS = 1e-12


def _as_bounds_array(bounds: Bounds) -> np.ndarray:
    try:
        b = np.array(bounds, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidBoundsError(f"bounds must be a list of (low, high) pairs: {exc}") from exc
    if b.ndim != 2 or b.shape[0] == 0 or b.shape[1] != 2:
        raise InvalidBoundsError(f"bounds must be a non-empty list of (low, high) pairs, got shape {b.shape}")
    if not np.all(np.isfinite(b)):
        raise InvalidBoundsError("bounds must be finite")
    bad = np.flatnonzero(b[:, 0] >= b[:, 1])
    if bad.size:
        i = int(bad[0])
        raise InvalidBoundsError(f"bounds[{i}] = ({b[i, 0]}, {b[i, 1]}) needs low < high")
    return b


class SearchSpace:
    """
    Box-shaped search domain plus the random source used to sample it.

    - global samples: each coordinate uniform in [low_i, high_i)
    - patch samples: uniform inside a local box from `patch_bounds`
    - the bounds are copied on construction; the generator is shared with the caller
    """
    def __init__(self, bounds: Bounds, rng: np.random.Generator):
        b = _as_bounds_array(bounds)
        self._lo = b[:, 0].copy()
        self._hi = b[:, 1].copy()
        self._span = self._hi - self._lo
        self.bounds: Bounds = [(float(lo), float(hi)) for lo, hi in b]
        self.rng = rng

    def dimension(self) -> int:
        return len(self._lo)

    def low(self, i: int) -> float:
        return float(self._lo[i])

    def high(self, i: int) -> float:
        return float(self._hi[i])

    def span(self, i: int) -> float:
        return float(self._span[i])

    def sample_global(self) -> np.ndarray:
        return self.rng.uniform(self._lo, self._hi)

    def sample_global_batch(self, count: int) -> Iterator[np.ndarray]:
        """Lazily yield `count` independent global samples."""
        for _ in range(int(count)):
            yield self.sample_global()

    def sample_within(self, local_bounds: np.ndarray) -> np.ndarray:
        lb = np.asarray(local_bounds, dtype=float)
        if lb.shape != (self.dimension(), 2):
            raise DimensionMismatchError(
                f"local bounds have shape {lb.shape}, expected ({self.dimension()}, 2)"
            )
        return self.rng.uniform(lb[:, 0], lb[:, 1])

    def patch_bounds(self, center: Sequence[float], relative_size: float, shrink_factor: float) -> np.ndarray:
        """
        Local box around `center`, returned as a (D, 2) array of [lo, hi] rows.

        Half-width per dimension is span * relative_size * shrink_factor / 2,
        clamped to the global box. A row that collapses (hi <= lo) is rebuilt
        around the clamped center, PATCH_EPS wide on each side.
        """
        c = np.asarray(center, dtype=float)
        if c.shape != (self.dimension(),):
            raise DimensionMismatchError(
                f"center has shape {c.shape}, expected ({self.dimension()},)"
            )
        half = self._span * float(relative_size) * float(shrink_factor) / 2.0
        lo = np.maximum(c - half, self._lo)
        hi = np.minimum(c + half, self._hi)

        collapsed = hi <= lo
        if np.any(collapsed):
            mid = project(c, self.bounds)
            # below float spacing at |mid|, 1e-12 is a no-op; step to the neighbouring floats instead
            lo_eps = np.minimum(mid - PATCH_EPS, np.nextafter(mid, -np.inf))
            hi_eps = np.maximum(mid + PATCH_EPS, np.nextafter(mid, np.inf))
            lo = np.where(collapsed, np.maximum(self._lo, lo_eps), lo)
            hi = np.where(collapsed, np.minimum(self._hi, hi_eps), hi)

        return np.column_stack([lo, hi])
