from __future__ import annotations
from typing import Callable, List, Optional, Dict, Tuple
import numpy as np
from .base import (
    Optimizer, Bounds, Comparator, DimensionMismatchError,
    minimize, rank_key,
)
from .candidate import Candidate
from .params import BeesParams
from .space import SearchSpace

DEFAULT_SEED = 123


class BeesAlgorithm(Optimizer):
    """
    Bees Algorithm (continuous, box-bounded).

    - initial population: n scouts sampled over the whole domain
    - each iteration ranks the population and keeps the best m as sites
    - elite sites (first e) recruit p bees, the others q bees, inside a patch
      of relative size s * shrink around the site
    - each site passes on its single best recruit; n - m fresh scouts fill the rest
    - the shrink factor decays by shrink_per_step after every iteration

    Parameters come from `params`, or from `options` via BeesParams.from_options.
    `comparator(a, b) < 0` means a is better, so the same loop minimises or maximises.
    """
    def __init__(self, bounds: Bounds, seed: int = 0, options: Optional[Dict] = None,
                 params: Optional[BeesParams] = None, comparator: Comparator = minimize,
                 rng: Optional[np.random.Generator] = None):
        super().__init__(bounds, seed, options, rng=rng)
        self.params: BeesParams = params if params is not None else BeesParams.from_options(self.options)
        self.comparator: Comparator = comparator
        self._key = rank_key(comparator)

        self.space = SearchSpace(self.bounds, self.rng)
        self.bounds = self.space.bounds

        self.population: List[Candidate] = []
        self.shrink: float = 1.0
        self.iter: int = 0
        self.evals_total: int = 0
        self.gbest: Optional[Candidate] = None

        self._asked: List[np.ndarray] = []
        # (start, stop) slice of the asked batch belonging to each site
        self._site_slices: List[Tuple[int, int]] = []
        self._state_phase = "ask"

    def _ranked(self, candidates: List[Candidate]) -> List[Candidate]:
        return sorted(candidates, key=lambda c: self._key(c.value))

    def _better(self, a: Candidate, b: Candidate) -> bool:
        return self._key(a.value) < self._key(b.value)

    def _recruit(self, center: Candidate, bees: int) -> List[np.ndarray]:
        patch = self.space.patch_bounds(center.x, self.params.s, self.shrink)
        return [self.space.sample_within(patch) for _ in range(bees)]

    def ask(self) -> List[np.ndarray]:
        if self._state_phase != "ask":
            raise RuntimeError("Call tell() before ask()")
        if self.done():
            raise RuntimeError(f"Optimisation finished after {self.params.steps} steps")

        P = self.params
        self._site_slices = []

        if not self.population:
            # Initial scouts
            self._asked = list(self.space.sample_global_batch(P.n))
        else:
            sites = self._ranked(self.population)[:P.m]
            X: List[np.ndarray] = []
            for rank, center in enumerate(sites):
                bees = P.p if rank < P.e else P.q
                start = len(X)
                X.extend(self._recruit(center, bees))
                self._site_slices.append((start, len(X)))
            X.extend(self.space.sample_global_batch(P.n - P.m))
            self._asked = X

        self._state_phase = "tell"
        return [x.copy() for x in self._asked]

    def tell(self, fitness: List[float]):
        if self._state_phase != "tell":
            raise RuntimeError("Call ask() before tell()")
        if len(fitness) != len(self._asked):
            raise ValueError(f"Expected {len(self._asked)} fitness values, got {len(fitness)}")

        evaluated = [Candidate(x, f) for x, f in zip(self._asked, fitness)]
        self.evals_total += len(evaluated)
        for c in evaluated:
            if self.gbest is None or self._better(c, self.gbest):
                self.gbest = c

        if not self._site_slices:
            self.population = evaluated
        else:
            # 1) one survivor per site: its best recruit
            next_pop = [self._ranked(evaluated[a:b])[0] for a, b in self._site_slices]
            # 2) every scout survives
            scouts_from = self._site_slices[-1][1]
            next_pop.extend(evaluated[scouts_from:])
            assert len(next_pop) == self.params.n, "population size drifted"

            self.population = next_pop
            self.shrink *= self.params.shrink_per_step
            self.iter += 1

        self._asked = []
        self._site_slices = []
        self._state_phase = "ask"

    def done(self) -> bool:
        return self.iter >= self.params.steps

    def results(self, count: Optional[int] = None) -> List[np.ndarray]:
        """Best `count` (default result_count) points of the current population, best first."""
        r = self.params.result_count if count is None else int(count)
        return [c.point() for c in self._ranked(self.population)[:r]]

    def ranked_population(self) -> List[Candidate]:
        return self._ranked(self.population)

    def best(self):
        if self.gbest is None:
            return {"x": None, "f": np.nan}
        return {"x": self.gbest.point(), "f": self.gbest.value}

    def state(self) -> Dict:
        values = np.array([c.value for c in self.population], dtype=float)
        finite = values[np.isfinite(values)]
        ranked = self._ranked(self.population)
        return {
            "iter": self.iter,
            "evals_total": self.evals_total,
            "shrink": self.shrink,
            "f_best": ranked[0].value if ranked else np.nan,
            "f_mean": float(np.mean(finite)) if finite.size else np.nan,
            "f_std": float(np.std(finite)) if finite.size else np.nan,
            "gbest_f": self.gbest.value if self.gbest is not None else np.nan,
            "gbest_x": self.gbest.point() if self.gbest is not None else None,
        }


def optimize(dimension: int, objective: Callable[[np.ndarray], float], bounds: Bounds,
             comparator: Comparator, params: BeesParams, seed: int = DEFAULT_SEED,
             rng: Optional[np.random.Generator] = None) -> List[np.ndarray]:
    """
    Run the Bees Algorithm to completion and return the best
    `params.result_count` points, ordered best first under `comparator`.

    Randomness comes from `rng` when given, otherwise from a fresh generator
    seeded with `seed`; equal inputs give identical results.
    """
    if dimension != len(bounds):
        raise DimensionMismatchError(
            f"dimension {dimension} does not match {len(bounds)} bounds"
        )
    opt = BeesAlgorithm(bounds, seed=seed, params=params, comparator=comparator, rng=rng)
    while not opt.done():
        X = opt.ask()
        opt.tell([objective(x) for x in X])
    return opt.results()
