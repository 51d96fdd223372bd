"""
Demonstration of the Bees Algorithm
-----------------------------------
Shows the sampler, a candidate and a parameter set, then maximises
sin(x) and cos(x) (x in degrees, 1-D) and sin(x)*cos(y) (2-D).
"""
import numpy as np

from beesearch.base import maximize
from beesearch.bees import optimize
from beesearch.candidate import Candidate
from beesearch.params import BeesParams
from beesearch.space import SearchSpace
from benchmarks.functions import sine_degrees, cosine_degrees, sin_cos


def main():
    rng = np.random.default_rng(42)

    print("=== Demo: random points in the search space ===")
    space = SearchSpace([(-10.0, 10.0), (-5.0, 5.0)], rng)
    for x in space.sample_global_batch(5):
        print(np.array2string(x, precision=6))

    c = Candidate(np.array([1.0, 2.0]), 3.14)
    print("\nDemo candidate:", c)

    params = BeesParams(
        steps=10,
        n=20,             # scout bees
        m=5,              # selected sites
        e=2,              # elite sites
        p=10,             # recruits per elite site
        q=5,              # recruits per other site
        s=0.5,            # patch size relative to the domain
        shrink_per_step=0.9,
        result_count=3,
    )
    print(f"\nParameters: steps={params.steps}, n={params.n}, "
          f"evaluations per run={params.evaluations()}")

    bounds_1d = [(-1800.0, 1800.0)]

    print("\n=== Bees Algorithm: f(x) = sin(x) ===")
    for r in optimize(1, sine_degrees, bounds_1d, maximize, params):
        print(f"x = {r[0]:.6f}  f(x) = {sine_degrees(r):.6f}")

    print("\n=== Bees Algorithm: f(x) = cos(x) ===")
    for r in optimize(1, cosine_degrees, bounds_1d, maximize, params):
        print(f"x = {r[0]:.6f}  f(x) = {cosine_degrees(r):.6f}")

    print("\n=== Bees Algorithm: f(x,y) = sin(x) * cos(y) ===")
    bounds_2d = [(-10.0, 10.0), (-10.0, 10.0)]
    for r in optimize(2, sin_cos, bounds_2d, maximize, params):
        print(f"x = ({r[0]:.6f}, {r[1]:.6f})  f(x,y) = {sin_cos(r):.6f}")


if __name__ == "__main__":
    main()
