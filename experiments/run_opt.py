# experiments/run_opt.py
import argparse
import time
from typing import Callable, List, Optional

import numpy as np

from beesearch.base import minimize, maximize
from beesearch.bees import BeesAlgorithm, DEFAULT_SEED
from beesearch.params import BeesParams, DEFAULT_OPTIONS
from benchmarks.functions import PROBLEMS
from experiments.plotting import plot_results


def format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    h, m = divmod(m, 60)
    if h > 0:
        return f"{h}h {m:02d}m {s:02d}s"
    return f"{m}m {s:02d}s"


def run(f: Callable[[np.ndarray], float], opt: BeesAlgorithm, verbose: bool = True) -> List[np.ndarray]:
    """Drive `opt` through ask/tell until done; return its result points."""
    start_time = time.time()
    try:
        while not opt.done():
            X = opt.ask()
            opt.tell([f(x) for x in X])

            st = opt.state()
            if verbose and st["iter"] > 0:
                elapsed_str = format_time(time.time() - start_time)
                print(f"[Iter {st['iter']}] Evals: {st['evals_total']} | Best: {st['f_best']:.6e} "
                      f"| Mean: {st['f_mean']:.6e} | Shrink: {st['shrink']:.4f} | Elapsed: {elapsed_str}")
    except KeyboardInterrupt:
        print("\n!!! Interrupted by user. Reporting the current population... !!!")
    return opt.results()


def build_parser() -> argparse.ArgumentParser:
    d = DEFAULT_OPTIONS
    parser = argparse.ArgumentParser(description="Bees Algorithm on a benchmark function")
    parser.add_argument("--problem", choices=sorted(PROBLEMS), default="sine")
    parser.add_argument("--D", type=int, default=None, help="Dimension (only for sphere/griewank; default 2)")
    parser.add_argument("--low", type=float, default=None, help="Lower bound for every dimension")
    parser.add_argument("--high", type=float, default=None, help="Upper bound for every dimension")
    goal = parser.add_mutually_exclusive_group()
    goal.add_argument("--maximize", dest="maximize", action="store_true", default=None)
    goal.add_argument("--minimize", dest="maximize", action="store_false")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument("--steps", type=int, default=d["steps"], help="Iterations (t)")
    parser.add_argument("--n", type=int, default=d["n"], help="Scout bees / population size")
    parser.add_argument("--m", type=int, default=d["m"], help="Selected sites")
    parser.add_argument("--e", type=int, default=d["e"], help="Elite sites")
    parser.add_argument("--p", type=int, default=d["p"], help="Recruits per elite site")
    parser.add_argument("--q", type=int, default=d["q"], help="Recruits per non-elite site")
    parser.add_argument("--s", type=float, default=d["s"], help="Patch size relative to domain span")
    parser.add_argument("--shrink", type=float, default=d["shrink_per_step"], help="Patch shrink per step")
    parser.add_argument("--r", type=int, default=d["result_count"], help="Number of returned solutions")
    parser.add_argument("--quiet", action="store_true", help="No per-iteration progress lines")
    parser.add_argument("--plot", type=str, default=None, help="Save a PNG of the returned points here")
    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    f, fixed_dim, (def_lo, def_hi), def_max = PROBLEMS[args.problem]
    if fixed_dim is not None and args.D not in (None, fixed_dim):
        parser.error(f"--problem {args.problem} is {fixed_dim}-dimensional")
    D = fixed_dim or (2 if args.D is None else args.D)
    lo = def_lo if args.low is None else args.low
    hi = def_hi if args.high is None else args.high
    bounds = [(lo, hi)] * D
    maximise = def_max if args.maximize is None else args.maximize

    options = dict(
        steps=args.steps, n=args.n, m=args.m, e=args.e, p=args.p, q=args.q,
        s=args.s, shrink_per_step=args.shrink, result_count=args.r,
    )
    try:
        params = BeesParams.from_options(options)
        opt = BeesAlgorithm(bounds, seed=args.seed, params=params,
                            comparator=maximize if maximise else minimize)
    except ValueError as exc:
        parser.error(str(exc))

    goal = "max" if maximise else "min"
    print(f"=== Bees Algorithm: {args.problem} (D={D}, {goal}, seed={args.seed}, "
          f"{params.evaluations()} evaluations) ===")
    results = run(f, opt, verbose=not args.quiet)

    for rank, x in enumerate(results, 1):
        print(f"#{rank} x = {np.array2string(x, precision=6)}  f(x) = {f(x):.6f}")

    if args.plot:
        out = plot_results(f, bounds, results, outpath=args.plot, title=f"{args.problem} ({goal})")
        if out:
            print("Saved results plot:", out)
    return results


if __name__ == "__main__":
    main()
