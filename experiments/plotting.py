import os
from typing import Callable, List, Sequence, Tuple

import numpy as np
try:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
except ImportError:
    plt = None

BASE_FIG_DIR = os.path.join("data", "figures")


def _ensure_dir(path: str):
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)


def plot_results_1d(objective: Callable[[np.ndarray], float], bounds: Sequence[Tuple[float, float]],
                    points: List[np.ndarray], outpath: str = None, title: str = None, samples: int = 2000):
    """
    Objective curve over the 1-D domain with the returned points on top.
    Rank 1 is drawn in red, the rest in black.
    """
    if plt is None:
        print("Skipping plot_results_1d (matplotlib missing)")
        return None

    lo, hi = bounds[0]
    xs = np.linspace(lo, hi, samples)
    ys = np.array([objective(np.array([x])) for x in xs])

    fig = plt.figure()
    ax = plt.gca()
    ax.plot(xs, ys, linewidth=0.8)
    if points:
        px = np.array([p[0] for p in points])
        py = np.array([objective(p) for p in points])
        ax.scatter(px[1:], py[1:], s=20, c="k", zorder=3, label="results")
        ax.scatter(px[:1], py[:1], s=40, c="r", zorder=4, label="best")
        ax.legend()
    ax.set_xlabel("x")
    ax.set_ylabel("f(x)")
    ax.grid(True, linestyle=":")
    ax.set_title(title or "Bees Algorithm results (D=1)")

    if outpath is None:
        outpath = os.path.join(BASE_FIG_DIR, "results_1d.png")
    _ensure_dir(outpath)
    fig.savefig(outpath, dpi=300, bbox_inches="tight")
    plt.close(fig)
    return outpath


def plot_results_2d(objective: Callable[[np.ndarray], float], bounds: Sequence[Tuple[float, float]],
                    points: List[np.ndarray], outpath: str = None, title: str = None, grid: int = 200):
    """Filled contour of the objective over the first two dimensions with the returned points."""
    if plt is None:
        print("Skipping plot_results_2d (matplotlib missing)")
        return None

    (x_lo, x_hi), (y_lo, y_hi) = bounds[0], bounds[1]
    gx = np.linspace(x_lo, x_hi, grid)
    gy = np.linspace(y_lo, y_hi, grid)
    XX, YY = np.meshgrid(gx, gy)
    ZZ = np.array([[objective(np.array([x, y])) for x in gx] for y in gy])

    fig = plt.figure()
    ax = plt.gca()
    cs = ax.contourf(XX, YY, ZZ, levels=30, cmap="viridis")
    fig.colorbar(cs, ax=ax)
    if points:
        pts = np.stack(points, axis=0)
        ax.scatter(pts[1:, 0], pts[1:, 1], s=20, c="w", edgecolors="k", zorder=3)
        ax.scatter(pts[:1, 0], pts[:1, 1], s=60, c="r", marker="*", zorder=4)
    ax.set_xlabel("x1")
    ax.set_ylabel("x2")
    ax.set_title(title or "Bees Algorithm results (D=2)")

    if outpath is None:
        outpath = os.path.join(BASE_FIG_DIR, "results_2d.png")
    _ensure_dir(outpath)
    fig.savefig(outpath, dpi=300, bbox_inches="tight")
    plt.close(fig)
    return outpath


def plot_results(objective, bounds, points, outpath: str = None, title: str = None):
    """Dispatch on dimension; D > 2 plots the first two coordinates with the rest fixed at the best point."""
    D = len(bounds)
    if D == 1:
        return plot_results_1d(objective, bounds, points, outpath, title)
    if D == 2:
        return plot_results_2d(objective, bounds, points, outpath, title)

    anchor = np.array(points[0], dtype=float) if points else np.array([(lo + hi) / 2 for lo, hi in bounds])

    def sliced(xy: np.ndarray) -> float:
        x = anchor.copy()
        x[:2] = xy
        return objective(x)

    return plot_results_2d(sliced, bounds[:2], [np.asarray(p)[:2] for p in points], outpath,
                           title or f"Bees Algorithm results (D={D}, slice through best)")
