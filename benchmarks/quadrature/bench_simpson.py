"""Benchmark Simpson quadrature.

Times the sample-based integrator on uniform and non-uniform grids against
scipy.integrate.simpson, and the callable integrator across subdivision
counts.
"""

import time

import numpy as np
import scipy.integrate
import torch

from torchsimpson.quadrature import simpson, simpson_quad


def _time(fn, n_iterations: int) -> float:
    """Average wall time of ``fn()`` in milliseconds."""
    # Warmup
    for _ in range(3):
        fn()

    start = time.perf_counter()
    for _ in range(n_iterations):
        fn()

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000


def benchmark_samples(n_points: int, n_iterations: int = 50) -> dict:
    """Benchmark sample-based integration at given number of points.

    Parameters
    ----------
    n_points : int
        Number of sample points.
    n_iterations : int
        Number of iterations for timing.

    Returns
    -------
    dict
        Average time per call in milliseconds, keyed by method.
    """
    x = torch.linspace(0, 1, n_points, dtype=torch.float64) ** 2
    y = torch.sin(10 * x)
    x_np = x.numpy()
    y_np = y.numpy()
    dx = 1.0 / (n_points - 1)

    return {
        "uniform": _time(lambda: simpson(y, dx=dx), n_iterations),
        "nonuniform": _time(lambda: simpson(y, x), n_iterations),
        "scipy": _time(
            lambda: scipy.integrate.simpson(y_np, x=x_np), n_iterations
        ),
    }


def benchmark_callable(n: int, n_iterations: int = 10) -> float:
    """Benchmark callable integration with ``n`` subintervals (ms per call)."""
    return _time(lambda: simpson_quad(torch.sin, 0.0, np.pi, n), n_iterations)


def main():
    """Run Simpson benchmarks."""
    print("Sample-based Simpson Benchmark")
    print("=" * 70)
    print(
        f"{'Points':>10} {'Uniform (ms)':>16} {'Nonuniform (ms)':>18} {'scipy (ms)':>14}"
    )
    print("-" * 70)

    for n_points in [101, 1_000, 10_000, 100_000, 1_000_000]:
        for parity in (n_points, n_points + 1):
            ms = benchmark_samples(parity)
            print(
                f"{parity:>10} {ms['uniform']:>16.4f} {ms['nonuniform']:>18.4f} {ms['scipy']:>14.4f}"
            )

    print()
    print("Callable Simpson Benchmark")
    print("=" * 40)
    print(f"{'N':>10} {'Time (ms)':>16}")
    print("-" * 40)

    for n in [1, 10, 100, 1_000]:
        print(f"{n:>10} {benchmark_callable(n):>16.4f}")

    print()
    print("Notes:")
    print("- Even point counts add one interpolated trailing interval")
    print("- simpson_quad calls the integrand 3 * N times")


if __name__ == "__main__":
    main()
