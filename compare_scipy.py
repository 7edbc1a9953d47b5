"""
Compare PyGridApprox against scipy.interpolate on identical sample sets.

Tests:
1. Accuracy: natural cubic spline vs scipy CubicSpline(bc_type="natural"),
   linear vs numpy.interp, on irregular samples of sin(x)
2. Convergence: max error as the number of samples grows
3. Timing: build time and per-query time (scalar and batch)

Usage:
    python compare_scipy.py

NOTE: This script is for local benchmarking only. It is NOT part of the
test suite.
"""

import math
import time

import numpy as np
from scipy.interpolate import CubicSpline

from pygridapprox import CubicInterpolation, LinearInterpolation


# ============================================================================
# Helpers
# ============================================================================

def irregular_samples(f, lo, hi, n, seed=42):
    """Sample f at n sorted random points on [lo, hi], endpoints included."""
    rng = np.random.default_rng(seed)
    xs = np.concatenate([[lo], np.sort(rng.uniform(lo, hi, n - 2)), [hi]])
    return xs, f(xs)


def max_error(values, exact):
    return float(np.max(np.abs(np.asarray(values) - np.asarray(exact))))


# ============================================================================
# Test 1: accuracy against scipy / numpy
# ============================================================================

def compare_accuracy():
    """Cell polynomials agree with the reference implementations."""
    print("=" * 70)
    print("1. Accuracy vs scipy CubicSpline / numpy.interp (sin, 50 samples)")
    print("=" * 70)

    xs, ys = irregular_samples(np.sin, 0.0, 2.0 * math.pi, 50)
    queries = np.linspace(0.0, 2.0 * math.pi, 1001)

    cubic = CubicInterpolation(zip(xs, ys))
    cubic.build(verbose=False)
    ref = CubicSpline(xs, ys, bc_type="natural")
    print(f"  cubic  vs scipy:       {max_error(cubic.eval_batch(queries), ref(queries)):.2e}")
    print(f"  cubic  vs sin(x):      {max_error(cubic.eval_batch(queries), np.sin(queries)):.2e}")

    linear = LinearInterpolation(zip(xs, ys))
    linear.build(verbose=False)
    lin_ref = np.interp(queries, xs, ys)
    print(f"  linear vs numpy.interp: {max_error(linear.eval_batch(queries), lin_ref):.2e}")
    print(f"  linear vs sin(x):       {max_error(linear.eval_batch(queries), np.sin(queries)):.2e}")
    print()


# ============================================================================
# Test 2: convergence
# ============================================================================

def compare_convergence():
    """Error decay: O(h^2) for linear, O(h^4) for cubic."""
    print("=" * 70)
    print("2. Convergence on exp(x) over [0, 2] (uniform samples)")
    print("=" * 70)
    print(f"  {'n':>6}  {'linear':>10}  {'cubic':>10}")

    queries = np.linspace(0.0, 2.0, 2001)
    exact = np.exp(queries)
    for n in [5, 10, 20, 40, 80, 160]:
        xs = np.linspace(0.0, 2.0, n)
        samples = list(zip(xs, np.exp(xs)))
        lin = LinearInterpolation(samples)
        cub = CubicInterpolation(samples)
        print(
            f"  {n:>6}  {max_error(lin.eval_batch(queries), exact):>10.2e}"
            f"  {max_error(cub.eval_batch(queries), exact):>10.2e}"
        )
    print()


# ============================================================================
# Test 3: timing
# ============================================================================

def compare_timing(n=10_000, n_queries=100_000):
    """Build and query timings against scipy."""
    print("=" * 70)
    print(f"3. Timing ({n:,} samples, {n_queries:,} queries)")
    print("=" * 70)

    xs, ys = irregular_samples(np.sin, 0.0, 100.0, n)
    rng = np.random.default_rng(0)
    queries = rng.uniform(0.0, 100.0, n_queries)

    start = time.time()
    cubic = CubicInterpolation(zip(xs, ys))
    cubic.build(verbose=False)
    build_ours = time.time() - start

    start = time.time()
    ref = CubicSpline(xs, ys, bc_type="natural")
    build_scipy = time.time() - start

    start = time.time()
    for q in queries[:10_000]:
        cubic.get_value(q)
    scalar_ours = (time.time() - start) / 10_000

    start = time.time()
    cubic.eval_batch(queries)
    batch_ours = time.time() - start

    start = time.time()
    ref(queries)
    batch_scipy = time.time() - start

    print(f"  build:  ours {build_ours * 1e3:8.2f} ms   scipy {build_scipy * 1e3:8.2f} ms")
    print(f"  scalar: ours {scalar_ours * 1e6:8.2f} us/query")
    print(f"  batch:  ours {batch_ours * 1e3:8.2f} ms   scipy {batch_scipy * 1e3:8.2f} ms")
    print()


def main():
    compare_accuracy()
    compare_convergence()
    compare_timing()


if __name__ == "__main__":
    main()
