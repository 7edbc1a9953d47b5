"""Shared test fixtures for PyGridApprox tests."""

import math

import numpy as np
import pytest

from pygridapprox import CubicInterpolation, GridApproximation, LinearInterpolation


# ---------------------------------------------------------------------------
# Sample sets
# ---------------------------------------------------------------------------

def irregular_sin_samples(n=25, seed=7):
    """sin(x) sampled at sorted random points on [0, 2*pi], endpoints included."""
    rng = np.random.default_rng(seed)
    xs = np.sort(rng.uniform(0.0, 2.0 * math.pi, n - 2))
    xs = np.concatenate([[0.0], xs, [2.0 * math.pi]])
    return [(float(x), math.sin(x)) for x in xs]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def sin_samples():
    """Irregularly spaced samples of sin(x) on [0, 2*pi]."""
    return irregular_sin_samples()


@pytest.fixture
def triangle_samples():
    """Three-node hat: (0, 0), (1, 1), (2, 0)."""
    return [(0.0, 0.0), (1.0, 1.0), (2.0, 0.0)]


@pytest.fixture
def cubic_sin(sin_samples):
    """Built natural cubic spline through sin samples."""
    approx = CubicInterpolation(sin_samples)
    approx.build(verbose=False)
    return approx


@pytest.fixture
def linear_sin(sin_samples):
    """Built piecewise-linear interpolant through sin samples."""
    approx = LinearInterpolation(sin_samples)
    approx.build(verbose=False)
    return approx


@pytest.fixture(params=["linear", "cubic"])
def any_sin(request, sin_samples):
    """Built interpolant of each kind through sin samples."""
    approx = GridApproximation(sin_samples, kind=request.param)
    approx.build(verbose=False)
    return approx
