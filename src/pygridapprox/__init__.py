"""PyGridApprox: piecewise-polynomial approximation of sampled 1-D functions.

Provides the :class:`GridApproximation` class, which interpolates an
irregularly spaced set of samples ``(x, y)`` cell by cell, either linearly
or with a natural cubic spline, and answers point queries by binary search
and Horner evaluation.

Example
-------
>>> from pygridapprox import CubicInterpolation
>>> spline = CubicInterpolation([(0, 0), (1, 1), (2, 0)])
>>> spline.build(verbose=False)
>>> spline.get_value(1.0)
1.0
"""

from pygridapprox._version import __version__
from pygridapprox.approximation import (
    CubicInterpolation,
    GridApproximation,
    LinearInterpolation,
)
from pygridapprox.base import FunctionApproximation, MonotonicFunctionApproximation
from pygridapprox.builders import (
    ApproximationType,
    cubic_spline_cells,
    linear_cells,
    solve_natural_spline,
)
from pygridapprox.dataset import GridDataset, Sample
from pygridapprox.exceptions import (
    DuplicateArgumentError,
    GridApproximationError,
    InsufficientDataError,
    OutOfDomainError,
)
from pygridapprox.polynomial import Polynomial, polynomials_equal

__all__ = [
    "ApproximationType",
    "CubicInterpolation",
    "DuplicateArgumentError",
    "FunctionApproximation",
    "GridApproximation",
    "GridApproximationError",
    "GridDataset",
    "InsufficientDataError",
    "LinearInterpolation",
    "MonotonicFunctionApproximation",
    "OutOfDomainError",
    "Polynomial",
    "Sample",
    "__version__",
    "cubic_spline_cells",
    "linear_cells",
    "polynomials_equal",
    "solve_natural_spline",
]
