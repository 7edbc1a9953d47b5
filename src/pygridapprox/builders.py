"""Per-cell polynomial builders.

Each builder is a pure function taking a :class:`~pygridapprox.dataset.GridDataset`
and returning a tuple with one :class:`~pygridapprox.polynomial.Polynomial`
per cell.  Callers pick a builder through :class:`ApproximationType`
without depending on the functions directly.

References
----------
- Burden & Faires (2010), "Numerical Analysis", 9th ed., Section 3.5:
  Cubic Spline Interpolation
- Thomas (1949), "Elliptic Problems in Linear Differential Equations
  over a Network", Watson Sci. Comput. Lab. Report
"""

from __future__ import annotations

import enum
from typing import Callable, Dict, Tuple

import numpy as np

from pygridapprox.dataset import GridDataset
from pygridapprox.exceptions import InsufficientDataError
from pygridapprox.polynomial import Polynomial


class ApproximationType(enum.Enum):
    """Labels a caller uses to request a builder."""

    DEFAULT = "default"
    HIGH_SPEED = "high_speed"
    HIGH_QUALITY = "high_quality"
    LINEAR = "linear"
    CUBIC = "cubic"


def _require_cells(dataset: GridDataset) -> None:
    if len(dataset) < 2:
        raise InsufficientDataError(
            f"At least 2 distinct samples are required, got {len(dataset)}"
        )


def linear_cells(dataset: GridDataset) -> Tuple[Polynomial, ...]:
    """Piecewise-linear interpolation through consecutive samples.

    Parameters
    ----------
    dataset : GridDataset
        Grid with at least two samples.

    Returns
    -------
    tuple of Polynomial
        Degree <= 1 polynomial per cell.

    Raises
    ------
    InsufficientDataError
        If the grid has fewer than two samples.
    """
    _require_cells(dataset)
    samples = dataset.samples
    return tuple(
        Polynomial.from_points(samples[i - 1], samples[i])
        for i in range(1, len(samples))
    )


def solve_natural_spline(xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    """Second derivatives of the natural cubic spline at every node.

    Solves the tridiagonal system for the interior nodes with the Thomas
    algorithm; both end values are fixed at zero.

    Parameters
    ----------
    xs : ndarray of shape (n,)
        Strictly increasing arguments, ``n >= 2``.
    ys : ndarray of shape (n,)
        Values at the nodes.

    Returns
    -------
    ndarray of shape (n,)
        Second derivative ``c[i]`` of the spline at node ``i``.
    """
    n = len(xs)
    alpha = np.zeros(n)
    beta = np.zeros(n)

    # Forward sweep
    for i in range(1, n - 1):
        dx1 = xs[i] - xs[i - 1]
        dx2 = xs[i + 1] - xs[i]
        dy1 = ys[i] - ys[i - 1]
        dy2 = ys[i + 1] - ys[i]

        diag = 2.0 * (dx1 + dx2)
        rhs = 6.0 * (dy2 / dx2 - dy1 / dx1)
        pivot = dx1 * alpha[i - 1] + diag

        alpha[i] = -dx2 / pivot
        beta[i] = (rhs - dx1 * beta[i - 1]) / pivot

    # Back substitution; beta[n-1] stays 0
    for i in range(n - 3, 0, -1):
        beta[i] += alpha[i] * beta[i + 1]

    return beta


def cubic_spline_cells(dataset: GridDataset) -> Tuple[Polynomial, ...]:
    """Natural cubic spline interpolation.

    The result is C2 at every interior node and has zero curvature at both
    ends of the domain.  Each cell polynomial is expressed in the absolute
    argument, expanded from its Taylor form around the right node of the
    cell.

    Parameters
    ----------
    dataset : GridDataset
        Grid with at least two samples.

    Returns
    -------
    tuple of Polynomial
        Degree <= 3 polynomial per cell.

    Raises
    ------
    InsufficientDataError
        If the grid has fewer than two samples.
    """
    _require_cells(dataset)
    xs = dataset.xs
    ys = dataset.ys
    c = solve_natural_spline(xs, ys)

    cells = []
    for i in range(len(xs) - 1):
        x = xs[i + 1]
        a = ys[i + 1]
        ci = c[i + 1]
        prev_c = c[i]

        dx = x - xs[i]
        dy = a - ys[i]

        d = (ci - prev_c) / dx
        b = dx * (2.0 * ci + prev_c) / 6.0 + dy / dx

        cells.append(Polynomial(
            a - x * (b - x * (ci / 2.0 - x * d / 6.0)),
            b - x * (ci - x * d / 2.0),
            (ci - x * d) / 2.0,
            d / 6.0,
        ))
    return tuple(cells)


CellBuilder = Callable[[GridDataset], Tuple[Polynomial, ...]]

BUILDERS: Dict[ApproximationType, CellBuilder] = {
    ApproximationType.DEFAULT: cubic_spline_cells,
    ApproximationType.HIGH_SPEED: linear_cells,
    ApproximationType.HIGH_QUALITY: cubic_spline_cells,
    ApproximationType.LINEAR: linear_cells,
    ApproximationType.CUBIC: cubic_spline_cells,
}


def resolve_kind(kind) -> ApproximationType:
    """Accept an :class:`ApproximationType` or its string value."""
    if isinstance(kind, ApproximationType):
        return kind
    try:
        return ApproximationType(str(kind).lower())
    except ValueError:
        valid = ", ".join(t.value for t in ApproximationType)
        raise ValueError(
            f"Unknown approximation type {kind!r}; expected one of: {valid}"
        ) from None


def get_builder(kind) -> CellBuilder:
    """Return the builder function registered for ``kind``."""
    return BUILDERS[resolve_kind(kind)]
