"""Immutable power-basis polynomials.

Coefficients are stored in ascending order, ``a[0] + a[1]*x + ... + a[n]*x**n``,
matching the convention of :mod:`numpy.polynomial.polynomial`.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np
from numpy.polynomial import polynomial as P


def _trim(coefficients: np.ndarray) -> np.ndarray:
    """Drop trailing zero coefficients, keeping at least the constant term."""
    n = len(coefficients)
    while n > 1 and coefficients[n - 1] == 0.0:
        n -= 1
    return coefficients[:n]


class Polynomial:
    """Polynomial in the power basis with read-only coefficients.

    Parameters
    ----------
    *coefficients : float
        Coefficients ``a0, a1, ..., an`` in ascending degree.  With no
        arguments the zero polynomial is created.

    Examples
    --------
    >>> p = Polynomial(1.0, 0.0, 2.0)
    >>> p.degree
    2
    >>> p.evaluate(3.0)
    19.0
    """

    __slots__ = ("_a",)

    def __init__(self, *coefficients: float):
        a = np.array(coefficients if coefficients else (0.0,), dtype=float)
        if a.ndim != 1:
            raise ValueError(
                f"Coefficients must be scalars, got array of shape {a.shape}"
            )
        a = _trim(a).copy()
        a.flags.writeable = False
        self._a = a

    @classmethod
    def from_coefficients(cls, coefficients: Iterable[float]) -> "Polynomial":
        """Create a polynomial from an ascending coefficient sequence."""
        return cls(*(float(c) for c in coefficients))

    @classmethod
    def from_points(cls, p0: Sequence[float], p1: Sequence[float]) -> "Polynomial":
        """Return the straight line through two points ``(x, y)``.

        Raises
        ------
        ValueError
            If both points have the same argument.
        """
        x0, y0 = p0
        x1, y1 = p1
        if x0 == x1:
            raise ValueError(f"Cannot draw a line through two points at x={x0}")
        k = (y1 - y0) / (x1 - x0)
        return cls(y0 - x0 * k, k)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def coefficients(self) -> np.ndarray:
        """Read-only view of the ascending coefficients."""
        return self._a

    @property
    def degree(self) -> int:
        """Degree of the polynomial (0 for constants, including zero)."""
        return len(self._a) - 1

    def __getitem__(self, index: int) -> float:
        if index < 0:
            raise IndexError(f"Coefficient index must be >= 0, got {index}")
        return float(self._a[index]) if index < len(self._a) else 0.0

    def __len__(self) -> int:
        return len(self._a)

    def __iter__(self):
        return (float(c) for c in self._a)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def evaluate(self, x):
        """Evaluate at ``x`` using Horner's scheme.

        Accumulates from the highest degree down, multiplying by ``x`` at
        each step.  ``x`` may be a float or a numpy array (elementwise).

        Parameters
        ----------
        x : float or ndarray
            Evaluation argument(s).

        Returns
        -------
        float or ndarray
            Polynomial value(s).
        """
        a = self._a
        result = a[-1]
        for k in range(len(a) - 2, -1, -1):
            result = result * x + a[k]
        if np.ndim(result) == 0:
            if np.ndim(x) == 0:
                return float(result)
            # Constant polynomial over an array argument
            return np.full(np.shape(x), float(result))
        return result

    __call__ = evaluate

    def derivative(self, order: int = 1) -> "Polynomial":
        """Return the ``order``-th derivative as a new polynomial."""
        if order < 0:
            raise ValueError(f"Derivative order must be >= 0, got {order}")
        if order == 0:
            return self
        if order > self.degree:
            return Polynomial()
        return Polynomial.from_coefficients(P.polyder(self._a, m=order))

    def antiderivative(self) -> "Polynomial":
        """Return the antiderivative with zero constant term."""
        return Polynomial.from_coefficients(P.polyint(self._a))

    def area(self, x0: float, x1: float) -> float:
        """Definite integral from ``x0`` to ``x1``."""
        primitive = self.antiderivative()
        return primitive.evaluate(x1) - primitive.evaluate(x0)

    # ------------------------------------------------------------------
    # Comparison and printing
    # ------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return polynomials_equal(self, other)

    def __hash__(self) -> int:
        return hash(tuple(self._a.tolist()))

    def __repr__(self) -> str:
        coeffs = ", ".join(repr(float(c)) for c in self._a)
        return f"Polynomial({coeffs})"

    def __str__(self) -> str:
        terms = []
        for k, c in enumerate(self._a):
            if c == 0.0 and len(self._a) > 1:
                continue
            if k == 0:
                terms.append(f"{c:g}")
            elif k == 1:
                terms.append(f"{c:g}*x")
            else:
                terms.append(f"{c:g}*x^{k}")
        return " + ".join(terms).replace("+ -", "- ")


def polynomials_equal(p: Polynomial, q: Polynomial, tol: float = 0.0) -> bool:
    """Compare two polynomials coefficient by coefficient.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to compare.
    tol : float, optional
        Absolute tolerance per coefficient.  The default of 0 demands exact
        equality.

    Returns
    -------
    bool
        True if every coefficient (missing ones count as 0) agrees.
    """
    n = max(len(p), len(q))
    for k in range(n):
        if abs(p[k] - q[k]) > tol:
            return False
    return True
