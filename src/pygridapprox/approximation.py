"""Piecewise-polynomial approximation on a grid of samples.

:class:`GridApproximation` owns a validated :class:`GridDataset` and the
tuple of per-cell polynomials produced by one builder.  Queries locate the
cell by binary search and evaluate its polynomial with Horner's scheme.
"""

from __future__ import annotations

import threading
import time
import warnings
from typing import Iterable, List, Tuple

import numpy as np

from pygridapprox.base import FunctionApproximation
from pygridapprox.builders import ApproximationType, get_builder, resolve_kind
from pygridapprox.dataset import GridDataset, Sample
from pygridapprox.polynomial import Polynomial


class GridApproximation(FunctionApproximation):
    """Piecewise-polynomial interpolant through a set of samples.

    The samples are validated at construction.  The cell polynomials are
    computed by :meth:`build`; if a query arrives first they are computed
    on demand, exactly once, behind a lock.  After that the object is
    immutable and safe to share between threads.

    Parameters
    ----------
    samples : iterable of (x, y)
        Samples of the function, in any order.  Exact duplicates are
        merged.
    kind : ApproximationType or str, optional
        Which builder to use.  ``DEFAULT`` and ``HIGH_QUALITY`` select the
        natural cubic spline, ``HIGH_SPEED`` selects linear interpolation.
    validate : bool, optional
        If False, ``samples`` are trusted to be strictly increasing in
        ``x`` and are used verbatim.  Default is True.

    Raises
    ------
    DuplicateArgumentError
        If two samples share ``x`` but have different ``y``.
    InsufficientDataError
        If no samples are given.

    Examples
    --------
    >>> approx = GridApproximation([(0, 0), (1, 1), (2, 0)], kind="cubic")
    >>> approx.build(verbose=False)
    >>> approx.get_value(0.5)
    0.6875
    """

    def __init__(
        self,
        samples: Iterable,
        kind: ApproximationType | str = ApproximationType.DEFAULT,
        validate: bool = True,
    ):
        self._kind = resolve_kind(kind)
        self._builder = get_builder(self._kind)
        self._dataset = GridDataset(samples, validate=validate)
        self._cells: Tuple[Polynomial, ...] | None = None
        self._build_lock = threading.Lock()
        self._build_time = 0.0

    # ------------------------------------------------------------------
    # Build
    # ------------------------------------------------------------------

    def build(self, verbose: bool = True) -> None:
        """Compute the polynomial of every cell.

        Calling ``build()`` again on a built object leaves it unchanged
        and emits a warning.

        Parameters
        ----------
        verbose : bool, optional
            If True, print build progress.  Default is True.

        Raises
        ------
        InsufficientDataError
            If the grid has fewer than two samples.
        """
        if self._cells is not None:
            warnings.warn(
                "GridApproximation is already built; build() has no effect.",
                UserWarning,
                stacklevel=2,
            )
            return
        self._build_once(verbose)

    def _build_once(self, verbose: bool) -> Tuple[Polynomial, ...]:
        with self._build_lock:
            if self._cells is None:
                if verbose:
                    print(
                        f"Building {self._kind.value} grid approximation "
                        f"({self._dataset.num_cells} cells)..."
                    )
                start = time.time()
                cells = self._builder(self._dataset)
                self._build_time = time.time() - start
                # Publish only the complete tuple
                self._cells = cells
                if verbose:
                    print(f"Build complete in {self._build_time:.3f}s")
            return self._cells

    def _get_cells(self) -> Tuple[Polynomial, ...]:
        cells = self._cells
        if cells is None:
            cells = self._build_once(verbose=False)
        return cells

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_index(self, x: float) -> int:
        """Return the index of the cell containing ``x``.

        Raises
        ------
        OutOfDomainError
            If ``x`` is outside ``[left_bound, right_bound]``.
        """
        return self._dataset.get_index(x)

    def get_value(self, x: float) -> float:
        """Evaluate the approximation at ``x``.

        Parameters
        ----------
        x : float
            Argument inside ``[left_bound, right_bound]``.

        Returns
        -------
        float
            Approximated value.

        Raises
        ------
        OutOfDomainError
            If ``x`` is outside the domain.
        InsufficientDataError
            If the grid has fewer than two samples.
        """
        index = self._dataset.get_index(x)
        return self._get_cells()[index].evaluate(x)

    __call__ = get_value

    def get_polynom(self, index: int) -> Polynomial:
        """Return the polynomial of cell ``index``.

        Raises
        ------
        IndexError
            If ``index`` is not in ``[0, num_cells - 1]``.
        """
        cells = self._get_cells()
        if not 0 <= index < len(cells):
            raise IndexError(
                f"Cell index {index} out of range [0, {len(cells) - 1}]"
            )
        return cells[index]

    def cells(self) -> Tuple[Polynomial, ...]:
        """Return the polynomials of all cells, left to right."""
        return self._get_cells()

    def eval_batch(self, x) -> np.ndarray:
        """Evaluate at many arguments, grouping them by cell.

        Parameters
        ----------
        x : array_like
            Arguments inside the domain.

        Returns
        -------
        ndarray
            Values, same shape as ``x``.

        Raises
        ------
        OutOfDomainError
            If any argument is outside the domain.
        """
        x = np.asarray(x, dtype=float)
        indices = self._dataset.get_indices(x)
        cells = self._get_cells()
        results = np.empty_like(x)
        for cell_idx in np.unique(indices):
            mask = indices == cell_idx
            results[mask] = cells[cell_idx].evaluate(x[mask])
        return results

    def derivative(self, x: float, order: int = 1) -> float:
        """Analytic derivative of the cell polynomial at ``x``.

        At an interior node the right-hand cell is used.  For the cubic
        spline the first two derivatives are continuous there anyway.
        """
        index = self._dataset.get_index(x)
        return self._get_cells()[index].derivative(order).evaluate(x)

    def integrate(self, a: float | None = None, b: float | None = None) -> float:
        """Exact integral of the approximation from ``a`` to ``b``.

        Parameters
        ----------
        a, b : float, optional
            Integration limits inside the domain.  Default to the domain
            bounds.  ``a > b`` gives the negated integral.

        Returns
        -------
        float
            Definite integral.

        Raises
        ------
        OutOfDomainError
            If a limit is outside the domain.
        """
        a = self.left_bound if a is None else a
        b = self.right_bound if b is None else b
        sign = 1.0
        if a > b:
            a, b = b, a
            sign = -1.0

        ia = self._dataset.get_index(a)
        ib = self._dataset.get_index(b)
        cells = self._get_cells()
        xs = self._dataset.xs

        if ia == ib:
            return sign * cells[ia].area(a, b)

        total = cells[ia].area(a, xs[ia + 1])
        for i in range(ia + 1, ib):
            total += cells[i].area(xs[i], xs[i + 1])
        total += cells[ib].area(xs[ib], b)
        return sign * float(total)

    def to_array(self) -> List[Sample]:
        """Return a copy of the samples sorted by argument."""
        return self._dataset.to_list()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def left_bound(self) -> float:
        return self._dataset.left_bound

    @property
    def right_bound(self) -> float:
        return self._dataset.right_bound

    @property
    def kind(self) -> ApproximationType:
        return self._kind

    @property
    def dataset(self) -> GridDataset:
        return self._dataset

    @property
    def nodes(self) -> np.ndarray:
        """Read-only array of node arguments."""
        return self._dataset.xs

    @property
    def num_cells(self) -> int:
        return self._dataset.num_cells

    @property
    def is_built(self) -> bool:
        return self._cells is not None

    @property
    def build_time(self) -> float:
        """Wall-clock time (seconds) spent computing the cell polynomials."""
        return self._build_time

    # ------------------------------------------------------------------
    # Printing
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        return (
            f"GridApproximation("
            f"kind={self._kind.value}, "
            f"nodes={len(self._dataset)}, "
            f"built={self.is_built})"
        )

    def __str__(self) -> str:
        status = "built" if self.is_built else "not built"
        lines = [
            f"GridApproximation ({self._kind.value}, {status})",
            f"  Nodes:   {len(self._dataset)} ({self.num_cells} cells)",
            f"  Domain:  [{self.left_bound}, {self.right_bound}]",
        ]
        if self.is_built:
            lines.append(f"  Build:   {self._build_time:.3f}s")
        return "\n".join(lines)


def LinearInterpolation(samples: Iterable, validate: bool = True) -> GridApproximation:
    """Piecewise-linear :class:`GridApproximation` through ``samples``."""
    return GridApproximation(samples, kind=ApproximationType.LINEAR, validate=validate)


def CubicInterpolation(samples: Iterable, validate: bool = True) -> GridApproximation:
    """Natural cubic spline :class:`GridApproximation` through ``samples``."""
    return GridApproximation(samples, kind=ApproximationType.CUBIC, validate=validate)
