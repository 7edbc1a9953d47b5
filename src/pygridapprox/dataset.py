"""Validated grid of samples for one-dimensional approximation.

A :class:`GridDataset` holds samples sorted by strictly increasing argument.
Exact duplicates in the input are merged; two samples with the same
argument but different values are rejected.
"""

from __future__ import annotations

from typing import Iterable, List, NamedTuple

import numpy as np

from pygridapprox._indexer import find_cell, find_cells
from pygridapprox.exceptions import (
    DuplicateArgumentError,
    InsufficientDataError,
    OutOfDomainError,
)


class Sample(NamedTuple):
    """Argument/value pair of the sampled function."""

    x: float
    y: float


def _as_samples(samples) -> List[Sample]:
    """Convert samples, pairs or an ``(n, 2)`` array into a list of Sample."""
    if isinstance(samples, np.ndarray):
        arr = np.asarray(samples, dtype=float)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(
                f"Sample array must have shape (n, 2), got {arr.shape}"
            )
        return [Sample(float(x), float(y)) for x, y in arr]
    return [Sample(float(x), float(y)) for x, y in samples]


def format_samples(samples: Iterable) -> List[Sample]:
    """Sort samples by argument, merge exact duplicates and validate.

    Parameters
    ----------
    samples : iterable of (x, y)
        Samples in any order.

    Returns
    -------
    list of Sample
        Strictly increasing in ``x``.

    Raises
    ------
    DuplicateArgumentError
        If two samples share ``x`` but not ``y``.
    ValueError
        If a coordinate is NaN or infinite.
    """
    result = _as_samples(samples)
    for p in result:
        if not (np.isfinite(p.x) and np.isfinite(p.y)):
            raise ValueError(f"Sample {tuple(p)} contains NaN or Inf")

    # list.sort is stable, so equal arguments keep their input order
    result.sort(key=lambda p: p.x)

    for i in range(len(result) - 1, 0, -1):
        p0 = result[i]
        p1 = result[i - 1]
        if p0 == p1:
            del result[i]
        elif p0.x == p1.x:
            raise DuplicateArgumentError(p0.x)

    return result


class GridDataset:
    """Sorted, argument-unique samples with cached domain bounds.

    Parameters
    ----------
    samples : iterable of (x, y)
        Samples of the function.  Tuples, :class:`Sample` objects or an
        ``(n, 2)`` array are accepted.
    validate : bool, optional
        If True (default), sort, merge duplicates and check the data.  If
        False the samples are trusted to be strictly increasing in ``x``
        already and are taken verbatim; query results are undefined when
        that does not hold.

    Raises
    ------
    DuplicateArgumentError
        If ``validate`` is True and two samples conflict.
    InsufficientDataError
        If no samples are given.
    """

    def __init__(self, samples: Iterable, validate: bool = True):
        points = format_samples(samples) if validate else _as_samples(samples)
        if len(points) == 0:
            raise InsufficientDataError("A grid needs at least one sample")

        self._samples = tuple(points)
        xs = np.array([p.x for p in points], dtype=float)
        ys = np.array([p.y for p in points], dtype=float)
        xs.flags.writeable = False
        ys.flags.writeable = False
        self._xs = xs
        self._ys = ys
        self._left = points[0].x
        self._right = points[-1].x

    @property
    def samples(self) -> tuple:
        """The validated samples as an immutable tuple."""
        return self._samples

    @property
    def xs(self) -> np.ndarray:
        """Read-only array of arguments."""
        return self._xs

    @property
    def ys(self) -> np.ndarray:
        """Read-only array of values."""
        return self._ys

    @property
    def left_bound(self) -> float:
        return self._left

    @property
    def right_bound(self) -> float:
        return self._right

    @property
    def num_cells(self) -> int:
        """Number of cells between consecutive samples."""
        return len(self._samples) - 1

    def __len__(self) -> int:
        return len(self._samples)

    def __getitem__(self, index: int) -> Sample:
        return self._samples[index]

    def __iter__(self):
        return iter(self._samples)

    def to_list(self) -> List[Sample]:
        """Return a new list of the samples; mutating it leaves the grid intact."""
        return list(self._samples)

    def contains(self, x: float) -> bool:
        """Return True if ``left_bound <= x <= right_bound``."""
        return self._left <= x <= self._right

    def get_index(self, x: float) -> int:
        """Return the cell index ``i`` with ``xs[i] <= x < xs[i+1]``.

        ``x == right_bound`` maps to the last cell.

        Raises
        ------
        OutOfDomainError
            If ``x`` is outside ``[left_bound, right_bound]`` or NaN.
        InsufficientDataError
            If the grid has a single sample and therefore no cells.
        """
        if not self.contains(x):
            raise OutOfDomainError(x, self._left, self._right)
        if len(self._samples) < 2:
            raise InsufficientDataError(
                "A grid with a single sample has no cells"
            )
        return find_cell(self._xs, x)

    def get_indices(self, x: np.ndarray) -> np.ndarray:
        """Vectorised :meth:`get_index` for an array of arguments."""
        x = np.asarray(x, dtype=float)
        outside = ~((x >= self._left) & (x <= self._right))
        if np.any(outside):
            bad = float(x[outside].flat[0])
            raise OutOfDomainError(bad, self._left, self._right)
        if len(self._samples) < 2:
            raise InsufficientDataError(
                "A grid with a single sample has no cells"
            )
        return find_cells(self._xs, x)

    def __eq__(self, other) -> bool:
        if not isinstance(other, GridDataset):
            return NotImplemented
        return self._samples == other._samples

    def __hash__(self) -> int:
        return hash(self._samples)

    def __repr__(self) -> str:
        return (
            f"GridDataset(n={len(self._samples)}, "
            f"domain=[{self._left}, {self._right}])"
        )
