"""Cell lookup on a sorted grid of arguments.

Both helpers assume the caller has already checked that every argument lies
within ``[xs[0], xs[-1]]`` and that the grid has at least two nodes.
"""

from __future__ import annotations

import numpy as np


def find_cell(xs: np.ndarray, x: float) -> int:
    """Binary search for the cell containing ``x``.

    Finds the smallest node index whose argument strictly exceeds ``x``
    and returns the index before it, so that ``xs[i] <= x < xs[i+1]``.
    The right end of the grid resolves to the last cell.

    Parameters
    ----------
    xs : ndarray of shape (n,)
        Strictly increasing node arguments, ``n >= 2``.
    x : float
        Query argument with ``xs[0] <= x <= xs[-1]``.

    Returns
    -------
    int
        Cell index in ``[0, n-2]``.
    """
    lo = 1
    hi = len(xs) - 1
    while lo != hi:
        mid = (lo + hi) // 2
        if x < xs[mid]:
            hi = mid
        else:
            lo = mid + 1
    return lo - 1


def find_cells(xs: np.ndarray, x: np.ndarray) -> np.ndarray:
    """Vectorised :func:`find_cell` built on ``np.searchsorted``.

    Parameters
    ----------
    xs : ndarray of shape (n,)
        Strictly increasing node arguments, ``n >= 2``.
    x : ndarray
        Query arguments inside the grid.

    Returns
    -------
    ndarray of int
        Cell indices, same shape as ``x``.
    """
    # side='right' gives the first node strictly greater than x
    idx = np.searchsorted(xs, x, side="right") - 1
    return np.clip(idx, 0, len(xs) - 2)
