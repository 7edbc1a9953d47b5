"""Exceptions raised by grid approximations.

All of them derive from :class:`ValueError`: every failure is a
deterministic input-validation failure, never a transient condition.
"""

from __future__ import annotations


class GridApproximationError(ValueError):
    """Base class for invalid grid data or arguments."""


class DuplicateArgumentError(GridApproximationError):
    """Two samples share the same argument ``x`` but differ in ``y``."""

    def __init__(self, x: float):
        self.x = x
        super().__init__(
            f"Samples with argument x={x} have different values; "
            f"each argument must map to a single value"
        )


class InsufficientDataError(GridApproximationError):
    """Too few distinct samples for the requested operation."""


class OutOfDomainError(GridApproximationError):
    """Argument lies outside ``[left_bound, right_bound]``."""

    def __init__(self, x: float, left_bound: float, right_bound: float):
        self.x = x
        self.left_bound = left_bound
        self.right_bound = right_bound
        super().__init__(
            f"Argument x={x} is outside the domain "
            f"[{left_bound}, {right_bound}]"
        )
